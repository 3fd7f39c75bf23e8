"""
Frame Source
Opens videos with OpenCV and decodes frames at requested timestamps.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import cv2
import numpy as np
from PIL import Image
from tqdm import tqdm

from .errors import FrameDecodeError, VideoOpenError
from .time_sampler import SampleTimestamp


@dataclass(frozen=True)
class ThumbnailFrame:
    """A decoded frame and the label of the sample it came from."""

    image: Image.Image
    label: str


@dataclass(frozen=True)
class SampleResult:
    """Outcome of decoding one sample: a frame, or the reason it failed."""

    sample: SampleTimestamp
    frame: Optional[Image.Image] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.frame is not None


class VideoHandle:
    """An open video; release it with `close()` or a `with` block."""

    def __init__(self, path: str, capture):
        self.path = path
        self._capture = capture
        self.fps = float(capture.get(cv2.CAP_PROP_FPS) or 0.0)
        self.frame_count = int(capture.get(cv2.CAP_PROP_FRAME_COUNT) or 0)

    @classmethod
    def open(cls, path: str) -> "VideoHandle":
        capture = cv2.VideoCapture(str(path))
        if not capture.isOpened():
            capture.release()
            raise VideoOpenError(str(path))
        return cls(str(path), capture)

    @property
    def duration(self) -> float:
        """Total duration in seconds, 0 when the container does not say."""
        if self.fps <= 0 or self.frame_count <= 0:
            return 0.0
        return self.frame_count / self.fps

    def _seek(self, timestamp: float):
        if self.fps > 0 and self.frame_count > 0:
            # clamp so a sample at the very end lands on the last frame
            index = min(max(0, int(round(timestamp * self.fps))), self.frame_count - 1)
            self._capture.set(cv2.CAP_PROP_POS_FRAMES, index)
        else:
            self._capture.set(cv2.CAP_PROP_POS_MSEC, max(0.0, timestamp) * 1000.0)

    def decode(self, timestamp: float) -> Image.Image:
        """
        Decode the frame shown at `timestamp` seconds.

        Returns:
            RGB PIL image

        Raises:
            FrameDecodeError: if OpenCV returns no frame or raises
        """
        if self._capture is None:
            raise FrameDecodeError(timestamp, "video is closed")

        try:
            self._seek(timestamp)
            ok, frame = self._capture.read()
            if not ok or frame is None or frame.size == 0:
                raise FrameDecodeError(timestamp)

            if frame.ndim == 2:
                frame = cv2.cvtColor(frame, cv2.COLOR_GRAY2RGB)
            else:
                frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        except cv2.error as e:
            raise FrameDecodeError(timestamp, str(e).strip() or "OpenCV error") from e
        return Image.fromarray(np.ascontiguousarray(frame))

    def close(self):
        if self._capture is not None:
            self._capture.release()
            self._capture = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def grab_samples(
    handle,
    samples: Sequence[SampleTimestamp],
    verbose: bool = True,
) -> List[SampleResult]:
    """
    Decode every sample, recording failures instead of raising.

    Args:
        handle: Open video exposing `decode(timestamp)`
        samples: Timestamps to decode, in order
        verbose: Whether to show a progress bar

    Returns:
        One SampleResult per sample, in sample order
    """
    results = []
    for sample in tqdm(samples, desc="Sampling", unit="frame", disable=not verbose, leave=False):
        try:
            frame = handle.decode(sample.seconds)
        except FrameDecodeError as e:
            tqdm.write(f"Warning: could not generate thumbnail at {sample.label} ({sample.seconds:.3f}s): {e.reason}")
            results.append(SampleResult(sample, error=e.reason))
            continue
        results.append(SampleResult(sample, frame=frame))
    return results


def successful_thumbnails(results: Sequence[SampleResult]) -> List[ThumbnailFrame]:
    """Keep the decoded samples, preserving their original order."""
    return [ThumbnailFrame(r.frame, r.sample.label) for r in results if r.ok]
