"""
Time Sampler
Chooses evenly spaced timestamps across a video and labels them.
"""

import math
from typing import List, NamedTuple


class SampleTimestamp(NamedTuple):
    seconds: float
    label: str


def format_timestamp(seconds: float) -> str:
    """Format seconds as zero-padded HH:MM:SS, truncating fractions."""
    if not math.isfinite(seconds) or seconds < 0:
        seconds = 0.0
    whole = int(math.floor(seconds))
    hours = whole // 3600
    minutes = (whole // 60) % 60
    secs = whole % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def sample_timestamps(duration: float, count: int) -> List[SampleTimestamp]:
    """
    Produce `count` evenly spaced sample points over [0, duration].

    Args:
        duration: Total video duration in seconds
        count: Number of samples (rows * columns)

    Returns:
        Ordered samples; the first is at 0 and, for count > 1, the last is
        exactly at `duration`.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    if count == 1:
        return [SampleTimestamp(0.0, format_timestamp(0.0))]

    samples = []
    for i in range(count):
        # last sample pinned to the exact duration
        seconds = duration if i == count - 1 else duration * i / (count - 1)
        samples.append(SampleTimestamp(seconds, format_timestamp(seconds)))
    return samples
