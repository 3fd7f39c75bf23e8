"""Shared fixtures: synthetic clips written with OpenCV and in-memory videos."""

from __future__ import annotations

import cv2
import numpy as np
import pytest
from PIL import Image

from contact_sheet.errors import FrameDecodeError


class FakeVideo:
    """Stands in for VideoHandle; fails on the timestamps listed in `failing`."""

    def __init__(self, duration, size=(64, 36), failing=(), color_for=None):
        self.duration = duration
        self.size = size
        self.failing = set(failing)
        self.color_for = color_for or (lambda t: (int(t) % 256, 0, 0))
        self.requested = []
        self.closed = False

    def decode(self, timestamp):
        self.requested.append(timestamp)
        if timestamp in self.failing:
            raise FrameDecodeError(timestamp, "synthetic failure")
        return Image.new("RGB", self.size, self.color_for(timestamp))

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


@pytest.fixture
def fake_video():
    return FakeVideo


@pytest.fixture
def make_clip(tmp_path):
    """Write an MJPG/AVI clip whose frame i is filled with gray level i * step."""

    def _make(name="clip.avi", frames=30, fps=10, size=(64, 36), step=8):
        path = tmp_path / name
        width, height = size
        writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), fps, (width, height))
        if not writer.isOpened():
            pytest.skip("OpenCV cannot write MJPG clips on this platform")
        for i in range(frames):
            writer.write(np.full((height, width, 3), min(255, i * step), dtype=np.uint8))
        writer.release()
        return path

    return _make
