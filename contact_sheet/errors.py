"""
Exceptions raised while building contact sheets.
"""


class ContactSheetError(Exception):
    """Base class for all contact sheet failures."""


class UsageError(ContactSheetError):
    """The command line did not name any video files."""


class VideoOpenError(ContactSheetError):
    """A video file could not be opened for decoding."""

    def __init__(self, path: str, reason: str = "unsupported or unreadable file"):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open video {path}: {reason}")


class FrameDecodeError(ContactSheetError):
    """A single frame could not be decoded at the requested timestamp."""

    def __init__(self, timestamp: float, reason: str = "no frame returned"):
        self.timestamp = timestamp
        self.reason = reason
        super().__init__(f"Could not decode frame at {timestamp:.3f}s: {reason}")


class EncodeError(ContactSheetError):
    """The finished canvas could not be written to disk."""

    def __init__(self, output_path: str, reason: str):
        self.output_path = output_path
        self.reason = reason
        super().__init__(f"Could not write {output_path}: {reason}")
