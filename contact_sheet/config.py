"""
Contact Sheet Configuration
Immutable per-run settings plus the fixed drawing constants.
"""

import math
from dataclasses import dataclass
from typing import Optional


DEFAULT_ROWS = 8
DEFAULT_COLUMNS = 2
DEFAULT_WIDTH = 1024.0

# Header band
HEADER_HEIGHT = 120
HEADER_FONT_SIZE = 28
HEADER_BACKGROUND = (255, 255, 255)
HEADER_TEXT_COLOR = (0, 0, 0)
HEADER_LINE_SPACING = 8

# Timestamp labels
LABEL_FONT_SIZE = 14
LABEL_MARGIN = 6
LABEL_PADDING = 2
LABEL_TEXT_COLOR = (255, 255, 255, 255)
LABEL_BACKGROUND_ALPHA = 153  # 60% opaque
LABEL_BACKGROUND = (0, 0, 0, LABEL_BACKGROUND_ALPHA)

CANVAS_BACKGROUND = (0, 0, 0)

JPEG_QUALITY = 95
OUTPUT_SUFFIX = ".jpg"

FONT_CANDIDATES = {
    True: [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/Library/Fonts/Arial Bold.ttf",
        "C:/Windows/Fonts/arialbd.ttf",
        "DejaVuSans-Bold.ttf",
    ],
    False: [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
        "/Library/Fonts/Arial.ttf",
        "C:/Windows/Fonts/arial.ttf",
        "DejaVuSans.ttf",
    ],
}


@dataclass(frozen=True)
class SheetConfig:
    """Grid shape and output width shared by every file in a run."""

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    width: float = DEFAULT_WIDTH

    def __post_init__(self):
        if self.rows < 1:
            raise ValueError(f"rows must be at least 1, got {self.rows}")
        if self.columns < 1:
            raise ValueError(f"columns must be at least 1, got {self.columns}")
        if not math.isfinite(self.width) or self.width <= 0:
            raise ValueError(f"width must be a positive number, got {self.width}")

    @property
    def frame_count(self) -> int:
        return self.rows * self.columns

    @classmethod
    def from_args(
        cls,
        rows: Optional[int] = None,
        columns: Optional[int] = None,
        width: Optional[float] = None,
    ) -> "SheetConfig":
        """
        Build a config from loosely parsed command-line values.

        Missing, malformed or non-positive values fall back to the defaults.
        """
        if rows is None or rows < 1:
            rows = DEFAULT_ROWS
        if columns is None or columns < 1:
            columns = DEFAULT_COLUMNS
        if width is None or not math.isfinite(width) or width <= 0:
            width = DEFAULT_WIDTH
        return cls(rows=rows, columns=columns, width=float(width))
