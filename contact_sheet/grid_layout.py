"""
Grid Layout
Computes cell and canvas dimensions for a rows x columns contact sheet.

Pillow rasters use a top-left origin, so row 0 is placed directly below the
header band and later rows extend downwards.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .config import HEADER_HEIGHT


@dataclass(frozen=True)
class LayoutMetrics:
    """Derived geometry for one contact sheet."""

    canvas_width: float
    columns: int
    rows: int
    cell_width: float
    cell_height: float
    header_height: int
    total_height: float

    @property
    def canvas_size(self) -> Tuple[int, int]:
        """Integer pixel size of the output canvas."""
        return (max(1, round(self.canvas_width)), max(1, round(self.total_height)))

    @property
    def capacity(self) -> int:
        return self.rows * self.columns

    def cell_origin(self, index: int) -> Tuple[float, float]:
        """Top-left corner of the cell at compacted sequence `index`."""
        row = index // self.columns
        column = index % self.columns
        x = column * self.cell_width
        y = self.header_height + row * self.cell_height
        return x, y

    def cell_box(self, index: int) -> Tuple[int, int, int, int]:
        """
        Integer (left, top, right, bottom) box of a cell.

        Each edge is rounded on its own so neighbouring cells share edges.
        """
        x, y = self.cell_origin(index)
        left = round(x)
        top = round(y)
        right = max(left + 1, round(x + self.cell_width))
        bottom = max(top + 1, round(y + self.cell_height))
        return left, top, right, bottom


def reference_aspect_ratio(thumbnails: Sequence) -> float:
    """
    Height/width ratio of the first thumbnail, or 1.0 when there is none.

    Args:
        thumbnails: Sequence of ThumbnailFrame (anything with an `image`
            attribute exposing `width` and `height`)
    """
    if not thumbnails:
        return 1.0
    image = thumbnails[0].image
    if image.width <= 0 or image.height <= 0:
        return 1.0
    return image.height / image.width


def compute_layout(
    canvas_width: float,
    columns: int,
    rows: int,
    aspect_ratio: float = 1.0,
) -> LayoutMetrics:
    """
    Compute the sheet geometry.

    The grid shape comes from the configured rows and columns, not from how
    many frames were decoded; unfilled cells stay blank.

    Args:
        canvas_width: Target output width in pixels
        columns: Number of grid columns
        rows: Number of grid rows
        aspect_ratio: Reference height/width ratio applied to every cell

    Returns:
        LayoutMetrics
    """
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")
    if rows < 1:
        raise ValueError(f"rows must be at least 1, got {rows}")
    if canvas_width <= 0:
        raise ValueError(f"canvas width must be positive, got {canvas_width}")
    if aspect_ratio <= 0:
        raise ValueError(f"aspect ratio must be positive, got {aspect_ratio}")

    cell_width = canvas_width / columns
    cell_height = cell_width * aspect_ratio
    total_height = HEADER_HEIGHT + rows * cell_height

    return LayoutMetrics(
        canvas_width=canvas_width,
        columns=columns,
        rows=rows,
        cell_width=cell_width,
        cell_height=cell_height,
        header_height=HEADER_HEIGHT,
        total_height=total_height,
    )
