"""
Sheet Compositor
Draws the header, scaled thumbnails and timestamp labels onto one canvas.
"""

from functools import lru_cache
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from .config import (
    CANVAS_BACKGROUND,
    FONT_CANDIDATES,
    HEADER_BACKGROUND,
    HEADER_FONT_SIZE,
    HEADER_LINE_SPACING,
    HEADER_TEXT_COLOR,
    LABEL_BACKGROUND,
    LABEL_FONT_SIZE,
    LABEL_MARGIN,
    LABEL_PADDING,
    LABEL_TEXT_COLOR,
)
from .frame_source import ThumbnailFrame
from .grid_layout import LayoutMetrics
from .time_sampler import format_timestamp


@lru_cache(maxsize=None)
def load_font(size: int, bold: bool = False):
    """Load the first available TrueType font, else Pillow's built-in one."""
    for candidate in FONT_CANDIDATES[bold]:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


class SheetCompositor:
    """Composites thumbnails into a contact sheet."""

    def __init__(self, header_font=None, label_font=None):
        """
        Initialize the compositor.

        Args:
            header_font: Font for the two header lines (bold system font if None)
            label_font: Font for the timestamp labels (regular system font if None)
        """
        self.header_font = header_font or load_font(HEADER_FONT_SIZE, bold=True)
        self.label_font = label_font or load_font(LABEL_FONT_SIZE)

    def compose(
        self,
        filename: str,
        duration: float,
        thumbnails: Sequence[ThumbnailFrame],
        metrics: LayoutMetrics,
    ) -> Image.Image:
        """
        Build the finished contact sheet.

        Thumbnails are placed by their position in `thumbnails`, so a frame
        that failed to decode leaves no gap: later frames move up a cell.

        Args:
            filename: Display name shown in the header
            duration: Total video duration in seconds
            thumbnails: Decoded frames in sample order (may be short or empty)
            metrics: Layout computed for this sheet

        Returns:
            RGB canvas of size metrics.canvas_size
        """
        canvas = Image.new("RGB", metrics.canvas_size, CANVAS_BACKGROUND)
        draw = ImageDraw.Draw(canvas, "RGBA")

        self._draw_header(draw, canvas.width, metrics.header_height, filename, duration)

        for index, thumbnail in enumerate(thumbnails[: metrics.capacity]):
            box = metrics.cell_box(index)
            self._draw_thumbnail(canvas, thumbnail.image, box)
            self._draw_label(draw, thumbnail.label, box)

        return canvas

    def _draw_header(self, draw, width, header_height, filename, duration):
        draw.rectangle([0, 0, width - 1, header_height - 1], fill=HEADER_BACKGROUND)

        text = f"{filename}\nDuration: {format_timestamp(duration)}"
        bbox = draw.multiline_textbbox(
            (0, 0), text, font=self.header_font, spacing=HEADER_LINE_SPACING, align="center"
        )
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]
        x = (width - text_w) / 2 - bbox[0]
        y = (header_height - text_h) / 2 - bbox[1]
        draw.multiline_text(
            (x, y),
            text,
            fill=HEADER_TEXT_COLOR,
            font=self.header_font,
            spacing=HEADER_LINE_SPACING,
            align="center",
        )

    def _draw_thumbnail(self, canvas, image, box):
        left, top, right, bottom = box
        size = (right - left, bottom - top)
        if image.mode != "RGB":
            image = image.convert("RGB")
        if image.size != size:
            image = image.resize(size, Image.LANCZOS)
        canvas.paste(image, (left, top))

    def _draw_label(self, draw, label, box):
        _, _, right, bottom = box
        bbox = draw.textbbox((0, 0), label, font=self.label_font)
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]

        # Right/bottom aligned inside the cell, inset by the margin
        x1 = right - LABEL_MARGIN
        y1 = bottom - LABEL_MARGIN
        x0 = x1 - text_w - 2 * LABEL_PADDING
        y0 = y1 - text_h - 2 * LABEL_PADDING

        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=LABEL_BACKGROUND)
        draw.text(
            (x0 + LABEL_PADDING - bbox[0], y0 + LABEL_PADDING - bbox[1]),
            label,
            fill=LABEL_TEXT_COLOR,
            font=self.label_font,
        )
