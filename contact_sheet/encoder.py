"""
JPEG encoding for finished contact sheets.
"""

from PIL import Image

from .config import JPEG_QUALITY
from .errors import EncodeError


class JpegEncoder:
    """Writes canvases to disk as JPEG."""

    def __init__(self, quality: int = JPEG_QUALITY):
        self.quality = quality

    def encode(self, canvas: Image.Image, output_path: str) -> str:
        """
        Save `canvas` to `output_path`.

        Raises:
            EncodeError: if Pillow cannot serialize or write the image
        """
        if canvas.mode != "RGB":
            canvas = canvas.convert("RGB")
        try:
            canvas.save(output_path, format="JPEG", quality=self.quality)
        except (OSError, ValueError) as e:
            raise EncodeError(str(output_path), str(e)) from e
        return str(output_path)
