"""Build video contact sheets: a header plus a grid of timestamped thumbnails."""

from .compositor import SheetCompositor, load_font
from .config import SheetConfig
from .encoder import JpegEncoder
from .errors import (
    ContactSheetError,
    EncodeError,
    FrameDecodeError,
    UsageError,
    VideoOpenError,
)
from .frame_source import (
    SampleResult,
    ThumbnailFrame,
    VideoHandle,
    grab_samples,
    successful_thumbnails,
)
from .grid_layout import LayoutMetrics, compute_layout, reference_aspect_ratio
from .time_sampler import SampleTimestamp, format_timestamp, sample_timestamps

__version__ = "1.0.0"
