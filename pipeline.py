"""
Main Pipeline Orchestrator
Builds one contact sheet per input video: sample timestamps, decode frames,
lay out the grid, composite and encode.
"""

import argparse
import os
import sys
import traceback
from typing import Callable, List, Optional, Sequence, Tuple

from contact_sheet.compositor import SheetCompositor
from contact_sheet.config import OUTPUT_SUFFIX, SheetConfig
from contact_sheet.encoder import JpegEncoder
from contact_sheet.errors import ContactSheetError, UsageError
from contact_sheet.frame_source import VideoHandle, grab_samples, successful_thumbnails
from contact_sheet.grid_layout import compute_layout, reference_aspect_ratio
from contact_sheet.time_sampler import sample_timestamps

USAGE = "contact-sheet <movie-file> [movie-file2 ...] [--rows=N] [--columns=N] [--width=N]"
OPTION_PREFIXES = ("--rows=", "--columns=", "--width=")
HELP_FLAGS = ("-h", "--help")

class ContactSheetPipeline:
    """Runs the contact sheet workflow over a batch of video files."""

    def __init__(
        self,
        config: Optional[SheetConfig] = None,
        open_video: Callable = VideoHandle.open,
        compositor: Optional[SheetCompositor] = None,
        encoder: Optional[JpegEncoder] = None,
        verbose: bool = True,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Grid shape and output width (defaults if None)
            open_video: Callable returning an open video handle for a path
            compositor: Sheet compositor (default fonts if None)
            encoder: Output encoder (JPEG if None)
            verbose: Whether to print progress and per-file summaries
        """
        self.config = config or SheetConfig()
        self.open_video = open_video
        self.compositor = compositor or SheetCompositor()
        self.encoder = encoder or JpegEncoder()
        self.verbose = verbose

    @staticmethod
    def output_path_for(path: str) -> str:
        return str(path) + OUTPUT_SUFFIX

    def process_file(self, path: str) -> str:
        """
        Build and write the contact sheet for a single video.

        Args:
            path: Input video path

        Returns:
            Path of the written image

        Raises:
            VideoOpenError: if the video cannot be opened
            EncodeError: if the sheet cannot be written
        """
        config = self.config
        filename = os.path.basename(str(path))

        if self.verbose:
            print(f"\nProcessing {path}")

        with self.open_video(path) as handle:
            duration = handle.duration
            samples = sample_timestamps(duration, config.frame_count)
            results = grab_samples(handle, samples, verbose=self.verbose)

        thumbnails = successful_thumbnails(results)
        metrics = compute_layout(
            config.width,
            config.columns,
            config.rows,
            reference_aspect_ratio(thumbnails),
        )
        canvas = self.compositor.compose(filename, duration, thumbnails, metrics)

        output_path = self.encoder.encode(canvas, self.output_path_for(path))

        if self.verbose:
            print(f"  Frames: {len(thumbnails)}/{len(samples)} decoded")
            print(f"  Size: {canvas.width}×{canvas.height} pixels")
        return output_path

    def run(self, paths: Sequence[str]) -> List[Tuple[str, Optional[str]]]:
        """
        Process every path in order; one file failing does not stop the rest.

        Returns:
            (input path, output path or None on failure) per file
        """
        outcomes = []
        for path in paths:
            try:
                output_path = self.process_file(path)
            except ContactSheetError as e:
                print(f"✗ Failed to create contact sheet for {path}: {e}")
                outcomes.append((path, None))
                continue
            except Exception as e:
                print(f"✗ Unexpected error while processing {path}: {e}")
                if self.verbose:
                    traceback.print_exc()
                outcomes.append((path, None))
                continue

            print(f"✓ Contact sheet saved to {output_path}")
            outcomes.append((path, output_path))
        return outcomes

def lenient_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None

def lenient_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contact-sheet",
        usage=USAGE,
        description="Create a contact sheet image (header plus thumbnail grid) for each video.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Each sheet is written next to its video as <movie-file>.jpg.
Malformed or non-positive numbers fall back to the defaults.

Examples:
  contact-sheet holiday.mp4
  contact-sheet a.mov b.mov --rows=4 --columns=4 --width=1600
        """,
    )
    parser.add_argument(
        "--rows",
        type=lenient_int,
        default=None,
        metavar="N",
        help="Number of thumbnail rows (default: 8)",
    )
    parser.add_argument(
        "--columns",
        type=lenient_int,
        default=None,
        metavar="N",
        help="Number of thumbnail columns (default: 2)",
    )
    parser.add_argument(
        "--width",
        type=lenient_float,
        default=None,
        metavar="N",
        help="Output image width in pixels (default: 1024)",
    )
    return parser

def split_arguments(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate `--name=value` options (and help) from file paths, keeping order."""
    options, files = [], []
    for token in argv:
        if token.startswith(OPTION_PREFIXES) or token in HELP_FLAGS:
            options.append(token)
        else:
            files.append(token)
    return options, files

def parse_arguments(argv: Sequence[str], parser: Optional[argparse.ArgumentParser] = None):
    """
    Split the command line into a config and the list of files.

    Options are only recognized in their `--name=value` form; any other
    token, including a bare `--rows`, is taken as a file path.

    Raises:
        UsageError: if no files were given
    """
    parser = parser or build_parser()
    option_tokens, files = split_arguments(argv)
    options = parser.parse_args(option_tokens)
    if not files:
        raise UsageError("at least one video file is required")
    config = SheetConfig.from_args(options.rows, options.columns, options.width)
    return config, files

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line interface."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv

    try:
        config, files = parse_arguments(argv, parser)
    except UsageError:
        parser.print_usage(sys.stderr)
        return 1

    pipeline = ContactSheetPipeline(config=config)
    try:
        pipeline.run(files)
    except KeyboardInterrupt:
        print("\n\n✗ Interrupted by user")
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
