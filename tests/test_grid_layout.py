import math

import pytest
from PIL import Image

from contact_sheet.config import HEADER_HEIGHT
from contact_sheet.frame_source import ThumbnailFrame
from contact_sheet.grid_layout import compute_layout, reference_aspect_ratio


def test_cell_size_follows_width_and_aspect_ratio():
    metrics = compute_layout(1000, columns=2, rows=8, aspect_ratio=0.5625)
    assert metrics.cell_width == 500
    assert metrics.cell_height == pytest.approx(281.25)
    assert metrics.header_height == HEADER_HEIGHT
    assert metrics.total_height == pytest.approx(HEADER_HEIGHT + 8 * 281.25)
    assert metrics.canvas_size == (1000, HEADER_HEIGHT + 2250)


def test_reference_ratio_comes_from_first_thumbnail():
    thumbnails = [
        ThumbnailFrame(Image.new("RGB", (160, 90)), "00:00:00"),
        ThumbnailFrame(Image.new("RGB", (100, 100)), "00:00:10"),
    ]
    assert reference_aspect_ratio(thumbnails) == pytest.approx(0.5625)


def test_no_thumbnails_still_gives_finite_positive_layout():
    ratio = reference_aspect_ratio([])
    assert ratio == 1.0
    metrics = compute_layout(1024, columns=2, rows=8, aspect_ratio=ratio)
    for value in (metrics.cell_width, metrics.cell_height, metrics.total_height):
        assert math.isfinite(value) and value > 0
    assert metrics.cell_height == metrics.cell_width == 512


def test_grid_shape_is_independent_of_decoded_count():
    full = compute_layout(800, columns=4, rows=3, aspect_ratio=0.75)
    assert full.capacity == 12
    assert full.total_height == pytest.approx(HEADER_HEIGHT + 3 * 150)


@pytest.mark.parametrize("columns, rows", [(0, 1), (1, 0), (-2, 3)])
def test_empty_grids_are_rejected(columns, rows):
    with pytest.raises(ValueError):
        compute_layout(1000, columns=columns, rows=rows, aspect_ratio=1.0)


def test_row_zero_sits_directly_under_the_header():
    metrics = compute_layout(1000, columns=2, rows=2, aspect_ratio=0.5)
    assert metrics.cell_box(0) == (0, HEADER_HEIGHT, 500, HEADER_HEIGHT + 250)
    assert metrics.cell_box(1) == (500, HEADER_HEIGHT, 1000, HEADER_HEIGHT + 250)
    assert metrics.cell_box(2) == (0, HEADER_HEIGHT + 250, 500, HEADER_HEIGHT + 500)


def test_fractional_cells_tile_without_gaps():
    metrics = compute_layout(1000, columns=3, rows=3, aspect_ratio=0.5625)
    for index in range(metrics.capacity - 1):
        left, top, right, bottom = metrics.cell_box(index)
        if (index + 1) % metrics.columns:
            assert metrics.cell_box(index + 1)[0] == right
        if index + metrics.columns < metrics.capacity:
            assert metrics.cell_box(index + metrics.columns)[1] == bottom
    assert metrics.cell_box(metrics.capacity - 1)[2] == metrics.canvas_size[0]
