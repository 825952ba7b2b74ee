import numpy as np
import pytest

from rps_arena.renderer.colors import breed_colors
from rps_arena.renderer.terrain import (
    DEFAULT_BACKGROUND,
    RASTER_MODE,
    cell_bounds,
    new_raster,
    render_terrain,
)
from tests.test_utils import pixel


def test_new_raster_is_background_filled() -> None:
    raster = new_raster((8, 6), background=(1, 2, 3))
    assert raster.mode == RASTER_MODE
    assert raster.size == (8, 6)
    assert pixel(raster, 7, 5) == (1, 2, 3)


@pytest.mark.parametrize(
    "raster_size, rows, cols, row, col, expected",
    [
        ((10, 10), 2, 2, 0, 0, (0.0, 0.0, 5.0, 5.0)),
        ((10, 10), 2, 2, 1, 1, (5.0, 5.0, 10.0, 10.0)),
        ((10, 10), 4, 4, 2, 1, (2.5, 5.0, 5.0, 7.5)),
        # non-square grids divide each axis independently
        ((12, 6), 2, 3, 1, 2, (8.0, 3.0, 12.0, 6.0)),
    ],
)
def test_cell_bounds(raster_size, rows, cols, row, col, expected) -> None:
    assert cell_bounds(raster_size, rows, cols, row, col) == pytest.approx(expected)


def test_render_checkerboard_quadrants() -> None:
    colors = breed_colors(2)
    terrain = np.array([[0, 1], [1, 0]], dtype=np.uint8)
    raster = render_terrain(new_raster((10, 10)), terrain, colors)

    assert pixel(raster, 2, 2) == colors[0]
    assert pixel(raster, 7, 2) == colors[1]
    assert pixel(raster, 2, 7) == colors[1]
    assert pixel(raster, 7, 7) == colors[0]
    # ovals leave the cell corners untouched
    assert pixel(raster, 0, 0) == DEFAULT_BACKGROUND


def test_render_repaints_every_cell() -> None:
    colors = breed_colors(3)
    raster = new_raster((30, 30))
    render_terrain(raster, np.zeros((3, 3), dtype=np.uint8), colors)
    render_terrain(raster, np.full((3, 3), 2, dtype=np.uint8), colors)
    for row in range(3):
        for col in range(3):
            assert pixel(raster, col * 10 + 5, row * 10 + 5) == colors[2]


def test_render_non_square_terrain() -> None:
    colors = breed_colors(2)
    terrain = np.array([[0, 1, 0, 1]], dtype=np.uint8)
    raster = render_terrain(new_raster((40, 10)), terrain, colors)
    assert [pixel(raster, x, 5) for x in (5, 15, 25, 35)] == [
        colors[0],
        colors[1],
        colors[0],
        colors[1],
    ]


def test_breed_outside_color_table_raises() -> None:
    terrain = np.array([[0, 3], [1, 0]], dtype=np.uint8)
    with pytest.raises(IndexError):
        render_terrain(new_raster((10, 10)), terrain, breed_colors(2))
