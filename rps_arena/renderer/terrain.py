from typing import Sequence, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from rps_arena.types import RGB, BreedIndex, Size

RASTER_MODE = "RGB"
DEFAULT_BACKGROUND: RGB = (0, 0, 0)

CellBox = Tuple[float, float, float, float]


def new_raster(size: Size, background: RGB = DEFAULT_BACKGROUND) -> Image.Image:
    width, height = size
    return Image.new(RASTER_MODE, (width, height), background)


def cell_bounds(
    raster_size: Size, rows: int, cols: int, row: int, col: int
) -> CellBox:
    """
    Rectangle (left, top, right, bottom) covered by cell ``(row, col)``.
    Cells are fractional when the raster does not divide evenly.
    """
    width, height = raster_size
    cell_width = width / cols
    cell_height = height / rows
    left = cell_width * col
    top = cell_height * row
    return left, top, left + cell_width, top + cell_height


def _inscribed(box: CellBox) -> CellBox:
    # Pillow treats the lower-right corner as inclusive.
    left, top, right, bottom = box
    return left, top, max(left, right - 1), max(top, bottom - 1)


def render_terrain(
    raster: Image.Image,
    terrain: npt.NDArray[np.uint8],
    breed_colors: Sequence[RGB],
) -> Image.Image:
    """
    Paints one filled oval per cell into ``raster``, in place, and returns it.

    The raster is not cleared first: every cell is repainted, so only the
    corners between ovals keep whatever was there before.
    """
    rows, cols = terrain.shape
    if rows == 0 or cols == 0:
        return raster

    draw = ImageDraw.Draw(raster)
    for row in range(rows):
        for col in range(cols):
            breed: BreedIndex = int(terrain[row, col])
            box = cell_bounds(raster.size, rows, cols, row, col)
            draw.ellipse(_inscribed(box), fill=breed_colors[breed])
    return raster
