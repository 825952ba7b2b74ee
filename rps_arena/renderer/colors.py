import colorsys
from typing import List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from rps_arena.types import MAX_BREEDS, RGB

MAX_HUE = 360.0
DEFAULT_SATURATION = 1.0
DEFAULT_BRIGHTNESS = 0.85


def _check_num_breeds(num_breeds: int) -> None:
    if not 1 <= num_breeds <= MAX_BREEDS:
        raise ValueError(
            f"num_breeds must be between 1 and {MAX_BREEDS}, got {num_breeds}"
        )


def breed_hues(num_breeds: int) -> List[float]:
    """
    Hues in degrees, evenly spaced around the color wheel starting at 0.
    """
    _check_num_breeds(num_breeds)
    hue_interval = MAX_HUE / num_breeds
    return [i * hue_interval for i in range(num_breeds)]


def hsv_to_rgb(hue: float, saturation: float, brightness: float) -> RGB:
    r, g, b = colorsys.hsv_to_rgb((hue % MAX_HUE) / MAX_HUE, saturation, brightness)
    return round(r * 255), round(g * 255), round(b * 255)


def breed_colors(
    num_breeds: int,
    saturation: float = DEFAULT_SATURATION,
    brightness: float = DEFAULT_BRIGHTNESS,
) -> PVector[RGB]:
    """
    Deterministically map each breed index to an RGB color.

    Index ``i`` gets hue ``i * 360 / num_breeds`` at fixed saturation and
    brightness, so breed 0 is always red.
    """
    return pvector(
        hsv_to_rgb(hue, saturation, brightness) for hue in breed_hues(num_breeds)
    )
