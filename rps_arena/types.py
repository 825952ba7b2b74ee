"""Common type aliases and enumerations.

``Size`` is always ``(width, height)`` in pixels; terrain arrays are indexed
``terrain[row, col]``.
"""

from enum import StrEnum, auto
from typing import Tuple

BreedIndex = int
Generation = int

RGB = Tuple[int, int, int]
Size = Tuple[int, int]
Bounds = Tuple[int, int, int, int]  # left, top, right, bottom

# Breed indices are stored one per byte in the terrain buffer.
MAX_BREEDS = 256


class MeasureMode(StrEnum):
    """Sizing constraint kinds a host passes to ``measure``."""

    EXACTLY = auto()
    AT_MOST = auto()
    UNSPECIFIED = auto()
