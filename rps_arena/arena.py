"""Arena boundary.

The simulation itself lives outside this package. The view only needs three
things from it, captured by the :class:`Arena` protocol:

* ``num_breeds``: number of distinct cell states (stable per instance).
* ``arena_size``: side length of the square grid (stable per instance).
* ``copy_terrain(destination)``: write the breed index of every cell into a
  caller-owned ``uint8`` array of shape ``(arena_size, arena_size)``.

:class:`SnapshotArena` is a fixed-snapshot implementation used by the demo app
and the tests. It has no rules and never steps; callers replace its terrain
explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

import numpy as np
import numpy.typing as npt

from rps_arena.types import MAX_BREEDS, BreedIndex

TerrainArray = npt.NDArray[np.uint8]


class Arena(Protocol):
    num_breeds: int
    arena_size: int

    def copy_terrain(self, destination: TerrainArray) -> None: ...


def validate_terrain(terrain: npt.NDArray[np.integer], num_breeds: int) -> None:
    """Raise ``ValueError`` unless ``terrain`` is a square grid of breed indices."""
    if not 1 <= num_breeds <= MAX_BREEDS:
        raise ValueError(
            f"num_breeds must be between 1 and {MAX_BREEDS}, got {num_breeds}"
        )
    if terrain.ndim != 2 or terrain.shape[0] != terrain.shape[1]:
        raise ValueError(f"Terrain must be a square 2D grid, got {terrain.shape}")
    if terrain.shape[0] == 0:
        raise ValueError("Terrain must contain at least one cell")
    if terrain.min() < 0 or terrain.max() >= num_breeds:
        raise ValueError(
            f"Terrain holds breed indices outside [0, {num_breeds}): "
            f"[{terrain.min()}, {terrain.max()}]"
        )


@dataclass(eq=False)
class SnapshotArena:
    """Arena backed by a fixed terrain snapshot.

    Attributes:
        terrain: Square ``uint8`` grid of breed indices.
        num_breeds: Number of distinct breeds.
    """

    terrain: TerrainArray
    num_breeds: int

    def __post_init__(self) -> None:
        terrain = np.asarray(self.terrain)
        validate_terrain(terrain, self.num_breeds)
        self.terrain = terrain.astype(np.uint8)

    @property
    def arena_size(self) -> int:
        return int(self.terrain.shape[0])

    def copy_terrain(self, destination: TerrainArray) -> None:
        if destination.shape != self.terrain.shape:
            raise ValueError(
                f"Destination shape {destination.shape} does not match terrain "
                f"shape {self.terrain.shape}"
            )
        np.copyto(destination, self.terrain)

    def replace_terrain(self, terrain: npt.ArrayLike) -> None:
        """Swap in a new snapshot of the same shape."""
        new_terrain = np.asarray(terrain)
        if new_terrain.shape != self.terrain.shape:
            raise ValueError(
                f"Replacement terrain shape {new_terrain.shape} does not match "
                f"{self.terrain.shape}"
            )
        validate_terrain(new_terrain, self.num_breeds)
        self.terrain = new_terrain.astype(np.uint8)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], num_breeds: int
    ) -> "SnapshotArena":
        return cls(terrain=np.array(rows, dtype=np.int64), num_breeds=num_breeds)

    @classmethod
    def random(
        cls, arena_size: int, num_breeds: int, seed: Optional[int] = None
    ) -> "SnapshotArena":
        """Uniformly random terrain, reproducible for a given ``seed``."""
        if arena_size < 1:
            raise ValueError(f"arena_size must be positive, got {arena_size}")
        if not 1 <= num_breeds <= MAX_BREEDS:
            raise ValueError(
                f"num_breeds must be between 1 and {MAX_BREEDS}, got {num_breeds}"
            )
        rng = np.random.default_rng(seed)
        terrain = rng.integers(0, num_breeds, size=(arena_size, arena_size))
        return cls(terrain=terrain, num_breeds=num_breeds)


def terrain_rows(terrain: TerrainArray) -> List[List[BreedIndex]]:
    """Nested-list copy of a terrain array (handy for JSON display)."""
    return [[int(value) for value in row] for row in terrain]
