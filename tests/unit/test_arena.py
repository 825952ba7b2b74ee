import numpy as np
import pytest

from rps_arena.arena import SnapshotArena, terrain_rows


def test_from_rows() -> None:
    arena = SnapshotArena.from_rows([[0, 1, 2], [2, 1, 0], [1, 1, 1]], num_breeds=3)
    assert arena.arena_size == 3
    assert arena.num_breeds == 3
    assert arena.terrain.dtype == np.uint8


def test_copy_terrain_fills_destination() -> None:
    arena = SnapshotArena.from_rows([[0, 1], [1, 0]], num_breeds=2)
    destination = np.zeros((2, 2), dtype=np.uint8)
    arena.copy_terrain(destination)
    assert terrain_rows(destination) == [[0, 1], [1, 0]]
    # the arena keeps its own copy
    destination[0, 0] = 1
    assert arena.terrain[0, 0] == 0


def test_copy_terrain_rejects_wrong_shape() -> None:
    arena = SnapshotArena.from_rows([[0, 1], [1, 0]], num_breeds=2)
    with pytest.raises(ValueError):
        arena.copy_terrain(np.zeros((3, 3), dtype=np.uint8))


def test_random_is_reproducible() -> None:
    a = SnapshotArena.random(16, 4, seed=7)
    b = SnapshotArena.random(16, 4, seed=7)
    assert np.array_equal(a.terrain, b.terrain)
    assert a.terrain.max() < 4


def test_replace_terrain() -> None:
    arena = SnapshotArena.from_rows([[0, 0], [0, 0]], num_breeds=2)
    arena.replace_terrain([[1, 1], [1, 0]])
    assert terrain_rows(arena.terrain) == [[1, 1], [1, 0]]
    with pytest.raises(ValueError):
        arena.replace_terrain([[1, 1, 1], [1, 0, 0], [0, 0, 0]])
    with pytest.raises(ValueError):
        arena.replace_terrain([[2, 1], [1, 0]])


@pytest.mark.parametrize(
    "rows, num_breeds",
    [
        ([[0, 1]], 2),  # not square
        ([[0, 3], [1, 0]], 3),  # breed out of range
        ([[0, -1], [1, 0]], 2),  # negative breed
        ([[0]], 0),  # no breeds
        ([[0]], 257),  # too many breeds for a byte
    ],
)
def test_invalid_terrain_rejected(rows, num_breeds) -> None:
    with pytest.raises(ValueError):
        SnapshotArena.from_rows(rows, num_breeds=num_breeds)


@pytest.mark.parametrize("arena_size, num_breeds", [(0, 3), (4, 0)])
def test_random_rejects_degenerate_sizes(arena_size: int, num_breeds: int) -> None:
    with pytest.raises(ValueError):
        SnapshotArena.random(arena_size, num_breeds)
