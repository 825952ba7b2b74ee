import numpy as np
from pyrsistent import pvector

from rps_arena.view.lifecycle import (
    Binding,
    Bound,
    Measured,
    Unmeasured,
    resolve_phase,
)
from tests.test_utils import checkerboard_arena


def make_binding() -> Binding:
    return Binding(
        terrain=np.zeros((2, 2), dtype=np.uint8),
        breed_colors=pvector([(255, 0, 0), (0, 255, 0)]),
    )


def test_unmeasured_without_size() -> None:
    assert resolve_phase(None, None, None) == Unmeasured()
    assert resolve_phase(None, checkerboard_arena(), make_binding()) == Unmeasured()


def test_measured_without_arena() -> None:
    assert resolve_phase((10, 10), None, None) == Measured((10, 10))
    # a stale binding after detach does not make the view bound
    assert resolve_phase((10, 10), None, make_binding()) == Measured((10, 10))


def test_bound_with_size_arena_and_binding() -> None:
    arena = checkerboard_arena()
    binding = make_binding()
    phase = resolve_phase((10, 10), arena, binding)
    assert isinstance(phase, Bound)
    assert phase.size == (10, 10)
    assert phase.arena is arena
    assert phase.binding is binding
