"""Explicit view phases.

A terrain view moves through three phases:

* :class:`Unmeasured`: no size yet; nothing can be drawn.
* :class:`Measured`: laid out, but no arena attached (the last frame, if any,
  stays on screen).
* :class:`Bound`: laid out with an arena attached; refreshes render frames.

The phase is derived from the view's fields on demand, so code that renders
can only do so with a size, an arena and a binding in hand.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt
from pyrsistent.typing import PVector

from rps_arena.arena import Arena
from rps_arena.types import RGB, Size


@dataclass(frozen=True, eq=False)
class Binding:
    """Terrain buffer and breed colors built together for one arena.

    Attributes:
        terrain: Buffer the arena copies into, shape ``(arena_size, arena_size)``.
        breed_colors: One color per breed index.
    """

    terrain: npt.NDArray[np.uint8]
    breed_colors: PVector[RGB]


@dataclass(frozen=True)
class Unmeasured:
    pass


@dataclass(frozen=True)
class Measured:
    size: Size


@dataclass(frozen=True, eq=False)
class Bound:
    size: Size
    arena: Arena
    binding: Binding


ViewPhase = Unmeasured | Measured | Bound


def resolve_phase(
    size: Optional[Size], arena: Optional[Arena], binding: Optional[Binding]
) -> ViewPhase:
    if size is None:
        return Unmeasured()
    if arena is None or binding is None:
        return Measured(size)
    return Bound(size, arena, binding)
