"""rps_arena
=================

View layer for a rock-paper-scissors style spatial simulation ("arena").

The simulation itself is external. This package reads its terrain (a square
grid of breed indices) through the small :class:`~rps_arena.arena.Arena`
protocol and renders it as one colored oval per cell::

    from rps_arena import MeasureSpec, SnapshotArena, TerrainRenderer

    view = TerrainRenderer()
    view.attach(SnapshotArena.random(arena_size=32, num_breeds=3, seed=0))
    view.measure(MeasureSpec.exactly(640), MeasureSpec.unspecified())
    view.layout((0, 0, 640, 640))

Breed colors are spaced evenly around the HSV hue wheel; see
:mod:`rps_arena.renderer.colors`.
"""

from .arena import Arena, SnapshotArena
from .view import MeasureSpec, Padding, TerrainRenderer

__all__ = ["Arena", "SnapshotArena", "MeasureSpec", "Padding", "TerrainRenderer"]
