"""View subpackage.

Hosts the :class:`~rps_arena.view.terrain_view.TerrainRenderer` widget and the
pieces it is built from: square measurement, explicit lifecycle phases and a
coalescing background refresh worker.
"""

from .measure import MeasureSpec, Padding
from .terrain_view import TerrainRenderer

__all__ = ["MeasureSpec", "Padding", "TerrainRenderer"]
