"""Rendering subpackage.

Turns a terrain snapshot (a square grid of breed indices) into pixels:

* :mod:`rps_arena.renderer.colors` derives one color per breed by spacing
  hues evenly around the HSV wheel.
* :mod:`rps_arena.renderer.terrain` paints one filled oval per cell into a
  Pillow raster.

Both are pure functions; scheduling and lifecycle live in :mod:`rps_arena.view`.
"""
