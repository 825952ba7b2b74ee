"""Terrain view.

:class:`TerrainRenderer` draws the terrain of an :class:`~rps_arena.arena.Arena`
as one filled oval per cell, colored by breed. It follows a host-driven view
protocol:

* ``measure(width_spec, height_spec)``: choose a square size.
* ``layout(bounds)``: accept final bounds and render synchronously.
* ``draw(target)``: paste the last rendered frame onto ``target``.

Embedders call ``attach(arena)`` to pick the arena and
``notify_generation(n)`` after each simulation step. Generation changes are
rendered on a background :class:`~rps_arena.view.refresh.RefreshWorker`, so a
fast simulation never queues more than one refresh behind the running one.

Frames are published as immutable copies of the offscreen raster. ``draw``
only reads the published frame and never waits on a refresh.
"""

import logging
import threading
from typing import Optional

import numpy as np
from PIL import Image
from pyrsistent import pvector
from pyrsistent.typing import PVector

from rps_arena.arena import Arena
from rps_arena.renderer.colors import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_SATURATION,
    breed_colors,
)
from rps_arena.renderer.terrain import DEFAULT_BACKGROUND, new_raster, render_terrain
from rps_arena.types import MAX_BREEDS, RGB, Bounds, Generation, Size
from rps_arena.view.lifecycle import Binding, Bound, ViewPhase, resolve_phase
from rps_arena.view.measure import MeasureSpec, Padding, measure_square
from rps_arena.view.refresh import RefreshWorker

logger = logging.getLogger(__name__)


class TerrainRenderer:
    min_width: int
    min_height: int
    padding: Padding
    saturation: float
    brightness: float
    background: RGB

    def __init__(
        self,
        min_width: int = 0,
        min_height: int = 0,
        padding: Padding = Padding(),
        saturation: float = DEFAULT_SATURATION,
        brightness: float = DEFAULT_BRIGHTNESS,
        background: RGB = DEFAULT_BACKGROUND,
    ):
        self.min_width = min_width
        self.min_height = min_height
        self.padding = padding
        self.saturation = saturation
        self.brightness = brightness
        self.background = background

        self._lock = threading.RLock()
        self._measured_size: Optional[Size] = None
        self._size: Optional[Size] = None
        self._arena: Optional[Arena] = None
        self._binding: Optional[Binding] = None
        self._raster: Optional[Image.Image] = None
        self._frame: Optional[Image.Image] = None
        self._generation: Generation = 0
        self._worker = RefreshWorker(self.refresh_bitmap)

    # -------- Read-only state --------

    @property
    def arena(self) -> Optional[Arena]:
        return self._arena

    @property
    def terrain(self) -> Optional[np.ndarray]:
        binding = self._binding
        return binding.terrain if binding is not None else None

    @property
    def breed_colors(self) -> PVector[RGB]:
        binding = self._binding
        return binding.breed_colors if binding is not None else pvector()

    @property
    def raster(self) -> Optional[Image.Image]:
        return self._raster

    @property
    def frame(self) -> Optional[Image.Image]:
        """Most recently published frame, or None before the first render."""
        return self._frame

    @property
    def generation(self) -> Generation:
        """Last generation whose refresh completed."""
        return self._generation

    @property
    def measured(self) -> bool:
        return self._size is not None

    @property
    def measured_size(self) -> Optional[Size]:
        return self._measured_size

    @property
    def phase(self) -> ViewPhase:
        return resolve_phase(self._size, self._arena, self._binding)

    # -------- Host protocol --------

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec) -> Size:
        """
        Returns a square size: each axis is resolved against its spec and the
        larger result is used for both. Clears the current frame until the next
        ``layout``.
        """
        size = measure_square(
            width_spec,
            height_spec,
            min_width=self.min_width,
            min_height=self.min_height,
            padding=self.padding,
        )
        with self._lock:
            self._size = None
            self._measured_size = size
            self._raster = None
            self._frame = None
        logger.debug("Measured %s x %s as %s", width_spec, height_spec, size)
        return size

    def layout(self, bounds: Bounds) -> None:
        """Accepts final bounds and renders the current terrain synchronously."""
        left, top, right, bottom = bounds
        size = (max(0, right - left), max(0, bottom - top))
        with self._lock:
            if size != self._size:
                self._raster = None
            self._size = size
        logger.debug("Laid out at %s", bounds)
        self.refresh_bitmap()

    def draw(self, target: Image.Image) -> None:
        frame = self._frame
        if frame is not None:
            target.paste(frame, (0, 0))

    # -------- Embedder API --------

    def attach(self, arena: Optional[Arena]) -> None:
        """
        Selects the arena to render. ``None`` detaches it but keeps the buffer,
        colors and frame from the previous arena. Does not redraw.
        """
        if arena is None:
            with self._lock:
                self._arena = None
            logger.debug("Detached arena")
            return

        num_breeds = int(arena.num_breeds)
        arena_size = int(arena.arena_size)
        if not 1 <= num_breeds <= MAX_BREEDS:
            raise ValueError(
                f"Arena num_breeds must be between 1 and {MAX_BREEDS}, "
                f"got {num_breeds}"
            )
        if arena_size < 1:
            raise ValueError(f"Arena arena_size must be positive, got {arena_size}")

        binding = Binding(
            terrain=np.zeros((arena_size, arena_size), dtype=np.uint8),
            breed_colors=breed_colors(
                num_breeds, saturation=self.saturation, brightness=self.brightness
            ),
        )
        # Waits for an in-flight refresh, which finishes with the old binding.
        with self._lock:
            self._arena = arena
            self._binding = binding
        logger.debug(
            "Attached arena: %d breeds, %dx%d", num_breeds, arena_size, arena_size
        )

    def notify_generation(self, generation: Generation) -> None:
        """
        Schedules a background refresh when ``generation`` is 0 or differs from
        the last completed one; the generation is recorded once that refresh
        has rendered. After ``close`` this only logs.
        """
        if generation < 0:
            raise ValueError(f"Generation must be non-negative, got {generation}")
        if generation != 0 and generation == self._generation:
            return
        if self._worker.closed:
            logger.warning("View is closed; ignoring generation %d", generation)
            return

        def commit() -> None:
            self._generation = generation

        logger.debug("Scheduling refresh for generation %d", generation)
        self._worker.submit(on_complete=commit)

    def refresh_bitmap(self) -> bool:
        """
        Copies the arena's terrain and repaints every cell into the offscreen
        raster, then publishes a copy as the drawable frame.

        Returns:
            bool: True if a frame was rendered; False when the view is not
            measured or has no arena.
        """
        with self._lock:
            phase = self.phase
            if not isinstance(phase, Bound):
                logger.debug("Skipping refresh in phase %s", type(phase).__name__)
                return False

            if self._raster is None:
                self._raster = new_raster(phase.size, self.background)
            raster = self._raster
            terrain = phase.binding.terrain

            phase.arena.copy_terrain(terrain)
            if raster.width > 0 and raster.height > 0:
                render_terrain(raster, terrain, phase.binding.breed_colors)
            self._frame = raster.copy()
        return True

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until no background refresh is pending or running."""
        return self._worker.wait_idle(timeout)

    def close(self, timeout: Optional[float] = None) -> None:
        self._worker.close(timeout)
