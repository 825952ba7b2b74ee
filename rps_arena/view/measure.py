"""Measurement helpers for square views.

A host lays out a view by handing it one :class:`MeasureSpec` per axis. The
terrain view resolves both axes independently and then keeps the larger side
for both, so its content is always square. That suits a host that scrolls
along one axis: fix the width to the container and let the height follow (or
the other way around).
"""

from dataclasses import dataclass

from rps_arena.types import MeasureMode, Size


@dataclass(frozen=True)
class MeasureSpec:
    """Sizing constraint for one axis.

    Attributes:
        mode: How ``size`` constrains the axis.
        size: Pixel size; ignored for ``UNSPECIFIED``.
    """

    mode: MeasureMode
    size: int = 0

    @classmethod
    def exactly(cls, size: int) -> "MeasureSpec":
        return cls(MeasureMode.EXACTLY, size)

    @classmethod
    def at_most(cls, size: int) -> "MeasureSpec":
        return cls(MeasureMode.AT_MOST, size)

    @classmethod
    def unspecified(cls) -> "MeasureSpec":
        return cls(MeasureMode.UNSPECIFIED)


@dataclass(frozen=True)
class Padding:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


def resolve_size(desired: int, spec: MeasureSpec) -> int:
    """Reconcile a desired size with a host constraint; never negative."""
    if spec.mode == MeasureMode.EXACTLY:
        size = spec.size
    elif spec.mode == MeasureMode.AT_MOST:
        size = min(desired, spec.size)
    else:
        size = desired
    return max(0, size)


def measure_square(
    width_spec: MeasureSpec,
    height_spec: MeasureSpec,
    min_width: int = 0,
    min_height: int = 0,
    padding: Padding = Padding(),
) -> Size:
    """Resolve both axes, then use the larger one as the side of a square."""
    width = resolve_size(padding.horizontal + min_width, width_spec)
    height = resolve_size(padding.vertical + min_height, height_spec)
    side = max(width, height)
    return side, side
