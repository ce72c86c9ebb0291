from __future__ import annotations

from typing import Any, NamedTuple, Tuple

from mapper.constants import CELL_SIZE


class Rect(NamedTuple):
    """Axis-aligned rectangle in screen pixels (top-left origin)."""
    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def at(cls, x: int, y: int, size: Tuple[int, int]) -> "Rect":
        width, height = size
        return cls(x, y, x + width, y + height)

    def contains(self, x: float, y: float) -> bool:
        # Points on an edge are outside.
        return self.left < x < self.right and self.top < y < self.bottom


def image_size(image: Any) -> Tuple[int, int]:
    """Pixel size of an image handle (arcade.Texture or anything sized)."""
    if image is None:
        return 0, 0
    return int(image.width), int(image.height)


def snap_remainder(delta: int) -> int:
    """Amount to subtract from delta to land on the lower grid line.

    Always in [0, CELL_SIZE), for negative deltas as well.
    """
    return delta % CELL_SIZE


def snap_delta(delta: int) -> int:
    """Largest multiple of CELL_SIZE that is <= delta."""
    return delta - snap_remainder(delta)


def snap_point(x: int, y: int) -> Tuple[int, int]:
    """Origin of the grid cell containing the point."""
    return snap_delta(x), snap_delta(y)


def reveal_offset(position: int, extent: int) -> int:
    """Shift that pulls a tile back over the top or left edge.

    A tile whose far edge has gone past the edge of the screen is moved so
    that one cell of it stays visible. Returns 0 when no shift is needed.
    """
    if position > -extent:
        return 0
    return (-position // CELL_SIZE + 1) * CELL_SIZE - extent
