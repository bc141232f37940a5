"""Shared world constants, axis-aligned rectangles and contact flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

MAP_WIDTH = 50
MAP_HEIGHT = 16
CELL_SIZE = 32.0
GRAVITY = 100.0
WINDOW_HEIGHT = 512
WINDOW_WIDTH = 512
NUM_TOOLS = 10
NUM_MONSTERS = 6

MAP_PIXEL_WIDTH = MAP_WIDTH * CELL_SIZE


class Contact(IntFlag):
    """Sides of an obstacle that a bounding box touches."""

    NONE = 0
    RIGHT = 1
    LEFT = 2
    BOTTOM = 4


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersection(self, other: FloatRect) -> FloatRect | None:
        """Return the overlapping area, or None when the rectangles only touch or are apart."""
        left = max(min(self.left, self.right), min(other.left, other.right))
        top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        right = min(max(self.left, self.right), max(other.left, other.right))
        bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        if left < right and top < bottom:
            return FloatRect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: FloatRect) -> bool:
        """Tell whether the rectangles share a non-empty area."""
        return self.intersection(other) is not None

    def moved(self, dx: float, dy: float) -> FloatRect:
        """Return the same rectangle shifted by (dx, dy)."""
        return FloatRect(self.left + dx, self.top + dy, self.width, self.height)