"""Small 2-D vector and rectangle types used by the game objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Vector:
    """An immutable 2-D vector in screen coordinates (y grows downwards)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def dot(self, other: Vector) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector:
        """Return a unit vector with the same direction."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector(self.x / length, self.y / length)


@dataclass(frozen=True)
class Rect:
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

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def intersection(self, other: Rect) -> Optional[Rect]:
        """Return the overlapping area, or None when the rectangles only touch or are apart."""
        own_left, own_right = self._span_x()
        own_top, own_bottom = self._span_y()
        other_left, other_right = other._span_x()
        other_top, other_bottom = other._span_y()

        left = max(own_left, other_left)
        top = max(own_top, other_top)
        right = min(own_right, other_right)
        bottom = min(own_bottom, other_bottom)

        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rect) -> bool:
        """Return True when the rectangles overlap."""
        return self.intersection(other) is not None