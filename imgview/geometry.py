"""Two-dimensional points and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


def sign(value: Number) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    return (value > 0) - (value < 0)


def round_half_away(value: Number) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Point:
    """A point or a 2D vector."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, other: Point | Number) -> Point:
        if isinstance(other, Point):
            return Point(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def abs(self) -> Point:
        """Component-wise absolute value."""
        return Point(abs(self.x), abs(self.y))

    def sign(self) -> Point:
        """Component-wise sign (-1, 0 or 1)."""
        return Point(sign(self.x), sign(self.y))

    def round(self) -> Point:
        """Component-wise rounding, halves away from zero."""
        return Point(round_half_away(self.x), round_half_away(self.y))

    def distance_squared(self, other: Point) -> Number:
        """Squared Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


class Corner(Enum):
    NONE = "none"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left and bottom-right points."""

    top_left: Point = Point()
    bottom_right: Point = Point()

    @property
    def width(self) -> Number:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> Number:
        return self.bottom_right.y - self.top_left.y

    def corner(self, corner: Corner) -> Point:
        """Return the requested corner point."""
        if corner is Corner.TOP_LEFT:
            return self.top_left
        if corner is Corner.BOTTOM_RIGHT:
            return self.bottom_right
        if corner is Corner.TOP_RIGHT:
            return Point(self.bottom_right.x, self.top_left.y)
        if corner is Corner.BOTTOM_LEFT:
            return Point(self.top_left.x, self.bottom_right.y)
        raise ValueError(f"no point for corner {corner!r}")

    def inflate(self, dx: Number, dy: Number) -> Rect:
        """Grow the rectangle by ``dx`` and ``dy`` on every side."""
        delta = Point(dx, dy)
        return Rect(self.top_left - delta, self.bottom_right + delta)

    def contains(self, point: Point) -> bool:
        """True if ``point`` lies inside or on the border."""
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )

    def translated(self, offset: Point) -> Rect:
        """Return the rectangle moved by ``offset``."""
        return Rect(self.top_left + offset, self.bottom_right + offset)