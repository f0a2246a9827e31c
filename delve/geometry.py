"""Points, rectangles and line tracing on the integer grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .components import Position


def _div_toward_zero(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Point:
    """A cell coordinate on the map."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_position(cls, pos) -> Point:
        """Build a point from anything with ``x`` and ``y`` attributes."""
        return cls(pos.x, pos.y)

    def to_xy(self) -> tuple[int, int]:
        return (self.x, self.y)

    def distance_squared_to(self, other: Point) -> int:
        """Squared Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner coordinates."""

    x1: int
    x2: int
    y1: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        return cls(x1=x, x2=x + w, y1=y, y2=y + h)

    def intersect(self, other: Rect) -> bool:
        """True when the rectangles overlap or touch."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def center(self) -> tuple[int, int]:
        return (
            _div_toward_zero(self.x1 + self.x2, 2),
            _div_toward_zero(self.y1 + self.y2, 2),
        )

    def center_position(self) -> Position:
        from .components import Position

        return Position.from_point(self.center_point())

    def center_point(self) -> Point:
        x, y = self.center()
        return Point(x, y)


def get_line(a: Point, b: Point) -> list[Point]:
    """Trace the cells between ``a`` and ``b`` with Bresenham's algorithm.

    The returned list starts at ``a`` and ends at ``b``.
    """
    x1, y1, x2, y2 = a.x, a.y, b.x, b.y

    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2

    flipped = x1 > x2
    if flipped:
        x1, x2 = x2, x1
        y1, y2 = y2, y1

    dx = x2 - x1
    dy = abs(y2 - y1)
    err = dx // 2
    y = y1
    y_step = 1 if y1 < y2 else -1

    points = []
    for x in range(x1, x2 + 1):
        points.append(Point(y, x) if steep else Point(x, y))
        err -= dy
        if err < 0:
            y += y_step
            err += dx

    if flipped:
        points.reverse()
    return points