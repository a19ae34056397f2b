"""Integer points and rectangles, and the geometry used for hit testing."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2) if value >= 0 else -((-value) // 2)


@dataclass(frozen=True)
class Point:
    """A point in screen pixels."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; edges are inclusive for hit testing."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def intersects(self, other: Rect) -> bool:
        """True when the rectangles overlap or touch."""
        return not (
            self.right < other.left
            or self.left > other.right
            or self.bottom < other.top
            or self.top > other.bottom
        )

    def translated(self, dx: int, dy: int) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    @staticmethod
    def from_points(a: Point, b: Point) -> Rect:
        """The normalised rectangle spanned by two corner points."""
        return Rect(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))


def handle_points(rect: Rect) -> list[tuple[int, int]]:
    """The eight resize handles, clockwise from the top-left corner."""
    cx = _half(rect.left + rect.right)
    cy = _half(rect.top + rect.bottom)
    return [
        (rect.left, rect.top),
        (cx, rect.top),
        (rect.right, rect.top),
        (rect.right, cy),
        (rect.right, rect.bottom),
        (cx, rect.bottom),
        (rect.left, rect.bottom),
        (rect.left, cy),
    ]


def point_to_line_distance(px: int, py: int, x1: int, y1: int, x2: int, y2: int) -> float:
    """Distance from a point to the segment (x1, y1)–(x2, y2)."""
    c = x2 - x1
    d = y2 - y1
    len_sq = float(c * c + d * d)
    if len_sq == 0.0:
        return math.hypot(px - x1, py - y1)
    param = ((px - x1) * c + (py - y1) * d) / len_sq
    if param < 0.0:
        xx, yy = float(x1), float(y1)
    elif param > 1.0:
        xx, yy = float(x2), float(y2)
    else:
        xx, yy = x1 + param * c, y1 + param * d
    return math.hypot(px - xx, py - yy)


_ARROW_HEAD_LENGTH = 15.0
_ARROW_HEAD_ANGLE = 0.5
_ARROW_MIN_LENGTH = 20.0


def arrow_wings(start: Point, end: Point) -> tuple[Point, Point] | None:
    """The two arrow-head wing tips, or None when the arrow is too short for a head."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.sqrt(float(dx * dx + dy * dy))
    if length <= _ARROW_MIN_LENGTH:
        return None
    ux = dx / length
    uy = dy / length
    cos_a = math.cos(_ARROW_HEAD_ANGLE)
    sin_a = math.sin(_ARROW_HEAD_ANGLE)
    wing1 = Point(
        end.x - int(_ARROW_HEAD_LENGTH * (ux * cos_a + uy * sin_a)),
        end.y - int(_ARROW_HEAD_LENGTH * (uy * cos_a - ux * sin_a)),
    )
    wing2 = Point(
        end.x - int(_ARROW_HEAD_LENGTH * (ux * cos_a - uy * sin_a)),
        end.y - int(_ARROW_HEAD_LENGTH * (uy * cos_a + ux * sin_a)),
    )
    return wing1, wing2