"""
Canvas geometry primitives.

Immutable point and axis-aligned rectangle types shared by the shape
model, hit-testing and marquee selection.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D position on the canvas."""
    x: float = 0.0
    y: float = 0.0

    def translated(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle.

    Width and height are never negative; use from_points() to build a
    rectangle from two arbitrary corners.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_points(cls, a: Point, b: Point) -> "Rect":
        """Normalized rectangle spanning two corner points."""
        left = min(a.x, b.x)
        top = min(a.y, b.y)
        return cls(left, top, abs(a.x - b.x), abs(a.y - b.y))

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def contains_point(self, point: Point) -> bool:
        """Inclusive containment test (points on the border are inside)."""
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def contains_rect(self, other: "Rect") -> bool:
        return (self.left <= other.left and other.right <= self.right and
                self.top <= other.top and other.bottom <= self.bottom)

    def intersects(self, other: "Rect") -> bool:
        """True when the interiors overlap; touching edges do not count."""
        if self.is_empty() or other.is_empty():
            return False
        return (self.left < other.right and other.left < self.right and
                self.top < other.bottom and other.top < self.bottom)

    def united(self, other: "Rect") -> "Rect":
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)

    def intersects_line(self, p1: Point, p2: Point) -> bool:
        """
        Check whether the segment p1-p2 touches this rectangle.

        Uses Liang-Barsky clipping, so segments lying fully inside count
        as intersecting as well as segments crossing the border.
        """
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        t0, t1 = 0.0, 1.0

        for p, q in (
            (-dx, p1.x - self.left),
            (dx, self.right - p1.x),
            (-dy, p1.y - self.top),
            (dy, self.bottom - p1.y),
        ):
            if p == 0:
                if q < 0:
                    return False  # Parallel and outside this edge
                continue
            t = q / p
            if p < 0:
                if t > t1:
                    return False
                t0 = max(t0, t)
            else:
                if t < t0:
                    return False
                t1 = min(t1, t)

        return t0 <= t1


def distance_to_segment(point: Point, a: Point, b: Point) -> float:
    """Shortest distance from point to the segment a-b."""
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return point.distance_to(a)

    t = ((point.x - a.x) * dx + (point.y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return point.distance_to(Point(a.x + t * dx, a.y + t * dy))
