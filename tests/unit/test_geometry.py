"""
Unit tests for geometry primitives.

Tests:
- Point translation and distance
- Rect normalization, containment and intersection
- Segment/rectangle crossing
- Point-to-segment distance
"""

import pytest
from models.geometry import Point, Rect, distance_to_segment


class TestPoint:
    """Tests for Point."""

    def test_translated(self):
        """Test translating a point returns a new point."""
        p = Point(1, 2)
        assert p.translated(3, -4) == Point(4, -2)
        assert p == Point(1, 2)

    def test_distance(self):
        """Test euclidean distance."""
        assert Point(0, 0).distance_to(Point(3, 4)) == pytest.approx(5.0)


class TestRect:
    """Tests for Rect."""

    def test_from_points_normalizes(self):
        """Test that corners in any order give the same rectangle."""
        assert Rect.from_points(Point(60, 40), Point(10, 10)) == Rect(10, 10, 50, 30)
        assert Rect.from_points(Point(10, 40), Point(60, 10)) == Rect(10, 10, 50, 30)

    def test_edges(self):
        """Test edge accessors."""
        rect = Rect(10, 20, 30, 40)
        assert rect.left == 10
        assert rect.top == 20
        assert rect.right == 40
        assert rect.bottom == 60
        assert rect.center == Point(25, 40)

    def test_contains_point_inclusive(self):
        """Test that points on the border count as inside."""
        rect = Rect(0, 0, 10, 10)
        assert rect.contains_point(Point(5, 5))
        assert rect.contains_point(Point(0, 0))
        assert rect.contains_point(Point(10, 10))
        assert not rect.contains_point(Point(10.1, 5))

    def test_contains_rect(self):
        """Test full containment of another rectangle."""
        outer = Rect(0, 0, 100, 100)
        assert outer.contains_rect(Rect(10, 10, 20, 20))
        assert outer.contains_rect(outer)
        assert not outer.contains_rect(Rect(90, 90, 20, 20))

    def test_intersects(self):
        """Test overlap detection."""
        rect = Rect(0, 0, 10, 10)
        assert rect.intersects(Rect(5, 5, 10, 10))
        assert not rect.intersects(Rect(20, 20, 5, 5))

    def test_touching_edges_do_not_intersect(self):
        """Test that rectangles sharing only an edge do not intersect."""
        assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 5, 5))

    def test_united(self):
        """Test union of two rectangles."""
        union = Rect(0, 0, 10, 10).united(Rect(20, 5, 10, 20))
        assert union == Rect(0, 0, 30, 25)

    def test_translated(self):
        """Test translating a rectangle keeps its size."""
        assert Rect(1, 2, 3, 4).translated(10, 20) == Rect(11, 22, 3, 4)

    def test_line_crossing(self):
        """Test a segment passing straight through."""
        rect = Rect(0, 0, 10, 10)
        assert rect.intersects_line(Point(-5, 5), Point(15, 5))
        assert rect.intersects_line(Point(5, -5), Point(5, 15))

    def test_line_inside(self):
        """Test a segment lying fully inside."""
        assert Rect(0, 0, 10, 10).intersects_line(Point(2, 2), Point(3, 3))

    def test_line_outside(self):
        """Test segments that miss the rectangle."""
        rect = Rect(0, 0, 10, 10)
        assert not rect.intersects_line(Point(-5, -5), Point(-1, 20))
        assert not rect.intersects_line(Point(20, 0), Point(30, 10))
        assert not rect.intersects_line(Point(-5, 20), Point(15, 20))


class TestDistanceToSegment:
    """Tests for distance_to_segment."""

    def test_perpendicular(self):
        """Test distance to the interior of a segment."""
        assert distance_to_segment(Point(5, 5), Point(0, 0), Point(10, 0)) == pytest.approx(5.0)

    def test_beyond_end(self):
        """Test distance past an endpoint is measured to that endpoint."""
        assert distance_to_segment(Point(13, 4), Point(0, 0), Point(10, 0)) == pytest.approx(5.0)

    def test_degenerate_segment(self):
        """Test a zero-length segment behaves like a point."""
        assert distance_to_segment(Point(3, 4), Point(0, 0), Point(0, 0)) == pytest.approx(5.0)
