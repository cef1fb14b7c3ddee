"""
Unit tests for the shape factory.
"""

import pytest
from models.canvas import EditorMode
from models.geometry import Point, Rect
from models.shapes import BasicShape, Link, LinkKind, ShapeType
from services.shape_factory import create_shape, create_link


class TestCreateShape:
    """Tests for create_shape."""

    def test_rect(self):
        """Test RECT mode creates a rectangle at the point."""
        shape = create_shape(EditorMode.RECT, Point(10, 10))
        assert isinstance(shape, BasicShape)
        assert shape.shape_type == ShapeType.RECT
        assert shape.get_bounds() == Rect(10, 10, 100, 60)
        assert shape.depth == -1

    def test_oval(self):
        """Test OVAL mode creates an oval."""
        shape = create_shape(EditorMode.OVAL, Point(0, 0))
        assert shape.shape_type == ShapeType.OVAL
        assert shape.type_name == "Oval"

    def test_custom_size(self):
        """Test default size can be overridden."""
        shape = create_shape(EditorMode.RECT, Point(0, 0), width=40, height=20)
        assert shape.get_bounds() == Rect(0, 0, 40, 20)

    @pytest.mark.parametrize("mode", [
        EditorMode.SELECT, EditorMode.ASSOCIATION,
        EditorMode.GENERALIZATION, EditorMode.COMPOSITION,
    ])
    def test_non_shape_modes(self, mode):
        """Test modes that do not create boxes return None."""
        assert create_shape(mode, Point(0, 0)) is None


class TestCreateLink:
    """Tests for create_link."""

    @pytest.mark.parametrize("mode,kind", [
        (EditorMode.ASSOCIATION, LinkKind.ASSOCIATION),
        (EditorMode.GENERALIZATION, LinkKind.GENERALIZATION),
        (EditorMode.COMPOSITION, LinkKind.COMPOSITION),
    ])
    def test_link_modes(self, mode, kind):
        """Test each link mode creates the matching link kind."""
        link = create_link(mode, Point(5, 6))
        assert isinstance(link, Link)
        assert link.kind == kind
        assert link.start_point == Point(5, 6)
        assert link.end_point == Point(5, 6)
        assert link.start_shape_id is None
        assert link.end_shape_id is None
        assert not link.is_complete

    def test_hit_tolerance(self):
        """Test hit tolerance is passed through."""
        link = create_link(EditorMode.ASSOCIATION, Point(0, 0), hit_tolerance=8.0)
        assert link.hit_tolerance == 8.0

    @pytest.mark.parametrize("mode", [EditorMode.SELECT, EditorMode.RECT, EditorMode.OVAL])
    def test_non_link_modes(self, mode):
        """Test modes that do not create links return None."""
        assert create_link(mode, Point(0, 0)) is None
