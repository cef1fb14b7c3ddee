"""
Integration tests for complete editing sessions.

Drives the CanvasController with pointer gestures the way the drawing
widget does: create boxes, link them, select, move, group, ungroup and
delete, then checks the resulting diagram.
"""

from models.canvas import EditorMode
from models.geometry import Point, Rect
from models.shapes import BasicShape, CompositeShape, Link, LinkKind, Port
from conftest import draw_box


def _click(controller, point):
    controller.on_press(point)
    controller.on_release(point)


def _drag(controller, start, end):
    controller.on_press(start)
    controller.on_drag(end)
    controller.on_release(end)


def _link(controller, mode, start, end):
    controller.set_mode(mode)
    _drag(controller, start, end)


class TestCreateAndSelect:
    """Drawing a box and selecting it."""

    def test_draw_then_click(self, controller):
        """Test a drawn box spans the gesture and can be clicked."""
        shape = draw_box(controller, Point(10, 10), Point(60, 40))
        assert shape.get_bounds() == Rect(10, 10, 50, 30)
        assert shape.depth == 0
        assert controller.current_shape is None

        controller.set_mode(EditorMode.SELECT)
        _click(controller, Point(30, 20))
        assert controller.selected_shapes == [shape]

        _click(controller, Point(200, 200))
        assert controller.selected_shapes == []


class TestLinkWorkflow:
    """Linking two boxes and moving them."""

    def _two_linked(self, controller, mode=EditorMode.ASSOCIATION):
        a = draw_box(controller, Point(0, 0), Point(100, 60))
        b = draw_box(controller, Point(200, 0), Point(300, 60))
        _link(controller, mode, Point(95, 30), Point(205, 30))
        return a, b, controller.shapes[-1]

    def test_link_between_boxes(self, controller):
        """Test a link gesture binds ports on both boxes."""
        a, b, link = self._two_linked(controller)

        assert isinstance(link, Link)
        assert link.kind == LinkKind.ASSOCIATION
        assert (link.start_shape_id, link.end_shape_id) == (a.id, b.id)
        assert (link.start_port, link.end_port) == (Port.E, Port.W)
        assert link.start_point == Point(100, 30)
        assert link.end_point == Point(200, 30)
        assert link.depth == 2

    def test_dangling_link_discarded(self, controller):
        """Test a link released over empty space is not kept."""
        draw_box(controller, Point(0, 0), Point(100, 60))
        _link(controller, EditorMode.GENERALIZATION, Point(95, 30), Point(400, 400))
        assert [type(s) for s in controller.shapes] == [BasicShape]

    def test_move_box_drags_link(self, controller):
        """Test moving a linked box keeps the link glued to it."""
        a, b, link = self._two_linked(controller)
        controller.set_mode(EditorMode.SELECT)
        _drag(controller, Point(250, 50), Point(270, 90))

        assert b.get_bounds() == Rect(220, 40, 100, 60)
        assert link.end_point == Point(220, 70)
        assert link.start_point == Point(100, 30)

    def test_marquee_then_click(self, controller):
        """Test a marquee picks boxes and link; a click narrows to one shape."""
        a, b, link = self._two_linked(controller, EditorMode.COMPOSITION)
        controller.set_mode(EditorMode.SELECT)
        _drag(controller, Point(-10, -10), Point(310, 70))
        assert controller.selected_shapes == [a, b, link]
        assert controller.get_selection_info() == "Selected 3 shapes: Rect, Rect, CompositionLink"

        _drag(controller, Point(50, 30), Point(60, 130))
        assert controller.selected_shapes == [a]
        assert a.get_bounds() == Rect(10, 100, 100, 60)
        assert b.get_bounds() == Rect(200, 0, 100, 60)
        assert link.start_point == Point(110, 130)
        assert link.end_point == Point(200, 30)


class TestGroupWorkflow:
    """Grouping, moving, ungrouping and deleting."""

    def test_group_move_ungroup(self, controller):
        """Test a group moves as a unit and ungroups back in place."""
        a = draw_box(controller, Point(0, 0), Point(100, 60))
        b = draw_box(controller, Point(200, 0), Point(300, 60))
        _link(controller, EditorMode.ASSOCIATION, Point(95, 30), Point(205, 30))
        link = controller.shapes[-1]

        controller.set_mode(EditorMode.SELECT)
        _click(controller, Point(50, 30))
        controller.state.select(b)
        group = controller.group_selected_shapes()
        assert group.get_bounds() == Rect(0, 0, 300, 60)

        _drag(controller, Point(150, 5), Point(150, 55))
        assert group.get_bounds() == Rect(0, 50, 300, 60)
        assert link.start_point == Point(100, 80)
        assert link.end_point == Point(200, 80)

        _click(controller, Point(150, 55))
        assert controller.ungroup_selected_shape()
        assert controller.shapes == [a, b, link]
        assert a.get_bounds() == Rect(0, 50, 100, 60)

    def test_delete_group_removes_outside_link(self, controller):
        """Test deleting a group also removes links leaving it."""
        a = draw_box(controller, Point(0, 0), Point(100, 60))
        b = draw_box(controller, Point(0, 200), Point(100, 260))
        c = draw_box(controller, Point(400, 0), Point(500, 60))
        _link(controller, EditorMode.ASSOCIATION, Point(95, 30), Point(405, 30))

        controller.set_mode(EditorMode.SELECT)
        _click(controller, Point(50, 30))
        controller.state.select(b)
        group = controller.group_selected_shapes()
        assert isinstance(group, CompositeShape)

        controller.delete_selected_shapes()
        assert controller.shapes == [c]


class TestGroupedLinkWorkflow:
    """Grouping a link together with one of the boxes it connects."""

    def _group_box_with_link(self, controller):
        a = draw_box(controller, Point(0, 0), Point(100, 60))
        c = draw_box(controller, Point(400, 0), Point(500, 60))
        _link(controller, EditorMode.ASSOCIATION, Point(95, 30), Point(405, 30))
        link = controller.shapes[-1]

        controller.set_mode(EditorMode.SELECT)
        _drag(controller, Point(-10, -10), Point(150, 70))
        assert controller.selected_shapes == [a, link]
        group = controller.group_selected_shapes()
        return a, c, link, group

    def test_delete_outside_box(self, controller):
        """Test deleting the outside box removes the grouped link."""
        a, c, link, group = self._group_box_with_link(controller)
        _click(controller, Point(450, 30))
        assert controller.selected_shapes == [c]

        controller.delete_selected_shapes()
        assert controller.shapes == [group]
        assert group.children == [a]

    def test_move_outside_box(self, controller):
        """Test moving the outside box drags the grouped link's end along."""
        a, c, link, group = self._group_box_with_link(controller)
        _drag(controller, Point(450, 30), Point(450, 130))

        assert c.get_bounds() == Rect(400, 100, 100, 60)
        assert link.end_point == Point(400, 130)
        assert link.start_point == Point(100, 30)


class TestCollapsedShape:
    """Shape gestures that end where they started."""

    def test_click_creates_default_size(self, controller):
        """Test a drag back to the press point leaves a visible default box."""
        shape = draw_box(controller, Point(10, 10), Point(10, 10))
        assert shape.get_bounds() == Rect(10, 10, 100, 60)
