"""
Selection Manager.

Click selection picks the topmost shape under the pointer; marquee
selection picks every root shape touched by a drag rectangle.
"""

import logging
from typing import Optional

from models.canvas import CanvasState
from models.geometry import Point, Rect
from models.shapes import Link, SelectionRectangle, Shape

logger = logging.getLogger(__name__)


def clear_selection(state: CanvasState) -> None:
    """Unmark every selected shape and empty the selection."""
    for shape in state.selected:
        shape.selected = False
    state.selected.clear()


def hit_test(shapes: list[Shape], point: Point) -> Optional[Shape]:
    """Topmost shape containing point, by descending depth."""
    for shape in sorted(shapes, key=lambda s: s.depth, reverse=True):
        if shape.contains(point):
            return shape
    return None


def select_at(state: CanvasState, point: Point) -> Optional[Shape]:
    """Replace the selection with the topmost shape under point, if any."""
    clear_selection(state)
    shape = hit_test(state.shapes, point)
    if shape is not None:
        state.select(shape)
    return shape


def is_shape_in_area(shape: Shape, area: Rect) -> bool:
    """
    Decide whether a marquee rectangle picks up a shape.

    Boxes and groups are picked when their bounds overlap or lie inside
    the area. Links are picked when an endpoint is inside or the segment
    crosses the area.
    """
    if isinstance(shape, Link):
        return (area.contains_point(shape.start_point) or
                area.contains_point(shape.end_point) or
                area.intersects_line(shape.start_point, shape.end_point))
    bounds = shape.get_bounds()
    return area.intersects(bounds) or area.contains_rect(bounds)


def begin_marquee(state: CanvasState, start: Point, current: Point) -> SelectionRectangle:
    marquee = SelectionRectangle(start=start, current=current)
    state.current_shape = marquee
    return marquee


def update_marquee(state: CanvasState, current: Point) -> SelectionRectangle:
    """Resize the active marquee, starting one if none is active."""
    start = state.start_point if state.start_point is not None else current
    marquee = state.current_shape
    if not isinstance(marquee, SelectionRectangle):
        return begin_marquee(state, start, current)
    marquee.resize(start, current)
    return marquee


def commit_marquee(state: CanvasState) -> list[Shape]:
    """Select every root shape in the active marquee and discard it."""
    marquee = state.current_shape
    if not isinstance(marquee, SelectionRectangle):
        return []

    area = marquee.rect
    picked = [shape for shape in list(state.shapes) if is_shape_in_area(shape, area)]
    for shape in picked:
        state.select(shape)
    state.current_shape = None

    logger.debug(f"Marquee {area} selected {len(picked)} shape(s)")
    return picked
