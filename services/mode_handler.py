"""
Interaction state machine.

Pointer events are routed through a transition table keyed by
(editor mode, event kind). Each handler is a plain function taking the
canvas state and the pointer position, so every transition can be
exercised directly without a GUI event.

Behaviour groups:
    Select           press picks, drag moves the selection or grows a marquee
    Shape creation   press creates a box, drag spans it, release finalizes
    Link creation    press anchors on a box port, drag follows the pointer,
                     release binds to a box port or discards the link
"""

import logging
from typing import Callable, Optional

from models.canvas import CanvasState, EditorMode, PointerEvent
from models.geometry import Point
from models.shapes import BasicShape, Link, SelectionRectangle
from .link_updater import update_links_for_shape
from .selection_manager import select_at, update_marquee, commit_marquee
from .shape_factory import create_shape, create_link

logger = logging.getLogger(__name__)

Handler = Callable[[CanvasState, Point], None]


def basic_shape_at(state: CanvasState, point: Point) -> Optional[BasicShape]:
    """Topmost root basic shape containing point."""
    for shape in state.shapes_top_down():
        if isinstance(shape, BasicShape) and shape.contains(point):
            return shape
    return None


# ============== Select behaviour ==============

def select_press(state: CanvasState, point: Point) -> None:
    state.start_point = point
    state.last_point = point
    select_at(state, point)


def select_drag(state: CanvasState, point: Point) -> None:
    if not state.selected:
        update_marquee(state, point)
        return

    if state.last_point is None:
        state.last_point = point
        return

    dx = point.x - state.last_point.x
    dy = point.y - state.last_point.y

    moving = list(state.selected)
    for shape in moving:
        shape.move(dx, dy)
    for shape in moving:
        update_links_for_shape(shape, state.shapes, dx, dy)

    state.last_point = point


def select_release(state: CanvasState, point: Point) -> None:
    if isinstance(state.current_shape, SelectionRectangle):
        state.current_shape.resize(state.current_shape.start, point)
        commit_marquee(state)
    state.current_shape = None
    state.last_point = None


# ============== Shape creation behaviour ==============

def shape_press(state: CanvasState, point: Point) -> None:
    settings = state.settings
    shape = create_shape(
        state.mode, point,
        width=settings.default_shape_width,
        height=settings.default_shape_height,
    )
    if shape is None:
        return

    shape.depth = state.allocate_depth()
    state.add_root(shape)
    state.current_shape = shape
    state.start_point = point
    logger.debug(f"Created {shape.type_name} {shape.id} at depth {shape.depth}")


def shape_drag(state: CanvasState, point: Point) -> None:
    shape = state.current_shape
    if isinstance(shape, BasicShape) and state.start_point is not None:
        shape.resize_to(state.start_point, point)


def shape_release(state: CanvasState, point: Point) -> None:
    # The shape was stored on press; only a collapsed side needs fixing here
    shape = state.current_shape
    if isinstance(shape, BasicShape) and shape.get_bounds().is_empty():
        if shape.width <= 0:
            shape.width = state.settings.default_shape_width
        if shape.height <= 0:
            shape.height = state.settings.default_shape_height
        logger.debug(f"Restored default size on collapsed {shape.type_name} {shape.id}")
    state.current_shape = None


# ============== Link creation behaviour ==============

def link_press(state: CanvasState, point: Point) -> None:
    source = basic_shape_at(state, point)
    if source is None:
        return

    port = source.nearest_port(point)
    link = create_link(state.mode, source.port_point(port), state.settings.link_hit_tolerance)
    if link is None:
        return

    link.attach_start(source, port)
    link.depth = state.allocate_depth()
    state.add_root(link)
    state.current_shape = link
    state.start_point = point


def link_drag(state: CanvasState, point: Point) -> None:
    if isinstance(state.current_shape, Link):
        state.current_shape.end_point = point


def link_release(state: CanvasState, point: Point) -> None:
    link = state.current_shape
    if not isinstance(link, Link):
        return

    target = basic_shape_at(state, point)
    if target is not None:
        link.attach_end(target, target.nearest_port(point))
        logger.debug(f"Linked {link.start_shape_id} -> {link.end_shape_id} ({link.type_name})")
    else:
        state.remove_root(link)
        logger.debug(f"Discarded dangling {link.type_name} {link.id}")
    state.current_shape = None


# ============== Transition table ==============

SELECT_HANDLERS = {
    PointerEvent.PRESS: select_press,
    PointerEvent.DRAG: select_drag,
    PointerEvent.RELEASE: select_release,
}

SHAPE_HANDLERS = {
    PointerEvent.PRESS: shape_press,
    PointerEvent.DRAG: shape_drag,
    PointerEvent.RELEASE: shape_release,
}

LINK_HANDLERS = {
    PointerEvent.PRESS: link_press,
    PointerEvent.DRAG: link_drag,
    PointerEvent.RELEASE: link_release,
}


def _build_transitions() -> dict[tuple[EditorMode, PointerEvent], Handler]:
    table: dict[tuple[EditorMode, PointerEvent], Handler] = {}
    for mode in EditorMode:
        if mode is EditorMode.SELECT:
            handlers = SELECT_HANDLERS
        elif mode.is_shape_mode:
            handlers = SHAPE_HANDLERS
        else:
            handlers = LINK_HANDLERS
        for event, handler in handlers.items():
            table[(mode, event)] = handler
    return table


TRANSITIONS = _build_transitions()


def dispatch(state: CanvasState, event: PointerEvent, point: Point) -> bool:
    """
    Run the handler for the current mode and event.

    Returns:
        False when the table has no transition for (mode, event)
    """
    handler = TRANSITIONS.get((state.mode, event))
    if handler is None:
        return False
    handler(state, point)
    return True
