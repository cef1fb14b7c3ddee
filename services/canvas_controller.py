"""
Canvas Controller.

Host-facing entry point to the diagram model. The drawing widget feeds
pointer events in; menus and dialogs call the editing operations. Every
change is announced through Qt signals so views can repaint and refresh
the status bar.

Usage:
    controller = CanvasController()
    controller.changed.connect(widget.update)
    controller.set_mode(EditorMode.RECT)
    controller.on_press(Point(10, 10))
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from models.canvas import CanvasSettings, CanvasState, EditorMode, PointerEvent
from models.geometry import Point
from models.shapes import BasicShape, CompositeShape, Shape, ShapeLabel
from .group_manager import (
    create_group, ungroup_shape, deep_ungroup_shape, recalculate_group_bounds,
)
from .mode_handler import dispatch
from .selection_manager import clear_selection
from .shape_deleter import delete_shapes

logger = logging.getLogger(__name__)


class CanvasController(QObject):
    """
    Owns the canvas state and exposes the editing API.

    Signals:
        changed(): Emitted after every event or mutation (repaint trigger)
        selectionChanged(str): Emitted with the new selection summary
        modeChanged(object): Emitted with the new EditorMode
    """

    changed = pyqtSignal()
    selectionChanged = pyqtSignal(str)
    modeChanged = pyqtSignal(object)

    def __init__(self, settings: Optional[CanvasSettings] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._state = CanvasState(settings=settings or CanvasSettings())

    @property
    def state(self) -> CanvasState:
        return self._state

    @property
    def mode(self) -> EditorMode:
        return self._state.mode

    @property
    def shapes(self) -> list[Shape]:
        return self._state.shapes

    @property
    def selected_shapes(self) -> list[Shape]:
        return self._state.selected

    @property
    def current_shape(self) -> Optional[Shape]:
        return self._state.current_shape

    def _notify(self, selection_changed: bool = True):
        self.changed.emit()
        if selection_changed:
            self.selectionChanged.emit(self.get_selection_info())

    # ============== Pointer events ==============

    def on_press(self, point: Point):
        dispatch(self._state, PointerEvent.PRESS, point)
        self._notify()

    def on_drag(self, point: Point):
        dispatch(self._state, PointerEvent.DRAG, point)
        self._notify(selection_changed=False)

    def on_release(self, point: Point):
        dispatch(self._state, PointerEvent.RELEASE, point)
        self._state.current_shape = None
        self._notify()

    # ============== Mode and selection ==============

    def set_mode(self, mode: EditorMode):
        """Switch tools; drops the selection and any unfinished gesture."""
        self._state.mode = mode
        self._state.current_shape = None
        clear_selection(self._state)
        logger.debug(f"Mode set to {mode.name}")
        self.modeChanged.emit(mode)
        self._notify()

    def clear_selection(self):
        clear_selection(self._state)
        self._notify()

    def clear_all(self):
        """Remove every shape from the canvas."""
        self._state.reset()
        logger.info("Canvas cleared")
        self._notify()

    def has_selected_shapes(self) -> bool:
        return bool(self._state.selected)

    # ============== Grouping ==============

    def can_create_group(self) -> bool:
        return len(self._state.selected) > 1

    def can_ungroup(self) -> bool:
        selected = self._state.selected
        return len(selected) == 1 and isinstance(selected[0], CompositeShape)

    def group_selected_shapes(self) -> Optional[CompositeShape]:
        """Group the selection; the new group becomes the only selected shape."""
        if not self.can_create_group():
            return None

        state = self._state
        group = create_group(list(state.selected), state.shapes, state.next_depth)
        if group is None:
            return None

        state.next_depth += 1
        clear_selection(state)
        state.add_root(group)
        state.select(group)
        logger.info(f"Created group {group.id} with {group.child_count} children")
        self._notify()
        return group

    def ungroup_selected_shape(self, deep: bool = False) -> bool:
        """
        Dissolve the selected group.

        Args:
            deep: Also dissolve nested groups, leaving only leaf shapes

        Returns:
            False when the selection is not exactly one group
        """
        if not self.can_ungroup():
            return False

        group = self._state.selected[0]
        if deep:
            deep_ungroup_shape(group, self._state.shapes, self._state.selected)
        else:
            ungroup_shape(group, self._state.shapes, self._state.selected)
        self._notify()
        return True

    def recalculate_group_bounds(self):
        recalculate_group_bounds(self._state.shapes)
        self._notify(selection_changed=False)

    # ============== Deletion ==============

    def delete_selected_shapes(self) -> list[Shape]:
        removed = delete_shapes(list(self._state.selected), self._state.shapes)
        clear_selection(self._state)
        self._notify()
        return removed

    # ============== Label editing ==============

    def _first_selected_basic(self) -> Optional[BasicShape]:
        if self._state.selected and isinstance(self._state.selected[0], BasicShape):
            return self._state.selected[0]
        return None

    def rename_selected_shape(self, name: str) -> bool:
        shape = self._first_selected_basic()
        if shape is None:
            return False
        shape.name = name
        self._notify()
        return True

    def customize_label_style(self, name: str, shape_kind: str, color: str, font_size: int) -> bool:
        """Restyle the label of the single selected basic shape."""
        if len(self._state.selected) != 1:
            return False
        shape = self._first_selected_basic()
        if shape is None:
            return False

        shape.label = ShapeLabel(text=name, shape=shape_kind, color=color, font_size=font_size)
        self._notify()
        return True

    def get_selected_shape_name(self) -> str:
        shape = self._first_selected_basic()
        return shape.name if shape is not None else ""

    def selected_label(self) -> Optional[ShapeLabel]:
        shape = self._first_selected_basic()
        return shape.label if shape is not None else None

    def get_selection_info(self) -> str:
        """Human readable summary of the selection for the status bar."""
        selected = self._state.selected
        if not selected:
            return "No shapes selected"

        parts = []
        for shape in selected:
            if isinstance(shape, CompositeShape):
                parts.append(f"group({shape.child_count} children)")
            elif isinstance(shape, BasicShape) and shape.name:
                parts.append(shape.name)
            else:
                parts.append(shape.type_name)

        noun = "shape" if len(selected) == 1 else "shapes"
        return f"Selected {len(selected)} {noun}: {', '.join(parts)}"

    # ============== Drawing ==============

    def drawable_shapes(self) -> list[Shape]:
        """Root shapes in ascending depth, then the shape being built if it is not a root."""
        shapes = sorted(self._state.shapes, key=lambda s: s.depth)
        current = self._state.current_shape
        if current is not None and current not in self._state.shapes:
            shapes.append(current)
        return shapes

    def draw(self, paint: Callable[[Shape], None]):
        for shape in self.drawable_shapes():
            paint(shape)
