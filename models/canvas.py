"""
Canvas editing state.

CanvasState is the single mutable context shared by the interaction
handlers: root shape list, selection, depth counter, current mode and
the in-progress gesture.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional

from .geometry import Point
from .shapes import Shape


class EditorMode(Enum):
    """Tool selected in the mode palette."""
    SELECT = auto()
    ASSOCIATION = auto()
    GENERALIZATION = auto()
    COMPOSITION = auto()
    RECT = auto()
    OVAL = auto()

    @property
    def is_link_mode(self) -> bool:
        return self in (EditorMode.ASSOCIATION, EditorMode.GENERALIZATION, EditorMode.COMPOSITION)

    @property
    def is_shape_mode(self) -> bool:
        return self in (EditorMode.RECT, EditorMode.OVAL)


class PointerEvent(Enum):
    """Abstract pointer events delivered by the host."""
    PRESS = auto()
    DRAG = auto()
    RELEASE = auto()


def insert_by_depth(shapes: list[Shape], shape: Shape) -> None:
    """Insert a shape into a depth-ordered list, after any equal depths."""
    index = len(shapes)
    while index > 0 and shapes[index - 1].depth > shape.depth:
        index -= 1
    shapes.insert(index, shape)


@dataclass
class CanvasSettings:
    """Geometry defaults used while editing."""
    default_shape_width: float = 100.0
    default_shape_height: float = 60.0
    link_hit_tolerance: float = 5.0


@dataclass
class CanvasState:
    """
    Root model for an editing session.

    Attributes:
        shapes: Top-level shapes, kept in ascending depth order
        selected: Currently selected root shapes, in selection order
        next_depth: Depth handed to the next created shape
        mode: Active editor mode
        current_shape: Shape under construction, or the marquee
        start_point: Where the current gesture was pressed
        last_point: Previous pointer position of the current gesture
    """
    shapes: list[Shape] = field(default_factory=list)
    selected: list[Shape] = field(default_factory=list)
    next_depth: int = 0
    mode: EditorMode = EditorMode.SELECT
    current_shape: Optional[Shape] = None
    start_point: Optional[Point] = None
    last_point: Optional[Point] = None
    settings: CanvasSettings = field(default_factory=CanvasSettings)

    def allocate_depth(self) -> int:
        depth = self.next_depth
        self.next_depth += 1
        return depth

    def add_root(self, shape: Shape) -> None:
        insert_by_depth(self.shapes, shape)

    def remove_root(self, shape: Shape) -> bool:
        if shape in self.shapes:
            self.shapes.remove(shape)
            return True
        return False

    def shapes_top_down(self) -> Iterator[Shape]:
        """Root shapes from highest depth (topmost) to lowest."""
        return reversed(list(self.shapes))

    def select(self, shape: Shape) -> None:
        if shape not in self.selected:
            self.selected.append(shape)
        shape.selected = True

    def deselect(self, shape: Shape) -> None:
        if shape in self.selected:
            self.selected.remove(shape)
        shape.selected = False

    def reset(self) -> None:
        """Drop every shape and restart depth numbering."""
        self.shapes.clear()
        self.selected.clear()
        self.next_depth = 0
        self.current_shape = None
        self.start_point = None
        self.last_point = None
