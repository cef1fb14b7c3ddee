"""
Diagram shape models.

The shape graph is a tagged family of plain dataclasses:

- BasicShape: a labelled rectangle or oval with derived boundary ports
- CompositeShape: a group that exclusively owns an ordered list of children
- Link: a connector whose ends reference shapes by id (never owning them)
- SelectionRectangle: the transient marquee used while drag-selecting

Recursive operations over groups (descendant walks, id lookup) live in
module-level functions so callers dispatch on the concrete type.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional
import uuid

from .geometry import Point, Rect, distance_to_segment


def _new_id() -> str:
    return str(uuid.uuid4())[:8]


class ShapeType(Enum):
    """Kinds of basic (leaf) shapes."""
    RECT = auto()
    OVAL = auto()


class LinkKind(Enum):
    """UML relationship drawn by a link."""
    ASSOCIATION = auto()     # Plain line
    GENERALIZATION = auto()  # Hollow triangle at the end
    COMPOSITION = auto()     # Filled diamond at the end


class Port(Enum):
    """Named attachment points on a basic shape's boundary."""
    N = auto()
    NE = auto()
    E = auto()
    SE = auto()
    S = auto()
    SW = auto()
    W = auto()
    NW = auto()


# Port position as a fraction of the bounding box (0 = left/top, 1 = right/bottom)
PORT_OFFSETS = {
    Port.N: (0.5, 0.0),
    Port.NE: (1.0, 0.0),
    Port.E: (1.0, 0.5),
    Port.SE: (1.0, 1.0),
    Port.S: (0.5, 1.0),
    Port.SW: (0.0, 1.0),
    Port.W: (0.0, 0.5),
    Port.NW: (0.0, 0.0),
}


@dataclass
class ShapeLabel:
    """Text label drawn inside a basic shape."""
    text: str = ""
    shape: str = "rect"      # Label background: "rect" or "oval"
    color: str = "#111827"   # Hex color for the label background
    font_size: int = 12


@dataclass(eq=False)
class Shape:
    """
    Common state of every canvas shape.

    Attributes:
        id: Unique identifier, used by links to refer to shapes
        depth: Draw/hit-test order, assigned once at creation (-1 = unassigned)
        selected: Mirrors membership in the canvas selection
    """
    id: str = field(default_factory=_new_id)
    depth: int = -1
    selected: bool = False

    @property
    def type_name(self) -> str:
        return type(self).__name__

    def contains(self, point: Point) -> bool:
        return self.get_bounds().contains_point(point)

    def get_bounds(self) -> Rect:
        raise NotImplementedError

    def move(self, dx: float, dy: float) -> None:
        raise NotImplementedError


@dataclass(eq=False)
class BasicShape(Shape):
    """
    A rectangle or oval box with a label.

    Ports are computed from the current bounds on every call, so they
    always follow the shape when it moves or resizes.
    """
    shape_type: ShapeType = ShapeType.RECT
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 60.0
    label: ShapeLabel = field(default_factory=ShapeLabel)

    @property
    def type_name(self) -> str:
        return self.shape_type.name.title()

    @property
    def name(self) -> str:
        return self.label.text

    @name.setter
    def name(self, value: str):
        self.label.text = value

    def get_bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def resize_to(self, anchor: Point, point: Point) -> None:
        """Span the shape between an anchor corner and the given point."""
        rect = Rect.from_points(anchor, point)
        self.x, self.y = rect.x, rect.y
        self.width, self.height = rect.width, rect.height

    def port_point(self, port: Port) -> Point:
        fx, fy = PORT_OFFSETS[port]
        return Point(self.x + self.width * fx, self.y + self.height * fy)

    def ports(self) -> dict[Port, Point]:
        return {port: self.port_point(port) for port in Port}

    def nearest_port(self, point: Point) -> Port:
        """Port closest to point; ties resolve in Port declaration order."""
        return min(Port, key=lambda port: self.port_point(port).distance_to(point))


@dataclass(eq=False)
class CompositeShape(Shape):
    """
    A group of shapes moved and selected as one unit.

    Children are owned exclusively: a shape inside a group is not on the
    canvas root list. Groups may nest.
    """
    children: list[Shape] = field(default_factory=list)
    _bounds: Rect = field(default_factory=Rect, init=False, repr=False)

    def __post_init__(self):
        self.recompute_bounds()

    @property
    def type_name(self) -> str:
        return "Group"

    @property
    def child_count(self) -> int:
        return len(self.children)

    def add_child(self, shape: Shape) -> None:
        self.children.append(shape)
        self.recompute_bounds()

    def get_bounds(self) -> Rect:
        return self._bounds

    def move(self, dx: float, dy: float) -> None:
        for child in self.children:
            child.move(dx, dy)
        self.recompute_bounds()

    def recompute_bounds(self) -> Rect:
        """Refresh the cached union of all descendant bounds."""
        bounds = None
        for child in self.children:
            if isinstance(child, CompositeShape):
                child.recompute_bounds()
            child_bounds = child.get_bounds()
            bounds = child_bounds if bounds is None else bounds.united(child_bounds)
        self._bounds = bounds if bounds is not None else Rect()
        return self._bounds


@dataclass(eq=False)
class Link(Shape):
    """
    A connector between two basic shapes.

    Ends refer to shapes by id and remember the port they snapped to.
    Either reference may be None while the link is being drawn.
    """
    kind: LinkKind = LinkKind.ASSOCIATION
    start_point: Point = field(default_factory=Point)
    end_point: Point = field(default_factory=Point)
    start_shape_id: Optional[str] = None
    end_shape_id: Optional[str] = None
    start_port: Optional[Port] = None
    end_port: Optional[Port] = None
    hit_tolerance: float = 5.0

    @property
    def type_name(self) -> str:
        return f"{self.kind.name.title()}Link"

    @property
    def is_complete(self) -> bool:
        return self.start_shape_id is not None and self.end_shape_id is not None

    def is_related_to(self, shape_id: str) -> bool:
        return shape_id in (self.start_shape_id, self.end_shape_id)

    def contains(self, point: Point) -> bool:
        return distance_to_segment(point, self.start_point, self.end_point) <= self.hit_tolerance

    def get_bounds(self) -> Rect:
        return Rect.from_points(self.start_point, self.end_point)

    def move(self, dx: float, dy: float) -> None:
        self.start_point = self.start_point.translated(dx, dy)
        self.end_point = self.end_point.translated(dx, dy)

    def attach_start(self, shape: BasicShape, port: Port) -> None:
        self.start_shape_id = shape.id
        self.start_port = port
        self.start_point = shape.port_point(port)

    def attach_end(self, shape: BasicShape, port: Port) -> None:
        self.end_shape_id = shape.id
        self.end_port = port
        self.end_point = shape.port_point(port)


@dataclass(eq=False)
class SelectionRectangle(Shape):
    """Marquee drawn while drag-selecting; never stored on the canvas."""
    start: Point = field(default_factory=Point)
    current: Point = field(default_factory=Point)

    @property
    def rect(self) -> Rect:
        return Rect.from_points(self.start, self.current)

    def resize(self, start: Point, current: Point) -> None:
        self.start = start
        self.current = current

    def get_bounds(self) -> Rect:
        return self.rect

    def move(self, dx: float, dy: float) -> None:
        self.start = self.start.translated(dx, dy)
        self.current = self.current.translated(dx, dy)


def iter_descendants(shape: Shape) -> Iterator[Shape]:
    """Depth-first walk over every shape nested inside a group."""
    if isinstance(shape, CompositeShape):
        for child in shape.children:
            yield child
            yield from iter_descendants(child)


def iter_leaves(shape: Shape) -> Iterator[Shape]:
    """Yield the non-group shapes of a (possibly nested) group, or the shape itself."""
    if isinstance(shape, CompositeShape):
        for child in shape.children:
            yield from iter_leaves(child)
    else:
        yield shape


def collect_descendant_ids(shape: Shape) -> set[str]:
    """Ids of a shape and everything nested inside it."""
    ids = {shape.id}
    ids.update(s.id for s in iter_descendants(shape))
    return ids


def iter_all_shapes(shapes: list[Shape]) -> Iterator[Shape]:
    """Every root shape followed by everything nested inside it."""
    for shape in shapes:
        yield shape
        yield from iter_descendants(shape)


def iter_links(shapes: list[Shape]) -> Iterator[Link]:
    """Links among the root shapes and inside groups."""
    for shape in iter_all_shapes(shapes):
        if isinstance(shape, Link):
            yield shape


def find_shape(shape_id: str, shapes: list[Shape]) -> Optional[Shape]:
    """Find a shape by id among root shapes and their descendants."""
    for shape in iter_all_shapes(shapes):
        if shape.id == shape_id:
            return shape
    return None
