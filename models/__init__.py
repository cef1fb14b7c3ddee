"""
Models package.

This package contains the data models for the diagram editor:
- Geometry primitives (Point, Rect)
- Shape graph (BasicShape, CompositeShape, Link, SelectionRectangle)
- Editing state (EditorMode, PointerEvent, CanvasState)
"""

from .geometry import Point, Rect, distance_to_segment
from .shapes import (
    ShapeType,
    LinkKind,
    Port,
    PORT_OFFSETS,
    ShapeLabel,
    Shape,
    BasicShape,
    CompositeShape,
    Link,
    SelectionRectangle,
    iter_descendants,
    iter_leaves,
    collect_descendant_ids,
    iter_all_shapes,
    iter_links,
    find_shape,
)
from .canvas import (
    EditorMode,
    PointerEvent,
    CanvasSettings,
    CanvasState,
    insert_by_depth,
)


__all__ = [
    # Geometry
    "Point",
    "Rect",
    "distance_to_segment",
    # Shapes
    "ShapeType",
    "LinkKind",
    "Port",
    "PORT_OFFSETS",
    "ShapeLabel",
    "Shape",
    "BasicShape",
    "CompositeShape",
    "Link",
    "SelectionRectangle",
    "iter_descendants",
    "iter_leaves",
    "collect_descendant_ids",
    "iter_all_shapes",
    "iter_links",
    "find_shape",
    # Canvas state
    "EditorMode",
    "PointerEvent",
    "CanvasSettings",
    "CanvasState",
    "insert_by_depth",
]
