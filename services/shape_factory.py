"""
Shape Factory.

Builds new shapes and links for the creation modes. Construction only:
nothing is added to the canvas here.
"""

from typing import Optional

from models.canvas import EditorMode
from models.geometry import Point
from models.shapes import BasicShape, Link, LinkKind, ShapeType


SHAPE_TYPES = {
    EditorMode.RECT: ShapeType.RECT,
    EditorMode.OVAL: ShapeType.OVAL,
}

LINK_KINDS = {
    EditorMode.ASSOCIATION: LinkKind.ASSOCIATION,
    EditorMode.GENERALIZATION: LinkKind.GENERALIZATION,
    EditorMode.COMPOSITION: LinkKind.COMPOSITION,
}


def create_shape(
    mode: EditorMode,
    point: Point,
    width: float = 100.0,
    height: float = 60.0
) -> Optional[BasicShape]:
    """
    Create a basic shape with its top-left corner at point.

    Returns None for modes that do not create shapes.
    """
    shape_type = SHAPE_TYPES.get(mode)
    if shape_type is None:
        return None
    return BasicShape(
        shape_type=shape_type,
        x=point.x,
        y=point.y,
        width=width,
        height=height,
    )


def create_link(
    mode: EditorMode,
    point: Point,
    hit_tolerance: float = 5.0
) -> Optional[Link]:
    """Create an unattached link collapsed onto point."""
    kind = LINK_KINDS.get(mode)
    if kind is None:
        return None
    return Link(kind=kind, start_point=point, end_point=point, hit_tolerance=hit_tolerance)
