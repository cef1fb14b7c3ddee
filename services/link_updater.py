"""
Link Consistency Engine.

Keeps link endpoints glued to the ports of the shapes they connect.
Endpoints are always recomputed from the current shape geometry, so
running an update twice never shifts a link further than its shape moved.
Links may sit on the root list or inside groups; both are kept attached.
"""

import logging
from typing import Optional

from models.shapes import (
    BasicShape, CompositeShape, Link, Shape, iter_all_shapes, iter_descendants, iter_links,
)

logger = logging.getLogger(__name__)


def build_shape_index(all_shapes: list[Shape]) -> dict[str, Shape]:
    """Map shape id -> shape for every root shape and everything nested in groups."""
    return {shape.id: shape for shape in iter_all_shapes(all_shapes)}


def attached_basic_shapes(shape: Shape) -> list[BasicShape]:
    """Basic shapes a link could be attached to when `shape` moves."""
    if isinstance(shape, BasicShape):
        return [shape]
    if isinstance(shape, CompositeShape):
        return [s for s in iter_descendants(shape) if isinstance(s, BasicShape)]
    return []


def related_links(shape: Shape, all_shapes: list[Shape]) -> list[Link]:
    """
    All links that must be re-attached after `shape` moves.

    These are the links referencing the shape or a basic shape inside it,
    wherever the link is stored, plus links carried inside a moved group.
    """
    ids = {s.id for s in attached_basic_shapes(shape)}
    links = [
        link for link in iter_links(all_shapes)
        if link.start_shape_id in ids or link.end_shape_id in ids
    ]
    for nested in iter_descendants(shape):
        if isinstance(nested, Link) and nested not in links:
            links.append(nested)
    return links


def snap_link_to_shape(link: Link, shape: BasicShape) -> None:
    """Move whichever link ends reference `shape` onto their ports."""
    if link.start_shape_id == shape.id:
        if link.start_port is None:
            link.start_port = shape.nearest_port(link.start_point)
        link.start_point = shape.port_point(link.start_port)
    if link.end_shape_id == shape.id:
        if link.end_port is None:
            link.end_port = shape.nearest_port(link.end_point)
        link.end_point = shape.port_point(link.end_port)


def refresh_link(link: Link, index: dict[str, Shape]) -> None:
    """Recompute both ends of a link from the shapes it references."""
    for shape_id in (link.start_shape_id, link.end_shape_id):
        shape: Optional[Shape] = index.get(shape_id) if shape_id else None
        if isinstance(shape, BasicShape):
            snap_link_to_shape(link, shape)


def refresh_groups_holding(links: list[Link], all_shapes: list[Shape]) -> None:
    """Recompute bounds of root groups that contain any of the links."""
    for root in all_shapes:
        if isinstance(root, CompositeShape) and any(
            nested in links for nested in iter_descendants(root)
        ):
            root.recompute_bounds()


def update_links_for_shape(
    shape: Shape,
    all_shapes: list[Shape],
    dx: float = 0.0,
    dy: float = 0.0
) -> list[Link]:
    """
    Re-attach every link touching a shape that has just moved.

    Args:
        shape: The moved shape (basic shape or group)
        all_shapes: Root shape list containing the links, directly or in groups
        dx, dy: The move that was applied; informational only

    Returns:
        The links whose endpoints were recomputed
    """
    links = related_links(shape, all_shapes)
    if not links:
        return []

    moved = attached_basic_shapes(shape)
    for link in links:
        for basic in moved:
            snap_link_to_shape(link, basic)

    # Second pass: the other end may belong to another shape moved in the same drag
    index = build_shape_index(all_shapes)
    for link in links:
        refresh_link(link, index)

    # Groups holding any of these links have stale cached bounds
    refresh_groups_holding(links, all_shapes)

    logger.debug(f"Updated {len(links)} link(s) for {shape.type_name} {shape.id} moved by ({dx}, {dy})")
    return links
