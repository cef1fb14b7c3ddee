"""
Shape/Group Manager.

Creates composite groups from the selection and takes them apart again,
either one level at a time or all the way down to leaf shapes.
Grouping re-parents shapes; nothing is destroyed.
"""

import logging
from typing import Optional

from models.canvas import insert_by_depth
from models.geometry import Rect
from models.shapes import CompositeShape, Shape

logger = logging.getLogger(__name__)


def create_group(
    selected: list[Shape],
    all_roots: list[Shape],
    depth: int
) -> Optional[CompositeShape]:
    """
    Move the selected root shapes into a new group.

    Members keep their root-list order inside the group. Selected groups
    are nested as they are, not flattened. The caller is responsible for
    adding the returned group to the canvas.

    Returns:
        The new group, or None when fewer than two root shapes are selected
    """
    if len(selected) < 2:
        return None

    members = [shape for shape in list(all_roots) if shape in selected]
    if len(members) < 2:
        return None

    group = CompositeShape(depth=depth)
    for shape in members:
        all_roots.remove(shape)
        shape.selected = False
        group.children.append(shape)
    group.recompute_bounds()

    logger.debug(f"Grouped {len(members)} shapes into group {group.id}")
    return group


def _release_child(child: Shape, all_roots: list[Shape], selected: list[Shape]) -> None:
    insert_by_depth(all_roots, child)
    child.selected = True
    if child not in selected:
        selected.append(child)


def _detach_group(group: CompositeShape, all_roots: list[Shape], selected: list[Shape]) -> None:
    if group in all_roots:
        all_roots.remove(group)
    if group in selected:
        selected.remove(group)
    group.selected = False


def ungroup_shape(group: CompositeShape, all_roots: list[Shape], selected: list[Shape]) -> None:
    """Replace a group by its direct children, leaving them selected."""
    _detach_group(group, all_roots, selected)
    for child in group.children:
        _release_child(child, all_roots, selected)
    logger.debug(f"Ungrouped {group.id} into {group.child_count} shapes")


def deep_ungroup_shape(group: CompositeShape, all_roots: list[Shape], selected: list[Shape]) -> None:
    """Replace a group by all of its leaf shapes, dissolving nested groups."""
    _detach_group(group, all_roots, selected)
    for child in group.children:
        if isinstance(child, CompositeShape):
            deep_ungroup_shape(child, all_roots, selected)
        else:
            _release_child(child, all_roots, selected)


def group_bounds(shapes: list[Shape]) -> Optional[Rect]:
    """Union of the bounds of the given shapes (None if empty)."""
    bounds = None
    for shape in shapes:
        shape_bounds = shape.get_bounds()
        bounds = shape_bounds if bounds is None else bounds.united(shape_bounds)
    return bounds


def recalculate_group_bounds(all_roots: list[Shape]) -> int:
    """Refresh cached bounds of every root group; returns how many were refreshed."""
    count = 0
    for shape in all_roots:
        if isinstance(shape, CompositeShape):
            shape.recompute_bounds()
            count += 1
    return count
