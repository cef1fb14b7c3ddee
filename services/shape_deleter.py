"""
Shape Deleter.

Cascading deletion: removing a group removes everything nested in it,
and removing any shape removes every link attached to it, including
links that were grouped together with other shapes.
"""

import logging

from models.shapes import CompositeShape, Shape, iter_descendants, iter_links

logger = logging.getLogger(__name__)


def collect_removal_set(to_delete: list[Shape]) -> list[Shape]:
    """The shapes themselves plus, for groups, every nested shape."""
    removal: list[Shape] = []
    for shape in list(to_delete):
        if isinstance(shape, CompositeShape):
            removal.extend(iter_descendants(shape))
        removal.append(shape)
    return removal


def prune_group(group: CompositeShape, doomed_ids: set[str]) -> list[Shape]:
    """
    Drop doomed shapes from a group at any nesting level.

    Nested groups left without children are dropped as well. Bounds of
    every group that lost a child are recomputed.

    Returns:
        The shapes taken out of the group
    """
    pruned: list[Shape] = []
    kept: list[Shape] = []
    for child in group.children:
        if child.id in doomed_ids:
            pruned.append(child)
            continue
        if isinstance(child, CompositeShape):
            pruned.extend(prune_group(child, doomed_ids))
            if not child.children:
                pruned.append(child)
                continue
        kept.append(child)

    if pruned:
        group.children[:] = kept
        group.recompute_bounds()
    return pruned


def delete_shapes(to_delete: list[Shape], all_shapes: list[Shape]) -> list[Shape]:
    """
    Remove shapes and everything that depends on them.

    Args:
        to_delete: Shapes to delete (usually the selection); not modified
        all_shapes: Root shape list to remove from

    Returns:
        Shapes and links actually removed, from the root list or from
        inside surviving groups
    """
    if not to_delete:
        return []

    removal = collect_removal_set(to_delete)
    removed_ids = {shape.id for shape in removal}

    doomed_links = [
        link for link in iter_links(all_shapes)
        if link.id not in removed_ids and
        (link.start_shape_id in removed_ids or link.end_shape_id in removed_ids)
    ]
    doomed_ids = removed_ids | {link.id for link in doomed_links}

    removed = [s for s in all_shapes if s.id in doomed_ids]
    survivors = [s for s in all_shapes if s.id not in doomed_ids]

    for shape in list(survivors):
        if isinstance(shape, CompositeShape):
            removed.extend(prune_group(shape, doomed_ids))
            if not shape.children:
                survivors.remove(shape)
                removed.append(shape)

    all_shapes[:] = survivors

    logger.info(f"Deleted {len(removal)} shape(s) and {len(doomed_links)} attached link(s)")
    return removed
