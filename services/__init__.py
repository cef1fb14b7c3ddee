"""Services package."""

from .shape_factory import create_shape, create_link
from .link_updater import (
    build_shape_index,
    related_links,
    refresh_link,
    update_links_for_shape,
)
from .group_manager import (
    create_group,
    ungroup_shape,
    deep_ungroup_shape,
    group_bounds,
    recalculate_group_bounds,
)
from .selection_manager import (
    clear_selection,
    hit_test,
    select_at,
    is_shape_in_area,
    commit_marquee,
)
from .shape_deleter import delete_shapes
from .mode_handler import TRANSITIONS, dispatch
from .canvas_controller import CanvasController
from .settings_manager import (
    SettingsManager,
    AppSettings,
    LabelDefaults,
    UISettings,
    get_settings,
    reset_settings_manager,
)

__all__ = [
    "create_shape",
    "create_link",
    "build_shape_index",
    "related_links",
    "refresh_link",
    "update_links_for_shape",
    "create_group",
    "ungroup_shape",
    "deep_ungroup_shape",
    "group_bounds",
    "recalculate_group_bounds",
    "clear_selection",
    "hit_test",
    "select_at",
    "is_shape_in_area",
    "commit_marquee",
    "delete_shapes",
    "TRANSITIONS",
    "dispatch",
    "CanvasController",
    "SettingsManager",
    "AppSettings",
    "LabelDefaults",
    "UISettings",
    "get_settings",
    "reset_settings_manager",
]
