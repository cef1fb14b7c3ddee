"""Views package."""

from .shape_renderer import ShapeRenderer
from .diagram_canvas import DiagramCanvas
from .mode_palette import ModePalette
from .label_style_dialog import LabelStyleDialog
from .main_window import MainWindow

__all__ = [
    "ShapeRenderer",
    "DiagramCanvas",
    "ModePalette",
    "LabelStyleDialog",
    "MainWindow",
]
