"""
Pytest configuration and shared fixtures for UML Canvas tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.canvas import CanvasState, EditorMode
from models.geometry import Point
from models.shapes import BasicShape, CompositeShape, Link, LinkKind, Port, ShapeType
from services.canvas_controller import CanvasController
from services.settings_manager import reset_settings_manager


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="uml_canvas_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def settings_path(temp_dir: Path) -> Generator[Path, None, None]:
    """Settings file location inside a temporary directory."""
    reset_settings_manager()
    yield temp_dir / "config" / "settings.json"
    reset_settings_manager()


# ============== Shape Helpers ==============

def make_box(shape_id: str, x: float, y: float, width: float = 100, height: float = 60,
             depth: int = 0, shape_type: ShapeType = ShapeType.RECT) -> BasicShape:
    """Create a basic shape with a fixed id."""
    return BasicShape(id=shape_id, shape_type=shape_type, x=x, y=y,
                      width=width, height=height, depth=depth)


def make_link(link_id: str, start: BasicShape, start_port: Port,
              end: BasicShape, end_port: Port, depth: int = 0,
              kind: LinkKind = LinkKind.ASSOCIATION) -> Link:
    """Create a link attached to two shapes."""
    link = Link(id=link_id, kind=kind, depth=depth)
    link.attach_start(start, start_port)
    link.attach_end(end, end_port)
    return link


# ============== Model Fixtures ==============

@pytest.fixture
def canvas_state() -> CanvasState:
    """Create an empty canvas state in select mode."""
    return CanvasState()


@pytest.fixture
def two_boxes(canvas_state: CanvasState) -> CanvasState:
    """Canvas with two boxes side by side: A at (0,0) and B at (200,0)."""
    canvas_state.add_root(make_box("A", 0, 0, depth=canvas_state.allocate_depth()))
    canvas_state.add_root(make_box("B", 200, 0, depth=canvas_state.allocate_depth()))
    return canvas_state


@pytest.fixture
def linked_boxes(canvas_state: CanvasState) -> CanvasState:
    """
    Three boxes A, B, C with links A->B and B->C.

    A at (0,0), B at (200,0), C at (400,0); each 100x60.
    """
    a = make_box("A", 0, 0, depth=canvas_state.allocate_depth())
    b = make_box("B", 200, 0, depth=canvas_state.allocate_depth())
    c = make_box("C", 400, 0, depth=canvas_state.allocate_depth())
    for shape in (a, b, c):
        canvas_state.add_root(shape)
    canvas_state.add_root(make_link("AB", a, Port.E, b, Port.W, depth=canvas_state.allocate_depth()))
    canvas_state.add_root(make_link("BC", b, Port.E, c, Port.W, depth=canvas_state.allocate_depth()))
    return canvas_state


@pytest.fixture
def nested_group() -> CompositeShape:
    """Group containing a box and an inner group of two boxes."""
    inner = CompositeShape(id="inner", depth=3, children=[
        make_box("L1", 0, 0, depth=0),
        make_box("L2", 150, 0, depth=1),
    ])
    return CompositeShape(id="outer", depth=4, children=[
        inner,
        make_box("L3", 0, 200, depth=2),
    ])


# ============== Controller Fixtures ==============

@pytest.fixture
def controller() -> CanvasController:
    """Create a controller with default settings."""
    return CanvasController()


def draw_box(controller: CanvasController, start: Point, end: Point,
             mode: EditorMode = EditorMode.RECT) -> BasicShape:
    """Draw a box with a press/drag/release gesture and return it."""
    controller.set_mode(mode)
    controller.on_press(start)
    controller.on_drag(end)
    controller.on_release(end)
    return controller.shapes[-1]
