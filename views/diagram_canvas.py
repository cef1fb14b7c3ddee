"""
Diagram canvas widget.

Turns Qt mouse and key events into controller calls and repaints the
shape list whenever the controller reports a change.
"""

import logging
from typing import Optional
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QPen, QColor, QMouseEvent, QKeyEvent, QPaintEvent
from PyQt6.QtWidgets import QWidget

from models.geometry import Point
from services.canvas_controller import CanvasController
from .shape_renderer import ShapeRenderer

# Setup logger for this module
logger = logging.getLogger(__name__)


COLORS = {
    "grid": QColor("#E5E7EB"),        # Light gray
    "background": QColor("#FFFFFF"),  # White
}


class DiagramCanvas(QWidget):
    """
    Drawing surface for the diagram.

    Left button press/move/release become on_press/on_drag/on_release;
    Delete removes the selection and Escape clears it.
    """

    def __init__(self, controller: CanvasController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.show_grid = True
        self.grid_size = 20
        self._dragging = False

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(600, 400)
        self.setAutoFillBackground(False)

        self.controller.changed.connect(self.update)

    @staticmethod
    def _event_point(event: QMouseEvent) -> Point:
        pos = event.position()
        return Point(pos.x(), pos.y())

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self.setFocus()
        self._dragging = True
        self.controller.on_press(self._event_point(event))
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        if not self._dragging:
            super().mouseMoveEvent(event)
            return
        self.controller.on_drag(self._event_point(event))
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton or not self._dragging:
            super().mouseReleaseEvent(event)
            return
        self._dragging = False
        self.controller.on_release(self._event_point(event))
        event.accept()

    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard shortcuts."""
        if event.key() in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace):
            self.controller.delete_selected_shapes()
            event.accept()
        elif event.key() == Qt.Key.Key_Escape:
            self.controller.clear_selection()
            event.accept()
        else:
            super().keyPressEvent(event)

    def paintEvent(self, event: Optional[QPaintEvent]):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), COLORS["background"])

        if self.show_grid:
            self._draw_grid(painter)

        self.controller.draw(lambda shape: ShapeRenderer.draw(painter, shape))
        painter.end()

    def _draw_grid(self, painter: QPainter):
        painter.setPen(QPen(COLORS["grid"], 1))

        x = 0
        while x < self.width():
            painter.drawLine(x, 0, x, self.height())
            x += self.grid_size

        y = 0
        while y < self.height():
            painter.drawLine(0, y, self.width(), y)
            y += self.grid_size
