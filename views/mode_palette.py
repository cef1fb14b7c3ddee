"""
Mode palette for choosing the active editing tool.

One checkable button per editor mode; exactly one is checked at a time.
"""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QPushButton, QButtonGroup
)

from models.canvas import EditorMode


class ModeButton(QPushButton):
    """A checkable button representing one editor mode."""

    clicked_with_mode = pyqtSignal(object)

    # Accent colors per tool family
    COLORS = {
        EditorMode.SELECT: "#3B82F6",
        EditorMode.ASSOCIATION: "#6B7280",
        EditorMode.GENERALIZATION: "#7B68EE",
        EditorMode.COMPOSITION: "#F59E0B",
        EditorMode.RECT: "#50C878",
        EditorMode.OVAL: "#4A90D9",
    }

    DESCRIPTIONS = {
        EditorMode.SELECT: "Select, move and marquee",
        EditorMode.ASSOCIATION: "Plain association line",
        EditorMode.GENERALIZATION: "Inheritance arrow",
        EditorMode.COMPOSITION: "Whole/part diamond",
        EditorMode.RECT: "Class box",
        EditorMode.OVAL: "Use case oval",
    }

    def __init__(self, mode: EditorMode, parent=None):
        super().__init__(parent)
        self.mode = mode
        self.setCheckable(True)
        self.setText(f"{mode.name.title()}\n{self.DESCRIPTIONS[mode]}")
        self.setToolTip(self.DESCRIPTIONS[mode])
        self._setup_ui()

        self.clicked.connect(lambda: self.clicked_with_mode.emit(self.mode))

    def _setup_ui(self):
        self.setFixedHeight(52)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        color = self.COLORS[self.mode]
        self.setStyleSheet(f"""
            QPushButton {{
                background: white;
                border: 2px solid #E5E7EB;
                border-radius: 10px;
                text-align: left;
                padding: 6px 12px;
                color: #374151;
            }}
            QPushButton:hover {{
                border-color: {color};
                background: #F9FAFB;
            }}
            QPushButton:checked {{
                border-color: {color};
                background: #EFF6FF;
            }}
        """)


class ModePalette(QWidget):
    """
    Palette panel containing all editor modes.
    """

    modeSelected = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._buttons: dict[EditorMode, ModeButton] = {}
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._setup_ui()

    def _setup_ui(self):
        self.setMinimumWidth(200)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        title = QLabel("Tools")
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setWeight(QFont.Weight.Bold)
        title.setFont(title_font)
        title.setStyleSheet("color: #111827;")
        layout.addWidget(title)

        for mode in EditorMode:
            btn = ModeButton(mode)
            btn.clicked_with_mode.connect(self.modeSelected)
            self._group.addButton(btn)
            self._buttons[mode] = btn
            layout.addWidget(btn)

        layout.addStretch()

        help_text = QLabel("Drag between boxes to link\nDrag on empty space to select")
        help_text.setAlignment(Qt.AlignmentFlag.AlignCenter)
        help_text.setStyleSheet("""
            color: #9CA3AF;
            font-size: 11px;
            padding: 12px;
            background: #F9FAFB;
            border-radius: 6px;
        """)
        layout.addWidget(help_text)

        self.set_mode(EditorMode.SELECT)

    def set_mode(self, mode: EditorMode):
        """Check the button for mode without emitting modeSelected."""
        self._buttons[mode].setChecked(True)
