"""
Label style dialog.

Edits the name, label shape, background color and font size of a single
selected box.
"""

from typing import Optional
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QComboBox,
    QSpinBox, QPushButton, QDialogButtonBox, QColorDialog
)

from models.shapes import ShapeLabel
from services.settings_manager import LabelDefaults


class LabelStyleDialog(QDialog):
    """Dialog for customizing a shape label."""

    LABEL_SHAPES = ["rect", "oval"]

    def __init__(self, label: Optional[ShapeLabel] = None,
                 defaults: Optional[LabelDefaults] = None, parent=None):
        super().__init__(parent)
        defaults = defaults or LabelDefaults()
        self._label = label or ShapeLabel(
            shape=defaults.shape, color=defaults.color, font_size=defaults.font_size
        )
        self._color = self._label.color
        self._setup_ui()

    def _setup_ui(self):
        self.setWindowTitle("Customize Label Style")
        self.setMinimumWidth(320)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self._name_edit = QLineEdit(self._label.text)
        self._name_edit.setPlaceholderText("Class name")
        form.addRow("Name:", self._name_edit)

        self._shape_combo = QComboBox()
        self._shape_combo.addItems(self.LABEL_SHAPES)
        if self._label.shape in self.LABEL_SHAPES:
            self._shape_combo.setCurrentText(self._label.shape)
        form.addRow("Label shape:", self._shape_combo)

        self._color_btn = QPushButton()
        self._color_btn.clicked.connect(self._pick_color)
        self._update_color_button()
        form.addRow("Color:", self._color_btn)

        self._font_spin = QSpinBox()
        self._font_spin.setRange(6, 72)
        self._font_spin.setValue(self._label.font_size)
        form.addRow("Font size:", self._font_spin)

        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _pick_color(self):
        color = QColorDialog.getColor(QColor(self._color), self, "Label Color")
        if color.isValid():
            self._color = color.name()
            self._update_color_button()

    def _update_color_button(self):
        self._color_btn.setText(self._color)
        self._color_btn.setStyleSheet(f"background: {self._color}; border: 1px solid #D1D5DB; padding: 4px;")

    def get_values(self) -> tuple[str, str, str, int]:
        """Return (name, label shape, color, font size)."""
        return (
            self._name_edit.text(),
            self._shape_combo.currentText(),
            self._color,
            self._font_spin.value(),
        )
