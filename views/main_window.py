"""
Main application window.

Assembles the mode palette, the drawing canvas and the editing menus.
"""

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QLabel, QStatusBar,
    QInputDialog, QMessageBox, QFrame
)

from models.canvas import EditorMode
from services import CanvasController, get_settings
from .diagram_canvas import DiagramCanvas
from .label_style_dialog import LabelStyleDialog
from .mode_palette import ModePalette
from .shape_renderer import ShapeRenderer


class MainWindow(QMainWindow):
    """
    Main application window.

    Layout:
    ┌─────────────────────────────────────────┐
    │  Menu Bar                               │
    ├──────────┬──────────────────────────────┤
    │  Mode    │                              │
    │  Palette │        Diagram Canvas        │
    │          │                              │
    ├──────────┴──────────────────────────────┤
    │  Status Bar                             │
    └─────────────────────────────────────────┘
    """

    def __init__(self):
        super().__init__()

        # Settings manager (JSON file based)
        self.settings_manager = get_settings()

        self.controller = CanvasController(self.settings_manager.canvas)

        # Setup
        self._setup_window()
        self._setup_central_widget()
        self._setup_menu()
        self._setup_status_bar()
        self._connect_signals()

        # Restore window geometry
        self._load_window_settings()
        self._on_selection_changed(self.controller.get_selection_info())

    def _load_window_settings(self):
        """Restore window geometry and state."""
        geometry, state = self.settings_manager.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)
        if state:
            self.restoreState(state)

    def _save_window_settings(self):
        """Save window geometry and state."""
        self.settings_manager.save_window_geometry(
            self.saveGeometry(),
            self.saveState()
        )

    def closeEvent(self, event):
        """Handle window close - save settings."""
        self._save_window_settings()
        super().closeEvent(event)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle("UML Canvas")
        self.setMinimumSize(900, 600)
        self.resize(1200, 800)

        self.setStyleSheet("""
            QMainWindow {
                background: #F3F4F6;
            }
        """)

    def _setup_central_widget(self):
        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.mode_palette = ModePalette()
        layout.addWidget(self.mode_palette)

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.VLine)
        separator.setStyleSheet("color: #E5E7EB;")
        layout.addWidget(separator)

        ui = self.settings_manager.ui
        self.canvas = DiagramCanvas(self.controller)
        self.canvas.show_grid = ui.show_grid
        self.canvas.grid_size = ui.grid_size
        ShapeRenderer.show_ports_on_selection = ui.show_ports_on_selection
        layout.addWidget(self.canvas, 1)

        self.setCentralWidget(central)

    def _add_action(self, menu, text: str, slot, shortcut=None) -> QAction:
        action = QAction(text, self)
        if shortcut is not None:
            action.setShortcut(shortcut)
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def _setup_menu(self):
        """Create menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")
        self._add_action(file_menu, "&Clear Canvas", self._on_clear_all, QKeySequence("Ctrl+Shift+N"))
        file_menu.addSeparator()
        self._add_action(file_menu, "E&xit", self.close, QKeySequence.StandardKey.Quit)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")
        self._group_action = self._add_action(
            edit_menu, "&Group", self._on_group, QKeySequence("Ctrl+G"))
        self._ungroup_action = self._add_action(
            edit_menu, "&Ungroup", self._on_ungroup, QKeySequence("Ctrl+Shift+G"))
        self._deep_ungroup_action = self._add_action(
            edit_menu, "Ungroup &All Levels", self._on_deep_ungroup)
        edit_menu.addSeparator()
        self._rename_action = self._add_action(
            edit_menu, "&Rename...", self._on_rename, QKeySequence("F2"))
        self._style_action = self._add_action(
            edit_menu, "&Label Style...", self._on_label_style)
        edit_menu.addSeparator()
        self._delete_action = self._add_action(
            edit_menu, "&Delete", self.controller.delete_selected_shapes, QKeySequence.StandardKey.Delete)
        self._add_action(edit_menu, "Clear &Selection", self.controller.clear_selection)
        self._add_action(edit_menu, "Recalculate Group &Bounds", self.controller.recalculate_group_bounds)

        # View menu
        view_menu = menubar.addMenu("&View")
        grid_action = QAction("Show &Grid", self)
        grid_action.setCheckable(True)
        grid_action.setChecked(self.canvas.show_grid)
        grid_action.toggled.connect(self._on_toggle_grid)
        view_menu.addAction(grid_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")
        self._add_action(help_menu, "&About", self._on_about)

    def _setup_status_bar(self):
        """Create status bar."""
        status = QStatusBar()
        status.setStyleSheet("""
            QStatusBar {
                background: #F9FAFB;
                border-top: 1px solid #E5E7EB;
                padding: 4px 8px;
                color: #6B7280;
                font-size: 12px;
            }
        """)
        self.setStatusBar(status)

        self._selection_label = QLabel()
        status.addWidget(self._selection_label)

        status.addWidget(QWidget(), 1)

        self._mode_label = QLabel()
        status.addWidget(self._mode_label)
        self._on_mode_changed(self.controller.mode)

    def _connect_signals(self):
        """Connect all signals."""
        self.mode_palette.modeSelected.connect(self.controller.set_mode)
        self.controller.modeChanged.connect(self._on_mode_changed)
        self.controller.selectionChanged.connect(self._on_selection_changed)

    def _on_mode_changed(self, mode: EditorMode):
        self.mode_palette.set_mode(mode)
        self._mode_label.setText(f"Mode: {mode.name.title()}")

    def _on_selection_changed(self, info: str):
        """Refresh status text and which edit actions apply."""
        self._selection_label.setText(info)
        single_basic = len(self.controller.selected_shapes) == 1 and \
            self.controller.selected_label() is not None

        self._group_action.setEnabled(self.controller.can_create_group())
        self._ungroup_action.setEnabled(self.controller.can_ungroup())
        self._deep_ungroup_action.setEnabled(self.controller.can_ungroup())
        self._delete_action.setEnabled(self.controller.has_selected_shapes())
        self._rename_action.setEnabled(self.controller.selected_label() is not None)
        self._style_action.setEnabled(single_basic)

    def _on_group(self):
        self.controller.group_selected_shapes()

    def _on_ungroup(self):
        self.controller.ungroup_selected_shape(deep=False)

    def _on_deep_ungroup(self):
        self.controller.ungroup_selected_shape(deep=True)

    def _on_rename(self):
        name, ok = QInputDialog.getText(
            self, "Rename Shape", "Name:", text=self.controller.get_selected_shape_name()
        )
        if ok:
            self.controller.rename_selected_shape(name)

    def _on_label_style(self):
        dialog = LabelStyleDialog(
            self.controller.selected_label(), self.settings_manager.labels, self
        )
        if dialog.exec():
            name, shape_kind, color, font_size = dialog.get_values()
            self.controller.customize_label_style(name, shape_kind, color, font_size)

    def _on_clear_all(self):
        if not self.controller.shapes:
            return
        reply = QMessageBox.question(
            self, "Clear Canvas", "Remove every shape from the canvas?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply == QMessageBox.StandardButton.Yes:
            self.controller.clear_all()

    def _on_toggle_grid(self, checked: bool):
        self.canvas.show_grid = checked
        self.settings_manager.ui.show_grid = checked
        self.settings_manager.save()
        self.canvas.update()

    def _on_about(self):
        QMessageBox.about(
            self, "About UML Canvas",
            "<h3>UML Canvas</h3>"
            "<p>Draw class boxes and use-case ovals, connect them with "
            "association, generalization and composition links, and group "
            "shapes into composites.</p>"
        )
