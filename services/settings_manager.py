"""
Settings Manager.

Handles application settings with JSON file storage.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from typing import Optional
from pathlib import Path

from models.canvas import CanvasSettings

logger = logging.getLogger(__name__)


@dataclass
class LabelDefaults:
    """Initial label style offered by the label style dialog."""
    shape: str = "rect"
    color: str = "#111827"
    font_size: int = 12


@dataclass
class UISettings:
    """User interface settings."""
    theme: str = "light"
    show_grid: bool = True
    grid_size: int = 20
    show_ports_on_selection: bool = True


@dataclass
class AppSettings:
    """Complete application settings."""
    canvas: CanvasSettings = field(default_factory=CanvasSettings)
    labels: LabelDefaults = field(default_factory=LabelDefaults)
    ui: UISettings = field(default_factory=UISettings)
    window_geometry: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "canvas": asdict(self.canvas),
            "labels": asdict(self.labels),
            "ui": asdict(self.ui),
            "window_geometry": self.window_geometry,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary, ignoring unknown keys."""
        settings = cls()

        if "canvas" in data:
            settings.canvas = _load_section(CanvasSettings, data["canvas"])
        if "labels" in data:
            settings.labels = _load_section(LabelDefaults, data["labels"])
        if "ui" in data:
            settings.ui = _load_section(UISettings, data["ui"])
        if "window_geometry" in data:
            settings.window_geometry = data["window_geometry"]

        return settings


def _load_section(section_cls, values: dict):
    known = section_cls.__dataclass_fields__
    return section_cls(**{k: v for k, v in values.items() if k in known})


class SettingsManager:
    """
    Manages application settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/UMLCanvas/settings.json
    - Linux: ~/.config/UMLCanvas/settings.json
    - macOS: ~/Library/Application Support/UMLCanvas/settings.json
    """

    APP_NAME = "UMLCanvas"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    @property
    def canvas(self) -> CanvasSettings:
        return self._settings.canvas

    @property
    def labels(self) -> LabelDefaults:
        return self._settings.labels

    @property
    def ui(self) -> UISettings:
        return self._settings.ui

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        import platform
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def load(self) -> bool:
        """Load settings from file; keeps defaults if the file is missing or unreadable."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Error loading settings from {self._settings_path}: {e}")
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.warning(f"Error saving settings to {self._settings_path}: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()

    def save_window_geometry(self, geometry: bytes, state: bytes):
        """Save window geometry and state."""
        import base64
        self._settings.window_geometry = {
            "geometry": base64.b64encode(geometry).decode("ascii"),
            "state": base64.b64encode(state).decode("ascii"),
        }
        self.save()

    def get_window_geometry(self) -> tuple:
        """Get saved window geometry and state."""
        import base64
        geo = self._settings.window_geometry
        if not geo:
            return None, None

        try:
            geometry = base64.b64decode(geo.get("geometry", ""))
            state = base64.b64decode(geo.get("state", ""))
            return geometry, state
        except ValueError:
            return None, None


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings(config_override: Optional[str] = None) -> SettingsManager:
    """
    Get the global settings manager instance.

    Args:
        config_override: Optional path to override config location.
                        Only used on first call to initialize.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager(config_override)
    return _settings_manager


def reset_settings_manager():
    """Reset the global settings manager (useful for testing)."""
    global _settings_manager
    _settings_manager = None
