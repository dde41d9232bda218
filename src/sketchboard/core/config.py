"""Configuration management for Sketchboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Default configuration file path
DEFAULT_CONFIG_PATH = Path("config.yaml")

DEFAULT_PALETTE = ["#990000", "#0000ff", "#006600", "#cc0099", "purple"]


@dataclass
class AppConfig:
    """
    Application configuration settings.

    Stores drawing defaults, grab tolerances and window geometry.
    """

    stroke_color: str = "#000000"
    default_tool: str = "pencil"  # selection, line, rectangle, circle, ellipse, pencil
    palette: list[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    custom_color: str = "#28FFBF"  # Initial value of the colour picker
    background_color: str = "#EEEEEE"
    handle_size: float = 5  # Grab tolerance around corners and endpoints
    line_tolerance: float = 1  # Grab tolerance along lines
    stroke_tolerance: float = 5  # Grab tolerance along pencil strokes
    line_width: float = 1  # Outline width for shapes
    pencil_width: float = 8  # Width of freehand strokes
    max_history_entries: int = 0  # Maximum undo history entries (0 = unbounded)
    window_width: int = 1280
    window_height: int = 800

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {
            "strokeColor": self.stroke_color,
            "defaultTool": self.default_tool,
            "palette": self.palette,
            "customColor": self.custom_color,
            "backgroundColor": self.background_color,
            "handleSize": self.handle_size,
            "lineTolerance": self.line_tolerance,
            "strokeTolerance": self.stroke_tolerance,
            "lineWidth": self.line_width,
            "pencilWidth": self.pencil_width,
            "maxHistoryEntries": self.max_history_entries,
            "windowWidth": self.window_width,
            "windowHeight": self.window_height,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create config from dictionary."""
        return cls(
            stroke_color=data.get("strokeColor", "#000000"),
            default_tool=data.get("defaultTool", "pencil"),
            palette=data.get("palette", list(DEFAULT_PALETTE)),
            custom_color=data.get("customColor", "#28FFBF"),
            background_color=data.get("backgroundColor", "#EEEEEE"),
            handle_size=data.get("handleSize", 5),
            line_tolerance=data.get("lineTolerance", 1),
            stroke_tolerance=data.get("strokeTolerance", 5),
            line_width=data.get("lineWidth", 1),
            pencil_width=data.get("pencilWidth", 8),
            max_history_entries=data.get("maxHistoryEntries", 0),
            window_width=data.get("windowWidth", 1280),
            window_height=data.get("windowHeight", 800),
        )


class ConfigManager:
    """
    Manager for loading and saving application configuration.

    Handles YAML serialization and provides a clean interface
    for configuration access.
    """

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = config_path
        self._config: Optional[AppConfig] = None

    @property
    def config(self) -> AppConfig:
        """Get the current configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> AppConfig:
        """
        Load configuration from file.

        Returns:
            AppConfig instance with loaded or default values
        """
        if not self.config_path.exists():
            logger.info(f"Config file not found at {self.config_path}, using defaults")
            return AppConfig()

        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                logger.warning(f"Config file {self.config_path} does not contain a mapping, using defaults")
                return AppConfig()
            logger.info(f"Loaded configuration from {self.config_path}")
            return AppConfig.from_dict(data)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing config file: {e}")
            return AppConfig()
        except OSError as e:
            logger.error(f"Error loading config: {e}")
            return AppConfig()

    def save(self, config: Optional[AppConfig] = None) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration to save, or use current config

        Returns:
            True if save was successful
        """
        if config is not None:
            self._config = config

        if self._config is None:
            logger.warning("No configuration to save")
            return False

        try:
            with open(self.config_path, "w") as f:
                yaml.dump(self._config.to_dict(), f, default_flow_style=False)
            logger.info(f"Saved configuration to {self.config_path}")
            return True
        except OSError as e:
            logger.error(f"Error saving config: {e}")
            return False

    def update(self, **kwargs: Any) -> None:
        """
        Update configuration with new values.

        Args:
            **kwargs: Key-value pairs to update
        """
        config = self.config
        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"Unknown config key: {key}")
        self.save()
