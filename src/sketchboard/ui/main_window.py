"""Main application window for Sketchboard."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QSize
from PyQt6.QtGui import QAction, QActionGroup, QColor, QIcon, QPixmap
from PyQt6.QtWidgets import QColorDialog, QLabel, QMainWindow, QStatusBar, QToolBar

from ..core.config import AppConfig, ConfigManager
from ..core.interaction import CanvasEngine, DrawingContext
from ..core.models import Tool
from .canvas import CanvasWidget

logger = logging.getLogger(__name__)

TOOL_LABELS = {
    Tool.SELECTION: "Move",
    Tool.LINE: "Line",
    Tool.RECTANGLE: "Rectangle",
    Tool.CIRCLE: "Circle",
    Tool.ELLIPSE: "Ellipse",
    Tool.PENCIL: "Pencil",
}


class MainWindow(QMainWindow):
    """
    Main application window for Sketchboard.

    Provides the chrome around the drawing canvas:
    - Tool selection (move, line, rectangle, circle, ellipse, pencil)
    - Stroke colour palette and custom colour picker
    - Undo and clear
    """

    def __init__(self, config_manager: Optional[ConfigManager] = None) -> None:
        """Initialize the main window."""
        super().__init__()

        self.config_manager = config_manager or ConfigManager()
        self.tool_actions: Dict[Tool, QAction] = {}
        self.status_bar: Optional[QStatusBar] = None
        self.tool_label: Optional[QLabel] = None
        self.color_label: Optional[QLabel] = None

        self.engine = self._create_engine()
        self.canvas = CanvasWidget(
            self.engine,
            background_color=self.config.background_color,
            line_width=self.config.line_width,
            pencil_width=self.config.pencil_width,
        )

        self._init_ui()
        self._connect_engine()

        logger.info("MainWindow initialization complete")

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self.config_manager.config

    def _create_engine(self, context: Optional[DrawingContext] = None) -> CanvasEngine:
        """Create an engine with an empty drawing, keeping the given tool and colour."""
        if context is None:
            try:
                tool = Tool(self.config.default_tool)
            except ValueError:
                logger.warning(f"Unknown default tool {self.config.default_tool!r}, using pencil")
                tool = Tool.PENCIL
            context = DrawingContext(tool=tool, stroke_color=self.config.stroke_color)

        return CanvasEngine(
            context=context,
            max_history=self.config.max_history_entries,
            handle_size=self.config.handle_size,
            line_tolerance=self.config.line_tolerance,
            stroke_tolerance=self.config.stroke_tolerance,
        )

    def _init_ui(self) -> None:
        """Initialize the user interface."""
        self.setWindowTitle("Sketchboard")
        self.resize(self.config.window_width, self.config.window_height)
        self.setCentralWidget(self.canvas)

        self._create_toolbar()
        self._create_palette_toolbar()
        self._create_status_bar()

        self.tool_actions[self.engine.context.tool].setChecked(True)
        self._update_status()

    def _create_toolbar(self) -> None:
        """Create the tool toolbar."""
        self.toolbar = QToolBar("Tools")
        self.toolbar.setObjectName("ToolsToolBar")
        self.addToolBar(self.toolbar)

        tools = QActionGroup(self)
        for tool, label in TOOL_LABELS.items():
            action = QAction(label, self)
            action.setCheckable(True)
            action.triggered.connect(lambda checked, t=tool: self._set_tool(t))
            tools.addAction(action)
            self.tool_actions[tool] = action
        self.toolbar.addActions(tools.actions())

        self.toolbar.addSeparator()

        self.clear_action = QAction("Clear", self)
        self.clear_action.triggered.connect(self._clear)
        self.toolbar.addAction(self.clear_action)

        self.undo_action = QAction("Undo", self)
        self.undo_action.setShortcut("Ctrl+Z")
        self.undo_action.triggered.connect(self._undo)
        self.undo_action.setEnabled(False)
        self.toolbar.addAction(self.undo_action)

    def _create_palette_toolbar(self) -> None:
        """Create the colour toolbar."""
        palette_toolbar = QToolBar("Colours")
        palette_toolbar.setObjectName("PaletteToolBar")
        palette_toolbar.setIconSize(QSize(24, 24))
        self.addToolBar(palette_toolbar)

        for color in self.config.palette:
            action = QAction(self._create_swatch(color), color, self)
            action.triggered.connect(lambda checked, c=color: self._set_stroke_color(c))
            palette_toolbar.addAction(action)

        custom_action = QAction("Custom Colour...", self)
        custom_action.triggered.connect(self._pick_custom_color)
        palette_toolbar.addAction(custom_action)

    def _create_status_bar(self) -> None:
        """Create the status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.tool_label = QLabel()
        self.color_label = QLabel()
        self.status_bar.addWidget(self.tool_label)
        self.status_bar.addPermanentWidget(self.color_label)

    @staticmethod
    def _create_swatch(color: str, size: int = 24) -> QIcon:
        """Create a solid colour icon."""
        pixmap = QPixmap(size, size)
        pixmap.fill(QColor(color))
        return QIcon(pixmap)

    def _connect_engine(self) -> None:
        self.engine.history.state_changed.connect(self._update_undo_state)
        self._update_undo_state()

    # === Actions ===

    def _set_tool(self, tool: Tool) -> None:
        self.engine.set_tool(tool)
        self.canvas.update_tool_cursor()
        self._update_status()

    def _set_stroke_color(self, color: str) -> None:
        self.engine.set_stroke_color(color)
        self._update_status()

    def _pick_custom_color(self) -> None:
        """Open a colour dialog and use the chosen colour for new elements."""
        color = QColorDialog.getColor(QColor(self.config.custom_color), self, "Choose your colour")
        if not color.isValid():
            return
        self.config.custom_color = color.name()
        self._set_stroke_color(color.name())

    def _undo(self) -> None:
        """Undo the last gesture."""
        self.engine.undo()

    def _clear(self) -> None:
        """Start over with an empty drawing; this is not undoable."""
        self.engine.history.state_changed.disconnect(self._update_undo_state)
        self.engine = self._create_engine(self.engine.context)
        self.canvas.set_engine(self.engine)
        self._connect_engine()
        logger.info("Canvas cleared")

    def _update_undo_state(self) -> None:
        self.undo_action.setEnabled(self.engine.history.can_undo())

    def _update_status(self) -> None:
        context = self.engine.context
        self.tool_label.setText(f"Tool: {TOOL_LABELS[context.tool]}")
        self.color_label.setText(f"Colour: {context.stroke_color}")

    def closeEvent(self, event) -> None:
        """Persist the last used tool and colour."""
        context = self.engine.context
        self.config_manager.update(
            default_tool=context.tool.value,
            stroke_color=context.stroke_color,
        )
        super().closeEvent(event)
