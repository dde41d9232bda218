"""Canvas widget that feeds pointer events to the drawing engine."""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QMouseEvent, QPainter
from PyQt6.QtWidgets import QWidget

from ..core.interaction import CanvasEngine
from ..core.models import Tool
from .renderer import draw_element

logger = logging.getLogger(__name__)


class CanvasWidget(QWidget):
    """
    Drawing surface widget.

    Forwards left-button mouse events to a CanvasEngine and repaints the
    engine's current elements whenever they change.
    """

    def __init__(
        self,
        engine: CanvasEngine,
        background_color: str = "#EEEEEE",
        line_width: float = 1,
        pencil_width: float = 8,
        parent: Optional[QWidget] = None
    ) -> None:
        super().__init__(parent)
        self.background_color = QColor(background_color)
        self.line_width = line_width
        self.pencil_width = pencil_width
        self.engine: Optional[CanvasEngine] = None

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.set_engine(engine)

    def set_engine(self, engine: CanvasEngine) -> None:
        """Attach a new engine, e.g. after the canvas was cleared."""
        if self.engine is not None:
            self.engine.elements_changed.disconnect(self._on_elements_changed)
        self.engine = engine
        self.engine.elements_changed.connect(self._on_elements_changed)
        self.update_tool_cursor()
        self.update()

    def update_tool_cursor(self) -> None:
        """Show a crosshair while a drawing tool is active."""
        if self.engine.context.tool == Tool.SELECTION:
            self.setCursor(Qt.CursorShape.ArrowCursor)
        else:
            self.setCursor(Qt.CursorShape.CrossCursor)

    def _on_elements_changed(self) -> None:
        self.update()

    # === Event Handlers ===

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Handle mouse press events."""
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        self.engine.on_pointer_down(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Handle mouse move events."""
        pos = event.position()
        cursor = self.engine.on_pointer_move(pos.x(), pos.y())
        if cursor is not None:
            self.setCursor(cursor)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Handle mouse release events."""
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        self.engine.on_pointer_up(pos.x(), pos.y())

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), self.background_color)

        for element in self.engine.elements:
            draw_element(painter, element, self.line_width, self.pencil_width)

        painter.end()
