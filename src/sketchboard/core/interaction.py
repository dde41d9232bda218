"""Pointer-driven interaction engine for the drawing surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal

from .hit_testing import (
    HANDLE_SIZE, LINE_TOLERANCE, STROKE_TOLERANCE,
    HitResult, cursor_for_position, find_element_at
)
from .history import History
from .models import (
    Action, BoxElement, Element, Position, SelectedElement, StrokeElement, Tool,
    create_element
)
from .transform import needs_normalization, normalize, resize

logger = logging.getLogger(__name__)


@dataclass
class DrawingContext:
    """User-selected drawing state read at the start of every gesture."""

    tool: Tool = Tool.PENCIL
    stroke_color: str = "#000000"


class CanvasEngine(QObject):
    """
    Turns pointer events into element creation, moves and resizes.

    Each gesture runs none -> drawing | moving | resizing -> none. The first
    change a gesture makes is committed to the history; every later change
    in the same gesture overwrites that entry, so one undo reverts one
    gesture.

    Emits elements_changed whenever the current element collection changes.
    """

    elements_changed = pyqtSignal()

    def __init__(
        self,
        context: Optional[DrawingContext] = None,
        max_history: int = 0,
        handle_size: float = HANDLE_SIZE,
        line_tolerance: float = LINE_TOLERANCE,
        stroke_tolerance: float = STROKE_TOLERANCE
    ) -> None:
        """
        Initialize the engine with an empty drawing.

        Args:
            context: Initial tool and stroke colour
            max_history: Maximum number of history entries (0 = unbounded)
            handle_size: Grab tolerance around handles
            line_tolerance: Grab tolerance along lines
            stroke_tolerance: Grab tolerance along pencil strokes
        """
        super().__init__()
        self.context = context or DrawingContext()
        self.history = History(max_history)
        self.history.state_changed.connect(self.elements_changed)

        self.handle_size = handle_size
        self.line_tolerance = line_tolerance
        self.stroke_tolerance = stroke_tolerance

        self._action = Action.NONE
        self._selected: Optional[SelectedElement] = None
        self._gesture_committed = False

    @property
    def elements(self) -> Tuple[Element, ...]:
        """The current element collection."""
        return self.history.current

    @property
    def action(self) -> Action:
        return self._action

    @property
    def selected(self) -> Optional[SelectedElement]:
        return self._selected

    def set_tool(self, tool: Tool) -> None:
        self.context.tool = Tool(tool)
        logger.debug(f"Tool set to {self.context.tool.value}")

    def set_stroke_color(self, color: str) -> None:
        self.context.stroke_color = color
        logger.debug(f"Stroke colour set to {color}")

    def undo(self) -> bool:
        """
        Revert the last gesture.

        Returns:
            True if the history moved back
        """
        if self._action != Action.NONE:
            logger.debug("Ignoring undo during an active gesture")
            return False
        return self.history.undo()

    # === Pointer Events ===

    def on_pointer_down(self, x: float, y: float) -> None:
        """Start a gesture at (x, y)."""
        self._gesture_committed = False

        if self.context.tool == Tool.SELECTION:
            hit = self._hit_test(x, y)
            if hit is None:
                return

            self._selected = SelectedElement.grab(hit.element, hit.position, x, y)
            if hit.position.is_handle:
                self._action = Action.RESIZING
            else:
                self._action = Action.MOVING
            logger.debug(f"Grabbed element {hit.element.id} at {hit.position.value}")
            return

        element_type = self.context.tool.element_type
        element = create_element(
            len(self.elements), x, y, x, y, element_type, self.context.stroke_color
        )
        self._write(self.elements + (element,))
        self._selected = SelectedElement(element, Position.END)
        self._action = Action.DRAWING
        logger.debug(f"Started drawing {element_type.value} {element.id}")

    def on_pointer_move(self, x: float, y: float) -> Optional[Qt.CursorShape]:
        """
        Continue the current gesture at (x, y).

        Returns:
            Cursor affordance for the pointer when the selection tool is
            active, otherwise None
        """
        cursor = None
        if self.context.tool == Tool.SELECTION:
            hit = self._hit_test(x, y)
            cursor = cursor_for_position(hit.position if hit else None)

        if self._action == Action.DRAWING:
            self._continue_drawing(x, y)
        elif self._action == Action.MOVING:
            self._move_selected(x, y)
        elif self._action == Action.RESIZING:
            self._resize_selected(x, y)

        return cursor

    def on_pointer_up(self, x: float, y: float) -> None:
        """Finish the current gesture."""
        if self._selected is not None and self._action in (Action.DRAWING, Action.RESIZING):
            element = self.elements[self._selected.id]
            if isinstance(element, BoxElement) and needs_normalization(element.type):
                coordinates = normalize(element)
                if coordinates != element.coordinates:
                    self._replace_element(element.with_coordinates(*coordinates))

        if self._action != Action.NONE:
            logger.debug(f"Finished {self._action.value}")

        self._action = Action.NONE
        self._selected = None
        self._gesture_committed = False

    # === Gesture Steps ===

    def _continue_drawing(self, x: float, y: float) -> None:
        element = self.elements[self._selected.id]
        if isinstance(element, StrokeElement):
            self._replace_element(element.with_point(x, y))
        else:
            self._replace_element(element.with_coordinates(element.x1, element.y1, x, y))

    def _move_selected(self, x: float, y: float) -> None:
        selected = self._selected
        grabbed = selected.element
        element = self.elements[selected.id]

        if isinstance(grabbed, StrokeElement):
            points: List[QPointF] = [
                QPointF(x - x_offset, y - y_offset)
                for x_offset, y_offset in zip(selected.x_offsets, selected.y_offsets)
            ]
            self._replace_element(element.with_points(points))
        else:
            width = grabbed.x2 - grabbed.x1
            height = grabbed.y2 - grabbed.y1
            new_x1 = x - selected.offset_x
            new_y1 = y - selected.offset_y
            self._replace_element(
                element.with_coordinates(new_x1, new_y1, new_x1 + width, new_y1 + height)
            )

    def _resize_selected(self, x: float, y: float) -> None:
        selected = self._selected
        coordinates = resize(x, y, selected.position, selected.element.coordinates)
        element = self.elements[selected.id]
        self._replace_element(element.with_coordinates(*coordinates))

    # === Helpers ===

    def _hit_test(self, x: float, y: float) -> Optional[HitResult]:
        return find_element_at(
            x, y, self.elements,
            self.handle_size, self.line_tolerance, self.stroke_tolerance
        )

    def _replace_element(self, element: Element) -> None:
        """Swap in a new version of one element, addressed by its id."""
        elements = list(self.elements)
        elements[element.id] = element
        self._write(elements)

    def _write(self, elements) -> None:
        """Commit the first change of a gesture, overwrite every later one."""
        if self._gesture_committed:
            self.history.overwrite(elements)
        else:
            self.history.commit(elements)
            self._gesture_committed = True
