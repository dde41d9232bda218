"""Data models for Sketchboard drawings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Tuple, Union

from PyQt6.QtCore import QPointF, QRectF

logger = logging.getLogger(__name__)

Coordinates = Tuple[float, float, float, float]


class UnknownElementTypeError(ValueError):
    """Raised when an element kind outside ElementType reaches the engine."""


class UnknownHandleError(ValueError):
    """Raised when a resize is requested for a handle that does not exist."""


class ElementType(str, Enum):
    """Kind of drawable element."""

    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    PENCIL = "pencil"

    @property
    def is_box(self) -> bool:
        """Whether the element is described by two anchor corners."""
        return self != ElementType.PENCIL


class Tool(str, Enum):
    """Active creation or selection mode."""

    SELECTION = "selection"
    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    PENCIL = "pencil"

    @property
    def element_type(self) -> ElementType:
        """Element type created by this tool."""
        if self == Tool.SELECTION:
            raise UnknownElementTypeError("The selection tool does not create elements")
        return ElementType(self.value)


class Action(str, Enum):
    """What the current pointer gesture is doing."""

    NONE = "none"
    DRAWING = "drawing"
    MOVING = "moving"
    RESIZING = "resizing"


class Position(str, Enum):
    """Where on an element the pointer is: a handle or the body."""

    START = "start"
    END = "end"
    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"
    INSIDE = "inside"

    @property
    def is_handle(self) -> bool:
        return self != Position.INSIDE


@dataclass(frozen=True)
class BoxElement:
    """
    A line, rectangle, circle or ellipse.

    Described by two anchor points (x1, y1) and (x2, y2). Instances are
    immutable; every coordinate change produces a new element.
    """

    id: int
    type: ElementType
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_color: str = "#000000"

    def __post_init__(self) -> None:
        if not isinstance(self.type, ElementType) or not self.type.is_box:
            raise UnknownElementTypeError(f"Type not recognised: {self.type}")

    @property
    def coordinates(self) -> Coordinates:
        return (self.x1, self.y1, self.x2, self.y2)

    def with_coordinates(self, x1: float, y1: float, x2: float, y2: float) -> BoxElement:
        """Return a copy of this element anchored at new coordinates."""
        return replace(self, x1=x1, y1=y1, x2=x2, y2=y2)

    @property
    def bounding_rect(self) -> QRectF:
        """Bounding rectangle of the two anchors, normalized."""
        return QRectF(QPointF(self.x1, self.y1), QPointF(self.x2, self.y2)).normalized()


@dataclass(frozen=True)
class StrokeElement:
    """
    A freehand pencil stroke.

    Points are kept in the order they were sampled and are only ever
    appended to or translated as a whole. The points tuple is shared between
    successive versions of a stroke, so its QPointF objects must not be
    mutated; use from_points to build a stroke from caller-owned points.
    """

    id: int
    points: Tuple[QPointF, ...]
    stroke_color: str = "#000000"
    type: ElementType = field(default=ElementType.PENCIL, init=False)

    @classmethod
    def from_points(
        cls,
        id: int,
        points: Iterable[QPointF],
        stroke_color: str = "#000000"
    ) -> StrokeElement:
        """Create a stroke from a copy of the given points."""
        return cls(id, tuple(QPointF(p) for p in points), stroke_color)

    def with_point(self, x: float, y: float) -> StrokeElement:
        """Return a copy of this stroke with one more sampled point."""
        return replace(self, points=self.points + (QPointF(x, y),))

    def with_points(self, points: List[QPointF]) -> StrokeElement:
        """Return a copy of this stroke with all points replaced."""
        return replace(self, points=tuple(points))


Element = Union[BoxElement, StrokeElement]


def create_element(
    id: int,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    element_type: ElementType,
    stroke_color: str = "#000000"
) -> Element:
    """
    Create a new element of the given type.

    Box shapes are anchored at both points; a pencil stroke starts with the
    single point (x1, y1).

    Raises:
        UnknownElementTypeError: If element_type is not an ElementType
    """
    if element_type in (
        ElementType.LINE, ElementType.RECTANGLE, ElementType.CIRCLE, ElementType.ELLIPSE
    ):
        return BoxElement(id, ElementType(element_type), x1, y1, x2, y2, stroke_color)
    elif element_type == ElementType.PENCIL:
        return StrokeElement.from_points(id, [QPointF(x1, y1)], stroke_color)

    raise UnknownElementTypeError(f"Type not recognised: {element_type}")


@dataclass
class SelectedElement:
    """
    The element grabbed by the current gesture.

    Holds a copy of the element as it was at pointer-down together with the
    offsets needed to translate it rigidly: one offset for box shapes, one
    per point for strokes.
    """

    element: Element
    position: Position
    offset_x: float = 0.0
    offset_y: float = 0.0
    x_offsets: List[float] = field(default_factory=list)
    y_offsets: List[float] = field(default_factory=list)

    @property
    def id(self) -> int:
        return self.element.id

    @classmethod
    def grab(cls, element: Element, position: Position, x: float, y: float) -> SelectedElement:
        """Capture pointer-to-element offsets at (x, y)."""
        if isinstance(element, StrokeElement):
            return cls(
                element=element,
                position=position,
                x_offsets=[x - p.x() for p in element.points],
                y_offsets=[y - p.y() for p in element.points],
            )
        return cls(
            element=element,
            position=position,
            offset_x=x - element.x1,
            offset_y=y - element.y1,
        )

