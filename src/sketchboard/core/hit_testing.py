"""Hit-testing of pointer positions against drawn elements."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from PyQt6.QtCore import Qt

from .geometry import near_point, point_near_segment
from .models import BoxElement, Element, ElementType, Position, StrokeElement, UnknownElementTypeError

logger = logging.getLogger(__name__)

# Defaults matching the interaction model: a 5 unit square around handles,
# a 1 unit slack on lines and a 5 unit slack on coarse pencil samples.
HANDLE_SIZE = 5
LINE_TOLERANCE = 1
STROKE_TOLERANCE = 5


@dataclass(frozen=True)
class HitResult:
    """An element under the pointer and where on it the pointer is."""

    element: Element
    position: Position


def position_within_element(
    x: float,
    y: float,
    element: Element,
    handle_size: float = HANDLE_SIZE,
    line_tolerance: float = LINE_TOLERANCE,
    stroke_tolerance: float = STROKE_TOLERANCE
) -> Optional[Position]:
    """
    Resolve where (x, y) falls on an element.

    Handles take priority over the element body: line endpoints before the
    segment, and box corners (tl, tr, bl, br in that order) before the
    bounding box. Strokes have no handles and only report INSIDE.

    Args:
        x, y: Pointer position
        element: Element to test
        handle_size: Half-width of the square around each handle
        line_tolerance: Slack for the on-segment test of lines
        stroke_tolerance: Slack for the on-segment test of stroke segments

    Returns:
        The resolved position, or None if the point misses the element

    Raises:
        UnknownElementTypeError: If the element kind is not recognised
    """
    if isinstance(element, BoxElement):
        x1, y1, x2, y2 = element.coordinates

        if element.type == ElementType.LINE:
            return (
                near_point(x, y, x1, y1, Position.START, handle_size)
                or near_point(x, y, x2, y2, Position.END, handle_size)
                or (Position.INSIDE if point_near_segment(x1, y1, x2, y2, x, y, line_tolerance) else None)
            )

        if element.type in (ElementType.RECTANGLE, ElementType.CIRCLE, ElementType.ELLIPSE):
            inside = x1 <= x <= x2 and y1 <= y <= y2
            return (
                near_point(x, y, x1, y1, Position.TOP_LEFT, handle_size)
                or near_point(x, y, x2, y1, Position.TOP_RIGHT, handle_size)
                or near_point(x, y, x1, y2, Position.BOTTOM_LEFT, handle_size)
                or near_point(x, y, x2, y2, Position.BOTTOM_RIGHT, handle_size)
                or (Position.INSIDE if inside else None)
            )

    elif isinstance(element, StrokeElement):
        points = element.points
        for a, b in zip(points, points[1:]):
            if point_near_segment(a.x(), a.y(), b.x(), b.y(), x, y, stroke_tolerance):
                return Position.INSIDE
        return None

    raise UnknownElementTypeError(f"Type not recognised: {getattr(element, 'type', element)!r}")


def find_element_at(
    x: float,
    y: float,
    elements: Iterable[Element],
    handle_size: float = HANDLE_SIZE,
    line_tolerance: float = LINE_TOLERANCE,
    stroke_tolerance: float = STROKE_TOLERANCE
) -> Optional[HitResult]:
    """
    Find the first element, in stored order, containing (x, y).

    Elements stored earlier win over later ones when they overlap. The
    elements are not modified.

    Returns:
        HitResult for the first match, or None
    """
    for element in elements:
        position = position_within_element(
            x, y, element, handle_size, line_tolerance, stroke_tolerance
        )
        if position is not None:
            return HitResult(element, position)
    return None


def cursor_for_position(position: Optional[Position]) -> Qt.CursorShape:
    """Pick the cursor affordance for a hit-test result."""
    if position is None:
        return Qt.CursorShape.ArrowCursor
    if position in (Position.TOP_LEFT, Position.BOTTOM_RIGHT, Position.START, Position.END):
        return Qt.CursorShape.SizeFDiagCursor
    if position in (Position.TOP_RIGHT, Position.BOTTOM_LEFT):
        return Qt.CursorShape.SizeBDiagCursor
    return Qt.CursorShape.SizeAllCursor
