"""Coordinate normalization and resize math for box shapes."""

from __future__ import annotations

from .models import BoxElement, Coordinates, ElementType, Position, UnknownElementTypeError, UnknownHandleError


def needs_normalization(element_type: ElementType) -> bool:
    """Box shapes are normalized when a gesture ends; strokes never are."""
    return element_type in (
        ElementType.LINE, ElementType.RECTANGLE, ElementType.CIRCLE, ElementType.ELLIPSE
    )


def normalize(element: BoxElement) -> Coordinates:
    """
    Put a box shape's coordinates into canonical form.

    Rectangles, circles and ellipses become (min x, min y, max x, max y).
    Lines keep their endpoints but are ordered so the first one is the
    lexicographically smaller (x, y) pair.

    Raises:
        UnknownElementTypeError: If the element is not a box shape
    """
    x1, y1, x2, y2 = element.coordinates

    if element.type in (ElementType.RECTANGLE, ElementType.CIRCLE, ElementType.ELLIPSE):
        return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    if element.type == ElementType.LINE:
        if x1 < x2 or (x1 == x2 and y1 < y2):
            return (x1, y1, x2, y2)
        return (x2, y2, x1, y1)

    raise UnknownElementTypeError(f"Type not recognised: {element.type!r}")


def resize(x: float, y: float, position: Position, coordinates: Coordinates) -> Coordinates:
    """
    Move the handle at position to (x, y).

    Only the two coordinates owned by the handle change; the opposite
    anchor stays where it was.

    Args:
        x, y: Pointer position
        position: Handle being dragged
        coordinates: (x1, y1, x2, y2) captured when the handle was grabbed

    Returns:
        Updated (x1, y1, x2, y2)

    Raises:
        UnknownHandleError: If position is not a resize handle
    """
    x1, y1, x2, y2 = coordinates

    if position in (Position.TOP_LEFT, Position.START):
        return (x, y, x2, y2)
    if position == Position.TOP_RIGHT:
        return (x1, y, x, y2)
    if position == Position.BOTTOM_LEFT:
        return (x, y1, x2, y)
    if position in (Position.BOTTOM_RIGHT, Position.END):
        return (x1, y1, x, y)

    raise UnknownHandleError(f"Handle not recognised: {position!r}")
