"""Painting of drawing elements with QPainter."""

from __future__ import annotations

import logging
from typing import Sequence

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QPainter, QPainterPath, QPainterPathStroker, QPen

from ..core.models import BoxElement, Element, ElementType, StrokeElement, UnknownElementTypeError

logger = logging.getLogger(__name__)


def element_path(element: BoxElement) -> QPainterPath:
    """
    Build the outline path of a box shape from its coordinates.

    Rectangles and ellipses fill the bounding box of the two anchors; a
    circle is the largest one centred in that box.

    Raises:
        UnknownElementTypeError: If the element is not a box shape
    """
    path = QPainterPath()

    if element.type == ElementType.LINE:
        path.moveTo(element.x1, element.y1)
        path.lineTo(element.x2, element.y2)
        return path

    rect = element.bounding_rect

    if element.type == ElementType.RECTANGLE:
        path.addRect(rect)
    elif element.type == ElementType.ELLIPSE:
        path.addEllipse(rect)
    elif element.type == ElementType.CIRCLE:
        diameter = min(rect.width(), rect.height())
        circle = QRectF(0, 0, diameter, diameter)
        circle.moveCenter(rect.center())
        path.addEllipse(circle)
    else:
        raise UnknownElementTypeError(f"Type not recognised: {element.type!r}")

    return path


def stroke_outline(points: Sequence[QPointF], width: float) -> QPainterPath:
    """
    Convert a freehand stroke into a closed path that can be filled.

    Args:
        points: Sampled stroke points in drawing order
        width: Stroke width

    Returns:
        Fillable outline; a single point becomes a dot, no points an empty path
    """
    if not points:
        return QPainterPath()

    if len(points) == 1:
        dot = QPainterPath()
        dot.addEllipse(points[0], width / 2, width / 2)
        return dot

    centre_line = QPainterPath(points[0])
    for point in points[1:]:
        centre_line.lineTo(point)

    stroker = QPainterPathStroker()
    stroker.setWidth(width)
    stroker.setCapStyle(Qt.PenCapStyle.RoundCap)
    stroker.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    return stroker.createStroke(centre_line)


def draw_element(
    painter: QPainter,
    element: Element,
    line_width: float = 1,
    pencil_width: float = 8
) -> None:
    """Paint one element: outlined for box shapes, filled for strokes."""
    if isinstance(element, BoxElement):
        painter.setPen(QPen(QColor(element.stroke_color), line_width))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(element_path(element))
    elif isinstance(element, StrokeElement):
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(element.stroke_color))
        painter.drawPath(stroke_outline(element.points, pencil_width))
    else:
        raise UnknownElementTypeError(f"Type not recognised: {getattr(element, 'type', element)!r}")
