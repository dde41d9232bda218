"""Distance and point-proximity primitives."""

from __future__ import annotations

import math
from typing import Optional, TypeVar

from PyQt6.QtCore import QPointF

T = TypeVar("T")


def distance(a: QPointF, b: QPointF) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x() - b.x(), a.y() - b.y())


def point_near_segment(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x: float,
    y: float,
    max_distance: float = 1
) -> bool:
    """
    Check whether a point lies on the segment (x1, y1)-(x2, y2).

    The point is on the segment when the sum of its distances to both
    endpoints differs from the segment length by less than max_distance.

    Args:
        x1, y1: First endpoint
        x2, y2: Second endpoint
        x, y: Point to test
        max_distance: Allowed slack

    Returns:
        True if the point is on the segment within the slack
    """
    a = QPointF(x1, y1)
    b = QPointF(x2, y2)
    c = QPointF(x, y)
    offset = distance(a, b) - (distance(a, c) + distance(b, c))
    return abs(offset) < max_distance


def near_point(
    x: float,
    y: float,
    x1: float,
    y1: float,
    label: T,
    tolerance: float = 5
) -> Optional[T]:
    """Return label if (x, y) is inside the tolerance square around (x1, y1)."""
    if abs(x - x1) < tolerance and abs(y - y1) < tolerance:
        return label
    return None
