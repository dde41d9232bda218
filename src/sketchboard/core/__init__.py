"""Core drawing engine for Sketchboard."""

from .models import (
    Action, BoxElement, Element, ElementType, Position, SelectedElement,
    StrokeElement, Tool, UnknownElementTypeError, UnknownHandleError, create_element
)
from .config import AppConfig, ConfigManager
from .history import History
from .interaction import CanvasEngine, DrawingContext

__all__ = [
    "Action",
    "BoxElement",
    "Element",
    "ElementType",
    "Position",
    "SelectedElement",
    "StrokeElement",
    "Tool",
    "UnknownElementTypeError",
    "UnknownHandleError",
    "create_element",
    "AppConfig",
    "ConfigManager",
    "History",
    "CanvasEngine",
    "DrawingContext",
]
