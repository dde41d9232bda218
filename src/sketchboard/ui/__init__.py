"""User interface components for Sketchboard."""

from .canvas import CanvasWidget
from .main_window import MainWindow

__all__ = [
    "CanvasWidget",
    "MainWindow",
]
