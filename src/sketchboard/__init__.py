"""
Sketchboard - an interactive vector drawing surface.

Built with PyQt6. Lines, rectangles, circles, ellipses and freehand strokes
can be drawn, moved and resized with the pointer, with linear undo.
"""

__version__ = "1.0.0"
__author__ = "Sketchboard Team"
