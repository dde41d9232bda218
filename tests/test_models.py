"""Tests for core models."""

import pytest
from PyQt6.QtCore import QPointF

from sketchboard.core.models import (
    BoxElement, ElementType, Position, SelectedElement, StrokeElement, Tool,
    UnknownElementTypeError, create_element
)


class TestCreateElement:
    """Tests for create_element."""

    @pytest.mark.parametrize("element_type", [
        ElementType.LINE, ElementType.RECTANGLE, ElementType.CIRCLE, ElementType.ELLIPSE
    ])
    def test_create_box_shape(self, element_type):
        """Test creating each box shape."""
        element = create_element(0, 10, 20, 30, 40, element_type, "#990000")

        assert isinstance(element, BoxElement)
        assert element.type == element_type
        assert element.coordinates == (10, 20, 30, 40)
        assert element.stroke_color == "#990000"

    def test_create_pencil(self):
        """Test that a stroke starts with its first point only."""
        element = create_element(3, 10, 20, 30, 40, ElementType.PENCIL)

        assert isinstance(element, StrokeElement)
        assert element.id == 3
        assert len(element.points) == 1
        assert element.points[0].x() == 10
        assert element.points[0].y() == 20

    def test_create_unknown_type(self):
        """Test that an unknown type fails fast."""
        with pytest.raises(UnknownElementTypeError):
            create_element(0, 0, 0, 0, 0, "triangle")

    def test_box_element_rejects_pencil(self):
        """Test that a box element cannot be a pencil stroke."""
        with pytest.raises(UnknownElementTypeError):
            BoxElement(0, ElementType.PENCIL, 0, 0, 1, 1)


class TestBoxElement:
    """Tests for BoxElement."""

    def test_with_coordinates_returns_new_element(self):
        """Test that changing coordinates leaves the original untouched."""
        element = BoxElement(0, ElementType.RECTANGLE, 0, 0, 10, 10, "#0000ff")

        moved = element.with_coordinates(5, 5, 15, 15)

        assert element.coordinates == (0, 0, 10, 10)
        assert moved.coordinates == (5, 5, 15, 15)
        assert moved.id == 0
        assert moved.stroke_color == "#0000ff"

    def test_bounding_rect_is_normalized(self):
        """Test the bounding rectangle of reversed anchors."""
        element = BoxElement(0, ElementType.ELLIPSE, 50, 40, 10, 10)

        rect = element.bounding_rect

        assert rect.x() == 10
        assert rect.y() == 10
        assert rect.width() == 40
        assert rect.height() == 30


class TestStrokeElement:
    """Tests for StrokeElement."""

    def test_with_point_appends(self):
        """Test appending a sampled point."""
        stroke = StrokeElement(0, (QPointF(0, 0),))

        longer = stroke.with_point(5, 6)

        assert len(stroke.points) == 1
        assert len(longer.points) == 2
        assert longer.points[-1].x() == 5
        assert longer.points[-1].y() == 6

    def test_from_points_copies(self):
        """Test that caller-owned points cannot change the stroke."""
        point = QPointF(1, 1)
        stroke = StrokeElement.from_points(0, [point], "#006600")

        point.setX(100)

        assert stroke.points[0].x() == 1
        assert stroke.stroke_color == "#006600"

    def test_with_point_reuses_existing_points(self):
        """Test that appending does not copy the points already sampled."""
        stroke = StrokeElement(0, (QPointF(0, 0), QPointF(1, 1)))

        longer = stroke.with_point(2, 2)

        assert longer.points[0] is stroke.points[0]
        assert longer.points[1] is stroke.points[1]

    def test_type_is_pencil(self):
        """Test the stroke type."""
        assert StrokeElement(0, ()).type == ElementType.PENCIL


class TestEnums:
    """Tests for model enumerations."""

    def test_tool_element_type(self):
        """Test drawing tools map to element types."""
        assert Tool.RECTANGLE.element_type == ElementType.RECTANGLE
        assert Tool.PENCIL.element_type == ElementType.PENCIL

    def test_selection_tool_has_no_element_type(self):
        """Test the selection tool does not create elements."""
        with pytest.raises(UnknownElementTypeError):
            Tool.SELECTION.element_type

    def test_is_box(self):
        """Test box shape classification."""
        assert ElementType.CIRCLE.is_box is True
        assert ElementType.PENCIL.is_box is False

    def test_position_is_handle(self):
        """Test handle classification."""
        assert Position.TOP_LEFT.is_handle is True
        assert Position.INSIDE.is_handle is False


class TestSelectedElement:
    """Tests for SelectedElement."""

    def test_grab_box(self):
        """Test capturing the pointer offset for a box."""
        element = BoxElement(2, ElementType.RECTANGLE, 10, 20, 50, 60)

        selected = SelectedElement.grab(element, Position.INSIDE, 15, 30)

        assert selected.id == 2
        assert selected.offset_x == 5
        assert selected.offset_y == 10

    def test_grab_stroke(self):
        """Test capturing per-point offsets for a stroke."""
        stroke = StrokeElement(0, (QPointF(0, 0), QPointF(10, 5)))

        selected = SelectedElement.grab(stroke, Position.INSIDE, 4, 2)

        assert selected.x_offsets == [4, -6]
        assert selected.y_offsets == [2, -3]

