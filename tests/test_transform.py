"""Tests for normalization and resize math."""

import pytest

from sketchboard.core.models import (
    BoxElement, ElementType, Position, UnknownHandleError
)
from sketchboard.core.transform import needs_normalization, normalize, resize


class TestNormalize:
    """Tests for normalize."""

    def test_rectangle_reversed(self):
        """Test that a reversed rectangle is reordered to min/max."""
        element = BoxElement(0, ElementType.RECTANGLE, 10, 10, 5, 5)
        assert normalize(element) == (5, 5, 10, 10)

    def test_rectangle_mixed(self):
        """Test a rectangle dragged up and to the right."""
        element = BoxElement(0, ElementType.ELLIPSE, 10, 40, 50, 10)
        assert normalize(element) == (10, 10, 50, 40)

    def test_line_keeps_direction_when_ordered(self):
        """Test a line that is already ordered."""
        element = BoxElement(0, ElementType.LINE, 0, 100, 50, 0)
        assert normalize(element) == (0, 100, 50, 0)

    def test_line_swaps_endpoints(self):
        """Test that a line is swapped end for end, not min/maxed."""
        element = BoxElement(0, ElementType.LINE, 50, 0, 0, 100)
        assert normalize(element) == (0, 100, 50, 0)

    def test_vertical_line(self):
        """Test that vertical lines are ordered by y."""
        assert normalize(BoxElement(0, ElementType.LINE, 5, 20, 5, 10)) == (5, 10, 5, 20)
        assert normalize(BoxElement(0, ElementType.LINE, 5, 10, 5, 20)) == (5, 10, 5, 20)

    @pytest.mark.parametrize("element_type", [
        ElementType.LINE, ElementType.RECTANGLE, ElementType.CIRCLE, ElementType.ELLIPSE
    ])
    @pytest.mark.parametrize("coordinates", [
        (10, 10, 5, 5), (0, 0, 0, 0), (3, -2, -7, 8), (1.5, 2.5, 1.5, -2.5)
    ])
    def test_idempotent(self, element_type, coordinates):
        """Test that normalizing twice equals normalizing once."""
        element = BoxElement(0, element_type, *coordinates)

        once = normalize(element)
        twice = normalize(element.with_coordinates(*once))

        assert twice == once

    def test_needs_normalization(self):
        """Test which element types are normalized on release."""
        assert needs_normalization(ElementType.RECTANGLE) is True
        assert needs_normalization(ElementType.LINE) is True
        assert needs_normalization(ElementType.PENCIL) is False


class TestResize:
    """Tests for resize."""

    COORDINATES = (10.0, 20.0, 30.0, 40.0)

    @pytest.mark.parametrize("position, changed", [
        (Position.TOP_LEFT, (0, 1)),
        (Position.START, (0, 1)),
        (Position.TOP_RIGHT, (1, 2)),
        (Position.BOTTOM_LEFT, (0, 3)),
        (Position.BOTTOM_RIGHT, (2, 3)),
        (Position.END, (2, 3)),
    ])
    def test_handle_changes_exactly_two_coordinates(self, position, changed):
        """Test each handle moves only the coordinates it owns."""
        result = resize(100.0, 200.0, position, self.COORDINATES)

        for index in range(4):
            if index in changed:
                assert result[index] in (100.0, 200.0)
            else:
                assert result[index] == self.COORDINATES[index]

    def test_top_right(self):
        """Test the top-right handle sets y1 and x2."""
        assert resize(100, 0, Position.TOP_RIGHT, self.COORDINATES) == (10, 0, 100, 40)

    def test_bottom_left(self):
        """Test the bottom-left handle sets x1 and y2."""
        assert resize(0, 100, Position.BOTTOM_LEFT, self.COORDINATES) == (0, 20, 30, 100)

    def test_inside_is_not_a_handle(self):
        """Test that the body position cannot be resized."""
        with pytest.raises(UnknownHandleError):
            resize(0, 0, Position.INSIDE, self.COORDINATES)

    def test_unknown_handle(self):
        """Test that an unrecognised handle fails fast."""
        with pytest.raises(UnknownHandleError):
            resize(0, 0, "middle", self.COORDINATES)
