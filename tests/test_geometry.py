"""Tests for geometry primitives."""

import pytest
from PyQt6.QtCore import QPointF

from sketchboard.core.geometry import distance, near_point, point_near_segment


class TestDistance:
    """Tests for distance."""

    def test_distance(self):
        """Test a 3-4-5 triangle."""
        assert distance(QPointF(0, 0), QPointF(3, 4)) == 5

    def test_distance_same_point(self):
        """Test distance of a point to itself."""
        assert distance(QPointF(7, 7), QPointF(7, 7)) == 0


class TestPointNearSegment:
    """Tests for point_near_segment."""

    def test_point_on_segment(self):
        """Test a point exactly on the segment."""
        assert point_near_segment(0, 0, 10, 0, 5, 0) is True

    def test_point_off_segment(self):
        """Test a point well away from the segment."""
        assert point_near_segment(0, 0, 10, 0, 5, 5) is False

    def test_point_beyond_endpoint(self):
        """Test a point on the line but past the end of the segment."""
        assert point_near_segment(0, 0, 10, 0, 15, 0) is False

    def test_larger_slack(self):
        """Test that a larger slack accepts points further from the segment."""
        assert point_near_segment(0, 0, 100, 0, 50, 10) is False
        assert point_near_segment(0, 0, 100, 0, 50, 10, max_distance=5) is True


class TestNearPoint:
    """Tests for near_point."""

    def test_inside_square(self):
        """Test a point inside the tolerance square."""
        assert near_point(12, 8, 10, 10, "tl") == "tl"

    def test_outside_square(self):
        """Test a point exactly at the tolerance edge is rejected."""
        assert near_point(15, 10, 10, 10, "tl") is None

    def test_custom_tolerance(self):
        """Test a custom tolerance."""
        assert near_point(17, 10, 10, 10, "end", tolerance=8) == "end"
