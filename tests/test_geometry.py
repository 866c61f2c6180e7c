"""
Tests for position mapping and rotation pivot correction
"""

import math

import pytest

from slidecanvas.services.geometry import (
    degrees_to_radians,
    place,
    rotate_about_center,
    text_position,
)


def expected_corner(x, y, w, h, degrees):
    theta = degrees * math.pi / 180
    cx, cy = x + w / 2, y + h / 2
    return (
        cx - (w / 2) * math.cos(theta) + (h / 2) * math.sin(theta),
        cy - (w / 2) * math.sin(theta) - (h / 2) * math.cos(theta),
    )


class TestPlace:
    """Frame-relative vs absolute placement."""

    def test_frame_relative_keeps_own_coordinates(self):
        assert place(10, 20, 500, 700, has_parent=True) == (10, 20)

    def test_absolute_adds_frame_origin(self):
        assert place(10, 20, 500, 700, has_parent=False) == (510, 720)

    def test_missing_coordinates_default_to_zero(self):
        assert place(None, None, 50, 60, has_parent=False) == (50, 60)
        assert place(None, None, 50, 60, has_parent=True) == (0, 0)


class TestRotation:
    """Rotation about the shape center."""

    def test_radians_conversion(self):
        assert degrees_to_radians(180) == pytest.approx(math.pi)
        assert degrees_to_radians(0) == 0.0
        assert degrees_to_radians(None) == 0.0

    def test_quarter_turn_matches_closed_form(self):
        x, y = rotate_about_center(100, 100, 50, 20, 90)
        ex, ey = expected_corner(100, 100, 50, 20, 90)
        assert x == pytest.approx(ex)
        assert y == pytest.approx(ey)
        assert (x, y) == (pytest.approx(135), pytest.approx(85))

    @pytest.mark.parametrize("degrees", [15, 45, 135, 270, -30])
    def test_center_is_preserved(self, degrees):
        x, y, w, h = 40.0, 60.0, 120.0, 30.0
        nx, ny = rotate_about_center(x, y, w, h, degrees)
        theta = math.radians(degrees)
        # Rotating the new corner's offset back around the new top-left gives the old center
        cx = nx + (w / 2) * math.cos(theta) - (h / 2) * math.sin(theta)
        cy = ny + (w / 2) * math.sin(theta) + (h / 2) * math.cos(theta)
        assert cx == pytest.approx(x + w / 2)
        assert cy == pytest.approx(y + h / 2)

    def test_full_turn_is_identity(self):
        x, y = rotate_about_center(10, 20, 30, 40, 360)
        assert x == pytest.approx(10)
        assert y == pytest.approx(20)


class TestTextPosition:

    def test_unrotated_text_is_not_moved(self):
        position, rotation = text_position(100, 100, 50, 20, None, 0, 0, True)
        assert position == (100, 100)
        assert rotation == 0.0

    def test_rotated_text_in_frame(self):
        position, rotation = text_position(100, 100, 50, 20, 90, 999, 999, True)
        ex, ey = expected_corner(100, 100, 50, 20, 90)
        assert position.x == pytest.approx(ex)
        assert position.y == pytest.approx(ey)
        assert rotation == pytest.approx(math.pi / 2)

    def test_rotated_text_without_frame_uses_absolute_corner(self):
        position, _ = text_position(100, 100, 50, 20, 45, 1000, 2000, False)
        ex, ey = expected_corner(1100, 2100, 50, 20, 45)
        assert position.x == pytest.approx(ex)
        assert position.y == pytest.approx(ey)

    def test_missing_size_rotates_a_point(self):
        position, _ = text_position(10, 10, None, None, 90, 0, 0, True)
        assert position.x == pytest.approx(10)
        assert position.y == pytest.approx(10)
