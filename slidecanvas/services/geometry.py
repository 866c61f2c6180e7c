"""
Geometry helpers: document position to canvas position, rotation pivot
correction and degree/radian conversion.
"""

import math
from typing import NamedTuple, Optional, Tuple


class Point(NamedTuple):
    x: float
    y: float


class Bounds(NamedTuple):
    max_x: float
    max_y: float


def degrees_to_radians(rotation: Optional[float]) -> float:
    """Canvas rotation is in radians; absent or zero rotation is 0.0"""
    if not rotation:
        return 0.0
    return (rotation * math.pi) / 180


def place(x: Optional[float], y: Optional[float], frame_x: float, frame_y: float, has_parent: bool) -> Point:
    """
    Map a component's top-left corner into the target coordinate space.

    Inside a frame the component keeps its own coordinates (frame-relative);
    without a parent the frame origin is added (absolute).
    """
    x = x or 0
    y = y or 0
    if has_parent:
        return Point(x, y)
    return Point(frame_x + x, frame_y + y)


def rotate_about_center(x: float, y: float, width: float, height: float, rotation: float) -> Point:
    """
    New top-left corner for a shape rotated about its own center.

    The source gives the top-left of the unrotated box while the canvas
    rotates shapes about their top-left corner, so the corner is moved to
    keep the center fixed.
    """
    angle = (rotation * math.pi) / 180
    center_x = x + width / 2
    center_y = y + height / 2
    new_x = center_x - (width / 2) * math.cos(angle) + (height / 2) * math.sin(angle)
    new_y = center_y - (width / 2) * math.sin(angle) - (height / 2) * math.cos(angle)
    return Point(new_x, new_y)


def text_position(
    x: Optional[float],
    y: Optional[float],
    width: Optional[float],
    height: Optional[float],
    rotation: Optional[float],
    frame_x: float,
    frame_y: float,
    has_parent: bool,
) -> Tuple[Point, float]:
    """Position and radian rotation for a text shape, pivot-corrected when rotated"""
    position = place(x, y, frame_x, frame_y, has_parent)
    if rotation:
        position = rotate_about_center(position.x, position.y, width or 0, height or 0, rotation)
    return position, degrees_to_radians(rotation)
