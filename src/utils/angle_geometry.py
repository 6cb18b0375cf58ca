"""
Point-on-circle and rotation helpers.

Screen convention: y grows downwards, angles grow counter-clockwise in the
math sense. point_on_circle() subtracts the sine term so that a growing angle
moves the point up (and a shrinking angle clockwise) on screen.
"""

import math

from models.geometry import Point2D


def point_on_circle(center: Point2D, radius: float, angle_radians: float) -> Point2D:
    """
    Point at `angle_radians` on a circle around `center`.

    0 rad is the 3 o'clock position. Radius 0 returns `center`; a negative
    radius mirrors the point through the center.
    """
    return Point2D(
        center.x + radius * math.cos(angle_radians),
        center.y - radius * math.sin(angle_radians),
    )


def rotate_point(point: Point2D, angle_radians: float) -> Point2D:
    """Rotate `point` about the origin with the standard rotation matrix."""
    cos_a = math.cos(angle_radians)
    sin_a = math.sin(angle_radians)
    return Point2D(
        point.x * cos_a - point.y * sin_a,
        point.x * sin_a + point.y * cos_a,
    )


def rotate_about(point: Point2D, pivot: Point2D, angle_degrees: float) -> Point2D:
    """
    Rotate `point` about `pivot`.

    In screen coordinates a positive angle turns clockwise, matching the
    drawing surfaces' rotated() scope.
    """
    return rotate_point(point - pivot, math.radians(angle_degrees)) + pivot
