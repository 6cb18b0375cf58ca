"""
RotatedTextMeasurer — screen footprint of rotated text, and drawing text
rotated about a pivot so that the rotated glyph block stays centred on it.
"""

from __future__ import annotations
import math

from models.geometry import Point2D, Size
from models.style import TextStyle
from surfaces.surface_interface import IDrawingSurface
from utils.angle_geometry import rotate_point


class RotatedTextMeasurer:
    """
    Wraps a surface's measure_text() capability.

    Results are recomputed on every call; label rotation changes every frame
    so there is nothing worth caching.
    """

    def __init__(self, surface: IDrawingSurface):
        self.surface = surface

    def measure_rotated(self, text: str, style: TextStyle, angle_degrees: float) -> Size:
        """
        Axis-aligned bounding box of `text` after rotating it by `angle_degrees`.

        At 0° this is exactly the unrotated measurement; at 90°/270° width and
        height swap.
        """
        size = self.surface.measure_text(text, style)
        if angle_degrees == 0:
            return size

        angle = math.radians(angle_degrees)
        corners = [
            Point2D(0.0, 0.0),
            Point2D(size.width, 0.0),
            Point2D(0.0, size.height),
            Point2D(size.width, size.height),
        ]
        rotated = [rotate_point(c, angle) for c in corners]

        xs = [p.x for p in rotated]
        ys = [p.y for p in rotated]
        return Size(abs(max(xs) - min(xs)), abs(max(ys) - min(ys)))

    def draw_rotated_text(self, text: str, style: TextStyle, angle_degrees: float, pivot: Point2D) -> None:
        """
        Draw `text` rotated by `angle_degrees` about `pivot`.

        The origin is offset by half the *rotated* footprint, then the
        unrotated text is drawn inside a rotation scope around the pivot.
        """
        rotated_size = self.measure_rotated(text, style, angle_degrees)
        origin = Point2D(
            pivot.x - rotated_size.width / 2,
            pivot.y - rotated_size.height / 2,
        )

        with self.surface.rotated(angle_degrees, pivot):
            self.surface.draw_text(text, origin, style)
