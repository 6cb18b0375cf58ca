"""
OverlayPathBuilder — the notch that bridges the hour label to the dial labels.

Two points straddle 3 o'clock on the outer radius at ±8°. The notch runs
horizontally from the upper point to a vertical line placed just inside the
space reserved for both dials' widest labels, turns with a cubic curve whose
bulge equals half the chord height, and returns to the lower point.
"""

from __future__ import annotations
import math

from models.geometry import Point2D
from models.path import OverlayPath
from models.style import ClockConfiguration
from surfaces.surface_interface import IDrawingSurface
from utils.angle_geometry import point_on_circle

OVERLAY_HALF_ANGLE_DEG = 8.0

# Widest two-digit label either dial can show
WIDEST_LABEL = "60"


class OverlayPathBuilder:

    def __init__(self, surface: IDrawingSurface):
        self.surface = surface

    def overlay_line_x(self, config: ClockConfiguration, surface_width: float) -> float:
        """X of the notch's vertical segment, from live-measured label widths."""
        seconds = config.seconds_dial_style
        minutes = config.minutes_dial_style

        seconds_label_max_width = self.surface.measure_text(WIDEST_LABEL, seconds.label_text_style).width
        minutes_label_max_width = self.surface.measure_text(WIDEST_LABEL, minutes.label_text_style).width

        return (
            surface_width
            - seconds.emphasis_tick_length
            - seconds.label_top_padding
            - seconds_label_max_width
            - minutes.emphasis_tick_length
            - minutes.label_top_padding
            - minutes_label_max_width / 2
        )

    def build_overlay_path(
        self,
        center: Point2D,
        outer_radius: float,
        config: ClockConfiguration,
        surface_width: float,
    ) -> OverlayPath:
        half_angle = math.radians(OVERLAY_HALF_ANGLE_DEG)
        start = point_on_circle(center, outer_radius, half_angle)
        end = point_on_circle(center, outer_radius, -half_angle)

        overlay_radius = (end.y - start.y) / 2
        line_x = self.overlay_line_x(config, surface_width)

        return (
            OverlayPath()
            .move_to(start)
            .line_to(Point2D(line_x, start.y))
            .cubic_to(
                Point2D(line_x - overlay_radius, start.y),
                Point2D(line_x - overlay_radius, end.y),
                Point2D(line_x, end.y),
            )
            .line_to(end)
        )
