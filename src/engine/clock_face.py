"""
ClockFaceComposer — draws one complete clock frame.

Outer dial = seconds, inner dial = minutes, zero-padded hour in the
centre, overlay notch on top.
"""

from __future__ import annotations

from engine.dial_renderer import DialRenderer
from engine.overlay_path import OverlayPathBuilder
from engine.rotated_text import RotatedTextMeasurer
from models.enums import LogCategory
from models.geometry import Point2D
from models.state import AnimationState
from models.style import ClockConfiguration
from surfaces.surface_interface import IDrawingSurface
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)


class ClockFaceComposer:
    """
    Stateless apart from the configuration; a frame is a pure function of
    (AnimationState, ClockConfiguration, surface size).
    """

    def __init__(self, config: ClockConfiguration):
        self.config = config

    def draw(self, surface: IDrawingSurface, state: AnimationState) -> None:
        width = surface.width
        height = surface.height
        if width <= 0 or height <= 0:
            log.debug(f"Skipping frame for empty surface ({width}x{height})")
            return

        center = surface.center
        outer_radius = min(width, height) / 2
        inner_radius = outer_radius - self.config.inner_dial_inset

        text_measurer = RotatedTextMeasurer(surface)
        dials = DialRenderer(surface, text_measurer)

        dials.draw_dial(center, outer_radius, state.second_rotation_deg, self.config.seconds_dial_style)
        dials.draw_dial(center, inner_radius, state.minute_rotation_deg, self.config.minutes_dial_style)

        self._draw_hour_label(surface, center, state)

        overlay = OverlayPathBuilder(surface).build_overlay_path(center, outer_radius, self.config, width)
        surface.draw_path(overlay, self.config.overlay_stroke_color, self.config.overlay_stroke_width)

    def _draw_hour_label(self, surface: IDrawingSurface, center: Point2D, state: AnimationState) -> None:
        style = self.config.hour_label_text_style
        label = state.hour_label
        size = surface.measure_text(label, style)
        top_left = Point2D(center.x - size.width / 2, center.y - size.height / 2)
        surface.draw_text(label, top_left, style)
