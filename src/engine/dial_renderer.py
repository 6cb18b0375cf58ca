"""
DialRenderer — one ring of 60 ticks with every fifth tick longer and labeled.

Tick angle for step i is i * 6° + dial rotation. Labels counter-rotate by
the same amount so they stay upright while the ring spins.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Optional

from engine.rotated_text import RotatedTextMeasurer
from models.enums import LogCategory, StrokeCap
from models.geometry import Point2D
from models.style import DialConfiguration
from surfaces.surface_interface import IDrawingSurface
from utils.angle_geometry import point_on_circle
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)


@dataclass(frozen=True)
class TickPlacement:
    """
    Computed geometry of one dial step.

    label / label_pivot / label_rotation_deg are None for non-emphasis ticks.
    """
    step_index: int
    angle_deg: float
    start: Point2D
    end: Point2D
    is_emphasis: bool
    label: Optional[str] = None
    label_pivot: Optional[Point2D] = None
    label_rotation_deg: Optional[float] = None


def step_label(step_index: int) -> str:
    """Two-digit label: 0 → "00", 5 → "05", 55 → "55"."""
    return f"{step_index:02d}"


class DialRenderer:
    """
    Draws dials onto a surface.

    Example:
        renderer = DialRenderer(surface)
        renderer.draw_dial(surface.center, 200.0, state.second_rotation_deg, config)
    """

    def __init__(self, surface: IDrawingSurface, text_measurer: Optional[RotatedTextMeasurer] = None):
        self.surface = surface
        self.text_measurer = text_measurer or RotatedTextMeasurer(surface)

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------

    @staticmethod
    def tick_geometry(
        center: Point2D,
        radius: float,
        dial_rotation_deg: float,
        config: DialConfiguration,
    ) -> List[TickPlacement]:
        """Pure placement math for every step of the dial."""
        placements = []

        for step_index in range(config.tick_count):
            step_angle = step_index * config.tick_angle_step
            angle_deg = step_angle + dial_rotation_deg
            angle_rad = math.radians(angle_deg)

            is_emphasis = config.is_emphasis(step_index)
            tick_length = config.tick_length(step_index)

            start = point_on_circle(center, radius, angle_rad)
            end = point_on_circle(center, radius - tick_length, angle_rad)

            if is_emphasis:
                label_radius = radius - tick_length - config.label_top_padding
                placements.append(TickPlacement(
                    step_index=step_index,
                    angle_deg=angle_deg,
                    start=start,
                    end=end,
                    is_emphasis=True,
                    label=step_label(step_index),
                    label_pivot=point_on_circle(center, label_radius, angle_rad),
                    label_rotation_deg=-step_angle - dial_rotation_deg,
                ))
            else:
                placements.append(TickPlacement(
                    step_index=step_index,
                    angle_deg=angle_deg,
                    start=start,
                    end=end,
                    is_emphasis=False,
                ))

        return placements

    # ------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------

    def draw_dial(
        self,
        center: Point2D,
        radius: float,
        dial_rotation_deg: float,
        config: DialConfiguration,
    ) -> None:
        """
        Draw ticks and labels. A non-positive radius draws nothing.
        """
        if radius <= 0:
            log.debug(f"Skipping degenerate dial (radius={radius})")
            return

        for tick in self.tick_geometry(center, radius, dial_rotation_deg, config):
            self.surface.draw_line(
                tick.start,
                tick.end,
                config.tick_color,
                config.tick_stroke_width,
                StrokeCap.ROUND,
            )
            if tick.is_emphasis:
                self._draw_step_label(tick, config)

    def _draw_step_label(self, tick: TickPlacement, config: DialConfiguration) -> None:
        self.text_measurer.draw_rotated_text(
            tick.label,
            config.label_text_style,
            tick.label_rotation_deg,
            tick.label_pivot,
        )
