"""
Style configuration records for dials and the clock face

All records are immutable; field defaults follow the stock clock look
(2px ticks, 10px/20px tick lengths, 60px hour label, red 2px overlay).
"""

from dataclasses import dataclass, field
from typing import Optional

from models.color import Color


@dataclass(frozen=True)
class TextStyle:
    """
    Text appearance

    Attributes:
        color: Glyph color
        font_size: Font size in pixels
        font_path: TrueType/OpenType file, None = built-in scalable font
    """
    color: Color = field(default_factory=Color.black)
    font_size: float = 14.0
    font_path: Optional[str] = None


@dataclass(frozen=True)
class DialConfiguration:
    """
    One ring of 60 ticks with every fifth tick emphasised and labeled.

    tick_count and emphasis_interval are fixed by the dial layout; the
    remaining fields are styling.
    """
    normal_tick_length: float = 10.0
    emphasis_tick_length: float = 20.0
    tick_color: Color = field(default_factory=Color.transparent)
    tick_stroke_width: float = 2.0
    label_top_padding: float = 0.0
    label_text_style: TextStyle = field(default_factory=TextStyle)

    tick_count: int = field(default=60, init=False)
    emphasis_interval: int = field(default=5, init=False)

    @property
    def tick_angle_step(self) -> float:
        """Angle between neighbouring ticks in degrees"""
        return 360.0 / self.tick_count

    def tick_length(self, step_index: int) -> float:
        if self.is_emphasis(step_index):
            return self.emphasis_tick_length
        return self.normal_tick_length

    def is_emphasis(self, step_index: int) -> bool:
        return step_index % self.emphasis_interval == 0


@dataclass(frozen=True)
class ClockConfiguration:
    """
    Full clock face styling: outer (seconds) dial, inner (minutes) dial,
    hour label, overlay notch stroke.

    inner_dial_inset is the radial distance between the two dials.
    """
    seconds_dial_style: DialConfiguration = field(default_factory=DialConfiguration)
    minutes_dial_style: DialConfiguration = field(default_factory=DialConfiguration)
    hour_label_text_style: TextStyle = field(default_factory=lambda: TextStyle(font_size=60.0))
    overlay_stroke_color: Color = field(default_factory=Color.red)
    overlay_stroke_width: float = 2.0
    inner_dial_inset: float = 60.0
