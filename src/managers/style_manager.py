"""
Style Manager - Processes clock style preset definitions

Processes the `styles:` section handed over by ConfigManager (does NOT load files).
"""

from typing import Any, Dict, List, Optional

from models.color import Color
from models.enums import LogCategory
from models.style import ClockConfiguration, DialConfiguration, TextStyle
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)


def parse_color(value: Any) -> Color:
    """
    Accepts "#RRGGBB", "#RRGGBBAA" or an [r, g, b] / [r, g, b, a] list.

    Raises:
        ValueError: On any other shape
    """
    if isinstance(value, str):
        return Color.from_hex(value)
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        return Color.from_rgb(*(int(v) for v in value))
    raise ValueError(f"Invalid color value: {value!r}")


def parse_text_style(data: Optional[Dict], default_size: float) -> TextStyle:
    data = data or {}
    color = parse_color(data["color"]) if "color" in data else Color.black()
    return TextStyle(
        color=color,
        font_size=float(data.get("font_size", default_size)),
        font_path=data.get("font"),
    )


def parse_dial(data: Optional[Dict], default_label_size: float) -> DialConfiguration:
    data = data or {}
    defaults = DialConfiguration()
    return DialConfiguration(
        normal_tick_length=float(data.get("normal_tick_length", defaults.normal_tick_length)),
        emphasis_tick_length=float(data.get("emphasis_tick_length", defaults.emphasis_tick_length)),
        tick_color=parse_color(data["tick_color"]) if "tick_color" in data else defaults.tick_color,
        tick_stroke_width=float(data.get("tick_stroke_width", defaults.tick_stroke_width)),
        label_top_padding=float(data.get("label_top_padding", defaults.label_top_padding)),
        label_text_style=parse_text_style(data.get("label"), default_label_size),
    )


class StyleManager:
    """
    Clock style preset manager (data processor only)

    Example:
        # Created by ConfigManager
        style_mgr = StyleManager(data["styles"])

        config = style_mgr.get_style("marron")
        background = style_mgr.get_background("marron")
    """

    def __init__(self, data: Dict):
        self.data = data or {}
        self._styles: Dict[str, ClockConfiguration] = {}
        self._backgrounds: Dict[str, Color] = {}
        self._process_data()

    def _process_data(self):
        for name, style_data in self.data.items():
            style_data = style_data or {}
            overlay = style_data.get("overlay") or {}
            defaults = ClockConfiguration()

            self._styles[name] = ClockConfiguration(
                seconds_dial_style=parse_dial(style_data.get("seconds_dial"), 20.0),
                minutes_dial_style=parse_dial(style_data.get("minutes_dial"), 18.0),
                hour_label_text_style=parse_text_style(style_data.get("hour_label"), 60.0),
                overlay_stroke_color=(
                    parse_color(overlay["color"]) if "color" in overlay else defaults.overlay_stroke_color
                ),
                overlay_stroke_width=float(overlay.get("stroke_width", defaults.overlay_stroke_width)),
                inner_dial_inset=float(style_data.get("inner_dial_inset", defaults.inner_dial_inset)),
            )
            if "background" in style_data:
                self._backgrounds[name] = parse_color(style_data["background"])

        log.info(f"Loaded {len(self._styles)} style presets", styles=", ".join(self._styles))

    @property
    def style_names(self) -> List[str]:
        return list(self._styles.keys())

    def get_style(self, name: str) -> ClockConfiguration:
        """
        Raises:
            ValueError: If no preset has that name
        """
        try:
            return self._styles[name]
        except KeyError:
            raise ValueError(
                f"Unknown clock style: {name!r} (available: {', '.join(self._styles) or 'none'})"
            ) from None

    def get_background(self, name: str) -> Optional[Color]:
        """Style-specific background, None when the style does not set one"""
        return self._backgrounds.get(name)
