"""
Application settings parsed from the `app:` and `logging:` config sections
"""

from dataclasses import dataclass, field
from typing import Optional

from models.color import Color
from models.enums import LogLevel
from models.state import ClockTimings


@dataclass(frozen=True)
class AppSettings:
    """
    Attributes:
        style: Name of the active style preset
        width, height: Surface size in pixels
        fps: Render loop frequency
        background: Surface clear color (a style may override it)
        output_path: PNG file rewritten on every frame, None = keep in memory
        timings: Update periods (shorter than real time for "fast time" demos)
        log_level, log_colors: Logger configuration
    """
    style: str = "standard"
    width: int = 420
    height: int = 420
    fps: int = 30
    background: Color = field(default_factory=Color.black)
    output_path: Optional[str] = None
    timings: ClockTimings = field(default_factory=ClockTimings)
    log_level: LogLevel = LogLevel.INFO
    log_colors: bool = True
