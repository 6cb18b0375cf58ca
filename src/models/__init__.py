"""
Models package - Data models for the clock face renderer
"""

from .enums import LogLevel, LogCategory, StrokeCap, ClockUpdateID
from .color import Color
from .geometry import Point2D, Size
from .style import TextStyle, DialConfiguration, ClockConfiguration
from .state import AnimationState, WallTime, ClockTimings
from .path import OverlayPath
from .settings import AppSettings

__all__ = [
    'LogLevel',
    'LogCategory',
    'StrokeCap',
    'ClockUpdateID',
    'Color',
    'Point2D',
    'Size',
    'TextStyle',
    'DialConfiguration',
    'ClockConfiguration',
    'AnimationState',
    'WallTime',
    'ClockTimings',
    'OverlayPath',
    'AppSettings',
]
