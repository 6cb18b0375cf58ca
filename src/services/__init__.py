"""Services layer"""

from .time_source import IWallClock, SystemWallClock, FixedWallClock

__all__ = [
    "IWallClock",
    "SystemWallClock",
    "FixedWallClock",
]
