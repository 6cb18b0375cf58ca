"""
Enums for the clock face renderer
"""

from enum import Enum, auto


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()         # Configuration loading, style presets
    ANIMATION = auto()      # Clock updates, seeding, start/stop
    RENDER_ENGINE = auto()  # Frame rendering, dial/overlay drawing
    SURFACE = auto()        # Drawing surfaces, PNG output
    SYSTEM = auto()         # Startup, shutdown, errors

    SHUTDOWN = auto()
    TASK = auto()

    GENERAL = auto()    # Default general category


class StrokeCap(Enum):
    """Line end decoration"""
    BUTT = auto()
    ROUND = auto()
    SQUARE = auto()


class ClockUpdateID(Enum):
    """
    Periodic clock updates, each running on its own schedule

    FINE_SWEEP: outer (seconds) dial sub-tick sweep
    SECOND: inner (minutes) dial advance, once per wall-clock second
    HOUR: hour label increment
    """
    FINE_SWEEP = auto()
    SECOND = auto()
    HOUR = auto()
