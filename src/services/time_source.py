"""
Wall-clock sources

The clock only reads the wall clock when it is seeded; afterwards time is
advanced by the periodic updates alone.
"""

from datetime import datetime
from typing import Callable, Optional, Protocol

from models.state import WallTime


class IWallClock(Protocol):
    def now(self) -> WallTime:
        ...


class SystemWallClock:
    """Local time of the host"""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now

    def now(self) -> WallTime:
        t = self._clock()
        return WallTime(hour=t.hour, minute=t.minute, second=t.second)


class FixedWallClock:
    """Always returns the same reading (tests, screenshot builds)"""

    def __init__(self, hour: int = 10, minute: int = 9, second: int = 0):
        self._time = WallTime(hour, minute, second)

    def set(self, hour: int, minute: int, second: int) -> None:
        self._time = WallTime(hour, minute, second)

    def now(self) -> WallTime:
        return self._time
