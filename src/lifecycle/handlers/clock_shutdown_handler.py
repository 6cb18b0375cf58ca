from __future__ import annotations

from animations.clock_animation import AnimationClock
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ClockShutdownHandler(IShutdownHandler):
    """
    Cancels the periodic clock updates.

    Priority: 100
    """

    def __init__(self, clock: AnimationClock):
        self.clock = clock

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        log.info("Stopping AnimationClock...")
        await self.clock.stop()
