"""
FrameRenderer shutdown handler.

Stops the render loop before the clock so no frame is drawn from a
half-stopped state.
"""

from __future__ import annotations

from engine.frame_renderer import FrameRenderer
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class RendererShutdownHandler(IShutdownHandler):

    def __init__(self, renderer: FrameRenderer):
        self.renderer = renderer

    @property
    def shutdown_priority(self) -> int:
        return 120  # stop rendering first

    async def shutdown(self) -> None:
        log.info("Stopping FrameRenderer...")
        await self.renderer.stop()
