"""
Shutdown handler protocol for component-based graceful shutdown.

Each component that needs cleanup implements IShutdownHandler to take part
in the shutdown sequence.
"""

from typing import Protocol


class IShutdownHandler(Protocol):
    """
    Protocol for components that need graceful shutdown.

    The ShutdownCoordinator calls shutdown() on each handler in priority order.

    Example:
        class RendererShutdownHandler:
            @property
            def shutdown_priority(self) -> int:
                return 120  # stop drawing first

            async def shutdown(self) -> None:
                await self.renderer.stop()
    """

    @property
    def shutdown_priority(self) -> int:
        """
        Higher priority shuts down earlier.
        """
        ...

    async def shutdown(self) -> None:
        """
        Called during coordinated shutdown.
        """
        ...
