"""
Shutdown coordinator that orchestrates graceful shutdown of all components.

Manages signal handlers, shutdown sequencing, and error handling across
multiple shutdown handlers in priority order.
"""

import asyncio
import signal
from typing import Dict, List, Optional, Set

from lifecycle.shutdown_protocol import IShutdownHandler
from lifecycle.task_registry import TaskCategory, TaskRegistry
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)

# Categories whose failure ends the application
CRITICAL_CATEGORIES: Set[TaskCategory] = {TaskCategory.ANIMATION, TaskCategory.RENDER}


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of the clock application.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(RendererShutdownHandler(renderer))
        coordinator.register(ClockShutdownHandler(clock))

        coordinator.setup_signal_handlers(loop)
        await coordinator.wait_for_shutdown()
        await coordinator.shutdown_all()
    """

    def __init__(
        self,
        timeout_per_handler: float = 5.0,
        total_timeout: float = 15.0,
        registry: Optional[TaskRegistry] = None,
    ):
        self._handlers: List[IShutdownHandler] = []
        self._shutdown_event: Optional[asyncio.Event] = None
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._registry = registry or TaskRegistry.instance()
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}

    @property
    def reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def register(self, handler: IShutdownHandler) -> None:
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """Install SIGINT/SIGTERM handlers that trigger shutdown."""
        self._ensure_event()

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, lambda s=sig: self.request_shutdown(s.name))

        log.info("Signal handlers installed (SIGINT, SIGTERM)")

    def request_shutdown(self, reason: str) -> None:
        """Trigger shutdown programmatically (signal handlers end up here too)."""
        self._ensure_event()
        self._shutdown_trigger["reason"] = reason
        log.info(f"Shutdown requested: {reason}")
        self._shutdown_event.set()

    def _ensure_event(self) -> asyncio.Event:
        if self._shutdown_event is None:
            self._shutdown_event = asyncio.Event()
        return self._shutdown_event

    def _failed_critical_task(self) -> Optional[str]:
        for record in self._registry.failed():
            if record.info.category in CRITICAL_CATEGORIES:
                return record.info.description
        return None

    async def wait_for_shutdown(self, poll_interval: float = 0.2) -> None:
        """
        Return once a shutdown was requested or a critical task failed.

        Raises:
            RuntimeError: If neither signal handlers nor request_shutdown set things up
        """
        if self._shutdown_event is None:
            raise RuntimeError("Call setup_signal_handlers() first")

        while not self._shutdown_event.is_set():
            failed = self._failed_critical_task()
            if failed:
                log.error(f"❌ Critical task failed: {failed}")
                self._shutdown_trigger["reason"] = f"Task failure: {failed}"
                return

            try:
                await asyncio.wait_for(self._shutdown_event.wait(), timeout=poll_interval)
            except asyncio.TimeoutError:
                pass

        log.debug("Shutdown triggered")

    async def shutdown_all(self) -> None:
        """
        Run every handler in descending priority order.

        Each handler has its own timeout; the whole sequence stops once
        total_timeout is exceeded. A failing handler does not stop the rest.
        """
        log.info("🛑 Initiating graceful shutdown sequence...")
        log.info(f"   Reason: {self.reason or 'UNKNOWN'}")

        sorted_handlers = sorted(self._handlers, key=lambda h: h.shutdown_priority, reverse=True)
        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(f"⚠️  Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)")
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"✓ {handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(f"⚠️  {handler_name} shutdown timeout ({self._timeout_per_handler}s)")

            except asyncio.CancelledError:
                log.warn("Shutdown sequence was cancelled")
                raise

            except Exception as e:
                log.error(f"❌ Error shutting down {handler_name}: {e}")

        log.info("✓ Shutdown sequence complete")

    def get_handler(self, handler_type: type) -> Optional[IShutdownHandler]:
        for handler in self._handlers:
            if isinstance(handler, handler_type):
                return handler
        return None
