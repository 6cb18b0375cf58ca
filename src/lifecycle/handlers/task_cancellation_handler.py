from __future__ import annotations
import asyncio
from typing import List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from lifecycle.task_registry import TaskRegistry
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class TaskCancellationHandler(IShutdownHandler):
    """
    Cancels whatever tracked tasks are still running once the components
    have stopped their own.

    Priority: 40
    """

    def __init__(self, registry: Optional[TaskRegistry] = None, exclude: Optional[List[asyncio.Task]] = None):
        self.registry = registry or TaskRegistry.instance()
        self.exclude = exclude or []

    @property
    def shutdown_priority(self) -> int:
        return 40

    async def shutdown(self) -> None:
        tasks = self.registry.get_tasks_for_shutdown(exclude=self.exclude)
        log.info(f"Cancelling {len(tasks)} leftover background task(s)...")

        for task in tasks:
            task.cancel()
            log.debug(f"Cancelled task: {task.get_name()}")

        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        log.debug("All tasks cancelled")
