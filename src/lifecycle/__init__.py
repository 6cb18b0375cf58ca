"""
Lifecycle subsystem
-------------------

Exports the public API for:
- graceful shutdown
- task tracking & introspection

Shutdown handlers live in lifecycle.handlers (they depend on the engine and
animation packages, so they are not imported here):
    from lifecycle import ShutdownCoordinator, TaskRegistry
    from lifecycle.handlers import RendererShutdownHandler
"""

from .shutdown_coordinator import ShutdownCoordinator
from .task_registry import TaskRegistry, TaskCategory, TaskInfo, create_tracked_task
from .shutdown_protocol import IShutdownHandler

__all__ = [
    "ShutdownCoordinator",
    "TaskRegistry",
    "TaskCategory",
    "TaskInfo",
    "IShutdownHandler",
    "create_tracked_task",
]
