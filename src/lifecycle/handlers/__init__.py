from .clock_shutdown_handler import ClockShutdownHandler
from .renderer_shutdown_handler import RendererShutdownHandler
from .task_cancellation_handler import TaskCancellationHandler

__all__ = [
    "ClockShutdownHandler",
    "RendererShutdownHandler",
    "TaskCancellationHandler",
]
