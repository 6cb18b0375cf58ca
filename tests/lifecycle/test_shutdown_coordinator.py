import asyncio
import signal

import pytest
import pytest_asyncio

from animations.clock_animation import AnimationClock
from engine.clock_face import ClockFaceComposer
from engine.frame_renderer import FrameRenderer
from lifecycle.handlers import ClockShutdownHandler, RendererShutdownHandler, TaskCancellationHandler
from lifecycle.shutdown_coordinator import ShutdownCoordinator
from lifecycle.task_registry import TaskCategory, TaskRegistry, create_tracked_task


@pytest_asyncio.fixture
async def signalled_coordinator():
    coordinator = ShutdownCoordinator()
    loop = asyncio.get_running_loop()
    coordinator.setup_signal_handlers(loop)
    yield coordinator
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.remove_signal_handler(sig)


class RecordingHandler:

    def __init__(self, name, priority, calls, error=None, delay=0.0):
        self.name = name
        self._priority = priority
        self.calls = calls
        self.error = error
        self.delay = delay

    @property
    def shutdown_priority(self):
        return self._priority

    async def shutdown(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        self.calls.append(self.name)
        if self.error:
            raise self.error


class TestShutdownCoordinator:

    def test_register_rejects_incomplete_handler(self):
        with pytest.raises(ValueError):
            ShutdownCoordinator().register(object())

    @pytest.mark.asyncio
    async def test_handlers_run_by_priority(self):
        calls = []
        coordinator = ShutdownCoordinator()
        coordinator.register(RecordingHandler("tasks", 40, calls))
        coordinator.register(RecordingHandler("renderer", 120, calls))
        coordinator.register(RecordingHandler("clock", 100, calls))

        await coordinator.shutdown_all()
        assert calls == ["renderer", "clock", "tasks"]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_sequence(self):
        calls = []
        coordinator = ShutdownCoordinator()
        coordinator.register(RecordingHandler("first", 2, calls, error=RuntimeError("boom")))
        coordinator.register(RecordingHandler("second", 1, calls))

        await coordinator.shutdown_all()
        assert calls == ["first", "second"]

    @pytest.mark.asyncio
    async def test_slow_handler_times_out(self):
        calls = []
        coordinator = ShutdownCoordinator(timeout_per_handler=0.01)
        coordinator.register(RecordingHandler("slow", 2, calls, delay=1.0))
        coordinator.register(RecordingHandler("fast", 1, calls))

        await coordinator.shutdown_all()
        assert calls == ["fast"]

    def test_get_handler(self):
        coordinator = ShutdownCoordinator()
        handler = RecordingHandler("x", 1, [])
        coordinator.register(handler)
        assert coordinator.get_handler(RecordingHandler) is handler
        assert coordinator.get_handler(TaskCancellationHandler) is None

    @pytest.mark.asyncio
    async def test_wait_requires_setup(self):
        with pytest.raises(RuntimeError):
            await ShutdownCoordinator().wait_for_shutdown()

    @pytest.mark.asyncio
    async def test_wait_returns_on_request(self):
        coordinator = ShutdownCoordinator()
        coordinator.request_shutdown("test")
        await asyncio.wait_for(coordinator.wait_for_shutdown(), timeout=1.0)
        assert coordinator.reason == "test"

    @pytest.mark.asyncio
    async def test_wait_returns_on_critical_task_failure(self, signalled_coordinator):
        async def failing():
            await asyncio.sleep(0.01)
            raise RuntimeError("render crashed")

        create_tracked_task(failing(), category=TaskCategory.RENDER, description="render loop")
        await asyncio.wait_for(signalled_coordinator.wait_for_shutdown(poll_interval=0.01), timeout=1.0)

        assert signalled_coordinator.reason == "Task failure: render loop"

    @pytest.mark.asyncio
    async def test_non_critical_failure_ignored(self, signalled_coordinator):
        async def failing():
            raise RuntimeError("not important")

        task = create_tracked_task(failing(), category=TaskCategory.GENERAL, description="general")
        await asyncio.gather(task, return_exceptions=True)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(signalled_coordinator.wait_for_shutdown(poll_interval=0.01), timeout=0.05)
        assert signalled_coordinator.reason is None


class TestClockShutdownSequence:

    @pytest.mark.asyncio
    async def test_handlers_stop_everything(self, surface, clock_config, wall_clock, fast_timings):
        clock = AnimationClock(wall_clock, timings=fast_timings)
        renderer = FrameRenderer(surface, ClockFaceComposer(clock_config), clock, fps=120)
        await clock.start()
        await renderer.start()

        async def stray():
            await asyncio.sleep(10)

        create_tracked_task(stray(), category=TaskCategory.GENERAL, description="stray")

        coordinator = ShutdownCoordinator()
        coordinator.register(RendererShutdownHandler(renderer))
        coordinator.register(ClockShutdownHandler(clock))
        coordinator.register(TaskCancellationHandler())
        await coordinator.shutdown_all()

        assert not renderer.running
        assert not clock.is_running()
        assert TaskRegistry.instance().active() == []
