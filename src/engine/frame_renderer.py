"""
FrameRenderer — redraws the clock face at a fixed frame rate.

The clock marks the renderer dirty on every applied update; the render loop
draws only when something changed since the last frame (the first frame is
always drawn).
"""

from __future__ import annotations
import asyncio
import time
from collections import deque
from typing import Deque, Dict, Optional

from animations.clock_animation import AnimationClock
from engine.clock_face import ClockFaceComposer
from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.enums import LogCategory
from surfaces.surface_interface import IDrawingSurface
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)

MIN_FPS = 1
MAX_FPS = 120


class FrameRenderer:
    """
    Render loop.

    Manages:
    - Dirty tracking driven by clock listeners
    - Clear → draw → flush per frame
    - Performance metrics
    """

    def __init__(
        self,
        surface: IDrawingSurface,
        composer: ClockFaceComposer,
        clock: AnimationClock,
        fps: int = 60,
    ):
        self.surface = surface
        self.composer = composer
        self.clock = clock
        self.fps = max(MIN_FPS, min(fps, MAX_FPS))

        self.running = False
        self.render_task: Optional[asyncio.Task] = None
        self._dirty = True

        self.frame_times: Deque[float] = deque(maxlen=300)
        self.frames_rendered = 0
        self.frames_skipped = 0
        self.render_errors = 0

        self.clock.add_listener(self.mark_dirty)

        log.info(
            "FrameRenderer initialized",
            fps=self.fps,
            surface=f"{surface.width}x{surface.height}",
        )

    def mark_dirty(self) -> None:
        self._dirty = True

    @property
    def dirty(self) -> bool:
        return self._dirty

    # === Lifecycle ===

    async def start(self) -> None:
        """Start the render loop."""
        if self.running:
            log.warn("FrameRenderer already running")
            return

        self.clock.add_listener(self.mark_dirty)
        self._dirty = True
        self.running = True
        self.render_task = create_tracked_task(
            self._render_loop(),
            category=TaskCategory.RENDER,
            description="Clock render loop",
        )
        log.info(f"FrameRenderer render loop started @ {self.fps} FPS")

    async def stop(self) -> None:
        """Stop the render loop."""
        if not self.running:
            return
        self.running = False
        self.clock.remove_listener(self.mark_dirty)
        if self.render_task:
            self.render_task.cancel()
            try:
                await self.render_task
            except asyncio.CancelledError:
                pass
            self.render_task = None

        log.info(
            "FrameRenderer stopped",
            frames_rendered=self.frames_rendered,
            frames_skipped=self.frames_skipped,
        )

    # === Rendering ===

    def render_once(self) -> None:
        """Draw one frame of the current clock state. Errors propagate."""
        state = self.clock.snapshot()

        self.surface.clear()
        self.composer.draw(self.surface, state)
        self.surface.flush()
        self._dirty = False

        self.frames_rendered += 1
        self.frame_times.append(time.perf_counter())

    async def _render_loop(self) -> None:
        frame_delay = 1.0 / self.fps
        log.info(f"Render loop @ {self.fps} FPS (delay={frame_delay*1000:.2f}ms)")

        while self.running:
            try:
                if self._dirty:
                    self.render_once()
                else:
                    self.frames_skipped += 1
            except Exception as e:
                self.render_errors += 1
                log.error(f"Render error: {e}")

            await asyncio.sleep(frame_delay)

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Measured FPS over recent frames."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return (len(self.frame_times) - 1) / duration

    def get_metrics(self) -> Dict:
        return {
            "fps_target": self.fps,
            "fps_actual": self.get_actual_fps(),
            "frames_rendered": self.frames_rendered,
            "frames_skipped": self.frames_skipped,
            "render_errors": self.render_errors,
        }

    def __repr__(self) -> str:
        metrics = self.get_metrics()
        return (
            f"FrameRenderer(fps={metrics['fps_actual']:.1f}/{metrics['fps_target']}, "
            f"rendered={metrics['frames_rendered']}, "
            f"skipped={metrics['frames_skipped']})"
        )
