"""
Animation Clock

Owns the AnimationState and advances it with three independently paced
periodic updates, each in its own task. Seeded once from the wall clock.
"""

from __future__ import annotations
import asyncio
from typing import Callable, Dict, List, Optional, Type

from animations.base import BasePeriodicUpdate
from animations.clock_updates import FineSweepUpdate, HourUpdate, SecondUpdate
from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.enums import ClockUpdateID, LogCategory
from models.state import AnimationState, ClockTimings, WallTime
from services.time_source import IWallClock
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

# A loop that wakes up this far behind schedule resynchronises instead of
# replaying every missed tick.
MAX_CATCH_UP_TICKS = 1000

UPDATE_CLASSES: Dict[ClockUpdateID, Type[BasePeriodicUpdate]] = {
    ClockUpdateID.FINE_SWEEP: FineSweepUpdate,
    ClockUpdateID.SECOND: SecondUpdate,
    ClockUpdateID.HOUR: HourUpdate,
}


def _build_updates(timings: ClockTimings) -> Dict[ClockUpdateID, BasePeriodicUpdate]:
    periods = {
        ClockUpdateID.FINE_SWEEP: timings.fine_sweep_ms,
        ClockUpdateID.SECOND: timings.second_ms,
        ClockUpdateID.HOUR: timings.hour_ms,
    }
    return {update_id: cls(periods[update_id]) for update_id, cls in UPDATE_CLASSES.items()}


class AnimationClock:
    """
    Clock state machine.

    • Each update (fine sweep, second, hour) gets its own task
    • Each task writes exactly one AnimationState field
    • Listeners are called after every applied update (redraw hook)

    Example:
        clock = AnimationClock(SystemWallClock())
        clock.add_listener(renderer.mark_dirty)
        await clock.start()
        ...
        await clock.stop()
    """

    def __init__(self, wall_clock: IWallClock, timings: Optional[ClockTimings] = None):
        self.wall_clock = wall_clock
        self.timings = timings or ClockTimings()
        self.updates = _build_updates(self.timings)

        self._state = AnimationState()
        self._listeners: List[Callable[[], None]] = []

        # active tasks: update_id → asyncio.Task
        self.tasks: Dict[ClockUpdateID, asyncio.Task] = {}
        self.tick_counts: Dict[ClockUpdateID, int] = {uid: 0 for uid in self.updates}

        self._lock = asyncio.Lock()

        self.seed()

    # ============================================================
    # State
    # ============================================================

    def seed(self, wall_time: Optional[WallTime] = None) -> AnimationState:
        """
        Set the state from a wall-clock reading (polled from the source
        when not given). Negative rotations turn the dials clockwise.
        """
        wall_time = wall_time or self.wall_clock.now()

        self._state = AnimationState(
            second_rotation_deg=-wall_time.second * 6.0,
            minute_rotation_deg=-wall_time.minute * 6.0,
            hour_value=wall_time.hour,
        )
        self.tick_counts = {uid: 0 for uid in self.updates}

        log.info(
            "Clock seeded",
            time=f"{wall_time.hour:02d}:{wall_time.minute:02d}:{wall_time.second:02d}",
            second_rotation=f"{self._state.second_rotation_deg:.1f}°",
            minute_rotation=f"{self._state.minute_rotation_deg:.1f}°",
        )
        self._notify()
        return self.snapshot()

    def reset(self) -> AnimationState:
        """Re-seed from the wall clock."""
        return self.seed()

    def snapshot(self) -> AnimationState:
        """Copy of the current state, safe to hand to the renderer."""
        return self._state.copy()

    def tick(self, update_id: ClockUpdateID) -> None:
        """Apply one period's worth of `update_id` and notify listeners."""
        self.updates[update_id].apply(self._state)
        self.tick_counts[update_id] += 1
        self._notify()

    def tick_fine_sweep(self) -> None:
        self.tick(ClockUpdateID.FINE_SWEEP)

    def tick_second(self) -> None:
        self.tick(ClockUpdateID.SECOND)

    def tick_hour(self) -> None:
        self.tick(ClockUpdateID.HOUR)

    # ============================================================
    # Listeners
    # ============================================================

    def add_listener(self, listener: Callable[[], None]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            try:
                listener()
            except Exception as e:
                log.error(
                    f"Clock listener failed: {getattr(listener, '__name__', listener)}",
                    error=str(e),
                )

    # ============================================================
    # Lifecycle
    # ============================================================

    async def start(self, seed: bool = True) -> None:
        """Seed (optionally) and spawn one task per update."""
        async with self._lock:
            if self.tasks:
                log.warn("AnimationClock already running")
                return

            if seed:
                self.seed()

            for update_id, update in self.updates.items():
                self.tasks[update_id] = create_tracked_task(
                    self._run_loop(update),
                    category=TaskCategory.ANIMATION,
                    description=f"Clock update {update_id.name}",
                )

            log.info(
                "AnimationClock started",
                periods_ms=", ".join(f"{uid.name}={u.period_ms:g}" for uid, u in self.updates.items()),
            )

    async def stop(self) -> None:
        """Cancel all update tasks together."""
        async with self._lock:
            tasks = list(self.tasks.values())
            self.tasks.clear()

            for task in tasks:
                task.cancel()
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)

            log.info("AnimationClock stopped", ticks=self._format_tick_counts())

    def is_running(self) -> bool:
        return any(not t.done() for t in self.tasks.values())

    def _format_tick_counts(self) -> str:
        return ", ".join(f"{uid.name}={n}" for uid, n in self.tick_counts.items())

    # ------------------------------------------------------------
    # Internal update loop
    # ------------------------------------------------------------

    async def _run_loop(self, update: BasePeriodicUpdate) -> None:
        """
        Apply `update` once per period until cancelled.

        Each loop sleeps until its own next deadline on the event loop clock,
        so wake-up latency does not accumulate into drift. Ticks that came
        due while suspended are applied on wake-up.
        """
        loop = asyncio.get_running_loop()
        period = update.period_s
        next_fire = loop.time() + period
        update_id = update.UPDATE_ID

        log.debug(f"Update loop started for {update_id.name} every {update.period_ms:g}ms")
        try:
            while True:
                await asyncio.sleep(max(0.0, next_fire - loop.time()))

                due = 0
                now = loop.time()
                while next_fire <= now and due < MAX_CATCH_UP_TICKS:
                    self.tick(update_id)
                    next_fire += period
                    due += 1

                if next_fire <= now:
                    log.warn(f"{update_id.name} fell behind by more than {MAX_CATCH_UP_TICKS} ticks, resyncing")
                    next_fire = now + period

        except asyncio.CancelledError:
            log.debug(f"Update loop for {update_id.name} cancelled")
            raise
        except Exception as e:
            log.error(f"Update loop for {update_id.name} failed", error=str(e))
            raise
