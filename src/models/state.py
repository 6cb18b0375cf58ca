"""
Clock runtime state

AnimationState is mutated only by AnimationClock; everything else reads
copies obtained through AnimationClock.snapshot().
"""

from dataclasses import dataclass, replace


@dataclass
class AnimationState:
    """
    Attributes:
        second_rotation_deg: Outer dial rotation (negative = clockwise on screen)
        minute_rotation_deg: Inner dial rotation
        hour_value: Displayed hour, always 0-23
    """
    second_rotation_deg: float = 0.0
    minute_rotation_deg: float = 0.0
    hour_value: int = 0

    def copy(self) -> 'AnimationState':
        return replace(self)

    @property
    def hour_label(self) -> str:
        return f"{self.hour_value:02d}"


@dataclass(frozen=True)
class WallTime:
    """Wall-clock reading used to seed the animation"""
    hour: int
    minute: int
    second: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second out of range: {self.second}")


@dataclass(frozen=True)
class ClockTimings:
    """
    Periods (ms) of the three clock updates.

    Defaults are real time. Shorter periods give a "fast time" clock for
    debugging; per-tick deltas never change.
    """
    fine_sweep_ms: float = 16.0
    second_ms: float = 1000.0
    hour_ms: float = 3_600_000.0

    def __post_init__(self):
        for name in ("fine_sweep_ms", "second_ms", "hour_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
