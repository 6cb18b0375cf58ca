"""
Base Periodic Update

Every clock update inherits from BasePeriodicUpdate and implements apply().
"""

from models.enums import ClockUpdateID
from models.state import AnimationState


class BasePeriodicUpdate:
    """
    Base class for the clock's periodic state updates.

    One instance = ONE schedule. AnimationClock runs each instance in its
    own task and calls apply() once per elapsed period.

    Subclasses MUST define UPDATE_ID and implement apply(state), mutating
    exactly one AnimationState field.
    """
    UPDATE_ID: ClockUpdateID

    def __init__(self, period_ms: float):
        if period_ms <= 0:
            raise ValueError(f"{type(self).__name__}: period must be positive, got {period_ms}")
        self.period_ms = period_ms

    @property
    def period_s(self) -> float:
        return self.period_ms / 1000.0

    def apply(self, state: AnimationState) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(period_ms={self.period_ms})"
