"""
Clock updates

Fine sweep: 1000 ms / 16 ms = 62.5 ticks * 0.096° ≈ 6° per second, one outer
dial step per second spread into sub-tick increments.

Second: 60 ticks * 0.1° = 6° per minute, one inner dial step per minute.

Hour: label +1, wrapping at 24.

Rotations decrease because a negative angle turns clockwise on screen.
"""

from animations.base import BasePeriodicUpdate
from models.enums import ClockUpdateID
from models.state import AnimationState


class FineSweepUpdate(BasePeriodicUpdate):
    """Outer (seconds) dial sweep"""

    UPDATE_ID = ClockUpdateID.FINE_SWEEP
    DELTA_DEG = 0.096

    def apply(self, state: AnimationState) -> None:
        state.second_rotation_deg -= self.DELTA_DEG


class SecondUpdate(BasePeriodicUpdate):
    """Inner (minutes) dial advance, once per wall-clock second"""

    UPDATE_ID = ClockUpdateID.SECOND
    DELTA_DEG = 0.1

    def apply(self, state: AnimationState) -> None:
        state.minute_rotation_deg -= self.DELTA_DEG


class HourUpdate(BasePeriodicUpdate):
    """Hour label increment"""

    UPDATE_ID = ClockUpdateID.HOUR

    def apply(self, state: AnimationState) -> None:
        state.hour_value = (state.hour_value + 1) % 24
