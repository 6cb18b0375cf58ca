import pytest

from models.state import AnimationState, ClockTimings, WallTime
from models.style import DialConfiguration


class TestAnimationState:

    def test_hour_label_zero_padded(self):
        assert AnimationState(hour_value=7).hour_label == "07"
        assert AnimationState(hour_value=23).hour_label == "23"

    def test_copy_is_independent(self):
        state = AnimationState(second_rotation_deg=-10.0)
        copy = state.copy()
        copy.second_rotation_deg = 5.0
        assert state.second_rotation_deg == -10.0


class TestWallTime:

    @pytest.mark.parametrize("h, m, s", [(24, 0, 0), (0, 60, 0), (0, 0, 60), (-1, 0, 0)])
    def test_out_of_range(self, h, m, s):
        with pytest.raises(ValueError):
            WallTime(h, m, s)


class TestClockTimings:

    def test_defaults(self):
        t = ClockTimings()
        assert (t.fine_sweep_ms, t.second_ms, t.hour_ms) == (16.0, 1000.0, 3_600_000.0)

    def test_non_positive_period_rejected(self):
        with pytest.raises(ValueError):
            ClockTimings(second_ms=0)


class TestDialConfiguration:

    def test_fixed_layout(self):
        dial = DialConfiguration()
        assert dial.tick_count == 60
        assert dial.emphasis_interval == 5
        assert dial.tick_angle_step == 6.0

    def test_tick_lengths(self):
        dial = DialConfiguration(normal_tick_length=8, emphasis_tick_length=16)
        assert dial.tick_length(0) == 16
        assert dial.tick_length(1) == 8
        assert dial.tick_length(55) == 16
