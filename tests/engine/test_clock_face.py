import pytest

from engine.clock_face import ClockFaceComposer
from models.color import Color
from models.state import AnimationState
from models.style import ClockConfiguration
from surfaces.recording_surface import RecordingSurface


class TestClockFaceComposer:

    def test_full_frame_contents(self, surface, clock_config):
        ClockFaceComposer(clock_config).draw(surface, AnimationState(hour_value=10))

        assert len(surface.lines) == 120
        assert len(surface.texts) == 25
        assert len(surface.paths) == 1

    def test_dial_radii(self, surface, clock_config):
        ClockFaceComposer(clock_config).draw(surface, AnimationState())

        outer_first, inner_first = surface.lines[0], surface.lines[60]
        assert outer_first.start.x == pytest.approx(400.0)
        # inner radius = 200 - 60
        assert inner_first.start.x == pytest.approx(340.0)

    def test_dials_follow_their_own_rotation(self, surface, clock_config):
        state = AnimationState(second_rotation_deg=-90.0, minute_rotation_deg=0.0)
        ClockFaceComposer(clock_config).draw(surface, state)

        # seconds step 0 moved to 6 o'clock, minutes step 0 still at 3 o'clock
        assert surface.lines[0].start.y == pytest.approx(400.0)
        assert surface.lines[60].start.y == pytest.approx(200.0)

    def test_hour_label_centred(self, surface, clock_config):
        ClockFaceComposer(clock_config).draw(surface, AnimationState(hour_value=7))

        (hour,) = [t for t in surface.texts if t.style == clock_config.hour_label_text_style]
        assert hour.text == "07"
        assert hour.rotations == ()
        # "07" at 60px is 72 x 72 on the recording surface
        assert hour.top_left.x == pytest.approx(200.0 - 36.0)
        assert hour.top_left.y == pytest.approx(200.0 - 36.0)

    def test_overlay_drawn_last_with_style(self, surface):
        config = ClockConfiguration(overlay_stroke_color=Color.white(), overlay_stroke_width=3.0)
        ClockFaceComposer(config).draw(surface, AnimationState())

        last = surface.ops[-1]
        assert last is surface.paths[0]
        assert last.color == Color.white()
        assert last.width == 3.0

    def test_non_square_surface_uses_smaller_side(self, clock_config):
        surface = RecordingSurface(600, 400)
        ClockFaceComposer(clock_config).draw(surface, AnimationState())
        assert surface.lines[0].start.x == pytest.approx(300.0 + 200.0)

    @pytest.mark.parametrize("w, h", [(0, 0), (0, 300), (300, 0)])
    def test_empty_surface_draws_nothing(self, clock_config, w, h):
        surface = RecordingSurface(w, h)
        ClockFaceComposer(clock_config).draw(surface, AnimationState())
        assert surface.ops == []

    def test_small_surface_skips_inner_dial(self, clock_config):
        # outer radius 50, inner radius 50 - 60 < 0
        surface = RecordingSurface(100, 100)
        ClockFaceComposer(clock_config).draw(surface, AnimationState())
        assert len(surface.lines) == 60

    def test_same_inputs_same_frame(self, clock_config):
        a, b = RecordingSurface(400, 400), RecordingSurface(400, 400)
        state = AnimationState(-33.3, -12.1, 4)
        ClockFaceComposer(clock_config).draw(a, state)
        ClockFaceComposer(clock_config).draw(b, state)
        assert a.ops == b.ops
