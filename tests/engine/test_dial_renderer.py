import math

import pytest

from engine.dial_renderer import DialRenderer, step_label
from models.color import Color
from models.enums import StrokeCap
from models.geometry import Point2D
from models.style import DialConfiguration, TextStyle
from surfaces.recording_surface import RecordingSurface

CENTER = Point2D(200.0, 200.0)


@pytest.fixture
def dial_config():
    return DialConfiguration(
        tick_color=Color.white().with_alpha(0.8),
        label_top_padding=20.0,
        label_text_style=TextStyle(color=Color.white(), font_size=20),
    )


class TestStepLabel:

    @pytest.mark.parametrize("index, label", [(0, "00"), (5, "05"), (30, "30"), (55, "55")])
    def test_two_digits(self, index, label):
        assert step_label(index) == label


class TestTickGeometry:

    def test_sixty_ticks_twelve_labels(self, dial_config):
        ticks = DialRenderer.tick_geometry(CENTER, 200.0, 0.0, dial_config)
        labels = [t.label for t in ticks if t.is_emphasis]

        assert len(ticks) == 60
        assert labels == [f"{i:02d}" for i in range(0, 60, 5)]
        assert all(t.label is None for t in ticks if not t.is_emphasis)

    def test_step_zero_at_three_oclock(self, dial_config):
        tick = DialRenderer.tick_geometry(CENTER, 200.0, 0.0, dial_config)[0]
        assert tick.start.x == pytest.approx(400.0)
        assert tick.start.y == pytest.approx(200.0)
        # emphasis tick is 20 long
        assert tick.end.x == pytest.approx(380.0)

    def test_normal_tick_length(self, dial_config):
        tick = DialRenderer.tick_geometry(CENTER, 200.0, 0.0, dial_config)[15 + 1]
        length = math.hypot(tick.start.x - tick.end.x, tick.start.y - tick.end.y)
        assert length == pytest.approx(10.0)

    def test_step_fifteen_points_up(self, dial_config):
        tick = DialRenderer.tick_geometry(CENTER, 200.0, 0.0, dial_config)[15]
        assert tick.angle_deg == pytest.approx(90.0)
        assert tick.start.x == pytest.approx(200.0)
        assert tick.start.y == pytest.approx(0.0)

    def test_rotation_shifts_every_tick(self, dial_config):
        tick = DialRenderer.tick_geometry(CENTER, 200.0, -90.0, dial_config)[15]
        assert tick.angle_deg == pytest.approx(0.0)
        assert tick.start.x == pytest.approx(400.0)
        assert tick.start.y == pytest.approx(200.0)

    def test_label_counter_rotates(self, dial_config):
        ticks = DialRenderer.tick_geometry(CENTER, 200.0, -30.0, dial_config)
        assert ticks[5].label_rotation_deg == pytest.approx(0.0)
        assert ticks[10].label_rotation_deg == pytest.approx(-30.0)
        assert ticks[0].label_rotation_deg == pytest.approx(30.0)

    def test_label_pivot_inside_tick(self, dial_config):
        tick = DialRenderer.tick_geometry(CENTER, 200.0, 0.0, dial_config)[0]
        # radius - emphasis length - padding = 200 - 20 - 20
        assert tick.label_pivot.x == pytest.approx(360.0)
        assert tick.label_pivot.y == pytest.approx(200.0)


class TestDrawDial:

    def test_draws_ticks_and_labels(self, surface, dial_config):
        DialRenderer(surface).draw_dial(CENTER, 200.0, 0.0, dial_config)

        assert len(surface.lines) == 60
        assert len(surface.texts) == 12
        assert all(line.cap is StrokeCap.ROUND for line in surface.lines)
        assert all(line.color == dial_config.tick_color for line in surface.lines)
        assert all(line.width == 2.0 for line in surface.lines)

    def test_labels_drawn_in_rotation_scope(self, surface, dial_config):
        DialRenderer(surface).draw_dial(CENTER, 200.0, -12.0, dial_config)
        ticks = DialRenderer.tick_geometry(CENTER, 200.0, -12.0, dial_config)
        emphasis = [t for t in ticks if t.is_emphasis]

        for text, tick in zip(surface.texts, emphasis):
            assert text.text == tick.label
            assert text.rotations == ((tick.label_rotation_deg, tick.label_pivot),)
            assert text.style == dial_config.label_text_style

    @pytest.mark.parametrize("radius", [0.0, -5.0])
    def test_degenerate_radius_draws_nothing(self, surface, dial_config, radius):
        DialRenderer(surface).draw_dial(CENTER, radius, 0.0, dial_config)
        assert surface.ops == []

    def test_deterministic_across_surfaces(self, dial_config):
        a, b = RecordingSurface(400, 400), RecordingSurface(400, 400)
        DialRenderer(a).draw_dial(CENTER, 180.0, -47.3, dial_config)
        DialRenderer(b).draw_dial(CENTER, 180.0, -47.3, dial_config)
        assert a.ops == b.ops
