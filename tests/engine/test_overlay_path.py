import math

import pytest

from engine.overlay_path import OVERLAY_HALF_ANGLE_DEG, OverlayPathBuilder
from models.geometry import Point2D
from models.path import CubicTo, LineTo, MoveTo
from models.style import ClockConfiguration, DialConfiguration, TextStyle

CENTER = Point2D(200.0, 200.0)


class TestOverlayLineX:

    def test_default_configuration(self, surface, clock_config):
        # "60" at 14px measures 16.8 wide on the recording surface
        x = OverlayPathBuilder(surface).overlay_line_x(clock_config, 400.0)
        assert x == pytest.approx(400.0 - 20 - 0 - 16.8 - 20 - 0 - 8.4)

    def test_uses_live_label_measurement(self, surface):
        big_labels = ClockConfiguration(
            seconds_dial_style=DialConfiguration(label_text_style=TextStyle(font_size=20)),
            minutes_dial_style=DialConfiguration(label_text_style=TextStyle(font_size=20)),
        )
        builder = OverlayPathBuilder(surface)
        assert builder.overlay_line_x(big_labels, 400.0) < builder.overlay_line_x(ClockConfiguration(), 400.0)

    def test_padding_moves_line_inward(self, surface):
        padded = ClockConfiguration(
            seconds_dial_style=DialConfiguration(label_top_padding=20),
            minutes_dial_style=DialConfiguration(label_top_padding=20),
        )
        builder = OverlayPathBuilder(surface)
        delta = builder.overlay_line_x(ClockConfiguration(), 400.0) - builder.overlay_line_x(padded, 400.0)
        assert delta == pytest.approx(40.0)


class TestBuildOverlayPath:

    def test_segment_sequence(self, surface, clock_config):
        path = OverlayPathBuilder(surface).build_overlay_path(CENTER, 200.0, clock_config, 400.0)
        assert [type(s) for s in path.segments] == [MoveTo, LineTo, CubicTo, LineTo]

    def test_endpoints_straddle_three_oclock(self, surface, clock_config):
        path = OverlayPathBuilder(surface).build_overlay_path(CENTER, 200.0, clock_config, 400.0)
        half = math.radians(OVERLAY_HALF_ANGLE_DEG)

        start, end = path.start_point, path.end_point
        assert start.x == pytest.approx(200.0 + 200.0 * math.cos(half))
        assert start.y == pytest.approx(200.0 - 200.0 * math.sin(half))
        assert end.x == pytest.approx(start.x)
        assert end.y == pytest.approx(200.0 + 200.0 * math.sin(half))

    def test_notch_shape(self, surface, clock_config):
        builder = OverlayPathBuilder(surface)
        path = builder.build_overlay_path(CENTER, 200.0, clock_config, 400.0)
        line_x = builder.overlay_line_x(clock_config, 400.0)
        _, top_line, curve, _ = path.segments

        radius = 200.0 * math.sin(math.radians(OVERLAY_HALF_ANGLE_DEG))
        assert top_line.point.x == pytest.approx(line_x)
        assert top_line.point.y == pytest.approx(path.start_point.y)
        assert curve.control1.x == pytest.approx(line_x - radius)
        assert curve.control2.x == pytest.approx(line_x - radius)
        assert curve.point == Point2D(line_x, path.end_point.y)
