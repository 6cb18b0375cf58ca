import pytest

from models.color import Color
from models.enums import StrokeCap
from models.geometry import Point2D
from models.style import TextStyle
from surfaces.recording_surface import LineOp, RecordingSurface, TextOp


class TestRecordingSurface:

    def test_geometry(self):
        surface = RecordingSurface(300, 200)
        assert surface.center == Point2D(150, 100)

    def test_records_rotation_scope(self):
        surface = RecordingSurface(100, 100)
        pivot = Point2D(10, 10)

        with surface.rotated(30.0, pivot):
            surface.draw_text("05", Point2D(0, 0), TextStyle())
        surface.draw_line(Point2D(0, 0), Point2D(1, 1), Color.white(), 2.0, StrokeCap.ROUND)

        text, line = surface.ops
        assert isinstance(text, TextOp)
        assert text.rotations == ((30.0, pivot),)
        assert isinstance(line, LineOp)
        assert line.rotations == ()
        assert line.cap is StrokeCap.ROUND

    def test_nested_scopes_compose(self):
        surface = RecordingSurface(100, 100)
        origin = Point2D(0, 0)
        with surface.rotated(45.0, origin):
            with surface.rotated(45.0, origin):
                assert surface.total_rotation() == pytest.approx(90.0)
                p = surface.transform_point(Point2D(10, 0))
        assert p.x == pytest.approx(0.0, abs=1e-9)
        assert p.y == pytest.approx(10.0)
        assert surface.rotation_stack == ()

    def test_scope_popped_on_error(self):
        surface = RecordingSurface(100, 100)
        with pytest.raises(RuntimeError):
            with surface.rotated(10.0, Point2D(0, 0)):
                raise RuntimeError("boom")
        assert surface.rotation_stack == ()

    def test_measure_is_deterministic(self):
        surface = RecordingSurface(100, 100)
        size = surface.measure_text("60", TextStyle(font_size=10))
        assert size.width == pytest.approx(12.0)
        assert size.height == pytest.approx(12.0)
        assert surface.measure_calls == 1

    def test_clear_and_flush(self):
        surface = RecordingSurface(100, 100)
        surface.draw_text("x", Point2D(0, 0), TextStyle())
        surface.clear()
        surface.flush()
        assert surface.ops == []
        assert surface.flush_count == 1
