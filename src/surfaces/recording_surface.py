"""
RecordingSurface - captures drawing calls instead of rasterizing.

Used by tests and dry runs to inspect exactly what the renderers emit.
Text metrics are deterministic (monospace approximation), so geometry
derived from measurements is reproducible.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Union

from models.color import Color
from models.enums import StrokeCap
from models.geometry import Point2D, Size
from models.path import OverlayPath
from models.style import TextStyle
from surfaces.surface_interface import BaseSurface, IDrawingSurface

RotationStack = Tuple[Tuple[float, Point2D], ...]

CHAR_WIDTH_FACTOR = 0.6
LINE_HEIGHT_FACTOR = 1.2


@dataclass(frozen=True)
class LineOp:
    start: Point2D
    end: Point2D
    color: Color
    width: float
    cap: StrokeCap
    rotations: RotationStack = ()


@dataclass(frozen=True)
class PathOp:
    path: OverlayPath
    color: Color
    width: float
    rotations: RotationStack = ()


@dataclass(frozen=True)
class TextOp:
    text: str
    top_left: Point2D
    style: TextStyle
    rotations: RotationStack = ()


DrawOp = Union[LineOp, PathOp, TextOp]


class RecordingSurface(BaseSurface, IDrawingSurface):

    def __init__(self, width: float, height: float):
        super().__init__(width, height)
        self.ops: List[DrawOp] = []
        self.flush_count = 0
        self.measure_calls = 0

    def draw_line(self, start: Point2D, end: Point2D, color: Color, width: float,
                  cap: StrokeCap = StrokeCap.BUTT) -> None:
        self.ops.append(LineOp(start, end, color, width, cap, self.rotation_stack))

    def draw_path(self, path: OverlayPath, color: Color, width: float) -> None:
        self.ops.append(PathOp(path, color, width, self.rotation_stack))

    def draw_text(self, text: str, top_left: Point2D, style: TextStyle) -> None:
        self.ops.append(TextOp(text, top_left, style, self.rotation_stack))

    def measure_text(self, text: str, style: TextStyle) -> Size:
        self.measure_calls += 1
        return Size(
            len(text) * style.font_size * CHAR_WIDTH_FACTOR,
            style.font_size * LINE_HEIGHT_FACTOR,
        )

    def clear(self) -> None:
        self.ops = []

    def flush(self) -> None:
        self.flush_count += 1

    # ------------------------------------------------------------
    # Inspection helpers
    # ------------------------------------------------------------

    @property
    def lines(self) -> List[LineOp]:
        return [op for op in self.ops if isinstance(op, LineOp)]

    @property
    def paths(self) -> List[PathOp]:
        return [op for op in self.ops if isinstance(op, PathOp)]

    @property
    def texts(self) -> List[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]
