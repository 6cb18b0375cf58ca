"""
Open stroked path made of move/line/cubic segments.

Only what the overlay notch needs; there is no fill, close or arc support.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Union

from models.geometry import Point2D


@dataclass(frozen=True)
class MoveTo:
    point: Point2D


@dataclass(frozen=True)
class LineTo:
    point: Point2D


@dataclass(frozen=True)
class CubicTo:
    control1: Point2D
    control2: Point2D
    point: Point2D


PathSegment = Union[MoveTo, LineTo, CubicTo]


@dataclass
class OverlayPath:
    """
    Builder-style path

    Example:
        path = OverlayPath()
        path.move_to(a).line_to(b).cubic_to(c1, c2, d)
    """
    segments: List[PathSegment] = field(default_factory=list)

    def move_to(self, point: Point2D) -> OverlayPath:
        self.segments.append(MoveTo(point))
        return self

    def line_to(self, point: Point2D) -> OverlayPath:
        self._require_current_point()
        self.segments.append(LineTo(point))
        return self

    def cubic_to(self, control1: Point2D, control2: Point2D, point: Point2D) -> OverlayPath:
        self._require_current_point()
        self.segments.append(CubicTo(control1, control2, point))
        return self

    def _require_current_point(self) -> None:
        if not self.segments:
            raise ValueError("Path has no current point, call move_to() first")

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def start_point(self) -> Point2D:
        if not self.segments:
            raise ValueError("Empty path has no start point")
        return self.segments[0].point

    @property
    def end_point(self) -> Point2D:
        if not self.segments:
            raise ValueError("Empty path has no end point")
        return self.segments[-1].point

    def flatten(self, curve_steps: int = 24) -> List[List[Point2D]]:
        """
        Approximate the path with polylines.

        Returns one point list per sub-path (each MoveTo starts a new one).
        Cubic segments are sampled at curve_steps evenly spaced t values.
        """
        polylines: List[List[Point2D]] = []
        current: List[Point2D] = []

        for segment in self.segments:
            if isinstance(segment, MoveTo):
                if len(current) > 1:
                    polylines.append(current)
                current = [segment.point]
            elif isinstance(segment, LineTo):
                current.append(segment.point)
            else:
                p0 = current[-1]
                for i in range(1, curve_steps + 1):
                    current.append(_cubic_point(p0, segment, i / curve_steps))

        if len(current) > 1:
            polylines.append(current)
        return polylines


def _cubic_point(p0: Point2D, seg: CubicTo, t: float) -> Point2D:
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t
    return Point2D(
        a * p0.x + b * seg.control1.x + c * seg.control2.x + d * seg.point.x,
        a * p0.y + b * seg.control1.y + c * seg.control2.y + d * seg.point.y,
    )
