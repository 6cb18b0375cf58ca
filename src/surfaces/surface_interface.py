# surfaces/surface_interface.py
"""
IDrawingSurface Protocol
========================
Minimal 2D drawing contract used by the clock renderers.

Primitives: line, open path, text, text measurement, and a nestable
rotate-about-pivot transform scope.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List, Protocol, Tuple

from models.color import Color
from models.enums import StrokeCap
from models.geometry import Point2D, Size
from models.path import OverlayPath
from models.style import TextStyle
from utils.angle_geometry import rotate_about


class IDrawingSurface(Protocol):
    """
    Protocol defining the drawing surface interface.

    All implementations must provide:
    - width / height / center: surface geometry
    - draw_line: stroked segment with a cap style
    - draw_path: stroked (never filled) path
    - draw_text: unrotated text at a top-left position
    - measure_text: unrotated text extent
    - rotated: transform scope, rotation in degrees about a pivot
    - clear / flush: frame boundaries
    """

    @property
    def width(self) -> float:
        ...

    @property
    def height(self) -> float:
        ...

    @property
    def center(self) -> Point2D:
        ...

    def draw_line(self, start: Point2D, end: Point2D, color: Color, width: float,
                  cap: StrokeCap = StrokeCap.BUTT) -> None:
        ...

    def draw_path(self, path: OverlayPath, color: Color, width: float) -> None:
        ...

    def draw_text(self, text: str, top_left: Point2D, style: TextStyle) -> None:
        ...

    def measure_text(self, text: str, style: TextStyle) -> Size:
        """Unrotated width/height of `text` rendered in `style`."""
        ...

    def rotated(self, degrees: float, pivot: Point2D):
        """
        Context manager: everything drawn inside is rotated by `degrees`
        (clockwise on screen) about `pivot`. Scopes nest.
        """
        ...

    def clear(self) -> None:
        """Reset to background before a new frame."""
        ...

    def flush(self) -> None:
        """Commit the finished frame."""
        ...


class BaseSurface:
    """
    Shared surface plumbing: geometry and the rotation stack.

    Subclasses implement the drawing primitives and map local coordinates
    through transform_point() / total_rotation().
    """

    def __init__(self, width: float, height: float):
        self._width = width
        self._height = height
        self._rotations: List[Tuple[float, Point2D]] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center(self) -> Point2D:
        return Point2D(self._width / 2, self._height / 2)

    @property
    def rotation_stack(self) -> Tuple[Tuple[float, Point2D], ...]:
        return tuple(self._rotations)

    @contextmanager
    def rotated(self, degrees: float, pivot: Point2D) -> Iterator[None]:
        self._rotations.append((degrees, pivot))
        try:
            yield
        finally:
            self._rotations.pop()

    def transform_point(self, point: Point2D) -> Point2D:
        """Map a local point to surface coordinates (innermost scope first)."""
        for degrees, pivot in reversed(self._rotations):
            point = rotate_about(point, pivot, degrees)
        return point

    def total_rotation(self) -> float:
        return sum(degrees for degrees, _ in self._rotations)
