"""
Screen-space value types

The y-axis grows downwards (raster convention).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Point2D') -> 'Point2D':
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point2D') -> 'Point2D':
        return Point2D(self.x - other.x, self.y - other.y)

    def to_tuple(self):
        return (self.x, self.y)


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0
