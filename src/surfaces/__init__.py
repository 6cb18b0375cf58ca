"""
Drawing surfaces

- surface_interface: IDrawingSurface protocol + BaseSurface (rotation stack)
- pillow_surface: raster output (PNG)
- recording_surface: call capture for tests and dry runs
"""

from .surface_interface import IDrawingSurface, BaseSurface
from .recording_surface import RecordingSurface, LineOp, PathOp, TextOp
from .pillow_surface import PillowSurface

__all__ = [
    "IDrawingSurface",
    "BaseSurface",
    "RecordingSurface",
    "LineOp",
    "PathOp",
    "TextOp",
    "PillowSurface",
]
