"""
Utility functions for the clock face renderer
"""

from .angle_geometry import (
    point_on_circle,
    rotate_point,
    rotate_about,
)

__all__ = [
    'point_on_circle',
    'rotate_point',
    'rotate_about',
]
