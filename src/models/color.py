"""
Color model - RGBA color used by styles and surfaces
"""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """
    Immutable RGBA color (each channel 0-255)

    Examples:
        white = Color.white()
        faded = white.with_alpha(0.8)
        maroon = Color.from_hex("#7B2C3B")

        r, g, b, a = faded.to_rgba()
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: int = 255) -> 'Color':
        return cls(_clamp(r), _clamp(g), _clamp(b), _clamp(a))

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Parse "#RRGGBB" or "#RRGGBBAA" (leading '#' optional)

        Raises:
            ValueError: If the string is not 6 or 8 hex digits
        """
        digits = value.strip().lstrip('#')
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None
        return cls(*channels)

    @classmethod
    def white(cls) -> 'Color':
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> 'Color':
        return cls(0, 0, 0)

    @classmethod
    def red(cls) -> 'Color':
        return cls(255, 0, 0)

    @classmethod
    def transparent(cls) -> 'Color':
        return cls(0, 0, 0, 0)

    # === CONVERSIONS ===

    def with_alpha(self, alpha: float) -> 'Color':
        """Copy with alpha given as a fraction (0.0-1.0)"""
        return replace(self, a=_clamp(round(alpha * 255)))

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"


def _clamp(value: int) -> int:
    return max(0, min(255, int(value)))
