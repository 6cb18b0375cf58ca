"""
PillowSurface - raster drawing surface backed by a Pillow image.

Lines and paths are mapped through the active rotation scopes point by
point. Text under rotation is rendered unrotated into its own layer, the
layer is rotated (expand=True) and composited centred on the transformed
text-box centre.
"""

from __future__ import annotations
import math
import os
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from models.color import Color
from models.enums import LogCategory, StrokeCap
from models.geometry import Point2D, Size
from models.path import OverlayPath
from models.style import TextStyle
from surfaces.surface_interface import BaseSurface, IDrawingSurface
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SURFACE)

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

CURVE_STEPS = 32


class PillowSurface(BaseSurface, IDrawingSurface):
    """
    Args:
        width, height: Image size in pixels
        background: Fill used by clear()
        output_path: PNG written on every flush(), None = keep in memory
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = Color.black(),
        output_path: Optional[Union[str, Path]] = None,
    ):
        super().__init__(width, height)
        self.background = background
        self.output_path = Path(output_path) if output_path else None
        self.frames_flushed = 0

        self._image = Image.new("RGB", (int(width), int(height)), background.to_rgb())
        self._draw = ImageDraw.Draw(self._image, "RGBA")
        self._fonts: Dict[Tuple[Optional[str], int], FontType] = {}

        log.debug(f"PillowSurface created {int(width)}x{int(height)}", output=self.output_path)

    # ------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------

    def _font(self, style: TextStyle) -> FontType:
        size = max(1, int(round(style.font_size)))
        key = (style.font_path, size)
        font = self._fonts.get(key)
        if font is None:
            if style.font_path:
                font = ImageFont.truetype(style.font_path, size)
            else:
                font = ImageFont.load_default(size=size)
            self._fonts[key] = font
        return font

    # ------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------

    def draw_line(self, start: Point2D, end: Point2D, color: Color, width: float,
                  cap: StrokeCap = StrokeCap.BUTT) -> None:
        a = self.transform_point(start)
        b = self.transform_point(end)
        stroke = max(1, int(round(width)))
        fill = color.to_rgba()

        if cap == StrokeCap.SQUARE:
            a, b = _extend_segment(a, b, width / 2)

        self._draw.line([a.to_tuple(), b.to_tuple()], fill=fill, width=stroke)

        if cap == StrokeCap.ROUND and width > 1:
            r = width / 2
            for p in (a, b):
                self._draw.ellipse([p.x - r, p.y - r, p.x + r, p.y + r], fill=fill)

    def draw_path(self, path: OverlayPath, color: Color, width: float) -> None:
        stroke = max(1, int(round(width)))
        for polyline in path.flatten(CURVE_STEPS):
            points = [self.transform_point(p).to_tuple() for p in polyline]
            self._draw.line(points, fill=color.to_rgba(), width=stroke, joint="curve")

    def draw_text(self, text: str, top_left: Point2D, style: TextStyle) -> None:
        font = self._font(style)
        angle = self.total_rotation()

        if not self._rotations or math.isclose(angle % 360.0, 0.0, abs_tol=1e-9):
            p = self.transform_point(top_left)
            self._draw.text(p.to_tuple(), text, fill=style.color.to_rgba(), font=font)
            return

        size = self.measure_text(text, style)
        w = max(1, math.ceil(size.width))
        h = max(1, math.ceil(size.height))

        layer = Image.new("RGBA", (w, h), (0, 0, 0, 0))
        ImageDraw.Draw(layer).text((0, 0), text, fill=style.color.to_rgba(), font=font)
        # Pillow rotates counter-clockwise, surface rotations are clockwise on screen
        layer = layer.rotate(-angle, resample=Image.Resampling.BICUBIC, expand=True)

        box_center = self.transform_point(
            Point2D(top_left.x + size.width / 2, top_left.y + size.height / 2)
        )
        dest = (
            int(round(box_center.x - layer.width / 2)),
            int(round(box_center.y - layer.height / 2)),
        )
        self._image.paste(layer, dest, layer)

    def measure_text(self, text: str, style: TextStyle) -> Size:
        left, top, right, bottom = self._font(style).getbbox(text)
        return Size(float(right), float(bottom))

    # ------------------------------------------------------------
    # Frame lifecycle
    # ------------------------------------------------------------

    def clear(self) -> None:
        self._image.paste(self.background.to_rgb(), (0, 0, self._image.width, self._image.height))

    def flush(self) -> None:
        self.frames_flushed += 1
        if self._image.width <= 0 or self._image.height <= 0:
            log.debug(f"Skipping PNG write for empty surface ({self._image.width}x{self._image.height})")
            return
        if self.output_path is not None:
            self.save(self.output_path)

    def save(self, path: Union[str, Path]) -> None:
        """Write the current image as PNG (replaced atomically)."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        self._image.save(tmp, format="PNG")
        os.replace(tmp, path)

    def to_image(self) -> Image.Image:
        """Copy of the current frame."""
        return self._image.copy()

    def __repr__(self) -> str:
        return f"PillowSurface({self._image.width}x{self._image.height}, output={self.output_path})"


def _extend_segment(a: Point2D, b: Point2D, amount: float) -> Tuple[Point2D, Point2D]:
    dx = b.x - a.x
    dy = b.y - a.y
    length = math.hypot(dx, dy)
    if length == 0:
        return a, b
    ux = dx / length * amount
    uy = dy / length * amount
    return Point2D(a.x - ux, a.y - uy), Point2D(b.x + ux, b.y + uy)
