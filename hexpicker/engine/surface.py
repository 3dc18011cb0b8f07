"""Offscreen drawing surface backed by a Pillow RGBA image.

Both the renderers and the raster hit-test strategy draw through this small
API. Coordinates are always given in widget pixels; a surface created with
``supersample > 1`` scales them internally, and ``to_image`` downsamples
with LANCZOS. Pillow does not anti-alias polygons, so supersampling is what
gives the rendered swatches smooth edges.
"""

from __future__ import annotations

from collections.abc import Sequence

from PIL import Image, ImageDraw

from .types import Color, Point2D

TRANSPARENT = (0, 0, 0, 0)

RGBA = tuple[int, int, int, int]


def _rgba(color: Color | RGBA, alpha: int = 255) -> RGBA:
    if len(color) == 4:
        return color  # type: ignore[return-value]
    return (color[0], color[1], color[2], alpha)


class Surface:
    def __init__(self, width: int, height: int, supersample: int = 1) -> None:
        self.width = width
        self.height = height
        self.supersample = supersample
        self.image = Image.new(
            "RGBA", (width * supersample, height * supersample), TRANSPARENT
        )
        self._draw = ImageDraw.Draw(self.image)

    def _px(self, points: Sequence[Point2D]) -> list[tuple[float, float]]:
        s = self.supersample
        return [(p.x * s, p.y * s) for p in points]

    def _lw(self, width: float) -> int:
        return max(1, round(width * self.supersample))

    def draw_filled_closed_path(
        self, points: Sequence[Point2D], color: Color | RGBA
    ) -> None:
        self._draw.polygon(self._px(points), fill=_rgba(color))

    def draw_stroked_closed_path(
        self, points: Sequence[Point2D], stroke_width: float, color: Color
    ) -> None:
        """Stroke centered on the path edges, with rounded joints."""
        px = self._px(points)
        self._draw.line(
            px + px[:1], fill=_rgba(color), width=self._lw(stroke_width),
            joint="curve",
        )

    def draw_rect(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        color: Color | RGBA,
    ) -> None:
        s = self.supersample
        self._draw.rectangle(
            [left * s, top * s, right * s, bottom * s], fill=_rgba(color)
        )

    def draw_rounded_rect(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        corner_radius: float,
        color: Color | RGBA,
    ) -> None:
        s = self.supersample
        self._draw.rounded_rectangle(
            [left * s, top * s, right * s, bottom * s],
            radius=corner_radius * s,
            fill=_rgba(color),
        )

    def draw_circle(
        self, cx: float, cy: float, radius: float, color: Color | RGBA
    ) -> None:
        s = self.supersample
        self._draw.ellipse(
            [(cx - radius) * s, (cy - radius) * s,
             (cx + radius) * s, (cy + radius) * s],
            fill=_rgba(color),
        )

    def read_pixel(self, x: float, y: float) -> RGBA | None:
        """Pixel at widget coords, or None if transparent or off-surface."""
        ix, iy = int(x), int(y)
        if not (0 <= ix < self.width and 0 <= iy < self.height):
            return None
        s = self.supersample
        pixel = self.image.getpixel((ix * s, iy * s))
        if pixel[3] == 0:
            return None
        return pixel

    def to_image(self) -> Image.Image:
        if self.supersample == 1:
            return self.image
        return self.image.resize(
            (self.width, self.height), Image.Resampling.LANCZOS
        )


def create_offscreen_surface(
    width: float, height: float, supersample: int = 1
) -> Surface:
    return Surface(max(int(width), 1), max(int(height), 1), supersample)
