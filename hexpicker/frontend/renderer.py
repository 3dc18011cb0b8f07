"""Render picker models to Pillow images.

Drawing happens on a supersampled ``Surface`` and is downsampled with
LANCZOS, which gives 16x SSAA at the default factor of 4 and hides Pillow's
aliased polygon edges.
"""

from PIL import Image, ImageChops

from ..engine.hexgrid import cell_paths
from ..engine.surface import create_offscreen_surface

SUPERSAMPLE = 4
THUMB_HALO_ALPHA = 0x7F
THUMB_HALO_SCALE = 0.8


class HexGridRenderer:
    """Renders a ``HexGridPicker`` to an RGBA image of the widget size."""

    def __init__(self, supersample=SUPERSAMPLE):
        self.supersample = supersample

    def render(self, picker):
        surface = create_offscreen_surface(
            picker.width, picker.height, self.supersample
        )
        grid = picker.grid
        paths = cell_paths(grid)
        for cell, path in zip(grid.cells, paths):
            surface.draw_filled_closed_path(path, cell.color)

        # Strokes go on top of every fill so shared edges are not covered.
        if picker.stroke_width > 0 and picker.stroke_color is not None:
            for path in paths:
                surface.draw_stroked_closed_path(
                    path, picker.stroke_width, picker.stroke_color
                )
        return surface.to_image()


class ColorBarRenderer:
    """Renders a ``ColorBarPicker``: masked color segments plus the thumb."""

    def __init__(self, supersample=SUPERSAMPLE):
        self.supersample = supersample

    def _surface(self, picker):
        return create_offscreen_surface(
            picker.width, picker.height, self.supersample
        )

    def render(self, picker):
        layout = picker.layout
        if layout.is_empty():
            return self._surface(picker).to_image()

        left, top, right, bottom = layout.rect
        mask = self._surface(picker)
        mask.draw_rounded_rect(
            left, top, right, bottom, picker.bar_height / 2,
            picker.bar_mask_color,
        )
        segments = self._surface(picker)
        for (start, end), color in zip(layout.spans, picker.palette.colors):
            segments.draw_rect(start, top, end, bottom, color)

        # Multiplying every band (alpha included) keeps the segments only
        # where the mask is opaque.
        img = ImageChops.multiply(mask.to_image(), segments.to_image())

        thumb = self._render_thumb(picker)
        if thumb is not None:
            img = Image.alpha_composite(img, thumb)
        return img

    def _render_thumb(self, picker):
        center = picker.thumb_center()
        if picker.thumb_size <= 0 or center is None:
            return None
        cx, cy = center
        color = picker.selected_color
        surface = self._surface(picker)
        if picker.dragging:
            surface.draw_circle(
                cx, cy, picker.thumb_size * THUMB_HALO_SCALE,
                (*color, THUMB_HALO_ALPHA),
            )
        surface.draw_circle(cx, cy, picker.thumb_size / 2, color)
        return surface.to_image()
