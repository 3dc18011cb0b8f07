"""Tests for the Pillow renderers."""

from ..engine.pickers import ColorBarPicker, HexGridPicker
from ..engine.types import ColorBarParams, HexGridParams
from .renderer import ColorBarRenderer, HexGridRenderer

RED = (255, 0, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


def _close(pixel, rgba, tol=2):
    return all(abs(a - b) <= tol for a, b in zip(pixel, rgba))


class TestHexGridRenderer:
    def test_image_matches_widget_size(self):
        picker = HexGridPicker(HexGridParams(radius=2, colors=[RED]))
        picker.set_size(120.0, 80.0)
        img = HexGridRenderer().render(picker)
        assert img.size == (120, 80)
        assert img.mode == "RGBA"

    def test_cell_center_has_cell_color(self):
        picker = HexGridPicker(HexGridParams(radius=1, colors=[BLUE]))
        picker.set_size(90.0, 90.0)
        img = HexGridRenderer().render(picker)
        assert _close(img.getpixel((45, 45)), (*BLUE, 255))

    def test_outside_cells_is_transparent(self):
        picker = HexGridPicker(HexGridParams(radius=1, colors=[BLUE]))
        picker.set_size(90.0, 90.0)
        img = HexGridRenderer().render(picker)
        assert img.getpixel((0, 0))[3] == 0

    def test_stroke_keeps_fill(self):
        picker = HexGridPicker(
            HexGridParams(
                radius=1, colors=[BLUE], stroke_width=3.0, stroke_color=BLACK
            )
        )
        picker.set_size(90.0, 120.0)
        img = HexGridRenderer(supersample=1).render(picker)
        assert img.getpixel((45, 60)) == (*BLUE, 255)
        # Left vertical edge of the cell runs along x=0
        assert img.getpixel((1, 60))[:3] == BLACK


class TestColorBarRenderer:
    def _picker(self, **kwargs):
        params = ColorBarParams(colors=[RED, BLUE], **kwargs)
        picker = ColorBarPicker(params)
        return picker

    def test_segments(self):
        picker = self._picker(thumb_size=0.0)
        picker.set_size(200.0, 30.0)
        img = ColorBarRenderer().render(picker)
        assert img.size == (200, 30)
        assert _close(img.getpixel((50, 15)), (*RED, 255))
        assert _close(img.getpixel((150, 15)), (*BLUE, 255))

    def test_mask_clips_segments(self):
        picker = self._picker(thumb_size=0.0)
        picker.set_size(200.0, 30.0)
        img = ColorBarRenderer().render(picker)
        # Bar is 16 px high, centered: rows 7..23
        assert img.getpixel((100, 1))[3] == 0
        assert img.getpixel((100, 28))[3] == 0

    def test_thumb_drawn_over_bar(self):
        picker = self._picker(thumb_size=40.0)
        picker.set_size(200.0, 50.0)
        img = ColorBarRenderer().render(picker)
        # Thumb of radius 20 centered on (0, 25), above the bar top at 17
        assert _close(img.getpixel((2, 10)), (*RED, 255))
        assert img.getpixel((150, 10))[3] == 0

    def test_empty_layout_renders_blank(self):
        picker = self._picker()
        img = ColorBarRenderer().render(picker)
        assert img.size == (1, 1)
        assert img.getpixel((0, 0))[3] == 0
