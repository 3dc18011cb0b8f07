"""Raster hit testing: look up the cell under a pixel in a cell-index map.

The map is drawn once per grid geometry without anti-aliasing. Cell ``i`` is
filled with the opaque RGB encoding of ``i + 1`` and everything else stays
transparent, so the lookup is exact to the drawn hexagon edges and does not
depend on the palette (two cells of the same color stay distinct, and no
palette color can collide with the "no cell" sentinel).
"""

from __future__ import annotations

from .hexgrid import hexagon_path
from .surface import Surface, create_offscreen_surface
from .types import Grid, HexCell


def encode_index(index: int) -> tuple[int, int, int]:
    value = index + 1
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def decode_index(pixel: tuple[int, ...]) -> int:
    return ((pixel[0] << 16) | (pixel[1] << 8) | pixel[2]) - 1


class CellIndexMap:
    def __init__(self, grid: Grid, surface: Surface) -> None:
        self.grid = grid
        self.surface = surface

    @staticmethod
    def from_grid(grid: Grid, width: float, height: float) -> CellIndexMap:
        surface = create_offscreen_surface(width, height)
        for cell in grid.cells:
            surface.draw_filled_closed_path(
                hexagon_path(cell.center, grid.cell_circumradius),
                encode_index(cell.index),
            )
        return CellIndexMap(grid, surface)

    def hit_test(self, x: float, y: float) -> HexCell | None:
        if not self.grid.contains(x, y):
            return None
        pixel = self.surface.read_pixel(x, y)
        if pixel is None:
            return None
        index = decode_index(pixel)
        if not 0 <= index < len(self.grid.cells):
            return None
        return self.grid.cells[index]
