"""Honeycomb layout: cell centers, hexagon outlines and analytic hit testing.

The grid is a big hexagon of ``radius`` rings made of point-up hexagons.
It is built from ``2 * radius - 1`` diagonal rows whose lengths run
``r, r+1, ..., 2r-1, ..., r+1, r``. Each row walks right and up (one step
is ``(spacing / 2, -1.5 * R)``), so a "row" is really a diagonal line of
cells along one of the three grid axes. Between rows the start point
advances by ``(spacing / 2, 1.5 * R)`` while rows are growing and by
``(spacing, 0)`` from the middle row on.

``spacing`` is the distance between adjacent centers (the hexagon's flat
width) and ``R = spacing / sqrt(3)`` its circumradius, so neighbouring
hexagons share an edge exactly.

Cell order matters: the palette is mapped onto cells by index, so
``compute_centers`` must keep the row walk above even though only the
final point set is symmetric.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from .errors import ConfigurationError, DegenerateGeometryError
from .types import Color, Grid, HexCell, Padding, Point2D

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3.0)

# Relative shrink of the hit circle. Centers accumulate rounding error, so a
# point exactly between two neighbours can land a hair inside both circles.
HIT_TOLERANCE = 1e-9

# Vertex angles of a point-up hexagon, measured before the -90 degree turn.
_VERTEX_ANGLES_DEG = (0, 60, 120, 180, 240, 300)


def check_radius(radius: int) -> None:
    if not isinstance(radius, int) or isinstance(radius, bool):
        raise ConfigurationError(
            f"Radius has to be an integer, got {radius!r}."
        )
    if radius < 1:
        raise ConfigurationError("Radius has to be greater than 0.")


def require_draw_area(width: float, height: float) -> float:
    """Return the square draw size, or raise if the area is degenerate."""
    draw_size = min(width, height)
    if draw_size <= 0:
        raise DegenerateGeometryError(width, height)
    return draw_size


def row_lengths(radius: int) -> list[int]:
    """Lengths of the diagonal rows in generation order."""
    check_radius(radius)
    diameter = 2 * radius - 1
    growing = list(range(radius, diameter))
    shrinking = list(range(diameter, radius - 1, -1))
    return growing + shrinking


def count_cells(radius: int) -> int:
    """Number of hexagons in a grid of ``radius`` rings."""
    check_radius(radius)
    diameter = 2 * radius - 1
    return diameter + sum(2 * i for i in range(radius, diameter))


def cell_metrics(draw_size: float, radius: int) -> tuple[float, float]:
    """Return ``(spacing, circumradius)`` for a square draw area."""
    spacing = draw_size / (2 * radius - 1)
    return spacing, spacing / SQRT3


def _row(
    start_x: float, start_y: float, spacing: float, circumradius: float, n: int
) -> list[Point2D]:
    return [
        Point2D(start_x + i * spacing / 2, start_y - 1.5 * i * circumradius)
        for i in range(n)
    ]


def compute_centers(
    area_width: float, area_height: float, radius: int
) -> list[Point2D]:
    """Cell centers for a draw area with its origin at the top-left corner.

    Returns an empty list when the area is degenerate.
    """
    check_radius(radius)
    try:
        draw_size = require_draw_area(area_width, area_height)
    except DegenerateGeometryError as e:
        logger.debug("No hex cells: %s", e)
        return []

    spacing, circumradius = cell_metrics(draw_size, radius)
    diameter = 2 * radius - 1

    x = area_width / 2 - (radius - 1) * spacing
    y = area_height / 2
    points: list[Point2D] = []
    for n in range(radius, diameter):
        points.extend(_row(x, y, spacing, circumradius, n))
        x += spacing / 2
        y += 1.5 * circumradius
    for n in range(diameter, radius - 1, -1):
        points.extend(_row(x, y, spacing, circumradius, n))
        x += spacing
    return points


def hexagon_path(center: Point2D, circumradius: float) -> list[Point2D]:
    """The 6 vertices of a point-up hexagon, starting at the top vertex.

    The path is implicitly closed and filled with the even-odd rule.
    """
    result = []
    for angle in _VERTEX_ANGLES_DEG:
        rad = math.radians(angle - 90)
        result.append(
            Point2D(
                center.x + circumradius * math.cos(rad),
                center.y + circumradius * math.sin(rad),
            )
        )
    return result


def build_grid(
    width: float,
    height: float,
    radius: int,
    colors: list[Color],
    padding: Padding | None = None,
) -> Grid:
    """Lay out a grid inside a widget of ``width`` x ``height``.

    Cell ``i`` gets ``colors[i % len(colors)]``. A degenerate draw area
    yields a grid with no cells.
    """
    check_radius(radius)
    if not colors:
        raise ConfigurationError("Hex grid needs at least one color.")
    padding = padding or Padding()
    draw_width, draw_height = padding.draw_size(width, height)

    points = compute_centers(draw_width, draw_height, radius)
    if points:
        spacing, circumradius = cell_metrics(
            min(draw_width, draw_height), radius
        )
    else:
        spacing, circumradius = 0.0, 0.0

    cells = [
        HexCell(
            center=Point2D(p.x + padding.left, p.y + padding.top),
            color=colors[i % len(colors)],
            index=i,
        )
        for i, p in enumerate(points)
    ]
    centers = np.array(
        [(c.center.x, c.center.y) for c in cells], dtype=float
    ).reshape(-1, 2)
    logger.debug(
        "Built hex grid radius=%d cells=%d spacing=%.2f", radius, len(cells),
        spacing,
    )
    return Grid(
        radius=radius,
        cells=cells,
        cell_circumradius=circumradius,
        cell_spacing=spacing,
        centers=centers,
        draw_left=padding.left,
        draw_top=padding.top,
        draw_width=max(draw_width, 0.0),
        draw_height=max(draw_height, 0.0),
    )


def cell_paths(grid: Grid) -> list[list[Point2D]]:
    return [hexagon_path(c.center, grid.cell_circumradius) for c in grid.cells]


def hit_test(grid: Grid, x: float, y: float) -> HexCell | None:
    """Return the cell under (x, y) using the inscribed-circle test.

    A point hits a cell when it is closer to the center than the hexagon's
    apothem shrunk by the relative ``HIT_TOLERANCE``, so the point midway
    between two neighbours hits neither. The six corner slivers outside
    that circle are not hit. Points outside the draw area never hit.
    """
    if grid.is_empty() or not grid.contains(x, y):
        return None
    dist = np.hypot(grid.centers[:, 0] - x, grid.centers[:, 1] - y)
    hits = np.flatnonzero(dist < grid.inscribed_radius * (1 - HIT_TOLERANCE))
    if hits.size == 0:
        return None
    return grid.cells[int(hits[0])]
