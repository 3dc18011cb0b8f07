"""Tests for honeycomb point generation, hexagon paths and analytic hit tests."""

import math

import pytest

from .errors import ConfigurationError, DegenerateGeometryError
from .hexgrid import (
    build_grid,
    cell_metrics,
    compute_centers,
    count_cells,
    hexagon_path,
    hit_test,
    require_draw_area,
    row_lengths,
)
from .types import Padding, Point2D

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def _has_point(points, x, y, tol=1e-6):
    return any(abs(p.x - x) < tol and abs(p.y - y) < tol for p in points)


# ---------------------------------------------------------------------------
# count_cells / row_lengths
# ---------------------------------------------------------------------------


class TestCountCells:
    def test_small_radii(self):
        assert count_cells(1) == 1
        assert count_cells(2) == 7
        assert count_cells(3) == 19
        assert count_cells(4) == 37

    def test_matches_centered_hexagonal_numbers(self):
        for r in range(1, 15):
            assert count_cells(r) == 3 * r * (r - 1) + 1

    def test_matches_row_lengths(self):
        for r in range(1, 10):
            assert sum(row_lengths(r)) == count_cells(r)

    def test_zero_radius_rejected(self):
        with pytest.raises(ConfigurationError):
            count_cells(0)

    def test_negative_radius_rejected(self):
        with pytest.raises(ConfigurationError):
            row_lengths(-2)

    def test_non_integer_radius_rejected(self):
        with pytest.raises(ConfigurationError):
            count_cells(2.5)
        with pytest.raises(ConfigurationError):
            compute_centers(100, 100, 2.0)


class TestRowLengths:
    def test_radius_one(self):
        assert row_lengths(1) == [1]

    def test_radius_three(self):
        assert row_lengths(3) == [3, 4, 5, 4, 3]

    def test_row_count(self):
        for r in range(1, 8):
            assert len(row_lengths(r)) == 2 * r - 1


# ---------------------------------------------------------------------------
# compute_centers
# ---------------------------------------------------------------------------


class TestComputeCenters:
    def test_point_count(self):
        for r in range(1, 8):
            assert len(compute_centers(300, 300, r)) == count_cells(r)

    def test_radius_one_is_area_center(self):
        points = compute_centers(300, 200, 1)
        assert points == [Point2D(150.0, 100.0)]

    def test_radius_two_order(self):
        """Rows are diagonals walking right and up from the left cell."""
        points = compute_centers(300, 300, 2)
        h = 1.5 * (100 / math.sqrt(3))
        expected = [
            (50, 150),
            (100, 150 - h),
            (100, 150 + h),
            (150, 150),
            (200, 150 - h),
            (200, 150 + h),
            (250, 150),
        ]
        assert len(points) == len(expected)
        for p, (ex, ey) in zip(points, expected):
            assert p.x == pytest.approx(ex)
            assert p.y == pytest.approx(ey)

    def test_first_point_offset_left_and_centered(self):
        for r in range(1, 6):
            spacing, _ = cell_metrics(300, r)
            first = compute_centers(300, 300, r)[0]
            assert first.x == pytest.approx(150 - (r - 1) * spacing)
            assert first.y == pytest.approx(150)

    def test_deterministic(self):
        assert compute_centers(320, 240, 4) == compute_centers(320, 240, 4)

    @pytest.mark.parametrize("radius", [1, 2, 3, 4, 5])
    def test_reflection_symmetry(self, radius):
        """A symmetric area gives a point set symmetric on both axes."""
        w, h = 400, 400
        points = compute_centers(w, h, radius)
        for p in points:
            assert _has_point(points, w - p.x, p.y)
            assert _has_point(points, p.x, h - p.y)

    def test_symmetric_in_wide_area(self):
        w, h = 500, 300
        points = compute_centers(w, h, 3)
        for p in points:
            assert _has_point(points, w - p.x, p.y)
            assert _has_point(points, p.x, h - p.y)

    @pytest.mark.parametrize("radius", [1, 2, 3, 6])
    def test_within_bounds(self, radius):
        w, h = 360, 250
        _, circumradius = cell_metrics(min(w, h), radius)
        for p in compute_centers(w, h, radius):
            assert -circumradius <= p.x <= w + circumradius
            assert -circumradius <= p.y <= h + circumradius

    def test_neighbours_are_one_spacing_apart(self):
        points = compute_centers(300, 300, 3)
        spacing, _ = cell_metrics(300, 3)
        nearest = min(
            math.hypot(a.x - b.x, a.y - b.y)
            for i, a in enumerate(points)
            for b in points[i + 1 :]
        )
        assert nearest == pytest.approx(spacing)

    def test_degenerate_area_is_empty(self):
        assert compute_centers(0, 100, 3) == []
        assert compute_centers(100, -5, 3) == []

    def test_zero_radius_rejected(self):
        with pytest.raises(ConfigurationError):
            compute_centers(100, 100, 0)


class TestRequireDrawArea:
    def test_returns_smaller_side(self):
        assert require_draw_area(300, 200) == 200

    def test_degenerate_raises(self):
        with pytest.raises(DegenerateGeometryError):
            require_draw_area(0, 200)


# ---------------------------------------------------------------------------
# hexagon_path
# ---------------------------------------------------------------------------


class TestHexagonPath:
    def test_six_vertices_on_circumcircle(self):
        center = Point2D(40.0, 60.0)
        for v in hexagon_path(center, 25.0):
            assert math.hypot(v.x - 40, v.y - 60) == pytest.approx(25.0)

    def test_equal_angular_spacing(self):
        center = Point2D(0.0, 0.0)
        path = hexagon_path(center, 10.0)
        assert len(path) == 6
        angles = [math.degrees(math.atan2(v.y, v.x)) for v in path]
        for a, b in zip(angles, angles[1:] + angles[:1]):
            assert (b - a) % 360 == pytest.approx(60.0)

    def test_point_up(self):
        """First vertex is straight above the center."""
        first = hexagon_path(Point2D(10.0, 10.0), 5.0)[0]
        assert first.x == pytest.approx(10.0)
        assert first.y == pytest.approx(5.0)


# ---------------------------------------------------------------------------
# build_grid
# ---------------------------------------------------------------------------


class TestBuildGrid:
    def test_cell_count_and_indices(self):
        grid = build_grid(300, 300, 3, [RED])
        assert len(grid.cells) == count_cells(3)
        assert [c.index for c in grid.cells] == list(range(len(grid.cells)))
        assert grid.centers.shape == (len(grid.cells), 2)

    def test_colors_cycle(self):
        grid = build_grid(300, 300, 2, [RED, GREEN, BLUE])
        colors = [c.color for c in grid.cells]
        assert colors == [RED, GREEN, BLUE, RED, GREEN, BLUE, RED]

    def test_padding_offsets_centers(self):
        padding = Padding(left=10, top=20, right=30, bottom=40)
        grid = build_grid(340, 360, 1, [RED], padding)
        # Draw area is 300 x 300 starting at (10, 20)
        assert grid.cells[0].center == Point2D(160.0, 170.0)
        assert grid.draw_width == 300
        assert grid.draw_height == 300

    def test_metrics(self):
        grid = build_grid(300, 300, 2, [RED])
        assert grid.cell_spacing == pytest.approx(100.0)
        assert grid.cell_circumradius == pytest.approx(100 / math.sqrt(3))
        assert grid.inscribed_radius == pytest.approx(50.0)

    def test_degenerate_area_has_no_cells(self):
        grid = build_grid(20, 20, 2, [RED], Padding(15, 0, 15, 0))
        assert grid.is_empty()
        assert grid.centers.shape == (0, 2)

    def test_empty_palette_rejected(self):
        with pytest.raises(ConfigurationError):
            build_grid(300, 300, 2, [])


# ---------------------------------------------------------------------------
# hit_test
# ---------------------------------------------------------------------------


class TestHitTest:
    def setup_method(self):
        self.grid = build_grid(300, 300, 2, [RED, GREEN, BLUE])

    def test_every_center_hits_its_cell(self):
        for cell in self.grid.cells:
            assert hit_test(self.grid, cell.center.x, cell.center.y) is cell

    def test_midway_between_horizontal_neighbours_is_none(self):
        # Cells 3 (150, 150) and 6 (250, 150) are horizontal neighbours.
        assert hit_test(self.grid, 200.0, 150.0) is None

    def test_near_edge_inside_apothem(self):
        hit = hit_test(self.grid, 150.0 + 49.0, 150.0)
        assert hit is not None
        assert hit.index == 3

    def test_outside_draw_area(self):
        assert hit_test(self.grid, -1.0, 150.0) is None
        assert hit_test(self.grid, 150.0, 300.0) is None

    def test_corner_of_area_is_none(self):
        assert hit_test(self.grid, 1.0, 1.0) is None

    def test_empty_grid(self):
        grid = build_grid(0, 0, 2, [RED])
        assert hit_test(grid, 0.0, 0.0) is None


@pytest.mark.parametrize("radius", [2, 3, 4, 5, 7])
@pytest.mark.parametrize(
    "size",
    [(97, 97), (100, 100), (213, 213), (317, 317), (481, 481), (640, 480)],
)
def test_midway_between_any_neighbours_is_none(size, radius):
    """Covers all three neighbour directions, whose centers carry
    different rounding error."""
    grid = build_grid(size[0], size[1], radius, [RED])
    cells = grid.cells
    pairs = 0
    for i, a in enumerate(cells):
        for b in cells[i + 1 :]:
            d = math.hypot(a.center.x - b.center.x, a.center.y - b.center.y)
            if d != pytest.approx(grid.cell_spacing, rel=1e-6):
                continue
            pairs += 1
            mx = (a.center.x + b.center.x) / 2
            my = (a.center.y + b.center.y) / 2
            assert hit_test(grid, mx, my) is None, (a.index, b.index)
    # Each cell has up to 6 neighbours: 3r(r-1)+1 cells share 9r^2-15r+6 edges
    assert pairs == 9 * radius * radius - 15 * radius + 6
