import json
from pathlib import Path

import pytest

from heaven.fractal import Grid, calculate_instability, generate_mandelbrot
from heaven.viewport import get_bounds

GOLDEN_PATH = Path(__file__).parent / "golden"


@pytest.mark.parametrize("max_iterations", [1, 2, 50, 1000])
def test_origin_never_escapes(max_iterations: int) -> None:
    assert calculate_instability(0.0, 0.0, max_iterations) == 0


@pytest.mark.parametrize("max_iterations", [1, 2, 50, 1000])
def test_far_point_escapes_immediately(max_iterations: int) -> None:
    assert calculate_instability(2.0, 2.0, max_iterations) == 1


def test_known_escape_iterations() -> None:
    # 0 -> 1 -> 2 -> 5; |2| is not greater than the bailout radius
    assert calculate_instability(1.0, 0.0, 50) == 3
    assert calculate_instability(1.0, 0.0, 2) == 0
    # 0 -> 0.5 -> 0.75 -> 1.0625 -> 1.6289... -> 3.153...
    assert calculate_instability(0.5, 0.0, 50) == 5
    # Period two cycle 0 -> -1 -> 0
    assert calculate_instability(-1.0, 0.0, 500) == 0
    # Orbit sits on the bailout radius without exceeding it
    assert calculate_instability(-2.0, 0.0, 100) == 0


def test_instability_range() -> None:
    max_iterations = 20
    for step_x in range(-25, 10):
        for step_y in range(-15, 16):
            value = calculate_instability(step_x / 10, step_y / 10, max_iterations)
            assert 0 <= value <= max_iterations


def test_grid_size_and_max() -> None:
    grid, max_value = generate_mandelbrot(-2.0, 1.0, -1.0, 1.0, 7, 5, 30)
    assert len(grid) == 7 * 5
    assert max_value == max(grid)


def test_grid_is_named_tuple() -> None:
    grid = generate_mandelbrot(-2.0, 1.0, -1.0, 1.0, 3, 2, 10)
    assert isinstance(grid, Grid)
    assert grid.max_value == max(grid.values)


def test_samples_cell_centers() -> None:
    # Centers are at 1 and 3, corners would be at 0 and 2
    assert generate_mandelbrot(0.0, 4.0, -1.0, 1.0, 2, 1, 50) == ([3, 1], 3)
    assert generate_mandelbrot(-1.0, 1.0, -1.0, 1.0, 1, 1, 50) == ([0], 0)


def test_row_major_from_y_min() -> None:
    # Row 0 is centered on y=0, row 1 on y=2
    assert generate_mandelbrot(0.0, 2.0, -1.0, 3.0, 1, 2, 50) == ([3, 1], 3)


def test_all_bounded_max_is_zero() -> None:
    grid, max_value = generate_mandelbrot(-0.1, 0.1, -0.1, 0.1, 4, 4, 50)
    assert grid == [0] * 16
    assert max_value == 0


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (0, 0)])
def test_degenerate_grid(width: int, height: int) -> None:
    assert generate_mandelbrot(-2.0, 1.0, -1.0, 1.0, width, height, 50) == ([], 0)


def test_default_view_render() -> None:
    golden = json.loads((GOLDEN_PATH / "default_80x24.json").read_text("utf-8"))

    bounds = get_bounds(-0.75, 0.0, 3.0, 3.0, 80, 24)
    assert list(bounds) == pytest.approx(golden["bounds"])
    grid, max_value = generate_mandelbrot(*bounds, 80, 24, 50)

    assert len(grid) == 80 * 24
    assert grid == golden["values"]
    assert max_value == golden["max_value"] == 28
    assert max_value == max(grid)

    def cell(row: int, col: int) -> int:
        return grid[row * 80 + col]

    # Corners are far outside the set
    assert cell(0, 0) == cell(23, 79) == 1
    # Main cardioid, near the origin
    assert cell(12, 48) == 0
    # Period two bulb, near -1
    assert cell(12, 37) == 0
    # The set is symmetric about the real axis, and rows are centered on it
    for row in range(12):
        assert grid[row * 80 : row * 80 + 80] == grid[(23 - row) * 80 : (23 - row) * 80 + 80]
