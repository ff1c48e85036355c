from __future__ import annotations

import math
from typing import NamedTuple


CELL_ASPECT = 2.5
"""How much taller a terminal cell is than it is wide."""


class PlaneBounds(NamedTuple):
    """The region of the complex plane mapped on to the terminal."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float


def _divide(numerator: float, denominator: float) -> float:
    """Divide, giving inf or nan for a zero denominator rather than raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def get_bounds(
    origin_x: float,
    origin_y: float,
    x_size: float,
    y_size: float,
    terminal_width: int,
    terminal_height: int,
) -> PlaneBounds:
    """Get the plane bounds for a view, corrected for the shape of terminal cells.

    The axis with the smaller plane-units-per-cell ratio is widened. The
    correction is added to the existing extent, so the two ratios end up
    close to, but not exactly, equal.

    A zero terminal dimension gives infinite bounds on the other axis.

    Args:
        origin_x: Real component of the view center.
        origin_y: Imaginary component of the view center.
        x_size: Plane width of the view (sign is ignored).
        y_size: Plane height of the view (sign is ignored).
        terminal_width: Width in cells.
        terminal_height: Height in cells.

    Returns:
        Bounds of the visible region.
    """
    x_size = abs(x_size)
    y_size = abs(y_size)

    x_min = origin_x - x_size * 0.5
    x_max = origin_x + x_size * 0.5
    y_min = origin_y - y_size * 0.5
    y_max = origin_y + y_size * 0.5

    # TODO: solve for the extents so the ratios match exactly after correction
    x_ratio = _divide(x_max - x_min, terminal_width)
    y_ratio = _divide(y_max - y_min, terminal_height) / CELL_ASPECT

    if x_ratio > y_ratio:
        grow = terminal_height * x_ratio
        y_min -= grow / 2.0
        y_max += grow / 2.0
    elif y_ratio > x_ratio:
        grow = terminal_width * y_ratio
        x_min -= grow / 2.0
        x_max += grow / 2.0

    return PlaneBounds(x_min, x_max, y_min, y_max)


def plane_point(
    row: int,
    col: int,
    bounds: PlaneBounds,
    terminal_width: int,
    terminal_height: int,
) -> tuple[float, float]:
    """Map a terminal cell to a point in the plane.

    Args:
        row: Cell row.
        col: Cell column.
        bounds: Bounds of what is currently on screen.
        terminal_width: Width in cells.
        terminal_height: Height in cells.

    Returns:
        (x, y) plane coordinates. These are nan or inf if the terminal has no
        cells on an axis.
    """
    x_min, x_max, y_min, y_max = bounds
    x = _divide(col, terminal_width) * (x_max - x_min) + x_min
    y = _divide(row, terminal_height) * (y_max - y_min) + y_min
    return x, y
