from __future__ import annotations

from typing import NamedTuple


BAILOUT_SQUARED = 4.0
"""Square of the bailout radius (2.0)."""


class Grid(NamedTuple):
    """Instability values for a rectangle of the plane."""

    values: list[int]
    """Row-major values, `width * height` long."""

    max_value: int
    """Largest value in `values` (0 if nothing escaped)."""


def calculate_instability(c_real: float, c_imag: float, max_iterations: int) -> int:
    """Get the iteration at which the orbit of `c` escapes.

    Args:
        c_real: Real component of the point.
        c_imag: Imaginary component of the point.
        max_iterations: Iteration budget.

    Returns:
        Escape iteration (starting at 1), or 0 if the orbit stayed bounded.
    """
    z_real = 0.0
    z_imag = 0.0
    for iteration in range(1, max_iterations + 1):
        z_real, z_imag = (
            z_real * z_real - z_imag * z_imag + c_real,
            2.0 * z_real * z_imag + c_imag,
        )
        if z_real * z_real + z_imag * z_imag > BAILOUT_SQUARED:
            return iteration
    return 0


def generate_mandelbrot(
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    width: int,
    height: int,
    max_iterations: int,
) -> Grid:
    """Sample the plane at the center of each cell of a width x height grid.

    Args:
        x_min: Left edge of the plane region.
        x_max: Right edge of the plane region.
        y_min: Top edge of the plane region.
        y_max: Bottom edge of the plane region.
        width: Number of columns.
        height: Number of rows.
        max_iterations: Iteration budget per cell.

    Returns:
        The grid of values and its maximum.
    """
    values: list[int] = []
    if width <= 0 or height <= 0:
        return Grid(values, 0)

    max_value = 0
    width_delta = (x_max - x_min) / width
    height_delta = (y_max - y_min) / height
    x_start = x_min + width_delta / 2.0
    y_start = y_min + height_delta / 2.0

    append = values.append
    for row in range(height):
        y_pt = y_start + row * height_delta
        for col in range(width):
            instability = calculate_instability(
                x_start + col * width_delta, y_pt, max_iterations
            )
            if instability > max_value:
                max_value = instability
            append(instability)

    return Grid(values, max_value)
