from typing import Sequence, TypeAlias


RGB: TypeAlias = tuple[int, int, int]

NO_ESCAPE: RGB = (0, 0, 0)
"""Color of points which never escaped (the interior of the set)."""

PALETTE: Sequence[RGB] = (
    (13, 0, 51),
    (20, 28, 132),
    (111, 118, 210),
    (220, 106, 136),
    (240, 120, 140),
)


def lerp(percentage: float, low: int, high: int) -> int:
    """Blend a single 8-bit channel.

    Args:
        percentage: Blend position, clamped to the range 0-1.
        low: Channel value at 0.
        high: Channel value at 1.

    Returns:
        Blended channel, truncated to an int.
    """
    if percentage >= 1.0:
        percentage = 1.0
    elif percentage <= 0.0:
        percentage = 0.0
    return int(low + (high - low) * percentage)


def scale_color(
    value: int, max_value: int, palette: Sequence[RGB] = PALETTE
) -> RGB:
    """Map an instability value to a color.

    The anchor pair is chosen from `value / max_value`, and the same global
    percentage is used to blend within that pair. Colors are therefore not
    continuous across anchor boundaries.

    Args:
        value: Instability value (0 for points which did not escape).
        max_value: Largest value in the grid.
        palette: Evenly spaced anchor colors (at least two).

    Returns:
        An (r, g, b) tuple.
    """
    if value == 0:
        return NO_ESCAPE
    percentage = value / max_value
    low_index = int(percentage * (len(palette) - 2))
    low = palette[low_index]
    high = palette[low_index + 1]
    return (
        lerp(percentage, low[0], high[0]),
        lerp(percentage, low[1], high[1]),
        lerp(percentage, low[2], high[2]),
    )
