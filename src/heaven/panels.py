"""Text for the status panels drawn over the top-left of the fractal."""

from decimal import Decimal
import math
from string import Template

from heaven.explorer import Overlay, ViewState

TITLE = "Mandelbrot's in Heaven"

PANEL_WIDTH = 50
RULE = "-" * PANEL_WIDTH

HELP_TEMPLATE = Template("""\
 $TITLE
 Left click: Zoom in on point
 Right click: Zoom out from point
 i: Increase iterations
 j: Decrease iterations
 r: Reset settings
 c: See coords
 q: Quit program""")

ITERATIONS_TEMPLATE = Template(" Iterations: $ITERATIONS")

COORDINATES_TEMPLATE = Template("""\
 Origin X: $ORIGIN_X
 Origin Y: $ORIGIN_Y
 Size (X): $X_SIZE
 Size (Y): $Y_SIZE""")

# Blanks written after variable-width lines, to clear what a previous panel left
ITERATIONS_PADDING = 32
COORDINATES_PADDING = 10


def format_number(value: float) -> str:
    """Format a float in plain decimal notation, without a redundant ".0".

    Args:
        value: Number to format.

    Returns:
        Shortest round-tripping digits, never in exponent form (e.g. "3", "-0.75", "0.0001").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def panel_lines(overlay: Overlay, view: ViewState) -> list[str]:
    """Render the lines of a status panel.

    Args:
        overlay: Panel to render.
        view: View to report on.

    Returns:
        Lines of text framed by rules (empty for `Overlay.NONE`).
    """
    if overlay == Overlay.HELP:
        body = [
            line.ljust(PANEL_WIDTH)
            for line in HELP_TEMPLATE.substitute(TITLE=TITLE).splitlines()
        ]
    elif overlay == Overlay.ITERATIONS:
        body = [
            ITERATIONS_TEMPLATE.substitute(ITERATIONS=view.iterations)
            + " " * ITERATIONS_PADDING
        ]
    elif overlay == Overlay.COORDINATES:
        coordinates = COORDINATES_TEMPLATE.substitute(
            ORIGIN_X=format_number(view.origin_x),
            ORIGIN_Y=format_number(view.origin_y),
            X_SIZE=format_number(view.x_size),
            Y_SIZE=format_number(view.y_size),
        )
        body = [line + " " * COORDINATES_PADDING for line in coordinates.splitlines()]
    else:
        return []
    return [RULE, *body, RULE]
