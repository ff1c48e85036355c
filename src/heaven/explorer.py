"""The interaction state machine.

Owns the view, reacts to input events, and produces frames when the view is dirty.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, Flag, auto
import logging

import rich.repr

from heaven.fractal import Grid, generate_mandelbrot
from heaven.inputs import ButtonDown, InputEvent, KeyPress, MouseButton, Resize
from heaven.viewport import PlaneBounds, get_bounds, plane_point

log = logging.getLogger("heaven")


QUIT_KEY = "q"
RESET_KEY = "r"
MORE_ITERATIONS_KEY = "i"
FEWER_ITERATIONS_KEY = "j"
COORDINATES_KEY = "c"

DEFAULT_TERMINAL_SIZE = (80, 80)
"""Size assumed until the first resize event."""


class Outcome(Enum):
    QUIT = auto()
    """Leave the interaction loop."""
    HANDLED = auto()
    """The event was acted on."""
    UNHANDLED = auto()
    """The event isn't bound to anything."""


class Overlay(Flag):
    """Status panels waiting to be shown, highest priority first."""

    NONE = 0
    HELP = auto()
    ITERATIONS = auto()
    COORDINATES = auto()


OVERLAY_PRIORITY = (Overlay.HELP, Overlay.ITERATIONS, Overlay.COORDINATES)


@dataclass(frozen=True)
class ViewDefaults:
    """The view at startup, and after a reset."""

    origin_x: float = -0.75
    origin_y: float = 0.0
    x_size: float = 3.0
    y_size: float = 3.0
    iterations: int = 50
    zoom_factor: float = 0.25


@dataclass
class ViewState:
    origin_x: float
    origin_y: float
    x_size: float
    y_size: float
    iterations: int
    zoom_factor: float

    @classmethod
    def from_defaults(cls, defaults: ViewDefaults) -> ViewState:
        return cls(
            origin_x=defaults.origin_x,
            origin_y=defaults.origin_y,
            x_size=defaults.x_size,
            y_size=defaults.y_size,
            iterations=defaults.iterations,
            zoom_factor=defaults.zoom_factor,
        )


@dataclass(frozen=True)
class Frame:
    """Everything needed to paint one redraw."""

    grid: Grid
    width: int
    height: int
    bounds: PlaneBounds
    overlay: Overlay
    """The single overlay to show with this frame (may be `Overlay.NONE`)."""
    view: ViewState
    """A copy of the view the frame was drawn from."""


def step_up(iterations: int) -> int:
    """Increase an iteration budget by a step which scales with its magnitude."""
    if iterations >= 1000:
        return iterations + 1000
    elif iterations >= 100:
        return iterations + 100
    elif iterations >= 10:
        return iterations + 10
    return iterations + 1


def step_down(iterations: int) -> int:
    """Decrease an iteration budget, never going below 1."""
    if iterations >= 2000:
        return iterations - 1000
    elif iterations >= 200:
        return iterations - 100
    elif iterations >= 20:
        return iterations - 10
    elif iterations >= 2:
        return iterations - 1
    return 1


@rich.repr.auto
class Explorer:
    """Interactive view of the Mandelbrot set."""

    def __init__(
        self,
        defaults: ViewDefaults | None = None,
        terminal_width: int = DEFAULT_TERMINAL_SIZE[0],
        terminal_height: int = DEFAULT_TERMINAL_SIZE[1],
    ) -> None:
        """

        Args:
            defaults: The view at startup and after a reset.
            terminal_width: Initial width of the drawing surface, in cells.
            terminal_height: Initial height of the drawing surface, in cells.
        """
        self.defaults = defaults or ViewDefaults()
        self.view = ViewState.from_defaults(self.defaults)
        self.terminal_width = terminal_width
        self.terminal_height = terminal_height
        self.bounds = PlaneBounds(0.0, 0.0, 0.0, 0.0)
        self.changed = True
        self.pending = Overlay.HELP

    def __rich_repr__(self) -> rich.repr.Result:
        yield "view", self.view
        yield "size", (self.terminal_width, self.terminal_height)
        yield "changed", self.changed, False
        yield "pending", self.pending, Overlay.NONE

    def handle(self, event: InputEvent) -> Outcome:
        """Update state in response to an input event.

        Args:
            event: The decoded input event.

        Returns:
            What the caller should do next.
        """
        if isinstance(event, KeyPress):
            return self._handle_key(event.character)
        elif isinstance(event, ButtonDown):
            return self._handle_button(event)
        elif isinstance(event, Resize):
            self.terminal_width = event.width
            self.terminal_height = event.height
            self.changed = True
            self.pending |= Overlay.HELP
            return Outcome.HANDLED
        return Outcome.UNHANDLED

    def _handle_key(self, character: str) -> Outcome:
        view = self.view
        if character == QUIT_KEY:
            return Outcome.QUIT
        elif character == RESET_KEY:
            self.view = ViewState.from_defaults(self.defaults)
        elif character == COORDINATES_KEY:
            self.pending |= Overlay.COORDINATES
        elif character == MORE_ITERATIONS_KEY:
            view.iterations = step_up(view.iterations)
            self.pending |= Overlay.ITERATIONS
        elif character == FEWER_ITERATIONS_KEY:
            view.iterations = step_down(view.iterations)
            self.pending |= Overlay.ITERATIONS
        else:
            return Outcome.UNHANDLED
        self.changed = True
        return Outcome.HANDLED

    def _handle_button(self, event: ButtonDown) -> Outcome:
        view = self.view
        # Clicks are relative to what is on screen, i.e. the last drawn bounds
        view.origin_x, view.origin_y = plane_point(
            event.row,
            event.col,
            self.bounds,
            self.terminal_width,
            self.terminal_height,
        )
        if event.button == MouseButton.PRIMARY:
            view.x_size *= view.zoom_factor
            view.y_size *= view.zoom_factor
        elif event.button == MouseButton.SECONDARY:
            view.x_size /= view.zoom_factor
            view.y_size /= view.zoom_factor
        else:
            return Outcome.UNHANDLED
        self.changed = True
        return Outcome.HANDLED

    def pop_overlay(self) -> Overlay:
        """Take the highest priority pending overlay.

        Returns:
            The overlay to show, or `Overlay.NONE`.
        """
        for overlay in OVERLAY_PRIORITY:
            if overlay in self.pending:
                self.pending &= ~overlay
                return overlay
        return Overlay.NONE

    def redraw(self) -> Frame | None:
        """Generate a new frame if anything changed since the last one.

        Returns:
            A new frame, or `None` if the view is unchanged.
        """
        if not self.changed:
            return None
        view = self.view
        width = self.terminal_width
        height = self.terminal_height
        self.bounds = get_bounds(
            view.origin_x, view.origin_y, view.x_size, view.y_size, width, height
        )
        grid = generate_mandelbrot(*self.bounds, width, height, view.iterations)
        self.changed = False
        overlay = self.pop_overlay()
        log.debug(
            "redraw %dx%d at %d iterations, bounds=%r, max=%d",
            width,
            height,
            view.iterations,
            self.bounds,
            grid.max_value,
        )
        return Frame(grid, width, height, self.bounds, overlay, replace(view))
