from __future__ import annotations

from dataclasses import dataclass
from time import monotonic

from rich.color import Color as RichColor
from rich.segment import Segment
from rich.style import Style as RichStyle

from textual import events, log
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from heaven.color import scale_color
from heaven.explorer import Frame
from heaven.inputs import ButtonDown, InputEvent, KeyPress, MouseButton, Resize


class MandelbrotView(Widget, can_focus=True):
    """Paints frames as one colored blank cell per grid value.

    Terminal input over the widget is translated into explorer input events.
    """

    ALLOW_SELECT = False
    DEFAULT_CSS = """
    MandelbrotView {
        width: 1fr;
        height: 1fr;
        text-wrap: nowrap;
        text-overflow: clip;
        overflow: hidden;
    }
    """

    @dataclass
    class Interaction(Message):
        """The user did something the explorer may react to."""

        event: InputEvent

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        self._strips: list[Strip] = []
        self._panel: list[str] = []
        super().__init__(name=name, id=id, classes=classes)

    @property
    def panel(self) -> list[str]:
        """Lines of the status panel currently on screen."""
        return self._panel

    def show_frame(self, frame: Frame) -> None:
        """Replace the fractal with a new frame.

        Args:
            frame: Frame from the explorer.
        """
        start = monotonic()
        grid, max_value = frame.grid
        width = frame.width
        styles: dict[int, RichStyle] = {}

        def get_style(value: int) -> RichStyle:
            if (style := styles.get(value)) is None:
                style = styles[value] = RichStyle(
                    bgcolor=RichColor.from_rgb(*scale_color(value, max_value))
                )
            return style

        strips: list[Strip] = []
        for row_start in range(0, len(grid), width):
            segments = [
                Segment(" ", get_style(value))
                for value in grid[row_start : row_start + width]
            ]
            # Adjacent cells with the same value share a style, and collapse to one segment
            strips.append(Strip(segments, width).simplify())
        self._strips = strips
        log(
            f"painted {frame.width}x{frame.height} with {len(styles)} colors in {monotonic() - start:.3f}s"
        )
        self.refresh()

    def show_panel(self, lines: list[str]) -> None:
        """Show a status panel at the top left, or remove it with an empty list.

        Args:
            lines: Lines of the panel.
        """
        self._panel = lines
        self.refresh()

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        base_style = self.rich_style
        try:
            strip = self._strips[y]
        except IndexError:
            strip = Strip.blank(width, base_style)
        if y < len(self._panel):
            panel_strip = Strip([Segment(self._panel[y], base_style)])
            strip = Strip.join(
                [panel_strip, strip.crop(panel_strip.cell_length, strip.cell_length)]
            )
        return strip.crop(0, width)

    def on_resize(self, event: events.Resize) -> None:
        width, height = self.size
        if width and height:
            self.post_message(self.Interaction(Resize(width, height)))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.post_message(
            self.Interaction(
                ButtonDown(event.y, event.x, MouseButton.from_number(event.button))
            )
        )

    def on_key(self, event: events.Key) -> None:
        self.post_message(self.Interaction(KeyPress(event.character or "")))
