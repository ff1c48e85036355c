from functools import cached_property
from pathlib import Path
import logging

import platformdirs

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.screen import Screen

from heaven.explorer import (
    COORDINATES_KEY,
    FEWER_ITERATIONS_KEY,
    MORE_ITERATIONS_KEY,
    QUIT_KEY,
    RESET_KEY,
    Explorer,
    Outcome,
    Overlay,
)
from heaven.inputs import InputEvent, KeyPress
from heaven import panels
from heaven.panels import panel_lines
from heaven.screens.main import MainScreen
from heaven.settings import Schema, Settings, SettingsError
from heaven.settings_schema import SCHEMA
from heaven.widgets.mandelbrot import MandelbrotView

log = logging.getLogger("heaven")


class HeavenApp(App):
    TITLE = panels.TITLE
    CSS_PATH = "heaven.tcss"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding(QUIT_KEY, f"press({QUIT_KEY!r})", "Quit", priority=True),
        Binding(RESET_KEY, f"press({RESET_KEY!r})", "Reset", priority=True),
        Binding(
            MORE_ITERATIONS_KEY,
            f"press({MORE_ITERATIONS_KEY!r})",
            "More iterations",
            priority=True,
        ),
        Binding(
            FEWER_ITERATIONS_KEY,
            f"press({FEWER_ITERATIONS_KEY!r})",
            "Fewer iterations",
            priority=True,
        ),
        Binding(
            COORDINATES_KEY, f"press({COORDINATES_KEY!r})", "Coordinates", priority=True
        ),
    ]

    def __init__(self, settings_path: Path | None = None) -> None:
        """

        Args:
            settings_path: Path to a settings file, or `None` for the default location.
        """
        self._settings_path = settings_path
        self.explorer = Explorer()
        super().__init__()

    @property
    def config_path(self) -> Path:
        return Path(platformdirs.user_config_dir("heaven"))

    @property
    def settings_path(self) -> Path:
        if self._settings_path is not None:
            return self._settings_path
        return self.config_path / "settings.json"

    @cached_property
    def settings_schema(self) -> Schema:
        return Schema(SCHEMA)

    def load_settings(self) -> Settings:
        try:
            return Settings.read(self.settings_schema, self.settings_path)
        except SettingsError as error:
            log.error("unable to load settings; %s", error)
            self.notify(
                f"{error}\nUsing default settings.", title="Settings", severity="error"
            )
            return Settings(self.settings_schema)

    def on_load(self) -> None:
        settings = self.load_settings()
        self.theme = settings.get_str("ui.theme")
        log.setLevel(settings.get_str("logging.level").upper())

    def get_default_screen(self) -> Screen:
        return MainScreen()

    @property
    def mandelbrot(self) -> MandelbrotView:
        return self.screen.query_one(MandelbrotView)

    def action_press(self, character: str) -> None:
        self.dispatch_input(KeyPress(character))

    def on_mandelbrot_view_interaction(
        self, message: MandelbrotView.Interaction
    ) -> None:
        self.dispatch_input(message.event)

    def dispatch_input(self, event: InputEvent) -> None:
        """Send an input event to the explorer, and redraw if required.

        Args:
            event: Decoded input event.
        """
        outcome = self.explorer.handle(event)
        if outcome == Outcome.QUIT:
            self.exit()
            return
        if outcome == Outcome.UNHANDLED:
            self.mandelbrot.show_panel(panel_lines(Overlay.HELP, self.explorer.view))
        self.update_view()

    def update_view(self) -> None:
        """Draw a new frame if the view has changed.

        The grid is generated synchronously, so input waits until it is complete.
        """
        frame = self.explorer.redraw()
        if frame is None:
            return
        mandelbrot = self.mandelbrot
        mandelbrot.show_frame(frame)
        mandelbrot.show_panel(panel_lines(frame.overlay, frame.view))


def run() -> None:
    """Run the explorer in the terminal."""
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])
    app = HeavenApp()
    app.run(mouse=True)
