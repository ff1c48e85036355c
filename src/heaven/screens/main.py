from textual.app import ComposeResult
from textual.screen import Screen
from textual import getters

from heaven.widgets.mandelbrot import MandelbrotView


class MainScreen(Screen):
    AUTO_FOCUS = "MandelbrotView"

    mandelbrot = getters.query_one(MandelbrotView)

    def compose(self) -> ComposeResult:
        yield MandelbrotView(id="mandelbrot")
