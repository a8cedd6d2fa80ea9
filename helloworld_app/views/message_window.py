from __future__ import annotations
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Static

from helloworld_core.render import EMPTY_TEXT

WINDOW_TITLE = "Hello World Addon"


class TitleBar(Static):
    """Drag handle: moving the mouse with the button held moves the parent window."""

    def __init__(self, text: str, window: Vertical, **kwargs):
        super().__init__(text, **kwargs)
        self._window = window
        self._dragging = False

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self._dragging = True
        self.capture_mouse()
        event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if not self._dragging:
            return
        offset = self._window.styles.offset
        self._window.styles.offset = (
            int(offset.x.value) + event.delta_x,
            int(offset.y.value) + event.delta_y,
        )

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self._dragging:
            self._dragging = False
            self.release_mouse()


class MessageWindow(Vertical):
    """
    The addon's single window:
    - title bar (drag to move) with a close button,
    - scrollable message history,
    - Clear History button.
    Hidden until something shows it.
    """

    def __init__(self, on_clear, on_close, **kwargs):
        super().__init__(**kwargs)
        self._on_clear = on_clear
        self._on_close = on_close

    def compose(self) -> ComposeResult:
        with Horizontal(id="mw_header"):
            yield TitleBar(WINDOW_TITLE, self, id="mw_title")
            yield Button("X", id="mw_close")
        with VerticalScroll(id="mw_scroll"):
            self.body = Static(EMPTY_TEXT, id="mw_text", markup=False)
            yield self.body
        yield Button("Clear History", id="mw_clear")

    def update_text(self, text: str) -> None:
        self.body.update(text)

    def set_shown(self, shown: bool) -> None:
        self.display = shown

    def on_button_pressed(self, event: Button.Pressed):
        if event.button.id == "mw_close":
            self._on_close()
            event.stop()
        elif event.button.id == "mw_clear":
            self._on_clear()
            event.stop()
