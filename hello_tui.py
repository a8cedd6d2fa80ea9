from textual.app import App, ComposeResult
from textual.widgets import Header, Footer, Input
from textual.containers import Vertical, VerticalScroll
from rich.console import Console
from rich.markup import escape
from typing import Any, Dict, Iterable, List, Optional

from helloworld_core.events import PLAYER_LOGIN, PLAYER_LOGOUT
from helloworld_core.models import CommandResult
from helloworld_app.controllers.addon import AddonController
from helloworld_app.services.settings import load_settings
from helloworld_app.services.log_config import close_logging, configure_logging, get_logger
from helloworld_app.views.log import ChatLog
from helloworld_app.views.message_window import MessageWindow

log = get_logger(__name__)


# ─────────────────────────────────────────
# App
# ─────────────────────────────────────────
class HelloWorldTUI(App):
    TITLE = "HelloWorld"
    CSS = """
    Screen { layout: vertical; }
    #main { height: 1fr; align: center middle; }
    #window { width: 44; height: 14; display: none; border: solid $primary; background: $surface; }
    #mw_header { height: 1; background: $primary; }
    #mw_title { width: 1fr; content-align: center middle; text-style: bold; }
    #mw_close { width: 5; min-width: 5; height: 1; border: none; }
    #mw_scroll { height: 1fr; padding: 0 1; }
    #mw_clear { width: 100%; }
    #chat_scroll { height: 8; border-top: solid $surface; }
    #chat_input { height: 3; }
    """
    BINDINGS = [
        ("f2", "toggle_window", "Toggle Window"),
        ("ctrl+l", "clear_history", "Clear History"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.settings = settings if settings is not None else load_settings()
        self.controller = AddonController(self.settings)
        self._logged_out = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="main"):
            self.window = MessageWindow(
                on_clear=self.action_clear_history,
                on_close=self._on_window_closed,
                id="window",
            )
            yield self.window
        with VerticalScroll(id="chat_scroll"):
            self.chat = ChatLog(id="chat")
            yield self.chat
        self.chat_input = Input(placeholder="/hw help", id="chat_input")
        yield self.chat_input
        yield Footer()

    def on_mount(self):
        try:
            path = configure_logging(self.settings)
            log.info("app.start", log_file=str(path))
        except OSError as e:
            self.chat.add_line(f"[red]Logging disabled:[/red] {escape(str(e))}")

        n = self.controller.load()
        log.info("app.loaded", messages=n)
        self._apply_all(self.controller.fire(PLAYER_LOGIN))
        self._sync_window()
        self.chat_input.focus()

    # ─────────────────────────────────────
    # Chat input
    # ─────────────────────────────────────
    def on_input_submitted(self, event: Input.Submitted) -> None:
        line = event.value
        event.input.value = ""
        if line.strip():
            self.submit(line)

    def submit(self, line: str) -> None:
        try:
            result = self.controller.submit(line)
        except Exception as e:
            log.exception("command.failed", text=line)
            self.chat.add_line(f"[red]Command failed:[/red] {escape(str(e))}")
            return
        if result is None:
            token = line.split()[0]
            if token.startswith("/"):
                self.chat.add_line(f"[yellow]Unknown command:[/yellow] {escape(token)}")
            else:
                self.chat.add_line(escape(line))
            return
        self._apply(result)

    # ─────────────────────────────────────
    # Actions
    # ─────────────────────────────────────
    def action_toggle_window(self) -> None:
        self.controller.state.window.toggle()
        self._sync_window()

    def action_clear_history(self) -> None:
        self._apply(self.controller.clear_history())

    async def action_quit(self) -> None:
        if not self._logged_out:
            results = self.logout()
            if any(not r.ok for r in results):
                # stay up so the save error can be read; a second quit exits
                self.chat.add_line("[yellow]Messages were not saved. Quit again to exit anyway.[/yellow]")
                return
        self.exit()

    def logout(self) -> List[CommandResult]:
        """Fire PLAYER_LOGOUT once; that is where the saved variables get written."""
        if self._logged_out:
            return []
        self._logged_out = True
        results = self.controller.fire(PLAYER_LOGOUT)
        if self.is_running:
            self._apply_all(results)
        return results

    def on_unmount(self) -> None:
        close_logging()

    # ─────────────────────────────────────
    # Internal flows
    # ─────────────────────────────────────
    def _on_window_closed(self) -> None:
        self.controller.state.window.hide()
        self._sync_window()

    def _apply_all(self, results: Iterable[CommandResult]) -> None:
        for result in results:
            self._apply(result)

    def _apply(self, result: CommandResult) -> None:
        for line in result.lines:
            text = escape(line)
            self.chat.add_line(text if result.ok else f"[red]{text}[/red]")
        if result.redraw:
            self.window.update_text(self.controller.display_text())
        self._sync_window()

    def _sync_window(self) -> None:
        self.window.set_shown(self.controller.state.window.shown)


def main():
    app = HelloWorldTUI()
    app.run()
    err = Console(stderr=True)
    for result in app.logout():
        if not result.ok:
            for line in result.lines:
                err.print(f"[red]{escape(line)}[/red]")
    close_logging()


if __name__ == "__main__":
    main()
