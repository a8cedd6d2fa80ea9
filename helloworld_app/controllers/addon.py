from pathlib import Path
from typing import Any, Dict, List, Optional
from helloworld_core.state import AppState
from helloworld_core.models import CommandResult
from helloworld_core.interpreter import CommandInterpreter, PREFIX
from helloworld_core.render import render_messages
from helloworld_core.events import EventDispatcher, PLAYER_LOGIN, PLAYER_LOGOUT
from helloworld_core.slash import SlashCommands
from helloworld_app.services import settings as settings_service
from helloworld_app.services.saved_variables import load_saved_variables, save_saved_variables
from helloworld_app.services.log_config import get_logger

log = get_logger(__name__)

SLASH_NAME = "HELLOWORLD"


class AddonController:
    """
    Host-side glue for the addon: owns the AppState, the event table and the
    slash command table. The UI asks it for lines to print and text to show.
    """

    def __init__(self, settings: Dict[str, Any]):
        self.settings = settings
        self.state = AppState()
        self.interpreter = CommandInterpreter(self.state)
        self.events = EventDispatcher()
        self.slash = SlashCommands()

        self.events.register(PLAYER_LOGIN, self.on_player_login)
        self.events.register(PLAYER_LOGOUT, self.on_player_logout)
        self.slash.register(
            SLASH_NAME,
            self.settings.get("slash_aliases") or settings_service.DEFAULTS["slash_aliases"],
            self.handle_command,
        )

    @property
    def saved_variables_path(self) -> Path:
        return settings_service.saved_variables_path(self.settings)

    # ─────────────────────────────────────
    # Saved variables
    # ─────────────────────────────────────
    def load(self) -> int:
        """Replace the in-memory record with the persisted one. Returns message count."""
        db = load_saved_variables(self.saved_variables_path)
        self.state.db.messages[:] = db.messages
        return self.state.store.count()

    def save(self) -> Path:
        return save_saved_variables(self.saved_variables_path, self.state.db)

    # ─────────────────────────────────────
    # Events
    # ─────────────────────────────────────
    def on_player_login(self, _event: str) -> CommandResult:
        n = self.state.store.count()
        log.info("event.player_login", messages=n)
        return CommandResult(
            lines=[
                "Hello World addon loaded! Type /hw to open the window.",
                f"{PREFIX} Loaded {n} saved messages.",
            ],
            redraw=True,
        )

    def on_player_logout(self, _event: str) -> CommandResult:
        try:
            path = self.save()
        except OSError as e:
            log.error("event.player_logout.save_failed", error=str(e))
            return CommandResult(ok=False, lines=[f"{PREFIX} Could not save messages: {e}"])
        return CommandResult(lines=[f"{PREFIX} Saved {self.state.store.count()} messages to {path}."])

    def fire(self, event: str) -> List[CommandResult]:
        return self.events.fire(event)

    # ─────────────────────────────────────
    # Commands
    # ─────────────────────────────────────
    def handle_command(self, msg: str) -> CommandResult:
        result = self.interpreter.execute(msg)
        log.debug("command", text=msg, ok=result.ok, shown=self.state.window.shown,
                  messages=self.state.store.count())
        return result

    def submit(self, line: str) -> Optional[CommandResult]:
        """Route a chat line through the slash table. None when no alias matched."""
        return self.slash.route(line)

    def clear_history(self) -> CommandResult:
        return self.interpreter.execute("clear")

    def display_text(self) -> str:
        return render_messages(self.state.store)
