import re
from typing import Callable, Dict, Tuple
from .models import CommandResult
from .state import AppState

PREFIX = "HelloWorld:"

HELP_LINES = [
    "HelloWorld Commands:",
    "  /hw open - Open the message window",
    "  /hw close - Close the message window",
    "  /hw write <message> - Save a message without toggling window",
    "  /hw clear - Clear all saved messages",
    "  /hw help - Show this help message",
]

_SPLIT = re.compile(r"^(\S*)\s*(.*)$", re.DOTALL)


def parse_command(line: str) -> Tuple[str, str]:
    """Split a raw line into (lower-cased command, stripped remainder)."""
    m = _SPLIT.match((line or "").lstrip())
    command, rest = m.group(1), m.group(2)
    return command.lower(), rest.strip()


class CommandInterpreter:
    """Dispatches one command line against the injected AppState."""

    def __init__(self, state: AppState):
        self.state = state
        self._actions: Dict[str, Callable[[str], CommandResult]] = {
            "open": self._open,
            "close": self._close,
            "write": self._write,
            "clear": self._clear,
            "help": self._help,
            "": self._help,
        }

    def execute(self, line: str) -> CommandResult:
        command, rest = parse_command(line)
        action = self._actions.get(command)
        if action is None:
            return self._fallback(line)
        return action(rest)

    # ─────────────────────────────────────
    # Actions
    # ─────────────────────────────────────
    def _open(self, _rest: str) -> CommandResult:
        self.state.window.show()
        return CommandResult(lines=[f"{PREFIX} Window opened."])

    def _close(self, _rest: str) -> CommandResult:
        self.state.window.hide()
        return CommandResult(lines=[f"{PREFIX} Window closed."])

    def _write(self, rest: str) -> CommandResult:
        store = self.state.store
        if not store.append(rest):
            return CommandResult(ok=False, lines=[f"{PREFIX} Usage - /hw write <message>"])
        return CommandResult(lines=[self._saved_line()], redraw=True)

    def _clear(self, _rest: str) -> CommandResult:
        self.state.store.clear()
        return CommandResult(lines=[f"{PREFIX} Message history cleared!"], redraw=True)

    def _help(self, _rest: str) -> CommandResult:
        return CommandResult(lines=list(HELP_LINES))

    def _fallback(self, line: str) -> CommandResult:
        # unknown command: the whole raw line is the message, and the window flips
        self.state.store.append(line)
        self.state.window.toggle()
        return CommandResult(lines=[self._saved_line()], redraw=True)

    def _saved_line(self) -> str:
        return f"{PREFIX} Message saved! (Total: {self.state.store.count()})"
