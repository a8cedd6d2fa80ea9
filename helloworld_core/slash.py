import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

SlashHandler = Callable[[str], Any]

_LEADING = re.compile(r"^\s*(\S+)\s?(.*)$", re.DOTALL)


class SlashCommands:
    """
    Slash command table: a list name (e.g. HELLOWORLD) owns one handler and
    any number of "/alias" spellings that route to it.
    """

    def __init__(self):
        self._handlers: Dict[str, SlashHandler] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, name: str, aliases: Iterable[str], handler: SlashHandler) -> None:
        name = name.upper()
        self._handlers[name] = handler
        for alias in aliases:
            alias = alias.strip().lower()
            if not alias.startswith("/"):
                alias = "/" + alias
            self._aliases[alias] = name

    def aliases(self, name: str) -> List[str]:
        name = name.upper()
        return [a for a, n in self._aliases.items() if n == name]

    def split(self, line: str) -> Optional[Tuple[str, str]]:
        """Return (alias, rest) when the line starts with a registered alias."""
        m = _LEADING.match(line or "")
        if not m:
            return None
        token = m.group(1).lower()
        if token not in self._aliases:
            return None
        return token, m.group(2)

    def route(self, line: str) -> Any:
        """Hand the text after the alias to its handler; None if nothing matched."""
        found = self.split(line)
        if found is None:
            return None
        alias, rest = found
        return self._handlers[self._aliases[alias]](rest)
