# helloworld_app/views/log.py
from textual.widgets import Static


class ChatLog(Static):
    """Chat frame stand-in: everything the addon prints ends up here."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._lines: list[str] = []

    def add_line(self, text: str) -> None:
        """Append a line (Rich markup allowed)."""
        self._lines.append(text)
        self.update("\n".join(self._lines))
        parent = self.parent
        if parent is not None and hasattr(parent, "scroll_end"):
            parent.scroll_end(animate=False)

    def clear(self) -> None:
        self._lines = []
        self.update("")

    @property
    def lines(self) -> list[str]:
        return list(self._lines)
