class Visibility:
    """Shown/hidden flag for the message window."""

    def __init__(self, shown: bool = False):
        self._shown = bool(shown)

    @property
    def shown(self) -> bool:
        return self._shown

    def show(self) -> None:
        self._shown = True

    def hide(self) -> None:
        self._shown = False

    def toggle(self) -> bool:
        self._shown = not self._shown
        return self._shown

    def __repr__(self) -> str:
        return f"Visibility(shown={self._shown})"
