from typing import Any, Callable, Dict, List

PLAYER_LOGIN = "PLAYER_LOGIN"
PLAYER_LOGOUT = "PLAYER_LOGOUT"

EventHandler = Callable[..., Any]


class EventDispatcher:
    """Named event -> handlers table, fired synchronously by the driver."""

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}

    def register(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.setdefault(event, [])
        if handler not in handlers:
            handlers.append(handler)

    def unregister(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)
        if not handlers:
            self._handlers.pop(event, None)

    def is_registered(self, event: str) -> bool:
        return bool(self._handlers.get(event))

    def fire(self, event: str, *args: Any) -> List[Any]:
        """Call each handler for ``event`` with ``(event, *args)``, in registration order."""
        return [fn(event, *args) for fn in list(self._handlers.get(event, []))]
