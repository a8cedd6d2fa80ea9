from typing import Iterator, List
from .models import SavedVariables


class MessageStore:
    """Ordered message log backed by the saved variables record.

    The store never owns the list; it mutates ``db.messages`` in place so
    whatever holds the record sees every change when it is saved.
    """

    def __init__(self, db: SavedVariables):
        self.db = db

    def append(self, text: str) -> bool:
        """Append ``text`` verbatim. Blank text is rejected and returns False."""
        if text is None or not text.strip():
            return False
        self.db.messages.append(text)
        return True

    def clear(self) -> None:
        self.db.messages.clear()

    def count(self) -> int:
        return len(self.db.messages)

    @property
    def messages(self) -> List[str]:
        return list(self.db.messages)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)
