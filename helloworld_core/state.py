from dataclasses import dataclass, field
from .models import SavedVariables
from .store import MessageStore
from .visibility import Visibility


@dataclass
class AppState:
    db: SavedVariables = field(default_factory=SavedVariables)
    window: Visibility = field(default_factory=Visibility)

    @property
    def store(self) -> MessageStore:
        return MessageStore(self.db)
