from dataclasses import dataclass, field
from typing import List, Dict, Any

DB_NAME = "HelloWorldDB"


@dataclass
class SavedVariables:
    """The persisted HelloWorldDB record."""
    messages: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "SavedVariables":
        # anything that isn't a usable record counts as a first run
        if not isinstance(data, dict):
            return cls()
        raw = data.get("messages")
        if not isinstance(raw, list):
            return cls()
        return cls(messages=[m if isinstance(m, str) else str(m) for m in raw if m is not None])

    def to_dict(self) -> Dict[str, Any]:
        return {"messages": list(self.messages)}


@dataclass
class CommandResult:
    ok: bool = True
    lines: List[str] = field(default_factory=list)
    # message window needs to be re-rendered
    redraw: bool = False
