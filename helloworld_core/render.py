from typing import Iterable

EMPTY_TEXT = "No messages yet. Type /hw <message> to add one!"


def render_messages(messages: Iterable[str]) -> str:
    msgs = list(messages)
    if not msgs:
        return EMPTY_TEXT
    lines = [f"Message History ({len(msgs)} total):", ""]
    for i, msg in enumerate(msgs, 1):
        lines.append(f"{i}. {msg}")
    return "\n".join(lines)
