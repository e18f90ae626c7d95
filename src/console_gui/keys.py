"""
Keyboard input decoding for legacy terminal sequences.

The toolkit never reads input itself; callers that do can use these helpers
to turn raw key data into key identifiers.

API:
- parse_key(data) — key identifier for one key's raw data, or None
- matches_key(data, key_id) — check if input matches a key identifier
- KEY — helper constants for common keys
"""
from __future__ import annotations

KeyId = str


class _KeyHelper:
    """Key identifier constants."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"


KEY = _KeyHelper()

_LEGACY_KEY_SEQS: dict[str, list[str]] = {
    "up":       ["\x1b[A", "\x1bOA"],
    "down":     ["\x1b[B", "\x1bOB"],
    "right":    ["\x1b[C", "\x1bOC"],
    "left":     ["\x1b[D", "\x1bOD"],
    "home":     ["\x1b[H", "\x1bOH", "\x1b[1~", "\x1b[7~"],
    "end":      ["\x1b[F", "\x1bOF", "\x1b[4~", "\x1b[8~"],
    "insert":   ["\x1b[2~"],
    "delete":   ["\x1b[3~"],
    "pageUp":   ["\x1b[5~", "\x1b[[5~"],
    "pageDown": ["\x1b[6~", "\x1b[[6~"],
}

_SINGLE_CHAR_KEYS: dict[str, str] = {
    "\x1b": "escape",
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    " ": "space",
    "\x7f": "backspace",
    "\x08": "backspace",
}

_SEQ_TO_KEY: dict[str, str] = {
    seq: key_id for key_id, seqs in _LEGACY_KEY_SEQS.items() for seq in seqs
}


def parse_key(data: str) -> KeyId | None:
    """Return the key identifier for *data*, or None if it isn't recognised."""
    if not data:
        return None
    if data in _SEQ_TO_KEY:
        return _SEQ_TO_KEY[data]
    if data in _SINGLE_CHAR_KEYS:
        return _SINGLE_CHAR_KEYS[data]
    if len(data) == 1:
        code = ord(data)
        # ctrl+a .. ctrl+z
        if 1 <= code <= 26:
            return f"ctrl+{chr(code + 96)}"
        if data.isprintable():
            return data.lower()
    return None


def matches_key(data: str, key_id: KeyId) -> bool:
    """Check if raw input *data* is the key named by *key_id*."""
    parsed = parse_key(data)
    if parsed is None:
        return False
    return parsed == key_id.lower() or parsed == key_id
