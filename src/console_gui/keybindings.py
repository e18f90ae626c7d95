"""
GUI keybindings — maps toolkit actions to key identifiers.

Provides GuiAction type, DEFAULT_GUI_KEYBINDINGS, and the
GuiKeybindingsManager class.
"""
from __future__ import annotations

from typing import Literal

from .keys import KeyId, matches_key

# ─────────────────────────────────────────────────────────────────────────────
# GuiAction type
# ─────────────────────────────────────────────────────────────────────────────

GuiAction = Literal[
    # Log box
    "logScrollUp",
    "logScrollDown",
    # Selection inside the focused panel
    "selectionUp",
    "selectionDown",
    # Focus between panels
    "focusPrevious",
    "focusNext",
    # Handed back to the caller
    "confirm",
    "quit",
]

# ─────────────────────────────────────────────────────────────────────────────
# Default keybindings
# ─────────────────────────────────────────────────────────────────────────────

GuiKeybindingsConfig = dict[str, "KeyId | list[KeyId]"]

DEFAULT_GUI_KEYBINDINGS: dict[str, list[KeyId]] = {
    "logScrollUp":   ["pageUp"],
    "logScrollDown": ["pageDown"],
    "selectionUp":   ["up"],
    "selectionDown": ["down"],
    "focusPrevious": ["left"],
    "focusNext":     ["right", "tab"],
    "confirm":       ["enter"],
    "quit":          ["q", "escape"],
}


# ─────────────────────────────────────────────────────────────────────────────
# GuiKeybindingsManager
# ─────────────────────────────────────────────────────────────────────────────

class GuiKeybindingsManager:
    """Resolves raw key data to GUI actions, defaults overridden by *config*."""

    def __init__(self, config: GuiKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[str, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: GuiKeybindingsConfig) -> None:
        self._action_to_keys.clear()
        for action, keys in DEFAULT_GUI_KEYBINDINGS.items():
            self._action_to_keys[action] = list(keys)
        for action, keys in config.items():
            if keys is None:
                continue
            self._action_to_keys[action] = list(keys) if isinstance(keys, list) else [keys]

    def matches(self, data: str, action: str) -> bool:
        """Check if input data matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        return any(matches_key(data, k) for k in keys)

    def action_for(self, data: str) -> str | None:
        """First action bound to *data*, in declaration order."""
        for action in self._action_to_keys:
            if self.matches(data, action):
                return action
        return None

    def get_keys(self, action: str) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: GuiKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)
