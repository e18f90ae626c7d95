"""
Controls — turns raw key data into calls on a panel group and the log box.
"""
from __future__ import annotations

import logging
from typing import Callable

from .group import PanelGroup
from .keybindings import GuiKeybindingsManager
from .log_box import LogBox

logger = logging.getLogger(__name__)


class GroupControls:
    """
    Routes navigation keys to *group* and *log_box*.

    ``handle_input`` returns the action it recognised. ``confirm`` and
    ``quit`` have no toolkit effect; they are returned for the caller, and
    ``on_confirm`` (if set) receives the current selection.
    """

    def __init__(
        self,
        group: PanelGroup,
        log_box: LogBox,
        keybindings: GuiKeybindingsManager | None = None,
    ) -> None:
        self.group = group
        self.log_box = log_box
        self.keybindings = keybindings or GuiKeybindingsManager()
        self.on_confirm: Callable[[str], None] | None = None

        self._handlers: dict[str, Callable[[], None]] = {
            "logScrollUp": log_box.scroll_up,
            "logScrollDown": log_box.scroll_down,
            "selectionUp": group.prev_selection,
            "selectionDown": group.next_selection,
            "focusPrevious": group.focus_previous,
            "focusNext": group.focus_next,
            "confirm": self._confirm,
        }

    def set_group(self, group: PanelGroup) -> None:
        """Point the navigation keys at another group."""
        self.group = group
        self._handlers.update({
            "selectionUp": group.prev_selection,
            "selectionDown": group.next_selection,
            "focusPrevious": group.focus_previous,
            "focusNext": group.focus_next,
        })

    def _confirm(self) -> None:
        if self.on_confirm:
            self.on_confirm(self.group.read_selection())

    def handle_input(self, data: str) -> str | None:
        action = self.keybindings.action_for(data)
        if action is None:
            logger.debug("Unbound key %r", data)
            return None
        handler = self._handlers.get(action)
        if handler:
            handler()
        return action
