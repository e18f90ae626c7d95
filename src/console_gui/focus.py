"""Focus registry — the one panel, across all groups, that holds focus."""
from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .panel import Panel

logger = logging.getLogger(__name__)


class FocusRegistry:
    """
    Weak pointer to the focused Panel.

    The registry never keeps a panel alive; panels are owned by their groups.
    """

    def __init__(self) -> None:
        self._ref: weakref.ref[Panel] | None = None

    @property
    def focused(self) -> Panel | None:
        return self._ref() if self._ref is not None else None

    def focus(self, panel: Panel | None) -> None:
        if panel is None:
            self._ref = None
        else:
            self._ref = weakref.ref(panel)
        logger.debug("Focus moved to %r", panel)

    def is_focused(self, panel: Panel) -> bool:
        return self.focused is panel

    def has_focus(self) -> bool:
        return self.focused is not None

    def clear(self) -> None:
        self.focus(None)
