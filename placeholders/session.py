"""Per-character session state: the set of tabs with placeholders disabled.

Character storage is wiped when a character loads.  The disabled tab list is
read before the wipe and written back straight after, so it is the one value
that survives.
"""

from __future__ import annotations

from typing import Any, Iterator, List

import structlog

from placeholders.storage import MemoryStorage

log = structlog.get_logger(__name__)

DISABLED_TABS_KEY = "disabledTabs"


def _sanitize_tabs(raw: Any) -> List[int]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        log.warning("Discarding malformed disabled tab list", value=repr(raw))
        return []
    tabs: List[int] = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            log.warning("Dropping invalid disabled tab", value=repr(value))
            continue
        if value not in tabs:
            tabs.append(value)
    return tabs


class DisabledTabs:
    """Ordered set of tab indices whose placeholders are not recreated."""

    def __init__(self, storage: MemoryStorage, tabs: List[int] | None = None) -> None:
        self._storage = storage
        self._tabs: List[int] = list(tabs or [])

    def __contains__(self, tab: object) -> bool:
        return tab in self._tabs

    def __iter__(self) -> Iterator[int]:
        return iter(self._tabs)

    def __len__(self) -> int:
        return len(self._tabs)

    def as_list(self) -> List[int]:
        return list(self._tabs)

    def set_disabled(self, tab: int, disabled: bool) -> None:
        if tab < 0:
            raise ValueError(f"Tab index must be >= 0, got {tab}")
        if disabled and tab not in self._tabs:
            self._tabs.append(tab)
        elif not disabled and tab in self._tabs:
            self._tabs.remove(tab)
        else:
            return
        self._storage.set(DISABLED_TABS_KEY, self.as_list())
        log.info("Placeholder tab setting changed", tab=tab, disabled=disabled)

    def toggle(self, tab: int) -> bool:
        """Flip ``tab`` and return whether it is now disabled."""
        disabled = tab not in self._tabs
        self.set_disabled(tab, disabled)
        return disabled


def load_session(storage: MemoryStorage) -> DisabledTabs:
    """Re-establish session state at character load.

    Reads the disabled tab list, clears the character storage and writes the
    list back unchanged.
    """
    tabs = _sanitize_tabs(storage.get(DISABLED_TABS_KEY))
    storage.clear()
    storage.set(DISABLED_TABS_KEY, tabs)
    log.debug("Session state restored", disabled_tabs=tabs)
    return DisabledTabs(storage, tabs)
