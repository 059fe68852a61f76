"""Bank placeholders: keep an emptied bank slot in place as a zero-quantity entry.

``PlaceholderBank`` is the entry point.  It wraps a host bank and wires the
pieces below together:

- ``metadata``: slot position captured before a removal
- ``reconciler``: placeholder recreation after a removal
- ``slots``: occupied slot counting and capacity checks
- ``guard``: item actions blocked on placeholders
- ``repair``: duplicate entry repair at load
- ``session``: disabled tabs that survive the load-time storage wipe
"""

from .collaborators import (
    EmptyItemSet,
    FocusedItemView,
    MessageLog,
    NoEmptyItems,
    NullSelectionView,
)
from .metadata import REMOVE_ALL, ItemMetadata, MetadataCapture
from .placeholder_bank import PlaceholderBank
from .reconciler import PlaceholderReconciler
from .repair import repair_duplicates
from .session import DISABLED_TABS_KEY, DisabledTabs, load_session
from .settings import DictSettingsStore, PolicySettings, YamlSettingsStore
from .storage import CharacterStorage, MemoryStorage

__all__ = [
    "EmptyItemSet",
    "FocusedItemView",
    "MessageLog",
    "NoEmptyItems",
    "NullSelectionView",
    "REMOVE_ALL",
    "ItemMetadata",
    "MetadataCapture",
    "PlaceholderBank",
    "PlaceholderReconciler",
    "repair_duplicates",
    "DISABLED_TABS_KEY",
    "DisabledTabs",
    "load_session",
    "DictSettingsStore",
    "PolicySettings",
    "YamlSettingsStore",
    "CharacterStorage",
    "MemoryStorage",
]
