# placeholders/placeholder_bank.py
"""
Placeholder-aware bank.

:class:`PlaceholderBank` wraps a host bank (anything implementing
:class:`bank.operations.BankOperations`) and layers placeholder behaviour on
top of it:

* removal hooks installed on the host capture a slot's position before a
  removal and bring the item back as a placeholder afterwards,
* slot counting follows the configured policy,
* item actions that need a real quantity are guarded against placeholders,
* selling and bulk top-ups skip placeholders,
* character load restores session state and repairs duplicate entries.

Operations not overridden here are forwarded to the host untouched.
"""
from typing import Any, Iterable, List

import structlog

from bank.components import BankItem, Item
from bank.operations import BankOperations, RemovalRequest
from placeholders import slots
from placeholders.collaborators import (
    EmptyItems,
    MessageLog,
    NoEmptyItems,
    Notifier,
    NullSelectionView,
    SelectionView,
)
from placeholders.guard import positive_quantity_action, show_contents
from placeholders.metadata import REMOVE_ALL, MetadataCapture
from placeholders.reconciler import PlaceholderReconciler
from placeholders.repair import repair_duplicates
from placeholders.session import DisabledTabs, load_session
from placeholders.settings import PolicySettings, SettingsStore
from placeholders.storage import MemoryStorage

log = structlog.get_logger(__name__)

# Leading slots of tab 0 inspected by the clue chaser check
CLUE_CHASER_SLOTS: int = 6


class PlaceholderBank:
    def __init__(
        self,
        host: BankOperations,
        settings: SettingsStore,
        storage: MemoryStorage | None = None,
        notifier: Notifier | None = None,
        selection: SelectionView | None = None,
        empties: EmptyItems | None = None,
    ) -> None:
        self.host = host
        self.settings = settings
        self.storage = storage if storage is not None else MemoryStorage()
        self.notifier = notifier if notifier is not None else MessageLog()
        self.selection = selection if selection is not None else NullSelectionView()
        self.empties = empties if empties is not None else NoEmptyItems()
        # Set by on_character_loaded, once storage has been read
        self.disabled_tabs: DisabledTabs | None = None
        self.capture = MetadataCapture()
        self.reconciler = PlaceholderReconciler(self.capture, self.empties, self.selection)
        self.loaded = False

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not defined on the wrapper
        if name == "host":
            raise AttributeError(name)
        return getattr(self.host, name)

    @property
    def policy(self) -> PolicySettings:
        return PolicySettings.from_store(self.settings)

    # --- Lifecycle ---

    def on_character_loaded(self) -> int:
        """Restore session state, then repair duplicates; returns entries dropped.

        Removal hooks are armed on the host only after both have run.
        """
        self.disabled_tabs = load_session(self.storage)
        dropped = repair_duplicates(self.host)
        self.host.install_hooks(self)
        self.loaded = True
        log.info(
            "Placeholder bank loaded",
            disabled_tabs=self.disabled_tabs.as_list(),
            duplicates_removed=dropped,
        )
        return dropped

    # --- Host hooks ---

    def before_remove(self, bank: BankOperations, request: RemovalRequest) -> RemovalRequest:
        return self.capture.capture(bank, request)

    def after_remove(self, bank: BankOperations, request: RemovalRequest, result: Any) -> None:
        self.reconciler.reconcile(bank, request, result, self.policy, self.disabled_tabs)

    def count_occupied(self, bank: BankOperations, raw: int) -> int:
        return slots.occupied_slots(bank, raw, self.policy, self.empties)

    # --- Storage queries ---

    def has_item(self, item: Item) -> bool:
        """``True`` only for a real, positive-quantity holding."""
        bank_item = self.host.get_bank_item(item)
        return bank_item is not None and bank_item.quantity > 0

    def has_placeholder(self, item: Item) -> bool:
        bank_item = self.host.get_bank_item(item)
        return bank_item is not None and bank_item.quantity == 0

    def placeholders(self, tab: int | None = None) -> List[BankItem]:
        tabs = self.host.tabs if tab is None else [self.host.tabs[tab]]
        return [entry for tab_items in tabs for entry in tab_items if entry.quantity == 0]

    # --- Removal ---

    def remove_item_quantity(
        self, item: Item, quantity: float, remove_charges: bool = False
    ) -> int:
        return self.host.remove_item_quantity(item, quantity, remove_charges)

    def release_placeholder(self, item: Item) -> bool:
        """Delete ``item``'s placeholder for good; ``False`` if it has none."""
        if not self.has_placeholder(item):
            return False
        self.host.remove_item_quantity(item, REMOVE_ALL)
        return not self.host.has_item(item)

    def release_all_placeholders(self, tab: int | None = None) -> int:
        released = 0
        for bank_item in reversed(self.placeholders(tab)):
            if self.release_placeholder(bank_item.item):
                released += 1
        log.info("Placeholders released", tab=tab, count=released)
        return released

    # --- Capacity ---

    @property
    def occupied_slots(self) -> int:
        return self.host.occupied_slots

    def will_items_fit(self, items: Iterable[Item]) -> bool:
        return slots.will_items_fit(self.host, list(items), self.policy, self.empties)

    def add_item(
        self,
        item: Item,
        quantity: int,
        tab: int | None = None,
        log_lost: bool = False,
    ) -> bool:
        if quantity <= 0:
            return False
        bank_item = self.host.get_bank_item(item)
        if (
            bank_item is not None
            and bank_item.quantity == 0
            and not self.policy.use_slots
            and self.host.occupied_slots >= self.host.max_slots
        ):
            log.info("Bank full, placeholder not filled", item_id=item.id, quantity=quantity)
            self.notifier.bank_full(item)
            if log_lost:
                self.host.lost_items[item] = self.host.lost_items.get(item, 0) + quantity
            return False
        return self.host.add_item(item, quantity, tab=tab, log_lost=log_lost)

    # --- Selling and bulk operations ---

    @positive_quantity_action("sell")
    def sell_item(self, item: Item, quantity: int) -> int:
        return self.host.sell_item(item, quantity)

    def sell_items_from_tab(self, tab: int) -> int:
        """Sell every unlocked real holding of ``tab``, last slot first."""
        earned = 0
        for bank_item in reversed(list(self.host.tabs[tab])):
            if bank_item.locked or bank_item.quantity == 0:
                continue
            earned += self.host.sell_item(bank_item.item, bank_item.quantity)
        return earned

    def sell_selected_items(self) -> int:
        earned = 0
        for item in list(self.host.selected_items):
            bank_item = self.host.get_bank_item(item)
            if bank_item is None or bank_item.quantity == 0:
                continue
            earned += self.host.sell_item(item, bank_item.quantity)
        self.host.selected_items.clear()
        return earned

    def add_quantity_to_existing_items(self, amount: int) -> None:
        if amount <= 0:
            return
        for bank_item in list(self.host.items.values()):
            if bank_item.quantity > 0:
                bank_item.quantity += amount
                self.host.mark_dirty(bank_item.item)

    def check_for_clue_chasers(self) -> bool:
        leading = self.host.tabs[0][:CLUE_CHASER_SLOTS]
        if any(entry.quantity == 0 for entry in leading):
            return False
        return self.host.check_for_clue_chasers()

    # --- Item actions ---

    @positive_quantity_action("double_click")
    def double_click(self, item: Item) -> Any:
        return self.host.double_click(item)

    @positive_quantity_action("bury")
    def bury(self, item: Item, quantity: int = 1) -> Any:
        return self.host.bury(item, quantity)

    @positive_quantity_action("open")
    def open(self, item: Item, quantity: int = 1) -> Any:
        return self.host.open(item, quantity)

    @positive_quantity_action("claim")
    def claim(self, item: Item, quantity: int = 1) -> Any:
        return self.host.claim(item, quantity)

    @positive_quantity_action("use_eight")
    def use_eight(self, item: Item) -> Any:
        return self.host.use_eight(item)

    @positive_quantity_action("read", substitute=show_contents)
    def read(self, item: Item) -> Any:
        return self.host.read(item)
