# bank/registry.py
"""
In-memory host bank.

Stores one :class:`BankItem` per :class:`Item` plus an ordered list of
entries per tab.  The bank knows nothing about placeholders: a removal that
brings a quantity to zero or below deletes the slot.  Layers that need to
observe or adjust removals and slot counting do so through the
:class:`bank.operations.BankHooks` installed with :meth:`HostBank.install_hooks`.
"""
from typing import Any, Dict, Iterable, List, Self, Sequence, Set, Tuple

import structlog

from bank.components import BankItem, Item
from bank.errors import ItemNotFoundError
from bank.operations import BankHooks, RemovalRequest

log = structlog.get_logger(__name__)

DEFAULT_TAB_COUNT: int = 12
DEFAULT_MAX_SLOTS: int = 12
USE_EIGHT_QUANTITY: int = 8
# Item ids that must lead tab 0, in order, for the clue chaser check
CLUE_CHASER_IDS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)


class HostBank:
    def __init__(
        self: Self,
        max_slots: int = DEFAULT_MAX_SLOTS,
        tab_count: int = DEFAULT_TAB_COUNT,
        notifier: Any = None,
        clue_chaser_ids: Sequence[int] = CLUE_CHASER_IDS,
    ):
        if tab_count <= 0:
            raise ValueError("HostBank requires at least one tab.")
        self.items: Dict[Item, BankItem] = {}
        self.tabs: List[List[BankItem]] = [[] for _ in range(tab_count)]
        self.selected_items: List[Item] = []
        self.selected_tab: int = 0
        self.max_slots: int = max_slots
        self.lost_items: Dict[Item, int] = {}
        self.dirty_items: Set[Item] = set()
        self.item_charges: Dict[Item, int] = {}
        self.gp: int = 0
        # (action name, item) for every item action the bank executed
        self.action_log: List[Tuple[str, Item]] = []
        self.notifier = notifier
        self.clue_chaser_ids: Tuple[int, ...] = tuple(clue_chaser_ids)
        self._hooks: BankHooks | None = None
        log.debug("HostBank initialized", max_slots=max_slots, tabs=tab_count)

    def install_hooks(self: Self, hooks: BankHooks | None) -> None:
        """Install (or clear with ``None``) the removal and slot-count hooks."""
        self._hooks = hooks

    # --- Storage ---

    def get_bank_item(self: Self, item: Item) -> BankItem | None:
        return self.items.get(item)

    def has_item(self: Self, item: Item) -> bool:
        return item in self.items

    def get_quantity(self: Self, item: Item) -> int:
        bank_item = self.items.get(item)
        return bank_item.quantity if bank_item is not None else 0

    def _require(self: Self, item: Item) -> BankItem:
        bank_item = self.items.get(item)
        if bank_item is None:
            log.warning("Bank item not found", item_id=item.id)
            raise ItemNotFoundError(item)
        return bank_item

    def mark_dirty(self: Self, item: Item) -> None:
        self.dirty_items.add(item)

    def reposition_tab(self: Self, tab: int, start: int = 0) -> None:
        """Reassign contiguous positions to every entry of ``tab`` from ``start``."""
        tab_items = self.tabs[tab]
        for position in range(max(0, start), len(tab_items)):
            tab_items[position].tab = tab
            tab_items[position].tab_position = position

    def add_item(
        self: Self,
        item: Item,
        quantity: int,
        tab: int | None = None,
        log_lost: bool = False,
    ) -> bool:
        """Add ``quantity`` of ``item``, creating a new slot if needed.

        Returns ``False`` when a new slot is required and the bank is full.
        """
        if quantity <= 0:
            return False
        existing = self.items.get(item)
        if existing is not None:
            existing.quantity += quantity
            self.mark_dirty(item)
            log.debug("Bank item topped up", item_id=item.id, quantity=existing.quantity)
            return True

        if self.occupied_slots >= self.max_slots:
            log.info("Bank full, item rejected", item_id=item.id, quantity=quantity)
            if self.notifier is not None:
                self.notifier.bank_full(item)
            if log_lost:
                self.lost_items[item] = self.lost_items.get(item, 0) + quantity
            return False

        target_tab = self.selected_tab if tab is None else tab
        tab_items = self.tabs[target_tab]
        bank_item = BankItem(item, quantity, tab=target_tab, tab_position=len(tab_items))
        self.items[item] = bank_item
        tab_items.append(bank_item)
        if item.max_charges is not None:
            self.item_charges.setdefault(item, item.max_charges)
        self.mark_dirty(item)
        log.debug(
            "Bank item added",
            item_id=item.id,
            quantity=quantity,
            tab=target_tab,
            tab_position=bank_item.tab_position,
        )
        return True

    def remove_item_quantity(
        self: Self, item: Item, quantity: float, remove_charges: bool = False
    ) -> int:
        """Remove ``quantity`` of ``item``; returns the quantity left.

        Removing down to zero (or below) deletes the slot and closes the gap
        in its tab.  Raises :class:`ItemNotFoundError` for unknown items.
        """
        request = RemovalRequest(item, quantity, remove_charges)
        if self._hooks is not None:
            request = self._hooks.before_remove(self, request)
        result = self._remove(request.item, request.quantity, request.remove_charges)
        if self._hooks is not None:
            self._hooks.after_remove(self, request, result)
        return result

    def _remove(self: Self, item: Item, quantity: float, remove_charges: bool) -> int:
        bank_item = self._require(item)
        if quantity <= 0:
            return bank_item.quantity

        bank_item.quantity -= quantity
        if remove_charges:
            self.item_charges.pop(item, None)
        self.mark_dirty(item)
        if bank_item.quantity > 0:
            return bank_item.quantity

        del self.items[item]
        tab_items = self.tabs[bank_item.tab]
        position = bank_item.tab_position
        if not (0 <= position < len(tab_items) and tab_items[position] is bank_item):
            position = next(
                (i for i, entry in enumerate(tab_items) if entry is bank_item), -1
            )
        if position >= 0:
            del tab_items[position]
            self.reposition_tab(bank_item.tab, position)
        else:
            log.warning("Removed bank item missing from its tab", item_id=item.id, tab=bank_item.tab)
        if item in self.selected_items:
            self.selected_items.remove(item)
        log.debug("Bank item deleted", item_id=item.id, tab=bank_item.tab)
        return 0

    # --- Capacity ---

    @property
    def raw_occupied_slots(self: Self) -> int:
        return len(self.items)

    @property
    def occupied_slots(self: Self) -> int:
        raw = self.raw_occupied_slots
        if self._hooks is not None:
            return self._hooks.count_occupied(self, raw)
        return raw

    def will_items_fit(self: Self, items: Iterable[Item]) -> bool:
        new_items = {item for item in items if item not in self.items}
        return self.occupied_slots + len(new_items) <= self.max_slots

    # --- Selling and bulk operations ---

    def sell_item(self: Self, item: Item, quantity: int) -> int:
        """Sell up to ``quantity`` of ``item``; returns the gp earned."""
        bank_item = self._require(item)
        sold = min(quantity, bank_item.quantity)
        if sold <= 0:
            return 0
        self.remove_item_quantity(item, sold)
        earned = sold * item.sell_price
        self.gp += earned
        log.debug("Item sold", item_id=item.id, quantity=sold, gp=earned)
        return earned

    def sell_items_from_tab(self: Self, tab: int) -> int:
        earned = 0
        for bank_item in list(self.tabs[tab]):
            if not bank_item.locked:
                earned += self.sell_item(bank_item.item, bank_item.quantity)
        return earned

    def sell_selected_items(self: Self) -> int:
        earned = 0
        for item in list(self.selected_items):
            bank_item = self.items.get(item)
            if bank_item is not None:
                earned += self.sell_item(item, bank_item.quantity)
        self.selected_items.clear()
        return earned

    def add_quantity_to_existing_items(self: Self, amount: int) -> None:
        for bank_item in self.items.values():
            bank_item.quantity += amount
            self.mark_dirty(bank_item.item)

    def check_for_clue_chasers(self: Self) -> bool:
        leading = [entry.item.id for entry in self.tabs[0][: len(self.clue_chaser_ids)]]
        return tuple(leading) == self.clue_chaser_ids

    # --- Item actions ---

    def _record(self: Self, action: str, item: Item) -> None:
        self.action_log.append((action, item))
        log.debug("Bank action", action=action, item_id=item.id)

    def double_click(self: Self, item: Item) -> bool:
        self._require(item)
        self._record("double_click", item)
        return True

    def bury(self: Self, item: Item, quantity: int = 1) -> int:
        self._require(item)
        self._record("bury", item)
        return self.remove_item_quantity(item, quantity)

    def open(self: Self, item: Item, quantity: int = 1) -> int:
        self._require(item)
        self._record("open", item)
        return self.remove_item_quantity(item, quantity)

    def claim(self: Self, item: Item, quantity: int = 1) -> int:
        self._require(item)
        self._record("claim", item)
        return self.remove_item_quantity(item, quantity)

    def use_eight(self: Self, item: Item) -> int:
        bank_item = self._require(item)
        self._record("use_eight", item)
        return self.remove_item_quantity(item, min(USE_EIGHT_QUANTITY, bank_item.quantity))

    def read(self: Self, item: Item) -> str | None:
        self._require(item)
        self._record("read", item)
        return item.contents if item.readable else None
