"""Interfaces between the host bank and anything layered on top of it.

:class:`BankOperations` is the surface a bank exposes: its storage views
(``items``, ``tabs``, ``selected_items`` ...) and the operations that mutate
or query them.  :class:`BankHooks` is the narrow set of callbacks a bank
invokes around its own mutations, so that a wrapper sees every removal and
every slot count regardless of which host flow triggered it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Protocol, Set

from bank.components import BankItem, Item


@dataclass
class RemovalRequest:
    """Arguments of one ``remove_item_quantity`` call.

    Returned by :meth:`BankHooks.before_remove` (possibly rewritten) and
    handed back unchanged to :meth:`BankHooks.after_remove` once the host
    mutation has completed.  ``flagged`` is set when the pre-phase recorded
    state that the post-phase must consume.
    """

    item: Item
    quantity: float
    remove_charges: bool = False
    flagged: bool = False


class BankHooks(Protocol):
    def before_remove(self, bank: "BankOperations", request: RemovalRequest) -> RemovalRequest:
        ...

    def after_remove(self, bank: "BankOperations", request: RemovalRequest, result: Any) -> None:
        ...

    def count_occupied(self, bank: "BankOperations", raw: int) -> int:
        ...


class BankOperations(Protocol):
    """Operations of a player bank."""

    items: Dict[Item, BankItem]
    tabs: List[List[BankItem]]
    selected_items: List[Item]
    selected_tab: int
    max_slots: int
    lost_items: Dict[Item, int]
    dirty_items: Set[Item]
    item_charges: Dict[Item, int]

    # --- Storage ---
    def get_bank_item(self, item: Item) -> BankItem | None: ...

    def has_item(self, item: Item) -> bool: ...

    def get_quantity(self, item: Item) -> int: ...

    def add_item(
        self, item: Item, quantity: int, tab: int | None = None, log_lost: bool = False
    ) -> bool: ...

    def remove_item_quantity(
        self, item: Item, quantity: float, remove_charges: bool = False
    ) -> int: ...

    def reposition_tab(self, tab: int, start: int = 0) -> None: ...

    def mark_dirty(self, item: Item) -> None: ...

    # --- Capacity ---
    @property
    def raw_occupied_slots(self) -> int: ...

    @property
    def occupied_slots(self) -> int: ...

    def will_items_fit(self, items: Iterable[Item]) -> bool: ...

    # --- Selling and bulk operations ---
    def sell_item(self, item: Item, quantity: int) -> int: ...

    def sell_items_from_tab(self, tab: int) -> int: ...

    def sell_selected_items(self) -> int: ...

    def add_quantity_to_existing_items(self, amount: int) -> None: ...

    def check_for_clue_chasers(self) -> bool: ...

    # --- Item actions ---
    def double_click(self, item: Item) -> Any: ...

    def bury(self, item: Item, quantity: int = 1) -> Any: ...

    def open(self, item: Item, quantity: int = 1) -> Any: ...

    def claim(self, item: Item, quantity: int = 1) -> Any: ...

    def use_eight(self, item: Item) -> Any: ...

    def read(self, item: Item) -> Any: ...

    # --- Hooks ---
    def install_hooks(self, hooks: BankHooks | None) -> None: ...
