"""Pre-removal capture of an item's bank position."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

import structlog

from bank.components import Item
from bank.operations import BankOperations, RemovalRequest

log = structlog.get_logger(__name__)

# Quantity that asks for a slot to be removed entirely, placeholder included
REMOVE_ALL: float = math.inf


@dataclass(frozen=True)
class ItemMetadata:
    tab: int
    tab_position: int
    locked: bool
    is_placeholder: bool


class MetadataCapture:
    """Keyed store of in-flight removal metadata.

    Entries are written by :meth:`capture` and consumed exactly once by
    :meth:`consume`.
    """

    def __init__(self) -> None:
        self.pending: Dict[Item, ItemMetadata] = {}

    def capture(self, bank: BankOperations, request: RemovalRequest) -> RemovalRequest:
        """Record metadata for ``request`` when the removal empties its slot.

        Returns the request to execute, flagged when metadata was recorded.
        A placeholder removed with :data:`REMOVE_ALL` is rewritten to remove
        a single unit together with its charges.
        """
        item = request.item
        stale = self.pending.pop(item, None)
        if stale is not None:
            log.debug("Discarding stale removal metadata", item_id=item.id)

        bank_item = bank.get_bank_item(item)
        if bank_item is None:
            return request

        if bank_item.quantity == 0:
            if request.quantity != REMOVE_ALL:
                return request
            self.pending[item] = ItemMetadata(
                bank_item.tab, bank_item.tab_position, bank_item.locked, is_placeholder=True
            )
            return RemovalRequest(item, 1, remove_charges=True, flagged=True)

        if bank_item.quantity <= request.quantity:
            self.pending[item] = ItemMetadata(
                bank_item.tab, bank_item.tab_position, bank_item.locked, is_placeholder=False
            )
            return RemovalRequest(item, request.quantity, request.remove_charges, flagged=True)

        return request

    def consume(self, item: Item) -> ItemMetadata | None:
        return self.pending.pop(item, None)
