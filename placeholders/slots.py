"""Slot accounting under the two placeholder counting policies.

With ``use_slots`` off, placeholders are free: every zero-quantity entry is
subtracted from the host's raw slot count.  With it on, placeholders take up
room like any other item and only empty sentinel items are free.
"""

from __future__ import annotations

from typing import Iterable, Set

import polars as pl
import structlog

from bank.components import Item
from bank.operations import BankOperations
from placeholders.collaborators import EmptyItems
from placeholders.frames import tab_frame
from placeholders.settings import PolicySettings

log = structlog.get_logger(__name__)


def count_placeholders(bank: BankOperations) -> int:
    return tab_frame(bank).filter(pl.col("quantity") == 0).height


def count_empty_items(bank: BankOperations, empties: EmptyItems) -> int:
    return sum(1 for item in bank.items if empties.is_empty(item))


def occupied_slots(
    bank: BankOperations, raw: int, policy: PolicySettings, empties: EmptyItems
) -> int:
    """Slots counted against capacity, given the host's ``raw`` count."""
    if policy.use_slots:
        return raw - count_empty_items(bank, empties)
    return raw - count_placeholders(bank)


def will_items_fit(
    bank: BankOperations,
    items: Iterable[Item],
    policy: PolicySettings,
    empties: EmptyItems,
) -> bool:
    """Capacity check for a batch of incoming items.

    Only used with ``use_slots`` on; otherwise the host's own check applies.
    Items already held (placeholders included) need no new slot.
    """
    if not policy.use_slots:
        return bank.will_items_fit(items)

    occupied = occupied_slots(bank, bank.raw_occupied_slots, policy, empties)
    tentative = 0
    seen: Set[Item] = set()
    for item in items:
        if item in bank.items or item in seen:
            continue
        seen.add(item)
        tentative += 1
        if occupied + tentative > bank.max_slots:
            log.debug(
                "Items do not fit",
                occupied=occupied,
                tentative=tentative,
                max_slots=bank.max_slots,
            )
            return False
    return True
