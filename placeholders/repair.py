"""Duplicate entry repair run when a character loads.

A bank can come back from load with the same item in more than one slot.
The first occurrence (tab order, then slot order) is kept and every later
one is dropped, whichever tab it is in.
"""

from __future__ import annotations

from typing import List, Set, Tuple

import polars as pl
import structlog

from bank.components import BankItem
from bank.operations import BankOperations
from placeholders.frames import tab_frame

log = structlog.get_logger(__name__)


def find_duplicates(bank: BankOperations) -> pl.DataFrame:
    """Rows of :func:`tab_frame` that repeat an item seen earlier in the bank."""
    frame = tab_frame(bank)
    return frame.filter(~pl.col("item_id").is_first_distinct())


def repair_duplicates(bank: BankOperations) -> int:
    """Drop duplicate entries, reindex every tab and return how many were dropped."""
    duplicates = find_duplicates(bank)
    if duplicates.height == 0:
        return 0

    dropped: Set[Tuple[int, int]] = set(
        zip(duplicates["tab"].to_list(), duplicates["order"].to_list())
    )
    for tab, tab_items in enumerate(bank.tabs):
        kept: List[BankItem] = [
            entry for order, entry in enumerate(tab_items) if (tab, order) not in dropped
        ]
        tab_items[:] = kept
        for entry in kept:
            bank.items[entry.item] = entry
        bank.reposition_tab(tab, 0)

    for item in bank.items:
        bank.mark_dirty(item)

    log.warning(
        "Duplicate bank entries removed",
        dropped=len(dropped),
        item_ids=sorted(set(duplicates["item_id"].to_list())),
    )
    return len(dropped)
