# placeholders/frames.py
from typing import Dict, List

import polars as pl

from bank.operations import BankOperations

# One row per tab entry, in tab order then slot order
TAB_FRAME_SCHEMA: dict[str, pl.DataType] = {
    "item_id": pl.Int64,
    "tab": pl.UInt16,
    "order": pl.UInt32,  # index within the tab list
    "tab_position": pl.Int64,  # recorded position, may disagree with order
    "quantity": pl.Int64,
    "locked": pl.Boolean,
}


def tab_frame(bank: BankOperations) -> pl.DataFrame:
    """Snapshot every tab entry of ``bank`` as a DataFrame."""
    columns: Dict[str, List] = {name: [] for name in TAB_FRAME_SCHEMA}
    for tab, tab_items in enumerate(bank.tabs):
        for order, bank_item in enumerate(tab_items):
            columns["item_id"].append(bank_item.item.id)
            columns["tab"].append(tab)
            columns["order"].append(order)
            columns["tab_position"].append(bank_item.tab_position)
            columns["quantity"].append(int(bank_item.quantity))
            columns["locked"].append(bank_item.locked)
    return pl.DataFrame(columns, schema=TAB_FRAME_SCHEMA)
