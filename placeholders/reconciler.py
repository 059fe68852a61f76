# placeholders/reconciler.py
"""
Post-removal reconciliation.

After the host has deleted a slot, decides whether the item comes back as a
zero-quantity placeholder at the tab and position it occupied before the
removal, and puts it there.  An item removed to zero reappears unless:

* nothing was captured for the removal,
* the removed entry was itself a placeholder being released,
* the only-locked policy is on and the item was not locked, or
* its tab has placeholders disabled.
"""
from typing import Any, Container

import structlog

from bank.components import BankItem, Item
from bank.operations import BankOperations, RemovalRequest
from placeholders.collaborators import EmptyItems, SelectionView
from placeholders.metadata import ItemMetadata, MetadataCapture
from placeholders.settings import PolicySettings

log = structlog.get_logger(__name__)


class PlaceholderReconciler:
    def __init__(
        self,
        capture: MetadataCapture,
        empties: EmptyItems,
        selection: SelectionView,
    ) -> None:
        self.capture = capture
        self.empties = empties
        self.selection = selection

    def reconcile(
        self,
        bank: BankOperations,
        request: RemovalRequest,
        result: Any,
        policy: PolicySettings,
        disabled_tabs: Container[int],
    ) -> BankItem | None:
        """Run after the host removal; returns the placeholder if one was created."""
        if not request.flagged:
            return None
        item = request.item
        metadata = self.capture.consume(item)
        if metadata is None:
            log.warning("No removal metadata for flagged removal", item_id=item.id, result=result)
            return None

        if bank.get_bank_item(item) is not None:
            return None

        if self.empties.is_empty(item):
            self.empties.cleanup(item)
            return None

        if metadata.is_placeholder:
            log.info("Placeholder released", item_id=item.id, tab=metadata.tab)
            return None

        if not self._should_recreate(item, metadata, policy, disabled_tabs):
            return None
        return self._recreate(bank, item, metadata)

    def _should_recreate(
        self,
        item: Item,
        metadata: ItemMetadata,
        policy: PolicySettings,
        disabled_tabs: Container[int],
    ) -> bool:
        if policy.only_locked and not metadata.locked:
            log.debug("Placeholder skipped: item not locked", item_id=item.id)
            return False
        if metadata.tab in disabled_tabs:
            log.debug("Placeholder skipped: tab disabled", item_id=item.id, tab=metadata.tab)
            return False
        if metadata.tab_position < 0:
            log.warning("Placeholder skipped: invalid tab position", item_id=item.id, tab_position=metadata.tab_position)
            return False
        return True

    def _recreate(self, bank: BankOperations, item: Item, metadata: ItemMetadata) -> BankItem:
        placeholder = BankItem(
            item,
            0,
            tab=metadata.tab,
            tab_position=metadata.tab_position,
            locked=metadata.locked,
        )
        bank.items[item] = placeholder
        tab_items = bank.tabs[metadata.tab]
        # list.insert clamps an index past the end, appending instead
        tab_items.insert(metadata.tab_position, placeholder)
        bank.reposition_tab(metadata.tab, 0)
        bank.mark_dirty(item)

        if self.selection.selected_item == item:
            self.selection.refresh(placeholder)

        log.info(
            "Placeholder created",
            item_id=item.id,
            tab=metadata.tab,
            tab_position=placeholder.tab_position,
        )
        return placeholder
