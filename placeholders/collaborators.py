"""Collaborators the placeholder layer talks to but does not own.

``Notifier`` is the user-facing message channel, ``SelectionView`` is the UI
panel showing the currently focused bank item, and ``EmptyItems`` is the
subsystem that owns layout-padding "empty" items.  Each has a small
reference implementation used by default and in tests.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, Set, Tuple

from bank.components import BankItem, Item

Colour = Tuple[int, int, int]

POLICY_COLOUR: Colour = (255, 165, 0)
WARNING_COLOUR: Colour = (255, 0, 0)
INFO_COLOUR: Colour = (200, 200, 255)


class Notifier(Protocol):
    def policy_violation(self, item: Item, action: str) -> None:
        ...

    def bank_full(self, item: Item) -> None:
        ...

    def show_contents(self, item: Item) -> None:
        ...


class SelectionView(Protocol):
    @property
    def selected_item(self) -> Item | None:
        ...

    def refresh(self, bank_item: BankItem) -> None:
        ...


class EmptyItems(Protocol):
    def is_empty(self, item: Item) -> bool:
        ...

    def cleanup(self, item: Item) -> None:
        ...


class MessageLog:
    """Notifier that appends ``(text, colour)`` messages to a list."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, Colour]] = []

    def add_message(self, text: str, colour: Colour = INFO_COLOUR) -> None:
        self.messages.append((text, colour))

    def policy_violation(self, item: Item, action: str) -> None:
        name = item.name or f"item {item.id}"
        self.add_message(
            f"You cannot {action.replace('_', ' ')} {name}: it is only a placeholder.",
            POLICY_COLOUR,
        )

    def bank_full(self, item: Item) -> None:
        self.add_message("Your bank is full.", WARNING_COLOUR)

    def show_contents(self, item: Item) -> None:
        self.add_message(item.contents, INFO_COLOUR)


class NullSelectionView:
    """Selection view with nothing ever focused."""

    selected_item: Item | None = None

    def refresh(self, bank_item: BankItem) -> None:
        pass


class FocusedItemView:
    """Selection view tracking one focused item and the last value shown."""

    def __init__(self, selected_item: Item | None = None) -> None:
        self.selected_item = selected_item
        self.shown: BankItem | None = None

    def refresh(self, bank_item: BankItem) -> None:
        self.shown = bank_item


class NoEmptyItems:
    def is_empty(self, item: Item) -> bool:
        return False

    def cleanup(self, item: Item) -> None:
        pass


class EmptyItemSet:
    """Treats a fixed set of item ids as empty sentinels and records cleanups."""

    def __init__(self, item_ids: Iterable[int] = ()) -> None:
        self.item_ids: Set[int] = set(item_ids)
        self.cleaned: List[Item] = []

    def is_empty(self, item: Item) -> bool:
        return item.id in self.item_ids

    def cleanup(self, item: Item) -> None:
        self.cleaned.append(item)
