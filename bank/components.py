from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """Identity of an item type.

    Equality and hashing use ``id`` only, so two ``Item`` values built from
    the same definition always address the same bank entry.
    """

    id: int
    name: str = field(default="", compare=False)
    max_charges: int | None = field(default=None, compare=False)
    readable: bool = field(default=False, compare=False)
    contents: str = field(default="", compare=False)
    sell_price: int = field(default=1, compare=False)


@dataclass(eq=False)
class BankItem:
    """One slot of the bank.

    A quantity of ``0`` marks the slot as a placeholder.
    """

    item: Item
    quantity: int
    tab: int = 0
    tab_position: int = 0
    locked: bool = False

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"BankItem quantity must be >= 0, got {self.quantity}")
        if self.tab < 0:
            raise ValueError(f"BankItem tab must be >= 0, got {self.tab}")

    @property
    def is_placeholder(self) -> bool:
        return self.quantity == 0
