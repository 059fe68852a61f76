"""Errors raised by the host bank."""


class BankError(Exception):
    """Base class for host bank failures."""


class ItemNotFoundError(BankError, KeyError):
    """Raised when an operation targets an item the bank does not hold."""

    def __init__(self, item) -> None:
        self.item = item
        super().__init__(f"Item not found in bank: {item!r}")

    def __str__(self) -> str:
        return self.args[0]
