"""Host bank object model: item identities, bank slots and the in-memory bank."""

from .components import BankItem, Item
from .errors import BankError, ItemNotFoundError
from .operations import BankHooks, BankOperations, RemovalRequest
from .registry import HostBank

__all__ = [
    "BankItem",
    "Item",
    "BankError",
    "ItemNotFoundError",
    "BankHooks",
    "BankOperations",
    "RemovalRequest",
    "HostBank",
]
