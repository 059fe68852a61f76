"""Guards for item actions that only make sense on real holdings.

:func:`positive_quantity_action` wraps a method of a bank wrapper that
forwards an item action to the host.  A real holding runs the host action
unchanged, and so does an item the bank does not hold at all, so the host's
own "not found" error is raised as usual.  A placeholder runs a substitute
instead, by default a policy notification.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

import structlog

from bank.components import BankItem

log = structlog.get_logger(__name__)

Substitute = Callable[[Any, BankItem, str], Any]


def notify_policy_violation(wrapper: Any, bank_item: BankItem, action: str) -> None:
    log.debug("Action blocked on placeholder", action=action, item_id=bank_item.item.id)
    wrapper.notifier.policy_violation(bank_item.item, action)
    return None


def show_contents(wrapper: Any, bank_item: BankItem, action: str) -> str | None:
    """Reading needs no quantity: show what a readable placeholder says."""
    item = bank_item.item
    if not item.readable:
        return notify_policy_violation(wrapper, bank_item, action)
    wrapper.notifier.show_contents(item)
    return item.contents


def positive_quantity_action(
    action: str, substitute: Substitute = notify_policy_violation
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate a wrapper method whose first argument is the target item."""

    def decorator(method: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(method)
        def guarded(self, item, *args, **kwargs):
            bank_item = self.host.get_bank_item(item)
            if bank_item is not None and bank_item.quantity <= 0:
                return substitute(self, bank_item, action)
            return method(self, item, *args, **kwargs)
        return guarded

    return decorator
