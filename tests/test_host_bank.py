import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from bank import BankItem, HostBank, Item, ItemNotFoundError
from placeholders import MessageLog

LOGS = Item(10, "Logs")
ORE = Item(11, "Ore")
GEM = Item(12, "Gem", sell_price=50)


def make_bank(max_slots=5, notifier=None):
    bank = HostBank(max_slots=max_slots, tab_count=3, notifier=notifier)
    bank.add_item(LOGS, 5)
    bank.add_item(ORE, 2)
    bank.add_item(GEM, 1)
    return bank


def positions(bank, tab=0):
    return [entry.tab_position for entry in bank.tabs[tab]]


def test_item_identity_is_by_id():
    assert Item(10, "Logs") == Item(10, "Renamed")
    assert hash(Item(10)) == hash(LOGS)


def test_bank_item_rejects_negative_quantity():
    with pytest.raises(ValueError):
        BankItem(LOGS, -1)


def test_add_item_appends_to_selected_tab():
    bank = make_bank()
    assert [entry.item for entry in bank.tabs[0]] == [LOGS, ORE, GEM]
    assert positions(bank) == [0, 1, 2]
    assert bank.occupied_slots == 3


def test_add_item_tops_up_existing_entry():
    bank = make_bank()
    assert bank.add_item(LOGS, 3, tab=2)
    assert bank.get_quantity(LOGS) == 8
    assert bank.get_bank_item(LOGS).tab == 0
    assert bank.tabs[2] == []


def test_add_item_rejected_when_full():
    log = MessageLog()
    bank = make_bank(max_slots=3, notifier=log)
    extra = Item(99, "Extra")
    assert bank.add_item(extra, 4, log_lost=True) is False
    assert not bank.has_item(extra)
    assert bank.lost_items[extra] == 4
    assert log.messages[-1][0] == "Your bank is full."


def test_partial_removal_decrements():
    bank = make_bank()
    assert bank.remove_item_quantity(LOGS, 2) == 3
    assert bank.get_quantity(LOGS) == 3


def test_removal_to_zero_deletes_and_closes_gap():
    bank = make_bank()
    assert bank.remove_item_quantity(LOGS, 5) == 0
    assert not bank.has_item(LOGS)
    assert [entry.item for entry in bank.tabs[0]] == [ORE, GEM]
    assert positions(bank) == [0, 1]


def test_remove_charges_clears_charge_counter():
    charged = Item(20, "Amulet", max_charges=5)
    bank = HostBank(max_slots=5)
    bank.add_item(charged, 1)
    assert bank.item_charges[charged] == 5
    bank.remove_item_quantity(charged, 1, remove_charges=True)
    assert charged not in bank.item_charges


def test_remove_unknown_item_raises():
    bank = make_bank()
    with pytest.raises(ItemNotFoundError):
        bank.remove_item_quantity(Item(404), 1)


def test_sell_item_credits_gp():
    bank = make_bank()
    assert bank.sell_item(GEM, 10) == 50
    assert bank.gp == 50
    assert not bank.has_item(GEM)


def test_actions_require_item():
    bank = make_bank()
    with pytest.raises(ItemNotFoundError):
        bank.double_click(Item(404))
    assert bank.double_click(LOGS) is True
    assert bank.action_log == [("double_click", LOGS)]


def test_clue_chasers_check_leading_ids():
    bank = HostBank(max_slots=10)
    for item_id in range(1, 7):
        bank.add_item(Item(item_id), 1)
    assert bank.check_for_clue_chasers()
    bank.remove_item_quantity(Item(1), 1)
    assert not bank.check_for_clue_chasers()


def test_will_items_fit_counts_new_distinct_items():
    bank = make_bank(max_slots=4)
    assert bank.will_items_fit([LOGS, ORE, Item(50)])
    assert not bank.will_items_fit([Item(50), Item(51)])
