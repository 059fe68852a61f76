from bank import BankItem, HostBank, Item
from placeholders import DictSettingsStore, PlaceholderBank, repair_duplicates
from placeholders.repair import find_duplicates

ROPE = Item(1, "Rope")
TORCH = Item(2, "Torch")
MAP = Item(3, "Map")


def corrupt_bank():
    """Bank whose tab 0 and tab 1 both hold ``ROPE``."""
    host = HostBank(max_slots=10, tab_count=3)
    host.add_item(ROPE, 2, tab=0)
    host.add_item(TORCH, 1, tab=0)
    host.add_item(MAP, 1, tab=1)
    duplicate = BankItem(ROPE, 7, tab=1, tab_position=1)
    host.tabs[1].append(duplicate)
    host.items[ROPE] = duplicate
    host.dirty_items.clear()
    return host


def test_clean_bank_is_left_alone():
    host = HostBank(max_slots=10)
    host.add_item(ROPE, 1)
    host.dirty_items.clear()
    assert find_duplicates(host).height == 0
    assert repair_duplicates(host) == 0
    assert host.dirty_items == set()


def test_later_duplicate_across_tabs_is_dropped():
    host = corrupt_bank()
    assert repair_duplicates(host) == 1
    assert [entry.item for entry in host.tabs[0]] == [ROPE, TORCH]
    assert [entry.item for entry in host.tabs[1]] == [MAP]
    assert host.items[ROPE] is host.tabs[0][0]
    assert host.items[ROPE].quantity == 2
    assert host.dirty_items == {ROPE, TORCH, MAP}


def test_duplicates_within_one_tab_and_positions_reindexed():
    host = HostBank(max_slots=10, tab_count=2)
    host.add_item(ROPE, 1)
    host.add_item(TORCH, 1)
    host.tabs[0].insert(1, BankItem(TORCH, 1, tab=0, tab_position=9))
    host.tabs[0].append(BankItem(ROPE, 3, tab=0, tab_position=9))
    host.tabs[1].append(BankItem(ROPE, 4, tab=1, tab_position=5))
    host.tabs[1].append(BankItem(MAP, 1, tab=1, tab_position=7))
    host.items[MAP] = host.tabs[1][1]

    assert repair_duplicates(host) == 3
    assert [(e.item, e.tab_position) for e in host.tabs[0]] == [(ROPE, 0), (TORCH, 1)]
    assert [(e.item, e.tab_position) for e in host.tabs[1]] == [(MAP, 0)]


def test_repair_runs_on_character_load():
    host = corrupt_bank()
    bank = PlaceholderBank(host, DictSettingsStore())
    assert bank.loaded is False
    assert bank.on_character_loaded() == 1
    assert bank.loaded is True
    assert len(host.tabs[1]) == 1
