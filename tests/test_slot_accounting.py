from bank import HostBank, Item
from placeholders import DictSettingsStore, EmptyItemSet, PlaceholderBank
from placeholders.slots import count_placeholders

EMPTY = Item(900, "Empty")


def make_bank(use_slots=False, max_slots=5, quantities=(1, 1, 1, 1, 1), empties=None):
    host = HostBank(max_slots=max_slots, tab_count=2)
    bank = PlaceholderBank(
        host,
        DictSettingsStore({"use-slots": use_slots}),
        empties=empties or EmptyItemSet([EMPTY.id]),
    )
    bank.on_character_loaded()
    for item_id, quantity in enumerate(quantities, start=1):
        host.add_item(Item(item_id), quantity)
    return bank


def test_placeholders_are_free_by_default():
    bank = make_bank(quantities=(3, 2, 1))
    bank.remove_item_quantity(Item(2), 2)
    bank.remove_item_quantity(Item(3), 1)
    assert bank.raw_occupied_slots == 3
    assert count_placeholders(bank) == 2
    assert bank.occupied_slots == 1


def test_use_slots_counts_placeholders_but_not_empty_items():
    bank = make_bank(use_slots=True, quantities=(3, 2))
    bank.host.add_item(EMPTY, 1)
    bank.remove_item_quantity(Item(2), 2)
    assert bank.raw_occupied_slots == 3
    assert bank.occupied_slots == 2


def test_new_item_does_not_fit_full_bank():
    bank = make_bank(use_slots=True)
    assert bank.occupied_slots == 5
    assert bank.will_items_fit([Item(42)]) is False


def test_held_items_always_fit():
    bank = make_bank(use_slots=True)
    bank.remove_item_quantity(Item(5), 1)
    assert bank.will_items_fit([Item(1), Item(5), Item(1)]) is True


def test_duplicates_in_batch_count_once():
    bank = make_bank(use_slots=True, quantities=(1, 1, 1, 1))
    assert bank.will_items_fit([Item(42), Item(42)]) is True
    assert bank.will_items_fit([Item(42), Item(43)]) is False


def test_without_use_slots_host_check_sees_free_placeholders():
    bank = make_bank()
    bank.remove_item_quantity(Item(1), 1)
    assert bank.will_items_fit([Item(42)]) is True
    assert bank.add_item(Item(42), 1)
    assert bank.raw_occupied_slots == 6
    assert bank.will_items_fit([Item(43)]) is False


def test_filling_placeholder_rejected_when_bank_full():
    bank = make_bank()
    bank.remove_item_quantity(Item(1), 1)
    bank.add_item(Item(42), 1)
    assert bank.occupied_slots == 5

    assert bank.add_item(Item(1), 7, log_lost=True) is False
    assert bank.has_placeholder(Item(1))
    assert bank.lost_items[Item(1)] == 7
    assert bank.notifier.messages[-1][0] == "Your bank is full."


def test_non_positive_fill_of_placeholder_is_rejected_quietly():
    bank = make_bank()
    bank.remove_item_quantity(Item(1), 1)
    bank.add_item(Item(42), 1)
    assert bank.occupied_slots == 5

    assert bank.add_item(Item(1), 0, log_lost=True) is False
    assert bank.add_item(Item(1), -3, log_lost=True) is False
    assert bank.notifier.messages == []
    assert Item(1) not in bank.lost_items
    assert bank.has_placeholder(Item(1))


def test_filling_placeholder_allowed_with_room():
    bank = make_bank()
    bank.remove_item_quantity(Item(1), 1)
    assert bank.add_item(Item(1), 7)
    assert bank.has_item(Item(1))
    assert bank.get_quantity(Item(1)) == 7
    assert bank.items[Item(1)].tab_position == 0


def test_filling_placeholder_ignores_capacity_with_use_slots():
    bank = make_bank(use_slots=True)
    bank.remove_item_quantity(Item(1), 1)
    assert bank.occupied_slots == 5
    assert bank.add_item(Item(1), 2)
    assert bank.get_quantity(Item(1)) == 2
