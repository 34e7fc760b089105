from __future__ import annotations

import pytest

from propmap.domain.model import Item, organizational_group, release_line_group
from propmap.domain.store import EntityStore, GroupNotFoundError, ItemNotFoundError, NotFoundError


def test_items_iterate_in_ascending_number_order() -> None:
    store = EntityStore()
    for number in (400, 12, 286, 1):
        store.put_item(Item(number=number, name=f"Item {number}"))

    assert [item.number for item in store.items()] == [1, 12, 286, 400]


def test_groups_iterate_in_insertion_order() -> None:
    store = EntityStore()
    store.put_group(release_line_group(17))
    store.put_group(organizational_group("/projects/amber", "Amber"))
    store.put_group(release_line_group(9))

    assert [group.id for group in store.groups()] == ["jdk/17", "amber", "jdk9"]


def test_put_item_overwrites_last_write_wins() -> None:
    store = EntityStore()
    first = Item(number=286, name="Draft title", status="Draft")
    second = Item(number=286, name="Local-Variable Type Inference", status="Closed")

    assert store.put_item(first) is None
    assert store.put_item(second) is first

    assert store.get_item(286) is second
    assert store.item_count == 1


def test_put_group_overwrites_last_write_wins() -> None:
    store = EntityStore()
    first = organizational_group("/projects/amber", "Amber")
    second = organizational_group("/projects/amber", "Project Amber")

    store.put_group(first)
    assert store.put_group(second) is first
    assert store.get_group("amber").name == "Project Amber"
    assert store.group_count == 1


def test_missing_lookups_raise_not_found() -> None:
    store = EntityStore()

    with pytest.raises(ItemNotFoundError) as item_exc:
        store.get_item(1)
    with pytest.raises(GroupNotFoundError):
        store.get_group("amber")

    assert isinstance(item_exc.value, NotFoundError)
    assert isinstance(item_exc.value, LookupError)
    assert item_exc.value.number == 1
    assert store.find_item(1) is None
    assert store.find_group("amber") is None


def test_contains_distinguishes_items_and_groups() -> None:
    store = EntityStore.from_entities(
        [Item(number=9, name="Nine")],
        [release_line_group(9)],
    )

    assert 9 in store
    assert "jdk9" in store
    assert "9" not in store
    assert 10 not in store
    assert True not in store


def test_groups_for_item() -> None:
    item = Item(number=286, name="Local-Variable Type Inference")
    amber = organizational_group("/projects/amber", "Amber")
    loom = organizational_group("/projects/loom", "Loom")
    jdk10 = release_line_group(10)
    store = EntityStore.from_entities([item], [amber, loom, jdk10])
    amber.add_item(item)
    jdk10.add_item(item)

    assert store.groups_for(item) == (amber, jdk10)
