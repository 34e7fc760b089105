"""Entity store holding the canonical items and groups of one run.

The store is an explicit context object: it is built once per run and passed
to every stage that needs it. Inserting an existing key replaces the previous
entry (last write wins), because ingestion may legitimately touch an item twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from propmap.domain.model import Group, Item

log = getLogger(__name__)


class NotFoundError(LookupError):
    """Raised when a requested entity is not in the store."""


class ItemNotFoundError(NotFoundError):
    def __init__(self, number: int) -> None:
        super().__init__(f"No item with number {number}")
        self.number = number


class GroupNotFoundError(NotFoundError):
    def __init__(self, group_id: str) -> None:
        super().__init__(f"No group with id {group_id!r}")
        self.group_id = group_id


@dataclass(slots=True)
class EntityStore:
    _items: dict[int, Item] = field(default_factory=dict["int", "Item"], repr=False)
    _groups: dict[str, Group] = field(default_factory=dict["str", "Group"], repr=False)

    @classmethod
    def from_entities(cls, items: Iterable[Item], groups: Iterable[Group] = ()) -> EntityStore:
        store = cls()
        for item in items:
            store.put_item(item)
        for group in groups:
            store.put_group(group)
        return store

    def put_item(self, item: Item) -> Item | None:
        """Store ``item``, returning the entry it replaced, if any."""
        previous = self._items.get(item.number)
        if previous is not None:
            log.debug("Replacing item %s (%s -> %s)", item.number, previous.name, item.name)
        self._items[item.number] = item
        return previous

    def put_group(self, group: Group) -> Group | None:
        """Store ``group``, returning the entry it replaced, if any."""
        previous = self._groups.get(group.id)
        if previous is not None:
            log.debug("Replacing group %s", group.id)
        self._groups[group.id] = group
        return previous

    def get_item(self, number: int) -> Item:
        item = self._items.get(number)
        if item is None:
            raise ItemNotFoundError(number)
        return item

    def get_group(self, group_id: str) -> Group:
        group = self._groups.get(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        return group

    def find_item(self, number: int) -> Item | None:
        return self._items.get(number)

    def find_group(self, group_id: str) -> Group | None:
        return self._groups.get(group_id)

    def items(self) -> tuple[Item, ...]:
        """All items, ascending by number."""
        return tuple(self._items[number] for number in sorted(self._items))

    def groups(self) -> tuple[Group, ...]:
        """All groups, in insertion order."""
        return tuple(self._groups.values())

    def groups_for(self, item: Item) -> tuple[Group, ...]:
        return tuple(group for group in self._groups.values() if item in group)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def group_count(self) -> int:
        return len(self._groups)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, bool):
            return False
        if isinstance(key, int):
            return key in self._items
        if isinstance(key, str):
            return key in self._groups
        return False
