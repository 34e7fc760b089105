"""Groups: organizational projects and release trains.

Both flavours share one value type. They differ only in how they are built,
so each has its own factory instead of a subclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from propmap.domain.model.enums import GroupKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from propmap.domain.model.item import Item

GROUP_PATH: Final[str] = "/projects/"
RELEASE_LINE_PREFIX: Final[str] = "jdk"
RELEASE_LINE_NAME_PREFIX: Final[str] = "JDK"
# From this major version on, release-line ids carry a path separator.
RELEASE_LINE_SEPARATOR_FROM: Final[int] = 10

log = getLogger(__name__)


@dataclass(eq=False, kw_only=True)
class Group:
    id: str
    name: str
    kind: GroupKind = GroupKind.ORGANIZATIONAL
    description: str | None = None
    url: str | None = None
    wiki_url: str | None = None
    major_version: int | None = None
    listed_item_numbers: set[int] = field(default_factory=set[int], repr=False)

    _items: set[Item] = field(default_factory=set["Item"], repr=False, init=False)

    def __post_init__(self) -> None:
        if not self.id or self.id != self.id.lower():
            raise ValueError(f"group id must be a non-empty lowercase string: {self.id!r}")

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(sorted(self._items, key=lambda item: item.number))

    @property
    def item_numbers(self) -> tuple[int, ...]:
        return tuple(item.number for item in self.items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, item: Item) -> bool:
        if item in self._items:
            return False
        self._items.add(item)
        log.debug("Added %s to %s", item.number, self.name)
        return True

    def remove_item(self, item: Item) -> bool:
        if item not in self._items:
            return False
        self._items.remove(item)
        return True

    def list_item(self, number: int) -> None:
        """Record that one of this group's own pages links to item ``number``."""
        self.listed_item_numbers.add(number)


def group_id_from_link(link: str) -> str:
    """Derive an organizational group id from its link path."""
    position = link.find(GROUP_PATH)
    if position == -1:
        raise ValueError(f"not a group link: {link!r}")
    group_id = link[position + len(GROUP_PATH) :].strip("/").lower()
    if not group_id:
        raise ValueError(f"group link has no id: {link!r}")
    return group_id


def organizational_group(
    link: str,
    name: str,
    *,
    description: str | None = None,
    url: str | None = None,
    wiki_url: str | None = None,
) -> Group:
    return Group(
        id=group_id_from_link(link),
        name=name,
        kind=GroupKind.ORGANIZATIONAL,
        description=description,
        url=url,
        wiki_url=wiki_url,
    )


def release_line_group_id(major: int) -> str:
    separator = "/" if major >= RELEASE_LINE_SEPARATOR_FROM else ""
    return f"{RELEASE_LINE_PREFIX}{separator}{major}"


def release_line_group(
    major: int,
    *,
    description: str | None = None,
    url: str | None = None,
    wiki_url: str | None = None,
) -> Group:
    return Group(
        id=release_line_group_id(major),
        name=f"{RELEASE_LINE_NAME_PREFIX}{major}",
        kind=GroupKind.RELEASE_LINE,
        description=description,
        url=url,
        wiki_url=wiki_url,
        major_version=major,
    )


def release_line_groups(first: int, last: int) -> list[Group]:
    """One release-line group per supported train, ``first`` to ``last`` inclusive."""
    return [release_line_group(major) for major in range(first, last + 1)]


def _report_sort_key(group: Group) -> tuple[str, int]:
    if group.kind is GroupKind.RELEASE_LINE and group.major_version is not None:
        return (RELEASE_LINE_NAME_PREFIX, group.major_version)
    return (group.name, -1)


def group_report_order(groups: Iterable[Group]) -> list[Group]:
    """Order groups for reports: by name, release trains numerically among themselves."""
    return sorted(groups, key=_report_sort_key)
