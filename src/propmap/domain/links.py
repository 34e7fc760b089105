"""Link classification helpers for ingestion collaborators.

Collaborators that scrape item bodies and group pages hand over plain link
strings. These helpers decide which links point at groups or items, so that
``Item.declared_group_ids`` and ``Group.listed_item_numbers`` are filled in
consistently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from propmap.domain.model.group import GROUP_PATH, RELEASE_LINE_PREFIX, group_id_from_link

if TYPE_CHECKING:
    from collections.abc import Iterable

ITEM_PATH: Final[str] = "/jeps/"
HOME_HOST: Final[str] = "openjdk.java.net"
_PLACEHOLDER_ITEM: Final[str] = "/jeps/0"


def link_is_group(link: str) -> bool:
    """True for organizational group links on the home site.

    Release-train pages also live under the group path; those groups are
    synthesized separately, so their links are excluded here.
    """
    if "http" in link and HOME_HOST not in link:
        return False
    return (
        GROUP_PATH in link
        and link != GROUP_PATH
        and f"{GROUP_PATH}{RELEASE_LINE_PREFIX}" not in link
    )


def link_is_item(link: str) -> bool:
    return ITEM_PATH in link and link != ITEM_PATH and not link.endswith(_PLACEHOLDER_ITEM)


def item_number_from_link(link: str) -> int | None:
    """Item number from the last path segment, ignoring any fragment."""
    last = link.rstrip("/").rsplit("/", 1)[-1].split("#", 1)[0]
    try:
        return int(last)
    except ValueError:
        return None


def declared_group_ids(links: Iterable[str]) -> set[str]:
    group_ids: set[str] = set()
    for link in links:
        if not link_is_group(link):
            continue
        try:
            group_ids.add(group_id_from_link(link))
        except ValueError:
            continue
    return group_ids


def listed_item_numbers(links: Iterable[str]) -> set[int]:
    numbers: set[int] = set()
    for link in links:
        if not link_is_item(link):
            continue
        number = item_number_from_link(link)
        if number is not None:
            numbers.add(number)
    return numbers
