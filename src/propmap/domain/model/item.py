"""Proposal items.

An item is identified by its externally assigned number. Relationship edges
live in two places over an item's life: ``pending_related``/``pending_depends``
hold foreign issue keys recorded during ingestion, and ``related``/``depends``
hold item numbers once the relationship resolver has run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from datetime import datetime

ITEM_LABEL: Final[str] = "JEP"
UNNUMBERED_PREFIX: Final[str] = f"{ITEM_LABEL} XXX:"
RELEASE_TBD: Final[str] = "tbd"


def display_name(title: str, number: int) -> str:
    """Strip the redundant ``JEP <n>:`` (or draft ``JEP XXX:``) prefix from a title."""

    return title.replace(f"{ITEM_LABEL} {number}:", "").replace(UNNUMBERED_PREFIX, "").strip()


@dataclass(eq=False, kw_only=True)
class Item:
    number: int
    name: str
    status: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    release: str | None = None
    discussion: str | None = None
    issue: str | None = None
    body: str | None = None

    declared_group_ids: set[str] = field(default_factory=set[str], repr=False)
    pending_related: set[str] = field(default_factory=set[str], repr=False)
    pending_depends: set[str] = field(default_factory=set[str], repr=False)
    _related: set[int] = field(default_factory=set[int], repr=False, init=False)
    _depends: set[int] = field(default_factory=set[int], repr=False, init=False)

    def __post_init__(self) -> None:
        self.name = display_name(self.name, self.number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.number == other.number and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.number, self.name))

    def __str__(self) -> str:
        return f"{self.number} => {self.name} (status: {self.status})"

    @property
    def related(self) -> frozenset[int]:
        return frozenset(self._related)

    @property
    def depends(self) -> frozenset[int]:
        return frozenset(self._depends)

    def add_related(self, number: int) -> bool:
        """Record a related item; self-references are refused."""
        if number == self.number:
            return False
        if number in self._related:
            return False
        self._related.add(number)
        return True

    def add_depends(self, number: int) -> bool:
        """Record a dependency; self-references are refused."""
        if number == self.number:
            return False
        if number in self._depends:
            return False
        self._depends.add(number)
        return True

    def discard_related(self, number: int) -> None:
        self._related.discard(number)

    def discard_depends(self, number: int) -> None:
        self._depends.discard(number)

    def declare_group(self, group_id: str) -> None:
        self.declared_group_ids.add(group_id.lower())

    @property
    def has_pending_links(self) -> bool:
        return bool(self.pending_related or self.pending_depends)

    @property
    def release_is_known(self) -> bool:
        release = (self.release or "").strip().lower()
        return bool(release) and release != RELEASE_TBD
