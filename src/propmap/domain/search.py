"""Substring search over item names and bodies, with context snippets.

A snippet is the text around one occurrence of the query, cut to whole words:
the window of ``context`` characters on either side is trimmed to the text
between its first and last space. Occurrences whose window holds fewer than
two spaces are skipped. After each occurrence the scan jumps ``context``
characters ahead, so closely packed hits collapse into one snippet.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from time import perf_counter
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from propmap.domain.model import Item

MIN_QUERY_LENGTH: Final[int] = 3
CONTEXT_RADIUS: Final[int] = 80

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchMatch:
    number: int
    name: str
    snippets: tuple[str, ...]

    def as_dict(self) -> dict[str, object]:
        return {"number": self.number, "name": self.name, "snippets": list(self.snippets)}


def _check_context(context: int) -> None:
    # the scan advances by ``context``, so it must move forward
    if context < 1:
        raise ValueError(f"context must be at least 1, got {context}")


def extract_snippets(body: str, query: str, *, context: int = CONTEXT_RADIUS) -> list[str]:
    """Word-trimmed snippets around occurrences of lowercase ``query`` in ``body``."""
    _check_context(context)
    if not query:
        return []
    lowered = body.lower()
    snippets: list[str] = []
    position = lowered.find(query)
    while position != -1:
        window = body[max(0, position - context) : min(position + context, len(body))]
        first_space = window.find(" ")
        last_space = window.rfind(" ")
        if first_space != -1 and first_space != last_space:
            snippets.append(window[first_space + 1 : last_space])
        position = lowered.find(query, position + context)
    return snippets


def _matches(item: Item, query: str) -> bool:
    return query in item.name.lower() or query in (item.body or "").lower()


def search(
    query: str, items: Iterable[Item], *, context: int = CONTEXT_RADIUS
) -> list[SearchMatch]:
    """Items whose name or body contain ``query``, in input order.

    Queries shorter than ``MIN_QUERY_LENGTH`` are rejected with no results.
    """
    _check_context(context)
    if len(query) < MIN_QUERY_LENGTH:
        return []
    query = query.strip().lower()
    if len(query) < MIN_QUERY_LENGTH:
        return []

    return [
        SearchMatch(
            number=item.number,
            name=item.name,
            snippets=tuple(extract_snippets(item.body or "", query, context=context)),
        )
        for item in items
        if _matches(item, query)
    ]


class CorpusIndex:
    """Read-only search corpus over a finalized snapshot of items."""

    def __init__(self, items: Iterable[Item]) -> None:
        self._items: tuple[Item, ...] = tuple(sorted(items, key=lambda item: item.number))

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def search(self, query: str, *, context: int = CONTEXT_RADIUS) -> list[SearchMatch]:
        start = perf_counter()
        matches = search(query, self._items, context=context)
        elapsed_ms = (perf_counter() - start) * 1000
        log.info("%s in %.1fms found %s results", query, elapsed_ms, len(matches))
        return matches
