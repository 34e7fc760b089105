"""Membership signals.

Each signal turns one item field into candidate group ids. They are pure
functions so every heuristic can be exercised on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from propmap.domain.model import RELEASE_TBD, release_line_group_id

if TYPE_CHECKING:
    from propmap.domain.model import Item

_WORD_PUNCTUATION: Final[tuple[tuple[str, str], ...]] = (
    (" dash ", "-"),
    (" at ", "@"),
    (" dot ", "."),
)
_DEV_SUFFIX: Final[str] = "-dev"


def normalize_discussion(text: str) -> str:
    """Turn a word-encoded list address back into symbols.

    A trailing ``-dev`` is dropped from the list name (the part before ``@``).

    ``"foo dash bar at example dot com"`` -> ``"foo-bar@example.com"``
    """
    normalized = text.strip()
    for word, symbol in _WORD_PUNCTUATION:
        normalized = normalized.replace(word, symbol)
    local, at, domain = normalized.partition("@")
    return f"{local.strip().removesuffix(_DEV_SUFFIX)}{at}{domain}"


def discussion_group_candidate(text: str | None) -> str | None:
    if text is None or not text.strip():
        return None
    normalized = normalize_discussion(text)
    # some channels are given without a domain, e.g. "hotspot-gc-dev"
    candidate = normalized.split("@", 1)[0] if "@" in normalized else normalized
    candidate = candidate.strip().lower()
    return candidate or None


def release_major_version(release: str | None) -> int | None:
    """Leading decimal digits of a release label (``"17-ea"`` -> 17)."""
    if release is None:
        return None
    release = release.strip()
    if not release or release.lower() == RELEASE_TBD:
        return None
    end = 0
    while end < len(release) and release[end].isdecimal():
        end += 1
    if end == 0:
        return None
    return int(release[:end])


def release_group_candidate(release: str | None) -> str | None:
    major = release_major_version(release)
    if major is None:
        return None
    return release_line_group_id(major)


def declared_group_candidates(item: Item) -> tuple[str, ...]:
    return tuple(sorted(group_id.lower() for group_id in item.declared_group_ids))
