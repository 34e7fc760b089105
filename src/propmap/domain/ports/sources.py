"""Ports for the collaborators that supply items and groups.

Fetching pages, parsing markup and caching happen behind these ports. By the
time an item is handed over, its scalar fields are filled in, raw issue links
are recorded as pending foreign ids and declared group ids are collected.
Groups are handed over with empty membership.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from propmap.domain.model import Group, Item


@runtime_checkable
class ItemSource(Protocol):
    """Callable port returning every ingested item."""

    def __call__(self) -> Iterable[Item]: ...


@runtime_checkable
class GroupSource(Protocol):
    """Callable port returning organizational and release-line groups."""

    def __call__(self) -> Iterable[Group]: ...


__all__ = ["GroupSource", "ItemSource"]
