"""Group reconciliation: derive item -> group memberships from signals.

For every item, the candidate groups of all signals are unioned:

- A: discussion list address
- B: target release train
- C: groups declared in the item body
- D: groups whose own pages list the item

Override rules are applied only after all signals for an item were collected,
so a forbidden pair is never added, and one left over from an earlier run is
removed. Membership containers are sets, so running twice changes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .diagnostics import DiagnosticKind, DiagnosticLog
from .signals import (
    declared_group_candidates,
    discussion_group_candidate,
    release_group_candidate,
)

if TYPE_CHECKING:
    from propmap.domain.model import Item
    from propmap.domain.overrides import OverrideRules
    from propmap.domain.store import EntityStore

log = getLogger(__name__)


class Signal(StrEnum):
    DISCUSSION = "discussion"
    RELEASE = "release"
    DECLARED = "declared"
    LISTED = "listed"


@dataclass(frozen=True, slots=True)
class Candidate:
    group_id: str
    signal: Signal


@dataclass(slots=True)
class ReconciliationResult:
    added: int = 0
    suppressed: int = 0
    removed: int = 0
    memberships: dict[str, tuple[int, ...]] = field(default_factory=dict[str, tuple[int, ...]])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)


@dataclass(slots=True)
class GroupReconciler:
    rules: OverrideRules

    def reconcile(self, store: EntityStore) -> ReconciliationResult:
        result = ReconciliationResult()
        listings = self._listings(store, result.diagnostics)

        for item in store.items():
            listed_by = listings.get(item.number, ())
            candidates = self.candidates_for(item, listed_by, result.diagnostics)
            self._apply(item, candidates, store, result)

        result.memberships = {group.id: group.item_numbers for group in store.groups()}
        log.info(
            "Reconciled groups: added=%s, suppressed=%s, removed=%s",
            result.added,
            result.suppressed,
            result.removed,
        )
        return result

    def candidates_for(
        self,
        item: Item,
        listed_by: tuple[str, ...],
        diagnostics: DiagnosticLog,
    ) -> list[Candidate]:
        candidates: list[Candidate] = []

        discussion = discussion_group_candidate(item.discussion)
        if discussion is not None:
            candidates.append(Candidate(discussion, Signal.DISCUSSION))

        if item.release_is_known:
            release = release_group_candidate(item.release)
            if release is None:
                diagnostics.report(
                    DiagnosticKind.UNPARSEABLE_RELEASE,
                    item.number,
                    f"release {item.release!r} has no major version",
                )
            else:
                candidates.append(Candidate(release, Signal.RELEASE))

        candidates.extend(
            Candidate(group_id, Signal.DECLARED) for group_id in declared_group_candidates(item)
        )
        candidates.extend(Candidate(group_id, Signal.LISTED) for group_id in listed_by)
        return candidates

    def _apply(
        self,
        item: Item,
        candidates: list[Candidate],
        store: EntityStore,
        result: ReconciliationResult,
    ) -> None:
        seen: set[str] = set()
        for candidate in candidates:
            if candidate.group_id in seen:
                continue
            seen.add(candidate.group_id)
            group = store.find_group(candidate.group_id)
            if group is None:
                result.diagnostics.report(
                    DiagnosticKind.UNKNOWN_GROUP,
                    item.number,
                    f"{candidate.signal} signal names unknown group {candidate.group_id!r}",
                )
                continue
            if self.rules.forbids(item.number, group.id):
                result.suppressed += 1
                log.debug("Suppressing %s -> %s (%s)", item.number, group.id, candidate.signal)
                continue
            if group.add_item(item):
                result.added += 1

        for group in store.groups_for(item):
            if self.rules.forbids(item.number, group.id) and group.remove_item(item):
                result.removed += 1
                log.info("Removing bad mapping item %s group %s", item.number, group.id)

    def _listings(
        self, store: EntityStore, diagnostics: DiagnosticLog
    ) -> dict[int, tuple[str, ...]]:
        listed: dict[int, list[str]] = {}
        for group in store.groups():
            for number in sorted(group.listed_item_numbers):
                if number not in store:
                    diagnostics.report(
                        DiagnosticKind.UNKNOWN_LISTED_ITEM,
                        number,
                        f"group {group.id!r} lists an item that is not in the store",
                    )
                    continue
                listed.setdefault(number, []).append(group.id)
        return {number: tuple(group_ids) for number, group_ids in listed.items()}
