"""Relationship resolution between items.

Issue links arrive during ingestion keyed by the issue tracker's own ids,
before every item (and therefore every item number) is known. Resolution is
split in two strictly ordered phases:

1) ingestion records raw links as pending foreign ids (``record_issue_link``)
2) once the store is complete, ``RelationshipResolver`` builds the
   foreign id -> item number index and rewrites every pending id in one pass

Translating while ingesting would silently lose forward references.

Direction policy: depends-on edges are one-directional; related-to edges are
symmetric and are mirrored onto the other item after translation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from propmap.domain.model import ITEM_LABEL, LinkDirection, RelationKind

from .diagnostics import DiagnosticKind, DiagnosticLog

if TYPE_CHECKING:
    from propmap.domain.model import Item
    from propmap.domain.store import EntityStore

ISSUE_KEY_PREFIX: Final[str] = "JDK-"
BLOCKS_RELATION: Final[str] = "blocks"

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class IssueLink:
    """One raw issue link as delivered by the issue tracker."""

    target_key: str
    direction: LinkDirection
    relation: str
    issue_type: str = ITEM_LABEL


def foreign_id(key: str) -> str:
    """Normalize an issue key to its bare id (``JDK-8046092`` -> ``8046092``)."""
    key = key.strip()
    if key.upper().startswith(ISSUE_KEY_PREFIX):
        return key[len(ISSUE_KEY_PREFIX) :]
    return key


def classify_issue_link(link: IssueLink) -> RelationKind | None:
    """Relation kind an issue link records, or ``None`` for links to non-items."""
    if link.issue_type.strip().lower() != ITEM_LABEL.lower():
        return None
    if link.relation.strip().lower() == BLOCKS_RELATION and link.direction is LinkDirection.INWARD:
        return RelationKind.DEPENDS
    return RelationKind.RELATED


def record_issue_link(item: Item, link: IssueLink) -> RelationKind | None:
    """Phase 1: store a raw link on ``item`` as a pending foreign id."""
    kind = classify_issue_link(link)
    if kind is None:
        return None
    target = foreign_id(link.target_key)
    if kind is RelationKind.DEPENDS:
        item.pending_depends.add(target)
    else:
        item.pending_related.add(target)
    return kind


@dataclass(slots=True)
class ResolutionResult:
    foreign_id_to_number: dict[str, int]
    translated: int = 0
    dropped: int = 0
    mirrored: int = 0
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)


@dataclass(slots=True)
class RelationshipResolver:
    """Phase 2: rewrite pending foreign ids into item numbers."""

    mirror_related: bool = True

    def build_index(self, store: EntityStore, diagnostics: DiagnosticLog) -> dict[str, int]:
        index: dict[str, int] = {}
        for item in store.items():
            if not item.issue:
                diagnostics.report(
                    DiagnosticKind.MISSING_FOREIGN_ID, item.number, "item has no issue key"
                )
                continue
            key = foreign_id(item.issue)
            previous = index.get(key)
            if previous is not None and previous != item.number:
                diagnostics.report(
                    DiagnosticKind.FOREIGN_ID_COLLISION,
                    item.number,
                    f"issue {key} already mapped to item {previous}; keeping {item.number}",
                )
            index[key] = item.number
        return index

    def resolve(self, store: EntityStore) -> ResolutionResult:
        diagnostics = DiagnosticLog()
        index = self.build_index(store, diagnostics)
        result = ResolutionResult(foreign_id_to_number=index, diagnostics=diagnostics)

        for item in store.items():
            self._translate(item, RelationKind.RELATED, index, store, result)
            self._translate(item, RelationKind.DEPENDS, index, store, result)
            self._prune(item, store, result)

        if self.mirror_related:
            for item in store.items():
                for number in sorted(item.related):
                    other = store.find_item(number)
                    if other is not None and other.add_related(item.number):
                        result.mirrored += 1

        log.info(
            "Resolved relationships: translated=%s, dropped=%s, mirrored=%s",
            result.translated,
            result.dropped,
            result.mirrored,
        )
        return result

    def _translate(
        self,
        item: Item,
        kind: RelationKind,
        index: dict[str, int],
        store: EntityStore,
        result: ResolutionResult,
    ) -> None:
        pending = item.pending_related if kind is RelationKind.RELATED else item.pending_depends
        add = item.add_related if kind is RelationKind.RELATED else item.add_depends

        for key in sorted(pending):
            number = index.get(foreign_id(key))
            if number is None or number not in store:
                result.dropped += 1
                result.diagnostics.report(
                    DiagnosticKind.DANGLING_REFERENCE,
                    item.number,
                    f"{kind} issue {key} has no item",
                )
                continue
            if number == item.number:
                result.dropped += 1
                result.diagnostics.report(
                    DiagnosticKind.SELF_REFERENCE,
                    item.number,
                    f"{kind} issue {key} points back at the item",
                )
                continue
            add(number)
            result.translated += 1
        pending.clear()

    def _prune(self, item: Item, store: EntityStore, result: ResolutionResult) -> None:
        """Drop numeric edges whose target is no longer in the store.

        Items rebuilt from records, or replaced in the store, may carry edges
        that were resolved against a different store.
        """
        for kind, numbers, discard in (
            (RelationKind.RELATED, item.related, item.discard_related),
            (RelationKind.DEPENDS, item.depends, item.discard_depends),
        ):
            for number in sorted(numbers):
                if number != item.number and number in store:
                    continue
                discard(number)
                result.dropped += 1
                result.diagnostics.report(
                    DiagnosticKind.DANGLING_REFERENCE,
                    item.number,
                    f"{kind} item {number} is not in the store",
                )
