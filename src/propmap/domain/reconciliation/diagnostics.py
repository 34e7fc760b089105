"""Diagnostics for data-quality conditions met during reconciliation.

None of these conditions is an error: the offending signal or edge is simply
not applied. Each one is recorded here and logged so a run can be audited.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

log = logging.getLogger(__name__)


class DiagnosticKind(StrEnum):
    FOREIGN_ID_COLLISION = "foreign_id_collision"
    MISSING_FOREIGN_ID = "missing_foreign_id"
    DANGLING_REFERENCE = "dangling_reference"
    SELF_REFERENCE = "self_reference"
    UNKNOWN_GROUP = "unknown_group"
    UNPARSEABLE_RELEASE = "unparseable_release"
    UNKNOWN_LISTED_ITEM = "unknown_listed_item"


_LEVELS: Final[dict[DiagnosticKind, int]] = {
    DiagnosticKind.FOREIGN_ID_COLLISION: logging.WARNING,
    DiagnosticKind.UNPARSEABLE_RELEASE: logging.INFO,
    DiagnosticKind.UNKNOWN_LISTED_ITEM: logging.INFO,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    kind: DiagnosticKind
    item_number: int | None
    detail: str


@dataclass(slots=True)
class DiagnosticLog:
    entries: list[Diagnostic] = field(default_factory=list["Diagnostic"])

    def report(self, kind: DiagnosticKind, item_number: int | None, detail: str) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, item_number=item_number, detail=detail)
        self.entries.append(diagnostic)
        log.log(_LEVELS.get(kind, logging.DEBUG), "%s item=%s: %s", kind, item_number, detail)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        return tuple(entry for entry in self.entries if entry.kind is kind)

    def __len__(self) -> int:
        return len(self.entries)
