"""Orchestrator for the reconciliation subsystem.

Relationship resolution always runs before group reconciliation: the foreign
id index is only complete once every item is in the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from propmap.domain.store import EntityStore

    from .groups import GroupReconciler, ReconciliationResult
    from .relationships import RelationshipResolver, ResolutionResult


@dataclass(slots=True)
class EngineResult:
    resolution: ResolutionResult
    reconciliation: ReconciliationResult

    @property
    def diagnostics(self) -> DiagnosticLog:
        merged = DiagnosticLog()
        merged.entries.extend(self.resolution.diagnostics.entries)
        merged.entries.extend(self.reconciliation.diagnostics.entries)
        return merged


@dataclass(slots=True)
class ReconciliationEngine:
    """Run relationship resolution, then group reconciliation, over one store."""

    resolver: RelationshipResolver
    reconciler: GroupReconciler

    def run(self, store: EntityStore) -> EngineResult:
        resolution = self.resolver.resolve(store)
        reconciliation = self.reconciler.reconcile(store)
        return EngineResult(resolution=resolution, reconciliation=reconciliation)
