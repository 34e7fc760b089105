"""Reconciliation core: relationship resolution and group membership.

Flow for one run over a populated ``EntityStore``:
1) ``RelationshipResolver`` rewrites pending foreign ids into item numbers
2) ``GroupReconciler`` unions membership signals and applies override rules
"""

from __future__ import annotations

from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from .engine import EngineResult, ReconciliationEngine
from .groups import Candidate, GroupReconciler, ReconciliationResult, Signal
from .relationships import (
    IssueLink,
    RelationshipResolver,
    ResolutionResult,
    classify_issue_link,
    foreign_id,
    record_issue_link,
)
from .signals import (
    declared_group_candidates,
    discussion_group_candidate,
    normalize_discussion,
    release_group_candidate,
    release_major_version,
)

__all__ = [
    "Candidate",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "EngineResult",
    "GroupReconciler",
    "IssueLink",
    "ReconciliationEngine",
    "ReconciliationResult",
    "RelationshipResolver",
    "ResolutionResult",
    "Signal",
    "classify_issue_link",
    "declared_group_candidates",
    "discussion_group_candidate",
    "foreign_id",
    "normalize_discussion",
    "record_issue_link",
    "release_group_candidate",
    "release_major_version",
]
