"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from propmap.adapters.records import read_item_records, write_item_records
from propmap.config import (
    get_overrides_config,
    get_record_storage_config,
    get_release_train_config,
)
from propmap.domain.model import release_line_groups
from propmap.domain.overrides import OverrideRules
from propmap.domain.reconciliation import (
    EngineResult,
    GroupReconciler,
    ReconciliationEngine,
    RelationshipResolver,
)
from propmap.domain.search import CorpusIndex
from propmap.domain.store import EntityStore

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from propmap.domain.model import Group, Item
    from propmap.domain.ports import GroupSource, ItemSource


log = getLogger(__name__)


@dataclass(slots=True)
class CatalogResult:
    """Finished store plus the audit trail of the run that produced it."""

    store: EntityStore
    rules: OverrideRules
    engine: EngineResult


def load_override_rules(path: Path | None = None) -> OverrideRules:
    """Load override rules from ``path`` or the configured location.

    Raises ``ConfigurationError`` when no rules source is configured or readable.
    """

    effective_path = path if path is not None else get_overrides_config().path
    rules = OverrideRules.load(effective_path)
    log.info("Loaded %s override rules from %s", len(rules), effective_path)
    return rules


def build_store(items: Iterable[Item], groups: Iterable[Group]) -> EntityStore:
    store = EntityStore.from_entities(items, groups)
    log.info("Built store: items=%s, groups=%s", store.item_count, store.group_count)
    return store


def reconcile_catalog(
    *,
    item_source: ItemSource,
    group_source: GroupSource,
    rules: OverrideRules | None = None,
    overrides_path: Path | None = None,
) -> CatalogResult:
    """Ingest from the sources, then resolve relationships and group memberships."""

    effective_rules = rules if rules is not None else load_override_rules(overrides_path)
    store = build_store(item_source(), group_source())

    engine = ReconciliationEngine(
        resolver=RelationshipResolver(),
        reconciler=GroupReconciler(rules=effective_rules),
    )
    result = engine.run(store)

    log.info(
        f"Finished reconciliation: edges={result.resolution.translated}, "
        f"memberships={result.reconciliation.added}, "
        f"suppressed={result.reconciliation.suppressed + result.reconciliation.removed}, "
        f"diagnostics={len(result.diagnostics)}"
    )
    return CatalogResult(store=store, rules=effective_rules, engine=result)


def release_train_groups() -> list[Group]:
    """Release-line groups for every configured release train."""

    config = get_release_train_config()
    return release_line_groups(config.first, config.last)


def write_catalog_records(store: EntityStore, directory: Path | None = None) -> int:
    effective_dir = (
        directory if directory is not None else get_record_storage_config().ensure_records_dir()
    )
    return write_item_records(store.items(), effective_dir)


def load_corpus(directory: Path | None = None) -> CorpusIndex:
    effective_dir = (
        directory if directory is not None else get_record_storage_config().resolve_records_dir()
    )
    return CorpusIndex(read_item_records(effective_dir))
