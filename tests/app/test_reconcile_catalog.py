from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from propmap.app import (
    build_store,
    load_corpus,
    load_override_rules,
    reconcile_catalog,
    release_train_groups,
    write_catalog_records,
)
from propmap.config import OVERRIDES_PATH_ENV, ConfigurationError
from propmap.domain.overrides import OverrideRules
from propmap.domain.ports import GroupSource, ItemSource
from tests.helpers.catalog import FakeGroupSource, FakeItemSource, make_groups, make_item

if TYPE_CHECKING:
    from pathlib import Path


def _sources() -> tuple[FakeItemSource, FakeGroupSource]:
    items = FakeItemSource(
        items=[
            make_item(
                286,
                issue="JDK-8151454",
                release="10",
                discussion="amber dash dev at openjdk dot java dot net",
                related=["8193209"],
                body="Enhance the Java Language to extend type inference to local variables.",
            ),
            make_item(323, issue="8193209", release="11", declared=["amber"]),
            make_item(8130200, issue="8130200", discussion="hotspot-gc-dev"),
        ]
    )
    return items, FakeGroupSource(groups=[*make_groups(), *release_train_groups()])


def test_fake_sources_satisfy_ports() -> None:
    items, groups = _sources()

    assert isinstance(items, ItemSource)
    assert isinstance(groups, GroupSource)


def test_reconcile_catalog_end_to_end(rules_file: Path) -> None:
    items, groups = _sources()

    result = reconcile_catalog(item_source=items, group_source=groups, overrides_path=rules_file)

    store = result.store
    assert items.calls == 1
    assert groups.calls == 1
    assert store.get_item(286).related == {323}
    assert store.get_item(323).related == {286}
    assert store.get_group("jdk/10").item_numbers == (286,)
    # 286 must not map to amber; 323 still does
    assert store.get_group("amber").item_numbers == (323,)
    # wildcard rule for 8130200
    assert store.groups_for(store.get_item(8130200)) == ()
    assert result.engine.reconciliation.suppressed == 2


def test_reconcile_catalog_reads_configured_rules(
    monkeypatch: pytest.MonkeyPatch, rules_file: Path
) -> None:
    monkeypatch.setenv(OVERRIDES_PATH_ENV, str(rules_file))
    items, groups = _sources()

    result = reconcile_catalog(item_source=items, group_source=groups)

    assert result.rules.forbids(286, "amber")


def test_reconcile_catalog_without_rules_is_fatal(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(OVERRIDES_PATH_ENV, str(tmp_path / "missing.properties"))
    items, groups = _sources()

    with pytest.raises(ConfigurationError):
        reconcile_catalog(item_source=items, group_source=groups)

    assert items.calls == 0


def test_reconcile_catalog_accepts_explicit_rules() -> None:
    items, groups = _sources()

    result = reconcile_catalog(item_source=items, group_source=groups, rules=OverrideRules())

    assert result.store.get_group("amber").item_numbers == (286, 323)


def test_load_override_rules_from_path(rules_file: Path) -> None:
    assert len(load_override_rules(rules_file)) == 2


def test_release_train_groups_follow_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROPMAP_RELEASE_FIRST", "9")
    monkeypatch.setenv("PROPMAP_RELEASE_LAST", "11")

    assert [group.id for group in release_train_groups()] == ["jdk9", "jdk/10", "jdk/11"]


def test_build_store_counts_entities() -> None:
    store = build_store([make_item(1), make_item(2)], make_groups())

    assert store.item_count == 2
    assert store.group_count == len(make_groups())


def test_records_feed_the_search_corpus(tmp_path: Path) -> None:
    items, groups = _sources()
    result = reconcile_catalog(item_source=items, group_source=groups, rules=OverrideRules())

    written = write_catalog_records(result.store, tmp_path)
    corpus = load_corpus(tmp_path)

    assert written == 3
    matches = corpus.search("type inference")
    assert [match.number for match in matches] == [286]
    assert matches[0].snippets


def test_records_use_configured_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("PROPMAP_DATA_DIR", str(tmp_path))
    store = build_store([make_item(1, body="records body text here")], [])

    write_catalog_records(store)

    assert [item.number for item in load_corpus().items] == [1]
