from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from propmap.domain.overrides import OverrideRules

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "badmappings.properties"
    path.write_text(
        "# curated false positives\n"
        "8130200=*\n"
        "286 = jdk/11, amber\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def no_rules() -> OverrideRules:
    return OverrideRules()
