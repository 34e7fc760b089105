"""Override rules configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import require_env_var

OVERRIDES_PATH_ENV = "PROPMAP_OVERRIDES_PATH"


@dataclass(frozen=True, slots=True)
class OverridesConfig:
    path: Path


def get_overrides_config() -> OverridesConfig:
    """Return the configured override rules location.

    There is no default: running reconciliation without curated rules would
    silently re-admit memberships that were removed by hand.
    """

    return OverridesConfig(path=Path(require_env_var(OVERRIDES_PATH_ENV)).expanduser())
