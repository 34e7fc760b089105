"""Catalog defaults: release trains and record storage."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import int_env_var
from .errors import ConfigurationError

APP_DIR_NAME: Final[str] = "propmap"
RECORDS_DIR_NAME: Final[str] = "items"
DEFAULT_FIRST_RELEASE: Final[int] = 6
DEFAULT_LAST_RELEASE: Final[int] = 18


@dataclass(frozen=True, slots=True)
class ReleaseTrainConfig:
    first: int = DEFAULT_FIRST_RELEASE
    last: int = DEFAULT_LAST_RELEASE

    def __post_init__(self) -> None:
        if self.first < 1 or self.last < self.first:
            raise ConfigurationError(
                f"Invalid release train range: {self.first}..{self.last}"
            )


@dataclass(frozen=True, slots=True)
class RecordStorageConfig:
    records_dir: Path

    def resolve_records_dir(self) -> Path:
        return self.records_dir.expanduser().resolve()

    def ensure_records_dir(self) -> Path:
        records_dir = self.resolve_records_dir()
        records_dir.mkdir(parents=True, exist_ok=True)
        return records_dir


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_release_train_config() -> ReleaseTrainConfig:
    return ReleaseTrainConfig(
        first=int_env_var("PROPMAP_RELEASE_FIRST", DEFAULT_FIRST_RELEASE),
        last=int_env_var("PROPMAP_RELEASE_LAST", DEFAULT_LAST_RELEASE),
    )


def get_record_storage_config() -> RecordStorageConfig:
    env_dir = os.getenv("PROPMAP_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _default_data_dir()
    return RecordStorageConfig(records_dir=data_dir / RECORDS_DIR_NAME)
