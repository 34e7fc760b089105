"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    RecordStorageConfig,
    ReleaseTrainConfig,
    get_record_storage_config,
    get_release_train_config,
)
from .env import int_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .overrides import OVERRIDES_PATH_ENV, OverridesConfig, get_overrides_config

__all__ = [
    "OVERRIDES_PATH_ENV",
    "ConfigurationError",
    "MissingConfigurationError",
    "OverridesConfig",
    "RecordStorageConfig",
    "ReleaseTrainConfig",
    "get_overrides_config",
    "get_record_storage_config",
    "get_release_train_config",
    "int_env_var",
    "require_env_var",
    "require_env_vars",
]
