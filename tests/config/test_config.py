from __future__ import annotations

import os
from pathlib import Path

import pytest

from propmap.config import (
    OVERRIDES_PATH_ENV,
    ConfigurationError,
    MissingConfigurationError,
    ReleaseTrainConfig,
    get_overrides_config,
    get_record_storage_config,
    get_release_train_config,
    int_env_var,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_int_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_INT", raising=False)
    assert int_env_var("EXAMPLE_INT", 6) == 6

    monkeypatch.setenv("EXAMPLE_INT", " 21 ")
    assert int_env_var("EXAMPLE_INT", 6) == 21

    monkeypatch.setenv("EXAMPLE_INT", "twenty")
    with pytest.raises(ConfigurationError, match="EXAMPLE_INT"):
        int_env_var("EXAMPLE_INT", 6)


def test_overrides_path_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(OVERRIDES_PATH_ENV, raising=False)

    with pytest.raises(MissingConfigurationError, match=OVERRIDES_PATH_ENV):
        get_overrides_config()


def test_overrides_path_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(OVERRIDES_PATH_ENV, str(tmp_path / "rules.properties"))

    assert get_overrides_config().path == tmp_path / "rules.properties"


def test_release_train_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PROPMAP_RELEASE_FIRST", raising=False)
    monkeypatch.delenv("PROPMAP_RELEASE_LAST", raising=False)

    config = get_release_train_config()

    assert (config.first, config.last) == (6, 18)


def test_release_train_range_is_validated() -> None:
    with pytest.raises(ConfigurationError, match="release train range"):
        ReleaseTrainConfig(first=20, last=10)


def test_record_storage_dir_from_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("PROPMAP_DATA_DIR", str(tmp_path))

    config = get_record_storage_config()

    assert config.resolve_records_dir() == (tmp_path / "items").resolve()
    assert config.ensure_records_dir().is_dir()


def test_record_storage_default_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("PROPMAP_DATA_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    config = get_record_storage_config()

    if os.name != "nt":
        assert config.records_dir == Path(tmp_path).resolve() / "propmap" / "items"
