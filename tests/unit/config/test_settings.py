"""Unit tests for WorkCatalog settings.

Tests verify:
- Defaults when no environment overrides are present
- WCAT_ prefixed and unprefixed environment variables
- Validation of ENVIRONMENT values
- Singleton behaviour of get_settings
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from work_catalog.config.settings import Settings, get_settings


@pytest.mark.unit
def test_defaults() -> None:
    settings = Settings()

    assert settings.ENVIRONMENT == "dev"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.log_to_file is False
    assert settings.extra_works_file is None
    assert settings.extra_works_path is None
    assert settings.export_path == "./build/works.json"


@pytest.mark.unit
def test_prefixed_env_vars_override_fields(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WCAT_EXPORT_PATH", str(tmp_path / "out.json"))
    monkeypatch.setenv("WCAT_EXTRA_WORKS_FILE", str(tmp_path / "extra.yml"))
    monkeypatch.setenv("WCAT_LOG_TO_FILE", "true")

    settings = Settings()

    assert settings.export_path == str(tmp_path / "out.json")
    assert settings.extra_works_path == tmp_path / "extra.yml"
    assert settings.log_to_file is True


@pytest.mark.unit
def test_blank_extra_works_file_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WCAT_EXTRA_WORKS_FILE", "  ")

    assert Settings().extra_works_path is None


@pytest.mark.unit
def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert Settings().LOG_LEVEL == "DEBUG"


@pytest.mark.unit
def test_invalid_environment_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "qa")

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert "ENVIRONMENT" in str(exc_info.value)


@pytest.mark.unit
def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.unit
def test_cache_clear_picks_up_new_env(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("ENVIRONMENT", "staging")
    get_settings.cache_clear()

    second = get_settings()

    assert first.ENVIRONMENT == "dev"
    assert second.ENVIRONMENT == "staging"
