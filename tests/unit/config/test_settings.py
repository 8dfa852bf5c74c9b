"""Unit tests for config settings & loaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from optval.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    OptvalSettings,
    Settings,
    load_settings,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across loader tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    ratio: float = 0.5
    timeout: int | None = None
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int_and_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.25")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_optional_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_TIMEOUT", "30")
        assert EnvSettingsLoader().load(AppSettings).timeout == 30
        monkeypatch.setenv("APP_TIMEOUT", "none")
        assert EnvSettingsLoader().load(AppSettings).timeout is None

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_TAGS", "a, b,,c")
        assert EnvSettingsLoader().load(AppSettings).tags == ["a", "b", "c"]

    def test_defaults_preserved_when_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_DEBUG", "APP_TIMEOUT", "APP_TAGS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings == AppSettings()

    def test_unparseable_value_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(AppSettings)


# ---------------------------------------------------------------------------
# OptvalSettings
# ---------------------------------------------------------------------------


class TestOptvalSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("OPTVAL_LOG_LEVEL", "OPTVAL_LOG_JSON", "OPTVAL_JSON_INDENT"):
            monkeypatch.delenv(key, raising=False)
        settings = load_settings()
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.json_indent is None

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTVAL_LOG_LEVEL", "debug")
        monkeypatch.setenv("OPTVAL_LOG_JSON", "false")
        monkeypatch.setenv("OPTVAL_JSON_INDENT", "4")
        settings = load_settings()
        assert settings.log_level == "debug"
        assert settings.log_json is False
        assert settings.json_indent == 4

    def test_is_cached_until_cleared(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTVAL_JSON_INDENT", "1")
        first = load_settings()
        monkeypatch.setenv("OPTVAL_JSON_INDENT", "3")
        assert load_settings() is first
        load_settings.cache_clear()
        assert load_settings().json_indent == 3

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            OptvalSettings(log_level="LOUD")

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            OptvalSettings(json_indent=-1)

    def test_invalid_env_value_surfaces_as_invalid_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTVAL_JSON_INDENT", "-2")
        with pytest.raises(InvalidSettingValueError):
            load_settings()

    def test_unparseable_env_value_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTVAL_JSON_INDENT", "wide")
        with pytest.raises(ConfigError) as exc_info:
            load_settings()
        assert "OPTVAL_JSON_INDENT" in exc_info.value.message
