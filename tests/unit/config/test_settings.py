"""Unit tests for Settings and get_settings."""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from five_whys.api import dependencies
from five_whys.config import get_settings
from five_whys.config.settings import Settings, set_file_values


class TestSettings:
    def test_session_store_defaults(self) -> None:
        """The store holds 100 sessions with a 30 minute idle timeout."""
        settings = Settings()
        assert settings.session_store.capacity == 100
        assert settings.session_store.idle_timeout == timedelta(minutes=30)

    def test_logging_defaults(self) -> None:
        settings = Settings()
        assert settings.logging.level == "INFO"
        assert settings.logging.format == "json"
        assert settings.logging.redact_pii is True
        assert settings.metrics_enabled is True

    def test_capacity_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(session_store={"capacity": 0})

    def test_idle_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(session_store={"idle_timeout_seconds": 0})

    def test_cors_origins_from_string(self) -> None:
        settings = Settings(api={"cors_origins": "http://a.test, http://b.test"})
        assert settings.api.cors_origins == ["http://a.test", "http://b.test"]

    def test_file_values_used(self) -> None:
        set_file_values({"session_store": {"capacity": 12}, "logging": {"format": "console"}})

        settings = Settings()

        assert settings.session_store.capacity == 12
        assert settings.session_store.idle_timeout_seconds == 1800
        assert settings.logging.format == "console"

    def test_env_beats_file_values(self, env_override) -> None:
        set_file_values({"session_store": {"capacity": 12, "idle_timeout_seconds": 60}})

        with env_override({"FIVE_WHYS_SESSION_STORE__CAPACITY": "7"}):
            settings = Settings()

        assert settings.session_store.capacity == 7
        assert settings.session_store.idle_timeout_seconds == 60


class TestGetSettings:
    def test_loads_toml(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({
            "default.toml": "metrics_enabled = false\n[session_store]\ncapacity = 25\n",
        })
        monkeypatch.setenv("FIVE_WHYS_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FIVE_WHYS_ENV", "nonexistent")

        settings = get_settings()

        assert settings.metrics_enabled is False
        assert settings.session_store.capacity == 25

    def test_env_beats_toml(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "[session_store]\ncapacity = 25\n"})
        monkeypatch.setenv("FIVE_WHYS_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FIVE_WHYS_SESSION_STORE__CAPACITY", "9")

        assert get_settings().session_store.capacity == 9

    def test_missing_default_falls_back_to_defaults(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FIVE_WHYS_CONFIG_DIR", str(test_config_dir))

        assert get_settings().session_store.capacity == 100

    def test_settings_cached(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "metrics_enabled = true"})
        monkeypatch.setenv("FIVE_WHYS_CONFIG_DIR", str(test_config_dir))

        assert get_settings() is get_settings()

    def test_reset_dependencies_reloads(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The API layer and the config package share one settings cache."""
        mock_toml_files({"default.toml": "[session_store]\ncapacity = 5\n"})
        monkeypatch.setenv("FIVE_WHYS_CONFIG_DIR", str(test_config_dir))
        assert get_settings().session_store.capacity == 5

        mock_toml_files({"default.toml": "[session_store]\ncapacity = 6\n"})
        dependencies.reset_dependencies()

        assert get_settings().session_store.capacity == 6
        store = dependencies.get_session_store(get_settings())
        assert store.capacity == 6
