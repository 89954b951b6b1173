"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from src.localization.core.config import (
    CONFIG_ENV_VAR,
    LocalizationConfig,
    Settings,
    find_config_file,
    get_settings,
    load_settings_from_file,
    reload_settings,
)


class TestLocalizationConfig:
    """Test the localization settings section."""

    def test_defaults(self):
        config = LocalizationConfig()
        assert config.enabled is True
        assert config.culture is None

    def test_culture_is_normalized(self):
        assert LocalizationConfig(culture="pt_br").culture == "pt-BR"

    def test_empty_culture_is_unset(self):
        assert LocalizationConfig(culture="").culture is None

    def test_invalid_enabled(self):
        with pytest.raises(ValidationError):
            LocalizationConfig(enabled="sometimes")


class TestSettingsLoading:
    """Test loading settings from YAML."""

    def test_env_var_config_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(
            "localization:\n  enabled: false\n  culture: de-DE\nlogging:\n  level: DEBUG\n",
            encoding="utf-8",
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert find_config_file() == config_file

        settings = reload_settings()
        assert settings.localization.enabled is False
        assert settings.localization.culture == "de-DE"
        assert settings.logging.level == "DEBUG"

    def test_settings_are_cached(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        assert get_settings() is get_settings()

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("", encoding="utf-8")
        assert load_settings_from_file(config_file) == {}

    def test_invalid_file_uses_defaults(self, tmp_path, monkeypatch, caplog):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("localization:\n  enabled: [not, a, bool]\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        settings = reload_settings()

        assert settings == Settings()
        assert "Failed to load config" in caplog.text

    def test_malformed_yaml_uses_defaults(self, tmp_path, monkeypatch):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("localization: [unclosed\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert reload_settings() == Settings()
