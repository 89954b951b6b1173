"""Configuration loader for the localization package."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from src.localization.core.culture import normalize_culture

CONFIG_ENV_VAR = "LOCALIZATION_CONFIG"

logger = logging.getLogger(__name__)


class LocalizationConfig(BaseModel):
    """Language manager configuration."""

    enabled: bool = Field(default=True, description="Resolve translations by culture")
    culture: str | None = Field(
        default=None, description="Default culture; the ambient culture is used when unset"
    )

    @field_validator("culture")
    @classmethod
    def validate_culture(cls, v: str | None) -> str | None:
        return normalize_culture(v) or None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    format: str = Field(default="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s")
    file: str | None = Field(default=None)


class Settings(BaseModel):
    """Complete application settings."""

    localization: LocalizationConfig = Field(default_factory=LocalizationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def find_config_file() -> Path | None:
    """Find settings.yaml: LOCALIZATION_CONFIG env, project root, or cwd."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path

    current = Path(__file__).resolve()
    for parent in current.parents:
        config_path = parent / "config" / "settings.yaml"
        if config_path.exists():
            return config_path
        if (parent / "pyproject.toml").exists():
            break

    cwd_config = Path("config/settings.yaml")
    if cwd_config.exists():
        return cwd_config

    return None


def load_settings_from_file(path: Path) -> dict[str, Any]:
    """Load settings dict from a YAML file."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get application settings (cached)."""
    config_path = find_config_file()

    if config_path:
        try:
            data = load_settings_from_file(config_path)
            return Settings.model_validate(data)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using default settings")

    return Settings()


def reset_settings() -> None:
    """Clear cached settings."""
    get_settings.cache_clear()


def reload_settings() -> Settings:
    """Force reload settings from file."""
    reset_settings()
    return get_settings()
