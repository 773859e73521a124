"""Configuration settings for the DevBytes video cache."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config.yaml."""

    model_config = SettingsConfigDict(  # type: ignore[assignment]
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "devbytes"
    mongodb_collection: str = "videos"

    # Network
    devbytes_base_url: str = "https://android-kotlin-fun-mars-server.appspot.com"
    http_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def log_path(self) -> Path | None:
        """Get log file as Path."""
        return Path(self.log_file) if self.log_file else None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_yaml_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to ./config.yaml or ./config.yml

    Returns:
        Dictionary with configuration values
    """
    if config_path is None:
        for path in (Path("config.yaml"), Path("config.yml")):
            if path.exists():
                config_path = path
                break

    if config_path is None or not Path(config_path).exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def apply_yaml_config(settings: Settings, config: dict[str, Any]) -> Settings:
    """
    Apply YAML configuration to settings object.

    Environment variables take precedence over YAML config: a YAML value is
    only applied to fields still at their default.

    Args:
        settings: Settings object to update
        config: Configuration dictionary from YAML

    Returns:
        Updated Settings object
    """
    sections = {
        "mongodb": {
            "url": "mongodb_url",
            "database": "mongodb_database",
            "collection": "mongodb_collection",
        },
        "network": {
            "base_url": "devbytes_base_url",
            "timeout": "http_timeout",
        },
        "logging": {
            "level": "log_level",
            "file": "log_file",
        },
    }

    updates: dict[str, Any] = {}
    for section, fields in sections.items():
        values = config.get(section) or {}
        for key, field_name in fields.items():
            if key in values and _is_default(settings, field_name):
                updates[field_name] = values[key]

    if not updates:
        return settings
    return Settings.model_validate({**settings.model_dump(), **updates})


def get_settings_with_yaml(config_path: Path | str | None = None) -> Settings:
    """
    Get settings with YAML configuration applied.

    Priority: Environment Variables > YAML Config > Defaults

    Args:
        config_path: Optional path to config file

    Returns:
        Settings object with YAML configuration applied
    """
    settings = get_settings()
    config = load_yaml_config(config_path)
    return apply_yaml_config(settings, config)


def _is_default(settings: Settings, field_name: str) -> bool:
    return getattr(settings, field_name) == Settings.model_fields[field_name].default
