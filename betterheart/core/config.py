"""
Configuration management for Better Heart.

Loads settings from environment variables and YAML config files.
Uses Pydantic for validation.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from betterheart.core.constants import DEFAULT_MESSAGES
from betterheart.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Paths and persistence switches are loaded from .env file or environment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BETTERHEART_",
        case_sensitive=False,
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(
        default=Path("data"),
        description="Root directory for data storage",
    )
    config_dir: Path = Field(
        default=Path("config"),
        description="Directory containing YAML config files",
    )

    # Persistence
    save_assessments: bool = Field(
        default=True,
        description="Forward completed assessments to the store",
    )
    save_workers: int = Field(
        default=2,
        ge=1,
        description="Background workers for assessment saves",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("data_dir", "config_dir", mode="before")
    @classmethod
    def resolve_path(cls, v: str | Path) -> Path:
        """Convert string to Path and resolve."""
        return Path(v).resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper()

    @property
    def assessments_dir(self) -> Path:
        """Directory for saved assessment records."""
        path = self.data_dir / "assessments"
        path.mkdir(parents=True, exist_ok=True)
        return path


class MessagesConfig:
    """
    User-facing notice texts loaded from messages.yaml.

    Keys missing from the file fall back to the built-in defaults.
    """

    def __init__(self, config_path: Path | None = None):
        self._config = self._load_yaml(config_path) if config_path else {}

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        """Load and parse YAML file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        with open(path) as f:
            return yaml.safe_load(f) or {}

    def _message(self, key: str) -> str:
        return self._config.get("messages", {}).get(key, DEFAULT_MESSAGES[key])

    @property
    def validation_failed(self) -> str:
        """Shown when a step gate refuses to advance."""
        return self._message("validation_failed")

    @property
    def save_succeeded(self) -> str:
        """Shown when a background save completes."""
        return self._message("save_succeeded")

    @property
    def save_failed(self) -> str:
        """Shown when a background save fails."""
        return self._message("save_failed")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def load_config(config_type: str) -> MessagesConfig:
    """
    Load a specific configuration file.

    Args:
        config_type: Currently only "messages"

    Returns:
        Appropriate config object
    """
    settings = get_settings()
    config_map: dict[str, tuple[Path, type]] = {
        "messages": (settings.config_dir / "messages.yaml", MessagesConfig),
    }

    if config_type not in config_map:
        raise ConfigurationError(
            f"Unknown config type: {config_type}. "
            f"Valid types: {list(config_map.keys())}",
            config_key=config_type,
        )

    path, config_class = config_map[config_type]
    return config_class(path)
