"""
ssosync configuration management.

Provides centralized configuration with validation using Pydantic.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path.home() / ".ssosync" / "config.json"


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    file_enabled: bool = True
    console_enabled: bool = True
    json_format: bool = False
    log_directory: Path = Field(default_factory=lambda: Path.home() / ".ssosync" / "logs")

    @field_validator("log_directory", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser().resolve()


class ProviderConfig(BaseModel):
    """Configuration for the collaborator provider."""

    # "package.module:callable", called with the SsoSyncConfig
    factory: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("factory")
    @classmethod
    def check_factory_format(cls, v: str | None) -> str | None:
        if v is None:
            return v
        module_name, sep, attr = v.partition(":")
        if not sep or not module_name.strip() or not attr.strip():
            raise ValueError("factory must look like 'package.module:callable'")
        return v.strip()


class PromptConfig(BaseModel):
    """Configuration for interactive integration selection."""

    message: str = "select an integration"


class SsoSyncConfig(BaseModel):
    """Main ssosync configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> SsoSyncConfig:
        """Load configuration from file or create default."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if config_path.exists():
            with open(config_path) as f:
                data = json.load(f)
            return cls.model_validate(data)

        return cls()

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, default=str)

    def ensure_directories(self) -> None:
        """Create all required directories."""
        if self.logging.file_enabled:
            self.logging.log_directory.mkdir(parents=True, exist_ok=True)


def load_config(config_path: Path | None = None) -> SsoSyncConfig:
    """Load or create configuration."""
    config = SsoSyncConfig.load(config_path)
    config.ensure_directories()
    return config
