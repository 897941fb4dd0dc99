# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Only the exporter factory and logging setup read these settings; the
encoder and assembler take everything as explicit arguments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from graphjson.core.errors import ConfigurationError
from graphjson.logging.handlers import parse_size


class ExporterSettings(BaseSettings):
    """Exporter settings, read from GRAPHJSON_* variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="GRAPHJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Identity ===
    id_strategy: Literal["integer", "string"] = "integer"

    # === NetworkX input ===
    networkx_weight_key: str = "weight"
    networkx_attributes: bool = False

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("log_retention")
    @classmethod
    def validate_log_retention(cls, v: int) -> int:
        if v < 0:
            raise ValueError("log_retention must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> ExporterSettings:
        """Cross-field checks that pydantic types cannot express."""
        errors: list[str] = []

        if not self.networkx_weight_key.strip():
            errors.append("NETWORKX_WEIGHT_KEY must not be empty")

        try:
            parse_size(self.log_rotation)
        except ValueError:
            errors.append(f"LOG_ROTATION is not a size: {self.log_rotation!r}")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> ExporterSettings:
    """Load settings from the environment and .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return ExporterSettings(**overrides)  # type: ignore[arg-type]
