# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Prediction defaults ===
    default_region: str = "US"
    default_experience_years: float = 0

    # === Weight data source ===
    weights_mode: Literal["static", "live"] = "static"
    weights_url: str = ""
    weights_token: str = ""
    weights_cache_key: str = ""
    weights_ttl_ms: int = 10 * 60 * 1000
    weights_timeout_ms: int = 3000
    weights_allow_stale: bool = True

    # === Cache ===
    cache_backend: Literal["memory", "json"] = "memory"
    cache_root: Path = Path("~/.skillsalary/cache")

    # === Jobs ===
    job_retention_ms: int = 60 * 60 * 1000
    job_cleanup_interval_s: float = 3600.0

    # === Webhooks ===
    webhook_transport: Literal["log", "http"] = "log"
    webhook_timeout_s: float = 5.0

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("weights_timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("weights_timeout_ms must be > 0")
        return v

    @field_validator("default_experience_years")
    @classmethod
    def validate_experience(cls, v: float) -> float:
        if v < 0:
            raise ValueError("default_experience_years must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.weights_mode == "live" and not self.weights_url:
            errors.append("WEIGHTS_MODE=live requires WEIGHTS_URL")

        if self.job_cleanup_interval_s <= 0:
            errors.append("JOB_CLEANUP_INTERVAL_S must be > 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
