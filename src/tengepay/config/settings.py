"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a local .env file) and are
validated on load.

Files that USE this module:
- tengepay.app (loads settings for logging configuration)
- tengepay.adapters.observers.investor (default investor threshold)
- tengepay.shared.language (default language)

Files that this module USES:
- tengepay.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from tengepay.shared.validators import (
    validate_language_code,  # Validate supported language codes
    validate_log_level,  # Validate logging level names
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Language Settings ---
    default_language: str = Field(default="en", alias="DEFAULT_LANGUAGE")

    # --- Exchange Rate Demo ---
    # Investors sell strictly above this USD/KZT rate and buy at or below it
    investor_threshold: float = Field(default=500.0, alias="INVESTOR_THRESHOLD")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="TENGEPAY_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        v = v.strip().lower()
        if not validate_language_code(v):
            raise ValueError("DEFAULT_LANGUAGE must be 'en' or 'ru'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level name."""
        v = v.strip().upper()
        if not validate_log_level(v):
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return v


# Global settings instance
settings = Settings()
