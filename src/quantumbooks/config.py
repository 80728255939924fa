"""Application configuration using Pydantic Settings.

This module provides centralized configuration management with environment
variable validation, type coercion, and default values.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Application settings with environment variable validation.

    All settings can be overridden via environment variables prefixed with
    ``QUANTUMBOOKS_`` (e.g. ``QUANTUMBOOKS_CURRENCY=USD``) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUANTUMBOOKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Application
    # ========================================
    app_name: str = Field(
        default="QuantumBooks",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log output format (json for machines, console for humans)",
    )

    # ========================================
    # Store
    # ========================================
    store_name: str = Field(
        default="Quantum Book Store",
        min_length=1,
        description="Prefix of every notice written to the output sink",
    )
    currency: str = Field(
        default="EGP",
        min_length=1,
        description="Currency code printed on receipts",
    )
    max_book_age: int = Field(
        default=3,
        ge=0,
        description="Books older than this many years are cleared by the demo",
    )
    current_year: int | None = Field(
        default=None,
        ge=0,
        description="Fixed reference year; the system clock is used when unset",
    )

    # ========================================
    # Derived Properties
    # ========================================
    @property
    def use_json_logs(self) -> bool:
        """Check if JSON logging should be used."""
        return self.log_format == LogFormat.JSON

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        """Store currency codes upper-cased."""
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    This function is cached to avoid re-reading environment variables
    on every access.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
