"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation,
type coercion, and sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContractsConfig(BaseSettings):
    """Payload validation behaviour."""

    model_config = SettingsConfigDict(env_prefix="ITCH_CONTRACTS_")

    reject_unknown_enums: bool = Field(
        default=False,
        description="Raise on enumeration values this package doesn't know yet",
    )
    log_unknown_enums: bool = Field(
        default=True,
        description="Emit a warning for each unknown enumeration value",
    )


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )

    contracts: ContractsConfig = Field(default_factory=ContractsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
