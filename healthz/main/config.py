"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Dict, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from healthz.shared import EnumEnvironment, EnumLogLevel


class AppInfoSettings(BaseSettings):
    """Service identification and HTTP server settings."""

    title: str = Field(default="Health UI Report", description="Service title")
    description: str = Field(
        default="Aggregated liveness/readiness report in the health "
        "dashboard format",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    debug: bool = Field(default=False, description="Enable debug mode")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class HealthSettings(BaseSettings):
    """Health endpoint and check registration settings."""

    path: str = Field(default="/healthz", description="Route of the health report")
    self_check: bool = Field(
        default=True, description="Register the always-healthy 'self' check"
    )
    url_checks: Dict[str, str] = Field(
        default_factory=dict,
        description="Reachability probes as a JSON object of tag -> URL",
    )
    url_timeout_seconds: float = Field(
        default=3.0, gt=0, description="Timeout applied to each URL probe"
    )
    entry_module: Optional[str] = Field(
        default=None,
        description="Module reported as process identity, defaults to __main__",
        validation_alias=AliasChoices("HEALTH_ENTRY_MODULE", "ENTRY_MODULE"),
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
