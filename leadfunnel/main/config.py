"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from leadfunnel.shared import EnumEnvironment, EnumLogLevel
from leadfunnel.shared.env import load_secret_file_variables

# SERVICE_AUTH_TOKEN_FILE and friends must be resolved before any settings load.
load_secret_file_variables()


class AppInfoSettings(BaseSettings):
    """Service identity and HTTP server settings."""

    title: str = Field(default="Lead Funnel Orchestrator", description="App title")
    description: str = Field(
        default="Orchestrates website analysis and homepage generation "
        "for the marketing funnel",
        description="App description",
    )
    version: str = Field(default="1.0.0", description="App version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("APP_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("APP_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(
        default=3000,
        description="Port to bind the server",
        validation_alias=AliasChoices("APP_PORT", "PORT"),
    )
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


class ServicesSettings(BaseSettings):
    """Downstream service addresses, shared credential and timeouts."""

    analyzer_url: str = Field(
        default="http://127.0.0.1:8001",
        description="Analyzer service base URL",
        validation_alias=AliasChoices("SERVICES_ANALYZER_URL", "ANALYZER_SERVICE_URL"),
    )
    builder_url: str = Field(
        default="http://127.0.0.1:8002",
        description="Homepage builder service base URL",
        validation_alias=AliasChoices("SERVICES_BUILDER_URL", "BUILDER_SERVICE_URL"),
    )
    auth_token: Optional[str] = Field(
        default=None,
        description="Shared service-to-service bearer token",
        validation_alias=AliasChoices("SERVICES_AUTH_TOKEN", "SERVICE_AUTH_TOKEN"),
    )
    public_api_url: str = Field(
        default="http://localhost:3000",
        description="Public base URL of this API, as seen by browsers",
        validation_alias=AliasChoices(
            "SERVICES_PUBLIC_API_URL", "PUBLIC_API_URL", "NEXT_PUBLIC_API_URL"
        ),
    )
    analyze_timeout: float = Field(
        default=120.0, gt=0, description="Seconds allowed for an analysis"
    )
    generate_timeout: float = Field(
        default=60.0, gt=0, description="Seconds allowed for homepage generation"
    )
    screenshot_timeout: float = Field(
        default=30.0, gt=0, description="Seconds allowed for a screenshot"
    )
    health_timeout: float = Field(
        default=5.0, gt=0, description="Seconds allowed for a health probe"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICES_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
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
    services: ServicesSettings = Field(default_factory=ServicesSettings)
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
