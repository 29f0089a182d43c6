"""
Configuration management for the Equify insights service.

Uses Pydantic Settings for environment variable validation and type safety.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ApiConfig(BaseSettings):
    """HTTP API configuration."""

    host: str = Field(
        default="0.0.0.0",
        description="Address the API server binds to"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the API server listens on"
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload (development only)"
    )
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    class Config:
        env_prefix = "API_"


class InsightsConfig(BaseSettings):
    """Insight generation configuration."""

    recent_window_days: int = Field(
        default=7,
        ge=1,
        description="Trailing window (days) counted as recent activity"
    )

    class Config:
        env_prefix = "INSIGHTS_"


class DashboardConfig(BaseSettings):
    """Dashboard statistics configuration."""

    window_days: int = Field(
        default=7,
        ge=1,
        description="Length of a week (days) for activity and weekly growth"
    )

    class Config:
        env_prefix = "DASHBOARD_"


class AppConfig(BaseSettings):
    """Main application configuration."""

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # Nested configurations
    api: ApiConfig = Field(default_factory=ApiConfig)
    insights: InsightsConfig = Field(default_factory=InsightsConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global configuration instance.

    Lazily loads configuration on first access.

    Returns:
        AppConfig: The global configuration instance
    """
    global _config
    if _config is None:
        _config = AppConfig(
            api=ApiConfig(),
            insights=InsightsConfig(),
            dashboard=DashboardConfig(),
        )
    return _config


def reload_config() -> AppConfig:
    """
    Reload configuration from environment variables.

    Useful for testing or when environment changes.

    Returns:
        AppConfig: The reloaded configuration instance
    """
    global _config
    _config = None
    return get_config()
