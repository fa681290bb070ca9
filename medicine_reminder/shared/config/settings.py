# 📄 File: medicine_reminder/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads settings from environment variables
# (like which server the app signs in against) and hands them to the rest of the app.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - medicine_reminder.main (application bootstrap)
# - medicine_reminder.shared.utils.logging (log level and format)
# - medicine_reminder.shared.infrastructure (database URL, API base URL)

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Medicine Reminder", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Force DEBUG logging regardless of LOG_LEVEL")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # AUTH API
    # =========================================================================

    API_BASE_URL: str = Field(..., description="Base URL of the reminder auth API")
    API_TIMEOUT: int = Field(default=30, description="Total request timeout (seconds)")
    API_MAX_CONNECTIONS: int = Field(default=10, description="HTTP connection pool size")

    # =========================================================================
    # LOCAL DATABASE
    # =========================================================================

    LOCAL_DATABASE_URL: str = Field(
        default="sqlite:///medicine_reminder.db",
        description="SQLAlchemy URL of the on-device database",
    )
    LOCAL_DATABASE_ECHO: bool = Field(default=False, description="Echo SQL statements")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed_formats = ["json", "text"]
        if v.lower() not in allowed_formats:
            raise ValueError(f"Log format must be one of {allowed_formats}")
        return v.lower()

    @field_validator("API_BASE_URL")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate API base URL scheme and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid API base URL: {v}")
        return v.rstrip("/")

    @field_validator("API_TIMEOUT", "API_MAX_CONNECTIONS")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Value must be greater than zero")
        return v


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
