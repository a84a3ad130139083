# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of our Plant Care app in a organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for application, logging, reminder scheduling
# and background job configuration.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - zoneinfo for timezone validation
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.utils.logging (log level / format)
# - care_management handlers (reminder window, default timezone)
# - celery_config (broker / backend URLs)

import re
from datetime import timedelta
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TIME_OF_DAY_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


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

    APP_NAME: str = Field(default="Plant Care API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Plant care tracking with care reminders and health status",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    API_V1_PREFIX: str = Field(default="/api/v1", description="API v1 route prefix")

    # =========================================================================
    # SERVER & CORS
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on code changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")

    # =========================================================================
    # LOGGING
    # =========================================================================

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")
    LOG_FILE: Optional[str] = Field(default=None, description="Optional log file path")

    # =========================================================================
    # CARE REMINDER SCHEDULING
    # =========================================================================

    DEFAULT_TIMEZONE: str = Field(
        default="UTC",
        description="IANA timezone used when a user has none configured"
    )
    REMINDER_LOOKAHEAD_HOURS: int = Field(
        default=48,
        description="How long before a due date a reminder is surfaced as upcoming"
    )
    REMINDER_GRACE_PERIOD_HOURS: int = Field(
        default=24,
        description="Tolerance after a due date before a reminder is overdue"
    )
    HEALTH_PROBLEM_WINDOW_DAYS: int = Field(
        default=14,
        description="Problem-report window used when a plant has no resolvable reminder interval"
    )
    DEFAULT_REMINDER_TIME: Optional[str] = Field(
        default=None,
        description="HH:MM time applied to reminders seeded from the plant catalog"
    )
    PLANT_CATALOG_FILE: Optional[str] = Field(
        default=None,
        description="JSON file of plant catalog entries loaded at startup"
    )

    # =========================================================================
    # BACKGROUND JOBS
    # =========================================================================

    CELERY_BROKER_URL: str = Field(
        default="redis://localhost:6379/1",
        description="Celery broker URL"
    )
    CELERY_RESULT_BACKEND: str = Field(
        default="redis://localhost:6379/2",
        description="Celery result backend URL"
    )
    REMINDER_EVALUATION_INTERVAL_MINUTES: int = Field(
        default=60,
        description="How often the beat schedule re-evaluates care reminders"
    )

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
        """Validate log format value."""
        allowed_formats = ["json", "text"]
        if v.lower() not in allowed_formats:
            raise ValueError(f"Log format must be one of {allowed_formats}")
        return v.lower()

    @field_validator("DEFAULT_TIMEZONE")
    @classmethod
    def validate_default_timezone(cls, v: str) -> str:
        """Validate that the default timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator(
        "REMINDER_LOOKAHEAD_HOURS",
        "REMINDER_GRACE_PERIOD_HOURS",
        "HEALTH_PROBLEM_WINDOW_DAYS",
        "REMINDER_EVALUATION_INTERVAL_MINUTES",
    )
    @classmethod
    def validate_positive_window(cls, v: int) -> int:
        """Reminder windows must be positive."""
        if v <= 0:
            raise ValueError("Reminder windows must be positive")
        return v

    @field_validator("DEFAULT_REMINDER_TIME")
    @classmethod
    def validate_default_reminder_time(cls, v: Optional[str]) -> Optional[str]:
        """Validate HH:MM format of the default reminder time."""
        if v is not None and not _TIME_OF_DAY_PATTERN.match(v):
            raise ValueError("Default reminder time must use 24-hour HH:MM format")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def reminder_lookahead(self) -> timedelta:
        return timedelta(hours=self.REMINDER_LOOKAHEAD_HOURS)

    @property
    def reminder_grace_period(self) -> timedelta:
        return timedelta(hours=self.REMINDER_GRACE_PERIOD_HOURS)

    @property
    def health_problem_window(self) -> timedelta:
        return timedelta(days=self.HEALTH_PROBLEM_WINDOW_DAYS)


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
