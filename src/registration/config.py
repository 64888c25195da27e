"""Configuration for the registration service.

All settings can be overridden via environment variables with the
REGISTRATION_ prefix, e.g. REGISTRATION_EMAIL_SERVICE_AVAILABLE=false.
List settings take JSON: REGISTRATION_ALLOWED_DOMAINS='["example.com"]'.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    """Logging levels accepted by the standard library."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RegistrationConfig(BaseSettings):
    """Registration service configuration."""

    model_config = {"env_prefix": "REGISTRATION_"}

    # Validation rules
    allowed_domains: list[str] = Field(
        default=["gmail.com", "outlook.com", "company.com"],
        description="Email domains accepted for registration",
    )
    min_password_length: int = Field(default=8, ge=1, description="Minimum password length")

    # Notification
    email_service_available: bool = Field(
        default=True, description="Whether the welcome email service is reachable"
    )
    email_template_valid: bool = Field(
        default=True, description="Whether the welcome email template renders"
    )

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level for the CLI")

    @field_validator("allowed_domains")
    @classmethod
    def normalize_domains(cls, domains: list[str]) -> list[str]:
        return [domain.strip().lower() for domain in domains]

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, level: object) -> object:
        if isinstance(level, str):
            return level.strip().upper()
        return level


class RegistrationPresets:
    """Configuration presets for demos and tests."""

    @staticmethod
    def default() -> RegistrationConfig:
        """Create the default configuration."""
        return RegistrationConfig()

    @staticmethod
    def with_overrides(**kwargs: object) -> RegistrationConfig:
        """Create a configuration with specific overrides."""
        return RegistrationConfig(**kwargs)  # type: ignore[arg-type]
