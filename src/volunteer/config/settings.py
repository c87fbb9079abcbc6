# src/volunteer/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Three bundles are loaded from environment variables (and an optional .env):

- BackendSettings: Supabase base URL, anon API key and Edge Function URLs
- EmailSettings: outbound-email metadata carried alongside the backend config
- Settings: HTTP and logging options, plus the two bundles above

Files that USE this module:
- volunteer.app (builds the backend adapter and logging from settings)
- volunteer.adapters.backend.supabase (endpoint URLs, API key, HTTP timeout)
- tests.test_settings (unit tests)

Files that this module USES:
- volunteer.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from volunteer.shared.validators import (
    validate_api_key,  # Validate API key format
    validate_base_url,  # Validate absolute http(s) URLs
    validate_endpoint_url,  # Validate absolute or relative endpoint URLs
)


class BackendSettings(BaseSettings):
    """Supabase endpoint configuration. Read-only after load."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    url: str = Field(default="", alias="SUPABASE_URL")
    anon_key: str = Field(default="", alias="SUPABASE_ANON_KEY")

    # --- Edge Functions ---
    create_volunteer_url: str = Field(default="", alias="SUPABASE_CREATE_VOLUNTEER_URL")
    email_link_url: str = Field(default="", alias="SUPABASE_EMAIL_LINK_URL")
    update_interests_url: str = Field(default="", alias="SUPABASE_UPDATE_INTERESTS_URL")
    update_volunteer_url: str = Field(default="", alias="SUPABASE_UPDATE_VOLUNTEER_URL")
    check_volunteer_url: str = Field(default="", alias="SUPABASE_CHECK_VOLUNTEER_URL")

    @property
    def interest_url(self) -> str:
        """REST table URL for interest reference records."""
        return f"{self.url.rstrip('/')}/rest/v1/interest"

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate base URL format."""
        v = v.strip()
        if v and not validate_base_url(v):
            raise ValueError("SUPABASE_URL must be an absolute http(s) URL")
        return v

    @field_validator(
        "create_volunteer_url",
        "email_link_url",
        "update_interests_url",
        "update_volunteer_url",
        "check_volunteer_url",
    )
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate Edge Function URL format."""
        v = v.strip()
        if v and not validate_endpoint_url(v):
            raise ValueError(f"Invalid endpoint URL: {v!r}")
        return v

    @field_validator("anon_key")
    @classmethod
    def validate_anon_key(cls, v: str) -> str:
        """Validate API key format (empty means no key configured)."""
        if v and not validate_api_key(v):
            raise ValueError("Invalid SUPABASE_ANON_KEY format")
        return v


class EmailSettings(BaseSettings):
    """Outbound-email metadata. Not read by the backend adapter itself."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    from_address: str = Field(default="", alias="EMAIL_FROM_ADDRESS")
    from_name: str = Field(default="", alias="EMAIL_FROM_NAME")
    subject: str = Field(default="", alias="EMAIL_SUBJECT")
    reply_to: str = Field(default="", alias="EMAIL_REPLY_TO")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Backend ---
    backend: BackendSettings = Field(default_factory=BackendSettings)
    email: EmailSettings = Field(default_factory=EmailSettings)

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=30, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=120)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v


# Global settings instance
settings = Settings()
