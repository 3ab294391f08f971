"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; LogoExtractor/1.0)"


class Config(BaseSettings):
    """Application configuration loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    request_timeout: float = 15.0
    max_redirects: int = 10
    max_logo_bytes: int = 2 * 1024 * 1024
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, value: float) -> float:
        """Request timeout must be between 1 and 120 seconds."""
        if value < 1 or value > 120:
            msg = "request_timeout must be between 1 and 120 seconds"
            raise ValueError(msg)
        return value

    @field_validator("max_redirects")
    @classmethod
    def validate_max_redirects(cls, value: int) -> int:
        """Redirect cap must be between 0 and 30."""
        if value < 0 or value > 30:
            msg = "max_redirects must be between 0 and 30"
            raise ValueError(msg)
        return value

    @field_validator("max_logo_bytes")
    @classmethod
    def validate_max_logo_bytes(cls, value: int) -> int:
        """Logo size limit must be positive."""
        if value <= 0:
            msg = "max_logo_bytes must be greater than 0"
            raise ValueError(msg)
        return value

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, value: str) -> str:
        """User agent must be non-empty."""
        if not value.strip():
            msg = "user_agent must not be empty"
            raise ValueError(msg)
        return value
