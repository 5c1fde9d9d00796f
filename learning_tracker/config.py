"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Identities granted the admin role when the container starts
    ADMIN_IDENTITIES: list[str] = []

    # Progress
    STATS_TIMEZONE: str = "UTC"
    RECENT_SESSIONS_LIMIT: int = 10

    @field_validator("STATS_TIMEZONE", mode="after")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Reject unknown IANA timezone names."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown timezone: {value}"
            raise ValueError(msg) from e
        return value

    @field_validator("ADMIN_IDENTITIES", mode="after")
    @classmethod
    def strip_admin_identities(cls, value: list[str]) -> list[str]:
        """Strip whitespace and drop empty entries."""
        return [identity.strip() for identity in value if identity.strip()]

    @field_validator("RECENT_SESSIONS_LIMIT", mode="after")
    @classmethod
    def validate_recent_sessions_limit(cls, value: int) -> int:
        if value < 1:
            msg = "RECENT_SESSIONS_LIMIT must be at least 1"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
