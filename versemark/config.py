"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from versemark.domain.versification import BUILTIN_VERSIFICATIONS, CANONICAL_SCHEME


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite:///./versemark.db"
    SQL_ECHO: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Scheme assumed for verse arguments when callers don't name one
    DEFAULT_VERSIFICATION: str = CANONICAL_SCHEME

    @field_validator("DEFAULT_VERSIFICATION", mode="after")
    @classmethod
    def validate_default_versification(cls, value: str) -> str:
        """Only built-in schemes can be configured as the default."""
        value = value.strip()
        known = [versification.name for versification in BUILTIN_VERSIFICATIONS]
        if value not in known:
            msg = f"DEFAULT_VERSIFICATION must be one of {known}, got '{value}'"
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

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
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
