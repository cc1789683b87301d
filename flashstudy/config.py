"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # External key-value store
    REDIS_URL: str | None = None
    REDIS_SOCKET_TIMEOUT: float = 5.0

    # API (constants, not from env)
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Flashstudy API"
    VERSION: str = "0.1.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Populate an empty store with sample flashcards
    SEED_SAMPLE_DATA: bool = True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def external_store_enabled(self) -> bool:
        """Whether an external key-value store is configured."""
        return self.REDIS_URL is not None

    @field_validator("REDIS_URL", mode="before")
    @classmethod
    def blank_redis_url_is_unset(cls, value: str | None) -> str | None:
        """Treat an empty REDIS_URL as not configured."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("REDIS_SOCKET_TIMEOUT", mode="after")
    @classmethod
    def positive_timeout(cls, value: float) -> float:
        """Reject non-positive socket timeouts."""
        if value <= 0:
            msg = "REDIS_SOCKET_TIMEOUT must be positive"
            raise ValueError(msg)
        return value


LOG_LEVELS = {
    "development": logging.DEBUG,
    "production": logging.INFO,
    "test": logging.WARNING,
}


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog.

    Production renders JSON lines, other environments a console format.
    """
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=LOG_LEVELS.get(environment, logging.INFO),
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
