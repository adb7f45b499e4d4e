"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DEFAULT_STATE_FILE = PROJECT_ROOT / "flashdeck-state.json"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # External record store
    DATABASE_URL: str = "sqlite:///./flashdeck-store.db"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "flashdeck API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Owner of the records written to the external store
    OWNER_ID: str = "local"

    # Local-first state
    STATE_FILE: Path = DEFAULT_STATE_FILE
    SEED_SAMPLE_DATA: bool = True

    # Decks
    DECK_COLOR_PALETTE: list[str] = [
        "bg-blue-500",
        "bg-green-500",
        "bg-purple-500",
        "bg-red-500",
        "bg-yellow-500",
        "bg-indigo-500",
    ]
    DEFAULT_DECK_COLOR: str = "bg-blue-500"

    # Import
    DEFAULT_IMPORT_STRATEGY: Literal["skip", "rename", "replace"] = "rename"
    IMPORT_FETCH_TIMEOUT_SECONDS: float = 30.0

    # Sync
    SYNC_ENABLED: bool = True
    SYNC_MAX_RETRIES: int = 3
    SYNC_RETRY_DELAY_SECONDS: float = 1.0

    @field_validator("DECK_COLOR_PALETTE", mode="after")
    @classmethod
    def require_palette(cls, value: list[str]) -> list[str]:
        """Reject an empty color palette."""
        if not value:
            msg = "DECK_COLOR_PALETTE must contain at least one color"
            raise ValueError(msg)
        return value

    @field_validator("SYNC_MAX_RETRIES", mode="after")
    @classmethod
    def non_negative_retries(cls, value: int) -> int:
        """Reject negative retry counts."""
        if value < 0:
            msg = "SYNC_MAX_RETRIES cannot be negative"
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
