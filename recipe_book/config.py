"""Configuration and logging setup.

Settings come from environment variables. A ``.env`` file in the working
directory is loaded first when present.

Example .env:
    MEALDB_BASE_URL=https://themealdb.com/api/json/v1/1/
    LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://themealdb.com/api/json/v1/1/"
DEFAULT_USER_AGENT = "RecipeBook/1.0"


class Settings(BaseModel):
    """Runtime settings."""

    model_config = ConfigDict(frozen=True)

    mealdb_base_url: str = Field(DEFAULT_BASE_URL, description="TheMealDB API base URL")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent request header")
    log_level: str = Field("INFO", description="Logging level name")

    @field_validator("mealdb_base_url")
    @classmethod
    def trailing_slash(cls, v: str) -> str:
        """Endpoint paths are appended, so the base must end with '/'."""
        return v if v.endswith("/") else v + "/"

    @field_validator("log_level")
    @classmethod
    def upper(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from the environment."""
        return cls(
            mealdb_base_url=os.getenv("MEALDB_BASE_URL", DEFAULT_BASE_URL),
            user_agent=os.getenv("MEALDB_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load ``.env`` once and return the cached settings."""
    load_dotenv()
    return Settings.from_env()


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Level name; defaults to ``LOG_LEVEL`` from settings
    """
    level_name = (level or get_settings().log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
