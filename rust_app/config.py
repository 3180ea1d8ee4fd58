"""Application configuration loading."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"

# RUST_LOG level names mapped onto standard logging levels.
LOG_LEVEL_ALIASES = {
    "OFF": "CRITICAL",
    "CRITICAL": "CRITICAL",
    "ERROR": "ERROR",
    "WARN": "WARNING",
    "WARNING": "WARNING",
    "INFO": "INFO",
    "DEBUG": "DEBUG",
    "TRACE": "DEBUG",
}


def parse_log_filter(value: str, target: str = "rust_app") -> str | None:
    """Return the logging level named by a ``RUST_LOG`` style filter.

    The first bare level wins (``info,hyper=warn`` gives ``INFO``); otherwise
    a ``target=level`` directive for ``target`` is used.

    Args:
        value: Filter such as ``debug``, ``info,hyper=warn`` or ``rust_app=trace``.
        target: Module prefix whose directive applies to this program.

    Returns:
        A standard level name, or ``None`` if the filter names no usable level.
    """
    targeted = None
    for directive in value.split(","):
        directive = directive.strip()
        if not directive:
            continue
        name, sep, level = directive.partition("=")
        if not sep:
            bare = LOG_LEVEL_ALIASES.get(name.upper())
            if bare is not None:
                return bare
        elif targeted is None and name.strip().replace("-", "_") == target:
            targeted = LOG_LEVEL_ALIASES.get(level.strip().upper())
    return targeted


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables.

    Only ambient behaviour is configurable; the reported build metadata is not.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="RUST_LOG")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to a standard logging level name, defaulting to WARNING."""
        level = parse_log_filter(v)
        if level is None:
            logger.warning("Ignoring unrecognized RUST_LOG value %r", v)
            return DEFAULT_LOG_LEVEL
        return level

    @property
    def log_level_number(self) -> int:
        """Return the numeric logging level."""
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
