"""
Runtime settings for feature-sources.

Values come from environment variables, optionally seeded from a .env file.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_FORMATS = ("json", "text")
DEFAULT_LOG_FORMAT = "json"


class Settings(BaseModel):
    """
    Application settings.

    Attributes:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "json" for structured logs, "text" for local development
        strict_options: Reject stored options that lack variant keys
    """

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    strict_options: bool = False

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_log_format() -> str:
    # Unrecognised formats fall back to the default
    value = os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT).strip().lower()
    return value if value in LOG_FORMATS else DEFAULT_LOG_FORMAT


def strict_options_enabled() -> bool:
    """Whether FEATURE_SOURCES_STRICT_OPTIONS turns on strict option checks."""
    return _env_flag("FEATURE_SOURCES_STRICT_OPTIONS")


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional .env file; existing environment variables win

    Returns:
        Settings instance
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=_env_log_format(),
        strict_options=strict_options_enabled(),
    )
