"""Pydantic-based runtime settings.

Loads from environment variables prefixed with ``VARIANT_FILTERS_`` (with an
optional .env file).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class RuntimeSettings(BaseSettings):
    """Configuration for the CLI and service logging, validated at startup."""

    model_config = {
        "env_prefix": "VARIANT_FILTERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    log_level: str = Field(default="INFO", description="Level for the variantfilters logger")
    json_indent: int = Field(default=2, ge=0, le=8, description="Indent for CLI JSON output (0 = compact)")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
