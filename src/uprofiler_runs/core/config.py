"""Configuration management for uprofiler-runs.

This module provides configuration classes using pydantic-settings
for environment variable management and validation.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SUFFIX = "uprofiler"


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    All settings can be configured via environment variables with
    the UPROFILER_ prefix.

    Attributes:
        output_dir: Directory where runs are stored when a store is
            created without an explicit directory.
        suffix: File suffix used to tag run files.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).

    Example:
        >>> # export UPROFILER_OUTPUT_DIR=/var/tmp/uprofiler
        >>> settings = Settings()
        >>> print(settings.output_dir)
        '/var/tmp/uprofiler'

    Environment Variables:
        UPROFILER_OUTPUT_DIR: Run directory (optional)
        UPROFILER_SUFFIX: Run file suffix (default: uprofiler)
        UPROFILER_LOG_LEVEL: Logging level (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_prefix="UPROFILER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_dir: str | None = Field(
        default=None,
        description="Directory for saved runs",
    )
    suffix: str = Field(
        default=DEFAULT_SUFFIX,
        min_length=1,
        description="File suffix for saved runs",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("suffix")
    @classmethod
    def _suffix_has_no_dot(cls, value: str) -> str:
        if "." in value:
            raise ValueError(f"suffix must not contain '.': {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()
