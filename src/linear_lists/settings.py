"""Environment-driven settings for linear lists.

Only the ambient logging setup is configurable from the environment. List
capacity is a per-type constant (``SequentialList.CAPACITY`` /
``bounded(n)``) and is deliberately not a setting: two lists of the same
type must never disagree about how much they can hold.

Examples:
    >>> from linear_lists.settings import LinearListSettings
    >>> LinearListSettings(log_level="DEBUG").log_level
    'DEBUG'

Environment variables use the ``LINEAR_LISTS_`` prefix::

    LINEAR_LISTS_LOG_LEVEL=DEBUG
    LINEAR_LISTS_JSON_LOGS=true
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linear_lists.logging import configure_logging


class LinearListSettings(BaseSettings):
    """Logging configuration for processes that use linear lists.

    Fields
    ──────
    log_level    : Structlog log level
    json_logs    : JSON output; None auto-detects (JSON when not a tty)
    service_name : Value of the ``service.name`` log field
    """

    model_config = SettingsConfigDict(
        env_prefix="LINEAR_LISTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    json_logs: bool | None = None
    service_name: str = Field(
        default="linear-lists",
        description="Service name attached to every log event",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level


def configure_logging_from_settings(settings: LinearListSettings | None = None) -> LinearListSettings:
    """Apply ``settings`` (or settings read from the environment) to logging."""
    settings = settings or LinearListSettings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )
    return settings


__all__ = [
    "LinearListSettings",
    "configure_logging_from_settings",
]
