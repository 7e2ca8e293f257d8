"""Configuration loading for the timespan command-line tools."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from timespan.template import DEFAULT_TEMPLATE, check_placeholders


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_TIME_FORMAT = "%H:%M:%S"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TimespanConfig:
    log_level: str
    default_template: str
    default_time_format: str

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def _parse_log_level(value: str | None) -> str:
    if value is None or not value.strip():
        return _DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        return _DEFAULT_LOG_LEVEL
    return level


def load_config() -> TimespanConfig:
    """Load configuration from environment variables.

    Raises:
        ValueError: If TIMESPAN_DEFAULT_TEMPLATE lacks {start} or {end}
    """
    default_template = os.getenv("TIMESPAN_DEFAULT_TEMPLATE") or DEFAULT_TEMPLATE
    try:
        check_placeholders(default_template)
    except ValueError as e:
        raise ValueError(f"TIMESPAN_DEFAULT_TEMPLATE is invalid: {e}") from e

    default_time_format = os.getenv("TIMESPAN_DEFAULT_TIME_FORMAT", "").strip() or _DEFAULT_TIME_FORMAT

    return TimespanConfig(
        log_level=_parse_log_level(os.getenv("TIMESPAN_LOG_LEVEL")),
        default_template=default_template,
        default_time_format=default_time_format,
    )
