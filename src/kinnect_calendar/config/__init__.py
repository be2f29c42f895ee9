"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    AppSettings,
    CalendarSettings,
    LoggingSettings,
    PagingSettings,
    get_settings,
    parse_weekday,
    weekday_index,
)

__all__ = [
    "AppSettings",
    "CalendarSettings",
    "LoggingSettings",
    "PagingSettings",
    "get_settings",
    "parse_weekday",
    "weekday_index",
]
