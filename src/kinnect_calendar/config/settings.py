from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..core.config import LOG_DIR
from ..domain import MONDAY, CalendarContext

load_dotenv()

WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
DEFAULT_PAGER_SIZE = 3


@dataclass(frozen=True)
class CalendarSettings:
    timezone: str
    first_weekday: int

    def context(self) -> CalendarContext:
        return CalendarContext(timezone=self.timezone, first_weekday=self.first_weekday)


@dataclass(frozen=True)
class PagingSettings:
    buffer_size: int


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    calendar: CalendarSettings
    paging: PagingSettings
    logging: LoggingSettings


def weekday_index(raw: str) -> int:
    """Weekday index (Monday is 0) from a name, a prefix like ``sun`` or a digit."""
    value = raw.strip().lower()
    if value.isdigit() and 0 <= int(value) <= 6:
        return int(value)
    for index, name in enumerate(WEEKDAY_NAMES):
        if len(value) >= 3 and name.startswith(value):
            return index
    raise ValueError(f"Unknown weekday: {raw!r}")


def parse_weekday(raw: Optional[str], default: int = MONDAY) -> int:
    """Lenient ``weekday_index`` for environment values; unknown input yields ``default``."""
    if not raw:
        return default
    try:
        return weekday_index(raw)
    except ValueError:
        return default


def _pager_size_from_env(name: str) -> int:
    raw = os.getenv(name)
    if not raw:
        return DEFAULT_PAGER_SIZE
    try:
        size = int(raw)
    except ValueError:
        return DEFAULT_PAGER_SIZE
    if size < 3 or size % 2 == 0:
        return DEFAULT_PAGER_SIZE
    return size


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    calendar = CalendarSettings(
        timezone=os.getenv("KINNECT_TIMEZONE", "UTC"),
        first_weekday=parse_weekday(os.getenv("KINNECT_FIRST_WEEKDAY")),
    )

    paging = PagingSettings(buffer_size=_pager_size_from_env("KINNECT_PAGER_SIZE"))

    logging_settings = LoggingSettings(
        level=os.getenv("KINNECT_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("KINNECT_LOG_DIR") or LOG_DIR),
    )

    return AppSettings(calendar=calendar, paging=paging, logging=logging_settings)
