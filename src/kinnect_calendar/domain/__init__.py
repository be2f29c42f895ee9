"""Calendar domain: arithmetic, period values, entries and errors."""

from __future__ import annotations

from .calendar import MONDAY, SUNDAY, UTC, CalendarContext
from .errors import (
    CalendarError,
    CalendarResolutionError,
    DuplicateEntryError,
    EntryNotFound,
    InvalidDateRange,
)
from .models import CalendarEntry, DayAgenda
from .periods import Day, Month, Week

__all__ = [
    "CalendarContext",
    "CalendarEntry",
    "CalendarError",
    "CalendarResolutionError",
    "Day",
    "DayAgenda",
    "DuplicateEntryError",
    "EntryNotFound",
    "InvalidDateRange",
    "MONDAY",
    "Month",
    "SUNDAY",
    "UTC",
    "Week",
]
