"""Kinnect calendar core: calendar periods, an in-memory entry store and paging."""

from __future__ import annotations

from .core import CalendarStore, demo_entries
from .domain import (
    CalendarContext,
    CalendarEntry,
    CalendarError,
    CalendarResolutionError,
    Day,
    DayAgenda,
    DuplicateEntryError,
    EntryNotFound,
    InvalidDateRange,
    Month,
    Week,
)
from .services.paging import PagerState, PageUnit
from .utils.ring_buffer import RingBuffer

__all__ = [
    "CalendarContext",
    "CalendarEntry",
    "CalendarError",
    "CalendarResolutionError",
    "CalendarStore",
    "Day",
    "DayAgenda",
    "DuplicateEntryError",
    "EntryNotFound",
    "InvalidDateRange",
    "Month",
    "PageUnit",
    "PagerState",
    "RingBuffer",
    "Week",
    "demo_entries",
]
