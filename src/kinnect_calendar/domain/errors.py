from __future__ import annotations

from typing import Optional


class CalendarError(Exception):
    """Base class for calendar core errors."""


class InvalidDateRange(CalendarError, ValueError):
    def __init__(self, message: str = "End date must be after start date.") -> None:
        super().__init__(message)


class EntryNotFound(CalendarError, LookupError):
    def __init__(self, entry_id: Optional[str] = None) -> None:
        self.entry_id = entry_id
        detail = f": {entry_id}" if entry_id else ""
        super().__init__(f"The requested calendar entry was not found{detail}")


class DuplicateEntryError(CalendarError, ValueError):
    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__(f"Duplicate calendar entry id: {entry_id}")


class CalendarResolutionError(CalendarError):
    """Raised when calendar components cannot be resolved to an instant."""


__all__ = [
    "CalendarError",
    "CalendarResolutionError",
    "DuplicateEntryError",
    "EntryNotFound",
    "InvalidDateRange",
]
