from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .calendar import UTC
from .periods import Day


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise ValueError(f"Unsupported datetime value: {value!r}")


def _as_utc(value: datetime, name: str) -> datetime:
    if value.tzinfo is None:
        raise ValueError(f"{name} must be timezone-aware, got {value.isoformat()}")
    return value.astimezone(UTC)


@dataclass(frozen=True, slots=True)
class CalendarEntry:
    """A titled, time-ranged calendar record with absolute start and end instants."""

    title: str
    start_date: datetime
    end_date: datetime
    description: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", _as_utc(self.start_date, "start_date"))
        object.__setattr__(self, "end_date", _as_utc(self.end_date, "end_date"))

    @property
    def duration(self) -> timedelta:
        return self.end_date - self.start_date

    @property
    def has_valid_range(self) -> bool:
        return self.end_date > self.start_date

    def with_changes(self, **changes: Any) -> "CalendarEntry":
        """Copy of the entry with ``changes`` applied; the id is kept."""

        return replace(self, **changes)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEntry":
        return cls(
            id=str(record["id"]),
            title=str(record["title"]),
            description=record.get("description"),
            start_date=_parse_datetime(record["start_date"]),
            end_date=_parse_datetime(record["end_date"]),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class DayAgenda:
    """A local day paired with the entries overlapping it."""

    day: Day
    entries: List[CalendarEntry] = field(default_factory=list)

    def to_record(self) -> Dict[str, Any]:
        return {
            "date": self.day.local_date.isoformat(),
            "start": self.day.start.isoformat(),
            "end": self.day.end.isoformat(),
            "entries": [entry.to_record() for entry in self.entries],
        }
