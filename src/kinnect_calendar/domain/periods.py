"""Immutable day, week and month values.

Periods compare, hash and sort on their canonical boundary instant only, so
two values built from different instants in the same bucket are equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from functools import total_ordering
from typing import TYPE_CHECKING, List, Tuple

from .calendar import CalendarContext

if TYPE_CHECKING:
    from .models import CalendarEntry

DEFAULT_CONTEXT = CalendarContext()


@total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """One local calendar day, ``[start, end)``."""

    date: datetime
    context: CalendarContext = field(default=DEFAULT_CONTEXT, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", self.context.start_of_day(self.date))

    @classmethod
    def bucket(cls, instant: datetime, context: CalendarContext = DEFAULT_CONTEXT) -> "Day":
        return cls(instant, context)

    @classmethod
    def from_date(cls, value: date, context: CalendarContext = DEFAULT_CONTEXT) -> "Day":
        return cls(context.local_midnight(value), context)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.date == other.date

    def __lt__(self, other: "Day") -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.date < other.date

    def __hash__(self) -> int:
        return hash(self.date)

    @property
    def start(self) -> datetime:
        return self.date

    @property
    def end(self) -> datetime:
        return self.context.midnight_after(self.local_date, 1)

    @property
    def interval(self) -> Tuple[datetime, datetime]:
        return self.start, self.end

    @property
    def local_date(self) -> date:
        return self.context.local_date(self.date)

    def adding(self, days: int) -> "Day":
        return Day(self.context.add_days(self.start, days), self.context)

    @property
    def next(self) -> "Day":
        return self.adding(1)

    @property
    def prev(self) -> "Day":
        return self.adding(-1)

    # -- overlap predicates (half-open) ------------------------------------

    def contains(self, instant: datetime) -> bool:
        instant = self.context.to_instant(instant)
        return self.start <= instant < self.end

    def overlaps(self, event_start: datetime, event_end: datetime) -> bool:
        """True when any part of ``[event_start, event_end)`` falls inside this day.

        An event ending exactly at ``start`` or starting exactly at ``end``
        belongs to a neighbouring day. Zero-length or inverted ranges are
        treated as a single instant at ``event_start``.
        """

        event_start = self.context.to_instant(event_start)
        event_end = self.context.to_instant(event_end)
        if event_start >= event_end:
            return self.contains(event_start)
        return event_start < self.end and event_end > self.start

    def overlap_fraction(self, event_start: datetime, event_end: datetime) -> float:
        """Share (0.0 to 1.0) of the event's duration that lies within this day."""

        event_start = self.context.to_instant(event_start)
        event_end = self.context.to_instant(event_end)
        if event_start >= event_end:
            return 0.0
        clipped_start = max(event_start, self.start)
        clipped_end = min(event_end, self.end)
        if clipped_end <= clipped_start:
            return 0.0
        return (clipped_end - clipped_start) / (event_end - event_start)

    def overlaps_entry(self, entry: "CalendarEntry") -> bool:
        return self.overlaps(entry.start_date, entry.end_date)


@total_ordering
@dataclass(frozen=True, eq=False)
class Week:
    """Seven local days beginning on the context's first weekday."""

    start: datetime
    context: CalendarContext = field(default=DEFAULT_CONTEXT, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", self.context.start_of_week(self.start))

    @classmethod
    def containing(cls, instant: datetime, context: CalendarContext = DEFAULT_CONTEXT) -> "Week":
        return cls(instant, context)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Week):
            return NotImplemented
        return self.start == other.start

    def __lt__(self, other: "Week") -> bool:
        if not isinstance(other, Week):
            return NotImplemented
        return self.start < other.start

    def __hash__(self) -> int:
        return hash(self.start)

    @property
    def end(self) -> datetime:
        return self.context.midnight_after(self.context.local_date(self.start), 7)

    @property
    def interval(self) -> Tuple[datetime, datetime]:
        return self.start, self.end

    @property
    def days(self) -> List[Day]:
        return [Day(self.context.add_days(self.start, offset), self.context) for offset in range(7)]

    def adding(self, weeks: int) -> "Week":
        return Week(self.context.add_weeks(self.start, weeks), self.context)

    @property
    def next(self) -> "Week":
        return self.adding(1)

    @property
    def prev(self) -> "Week":
        return self.adding(-1)


@total_ordering
@dataclass(frozen=True, eq=False)
class Month:
    year: int
    month: int
    context: CalendarContext = field(default=DEFAULT_CONTEXT, repr=False)

    def __post_init__(self) -> None:
        # Resolving the start validates year and month.
        self.context.month_start(self.year, self.month)

    @classmethod
    def containing(cls, instant: datetime, context: CalendarContext = DEFAULT_CONTEXT) -> "Month":
        local = context.local_date(instant)
        return cls(local.year, local.month, context)

    @staticmethod
    def start_of_month(instant: datetime, context: CalendarContext = DEFAULT_CONTEXT) -> datetime:
        return context.start_of_month(instant)

    @staticmethod
    def next_month_start(after: datetime, context: CalendarContext = DEFAULT_CONTEXT) -> datetime:
        """Start of the month following the one containing ``after``."""

        return Month.containing(after, context).next.start

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.start == other.start

    def __lt__(self, other: "Month") -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.start < other.start

    def __hash__(self) -> int:
        return hash(self.start)

    @property
    def start(self) -> datetime:
        return self.context.month_start(self.year, self.month)

    @property
    def end(self) -> datetime:
        return self.next.start

    @property
    def interval(self) -> Tuple[datetime, datetime]:
        return self.start, self.end

    @property
    def number_of_days(self) -> int:
        return self.context.days_in_month(self.year, self.month)

    @property
    def days(self) -> List[Day]:
        """Days strictly inside the month."""

        first = Day(self.start, self.context)
        return [first.adding(offset) for offset in range(self.number_of_days)]

    @property
    def weeks(self) -> List[Week]:
        """Weeks intersecting the month."""

        end = self.end
        result: list[Week] = []
        week = Week(self.start, self.context)
        while week.start < end:
            result.append(week)
            week = week.next
        return result

    @property
    def grid_weeks(self) -> List[List[Day]]:
        """Month grid rows padded to whole weeks; 4 to 6 rows of 7 days."""

        first_row = Week(self.start, self.context)
        last_day = Day(self.start, self.context).adding(self.number_of_days - 1)
        last_row = Week(last_day.start, self.context)

        rows: list[list[Day]] = []
        week = first_row
        while week <= last_row:
            rows.append(week.days)
            week = week.next
        return rows

    def adding(self, months: int) -> "Month":
        return Month.containing(self.context.add_months(self.start, months), self.context)

    @property
    def next(self) -> "Month":
        return self.adding(1)

    @property
    def prev(self) -> "Month":
        return self.adding(-1)


__all__ = ["DEFAULT_CONTEXT", "Day", "Month", "Week"]
