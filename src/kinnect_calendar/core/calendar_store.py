from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Iterable, List, Optional, Tuple

from ..domain import (
    CalendarContext,
    CalendarEntry,
    Day,
    DayAgenda,
    DuplicateEntryError,
    EntryNotFound,
    InvalidDateRange,
    Month,
)

logger = logging.getLogger(__name__)

Subscriber = Callable[["CalendarStore"], None]


def _start_key(entry: CalendarEntry) -> datetime:
    return entry.start_date


def _validate_range(start_date: datetime, end_date: datetime) -> None:
    if not end_date > start_date:
        raise InvalidDateRange()


class CalendarStore:
    """In-memory calendar entries kept sorted by start date.

    The store has a single owner; callers that mutate it from several places
    must serialise access themselves. Subscribers are called inline after
    every successful mutation.
    """

    def __init__(self, entries: Optional[Iterable[CalendarEntry]] = None) -> None:
        initial = list(entries or [])
        seen: set[str] = set()
        for entry in initial:
            _validate_range(entry.start_date, entry.end_date)
            if entry.id in seen:
                raise DuplicateEntryError(entry.id)
            seen.add(entry.id)
        initial.sort(key=_start_key)
        self._entries: List[CalendarEntry] = initial
        self._subscribers: List[Subscriber] = []
        self._version = 0

    @property
    def entries(self) -> Tuple[CalendarEntry, ...]:
        return tuple(self._entries)

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._entries)

    # -- change notification ----------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _changed(self, action: str, entry: CalendarEntry) -> None:
        """Bump the version and notify every subscriber.

        The mutation has already been applied, so a failing subscriber is
        logged and the remaining subscribers are still called.
        """

        self._version += 1
        logger.debug("Calendar entry %s %s (version %d)", entry.id, action, self._version)
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception("Calendar subscriber %r failed after entry %s %s", callback, entry.id, action)

    def _index_of(self, entry_id: str) -> int:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        raise EntryNotFound(entry_id)

    # -- CRUD --------------------------------------------------------------

    def add_entry(
        self,
        title: str,
        description: Optional[str] = None,
        *,
        start_date: datetime,
        end_date: datetime,
    ) -> CalendarEntry:
        entry = CalendarEntry(
            title=title,
            description=description,
            start_date=start_date,
            end_date=end_date,
        )
        _validate_range(entry.start_date, entry.end_date)
        self._entries.append(entry)
        self._entries.sort(key=_start_key)
        self._changed("added", entry)
        return entry

    def update_entry(self, updated: CalendarEntry) -> None:
        _validate_range(updated.start_date, updated.end_date)
        index = self._index_of(updated.id)
        self._entries[index] = updated
        self._entries.sort(key=_start_key)
        self._changed("updated", updated)

    def remove_entry(self, entry_id: str) -> None:
        index = self._index_of(entry_id)
        removed = self._entries.pop(index)
        self._changed("removed", removed)

    def get_entry(self, entry_id: str) -> CalendarEntry:
        return self._entries[self._index_of(entry_id)]

    # -- queries -----------------------------------------------------------

    def entries_in(self, start: datetime, end: datetime) -> List[CalendarEntry]:
        """Entries overlapping the half-open range ``[start, end)``."""

        return [entry for entry in self._entries if entry.start_date < end and entry.end_date > start]

    def entries_on(self, date: datetime, context: CalendarContext) -> List[CalendarEntry]:
        day = Day(date, context)
        return self.entries_in(day.start, day.end)

    def days(self, start: datetime, count: int, context: CalendarContext) -> List[DayAgenda]:
        if count <= 0:
            return []
        first = Day(start, context)
        result: list[DayAgenda] = []
        for offset in range(count):
            day = first.adding(offset)
            result.append(DayAgenda(day=day, entries=self.entries_on(day.start, context)))
        return result

    def months(self, start: datetime, count: int, context: CalendarContext) -> List[Month]:
        if count <= 0:
            return []
        first = Month.containing(start, context)
        return [first.adding(offset) for offset in range(count)]


def demo_entries(reference: datetime, context: CalendarContext) -> List[CalendarEntry]:
    """A week of sample entries starting on the local day of ``reference``."""

    today = Day(reference, context)

    def make(
        title: str,
        description: str,
        *,
        day_offset: int,
        hour: int,
        minute: int = 0,
        minutes: int,
    ) -> CalendarEntry:
        start = context.normalized(today.adding(day_offset).start, hour=hour, minute=minute)
        return CalendarEntry(
            title=title,
            description=description,
            start_date=start,
            end_date=start + timedelta(minutes=minutes),
        )

    entries = [
        make("Daily Standup", "Quick sync with the mobile team.", day_offset=0, hour=9, minutes=30),
        make("Product Design Review", "Review latest designs with the design org.", day_offset=0, hour=11, minutes=75),
        make("Client Check-In", "Weekly status update with the client.", day_offset=1, hour=14, minute=30, minutes=45),
        make("Growth Strategy Workshop", "Cross-functional roadmap planning.", day_offset=2, hour=10, minutes=120),
        make("Hack Day", "Heads-down experimentation time for the whole team.", day_offset=3, hour=9, minutes=8 * 60),
        make("Team Social", "Dinner with the office.", day_offset=5, hour=18, minutes=150),
        make("Launch Prep", "Finalize assets ahead of the release.", day_offset=6, hour=16, minutes=90),
        make("Wellness Day", "Company-wide day off to recharge.", day_offset=7, hour=0, minutes=24 * 60),
    ]
    return sorted(entries, key=_start_key)


__all__ = ["CalendarStore", "Subscriber", "demo_entries"]
