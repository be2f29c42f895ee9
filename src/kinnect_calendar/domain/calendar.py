"""Calendar arithmetic under an explicit timezone and first-weekday rule.

Every method returns absolute instants as UTC-aware ``datetime`` objects.
Naive ``datetime`` inputs are read as wall-clock time in the context's
timezone; aware inputs are converted.
"""

from __future__ import annotations

import calendar as _calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta

from .errors import CalendarResolutionError

UTC = timezone.utc

MONDAY = _calendar.MONDAY
TUESDAY = _calendar.TUESDAY
WEDNESDAY = _calendar.WEDNESDAY
THURSDAY = _calendar.THURSDAY
FRIDAY = _calendar.FRIDAY
SATURDAY = _calendar.SATURDAY
SUNDAY = _calendar.SUNDAY


@dataclass(frozen=True, slots=True)
class CalendarContext:
    """Device preferences that decide where local days, weeks and months begin."""

    timezone: str = "UTC"
    first_weekday: int = MONDAY

    def __post_init__(self) -> None:
        if not MONDAY <= self.first_weekday <= SUNDAY:
            raise CalendarResolutionError(f"Invalid first weekday: {self.first_weekday!r}")
        self.tzinfo  # fail fast on unknown zones

    @property
    def tzinfo(self) -> ZoneInfo:
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise CalendarResolutionError(f"Unknown timezone: {self.timezone!r}") from exc

    # -- conversions -------------------------------------------------------

    def _resolve(self, wall: datetime) -> datetime:
        # Round-tripping through UTC moves wall times inside a DST gap forward.
        tz = self.tzinfo
        try:
            return wall.replace(tzinfo=tz).astimezone(UTC).astimezone(tz)
        except (OverflowError, ValueError) as exc:
            raise CalendarResolutionError(f"Cannot resolve {wall.isoformat()} in {self.timezone}") from exc

    def to_local(self, instant: datetime) -> datetime:
        if instant.tzinfo is None:
            return self._resolve(instant)
        try:
            return instant.astimezone(self.tzinfo)
        except (OverflowError, ValueError) as exc:
            raise CalendarResolutionError(f"Cannot localise {instant.isoformat()}") from exc

    def to_instant(self, value: datetime) -> datetime:
        return self.to_local(value).astimezone(UTC)

    def local_date(self, instant: datetime) -> date:
        return self.to_local(instant).date()

    def local_midnight(self, day: date) -> datetime:
        """First instant of ``day``; 01:00 when a DST jump skips midnight."""
        return self._resolve(datetime.combine(day, time())).astimezone(UTC)

    def midnight_after(self, day: date, days: int) -> datetime:
        """First instant of the local day ``days`` after ``day``."""
        return self.local_midnight(_shift_date(day, days))

    # -- boundaries --------------------------------------------------------

    def start_of_day(self, instant: datetime) -> datetime:
        return self.local_midnight(self.local_date(instant))

    def start_of_week(self, instant: datetime) -> datetime:
        day = self.local_date(instant)
        back = (day.weekday() - self.first_weekday) % 7
        return self.local_midnight(_shift_date(day, -back))

    def start_of_month(self, instant: datetime) -> datetime:
        return self.local_midnight(self.local_date(instant).replace(day=1))

    def month_start(self, year: int, month: int) -> datetime:
        return self.local_midnight(_first_of_month(year, month))

    def days_in_month(self, year: int, month: int) -> int:
        _first_of_month(year, month)
        return _calendar.monthrange(year, month)[1]

    # -- arithmetic --------------------------------------------------------

    def add_days(self, instant: datetime, days: int) -> datetime:
        wall = self.to_local(instant).replace(tzinfo=None)
        try:
            shifted = wall + timedelta(days=days)
        except OverflowError as exc:
            raise CalendarResolutionError(f"Cannot add {days} days to {instant.isoformat()}") from exc
        return self._resolve(shifted).astimezone(UTC)

    def add_weeks(self, instant: datetime, weeks: int) -> datetime:
        return self.add_days(instant, weeks * 7)

    def add_months(self, instant: datetime, months: int) -> datetime:
        wall = self.to_local(instant).replace(tzinfo=None)
        try:
            shifted = wall + relativedelta(months=months)
        except (OverflowError, ValueError) as exc:
            raise CalendarResolutionError(f"Cannot add {months} months to {instant.isoformat()}") from exc
        return self._resolve(shifted).astimezone(UTC)

    def normalized(self, instant: datetime, hour: int = 12, minute: int = 0) -> datetime:
        """Same local day as ``instant`` at ``hour:minute`` with seconds cleared."""

        try:
            clock = time(hour, minute)
        except ValueError as exc:
            raise CalendarResolutionError(f"Invalid time of day {hour}:{minute}") from exc
        return self._resolve(datetime.combine(self.local_date(instant), clock)).astimezone(UTC)


def _first_of_month(year: int, month: int) -> date:
    try:
        return date(year, month, 1)
    except (TypeError, ValueError) as exc:
        raise CalendarResolutionError(f"Invalid month {year}-{month}") from exc


def _shift_date(day: date, days: int) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError as exc:
        raise CalendarResolutionError(f"Date out of range: {day.isoformat()} {days:+d} days") from exc


__all__ = [
    "CalendarContext",
    "FRIDAY",
    "MONDAY",
    "SATURDAY",
    "SUNDAY",
    "THURSDAY",
    "TUESDAY",
    "UTC",
    "WEDNESDAY",
]
