from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kinnect_calendar.domain import SUNDAY, CalendarContext


def _make_date(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


@pytest.fixture
def make_date():
    return _make_date


@pytest.fixture
def utc() -> CalendarContext:
    return CalendarContext("UTC")


@pytest.fixture
def new_york() -> CalendarContext:
    return CalendarContext("America/New_York", first_weekday=SUNDAY)
