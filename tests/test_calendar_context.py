from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from kinnect_calendar.domain import SUNDAY, CalendarContext, CalendarResolutionError


class TestBoundaries:
    def test_start_of_day_drops_time_component(self, utc, make_date):
        assert utc.start_of_day(make_date(2025, 3, 10, 15, 30)) == make_date(2025, 3, 10)

    def test_naive_values_are_local_wall_time(self, new_york, make_date):
        assert new_york.to_instant(datetime(2025, 1, 15, 9, 0)) == make_date(2025, 1, 15, 14, 0)

    def test_start_of_day_uses_local_calendar(self, new_york, make_date):
        # 02:00 UTC on the 11th is still the evening of the 10th in New York.
        assert new_york.start_of_day(make_date(2025, 7, 11, 2, 0)) == make_date(2025, 7, 10, 4, 0)

    def test_start_of_week_respects_first_weekday(self, utc, make_date):
        wednesday = make_date(2025, 3, 12, 18, 0)
        assert utc.start_of_week(wednesday) == make_date(2025, 3, 10)
        sunday_first = CalendarContext("UTC", first_weekday=SUNDAY)
        assert sunday_first.start_of_week(wednesday) == make_date(2025, 3, 9)

    def test_start_of_week_on_the_first_weekday_itself(self, utc, make_date):
        assert utc.start_of_week(make_date(2025, 3, 10, 0, 0)) == make_date(2025, 3, 10)

    def test_start_of_month(self, utc, make_date):
        assert utc.start_of_month(make_date(2025, 1, 18, 15, 30)) == make_date(2025, 1, 1)

    def test_midnight_skipped_by_dst_resolves_to_first_instant(self, make_date):
        sao_paulo = CalendarContext("America/Sao_Paulo")
        start = sao_paulo.start_of_day(make_date(2018, 11, 4, 15, 0))
        assert start == make_date(2018, 11, 4, 3, 0)
        assert sao_paulo.to_local(start).hour == 1


class TestArithmetic:
    def test_add_days_keeps_wall_clock_across_dst(self, new_york, make_date):
        noon_before = make_date(2025, 3, 8, 17, 0)  # 12:00 EST
        assert new_york.add_days(noon_before, 1) == make_date(2025, 3, 9, 16, 0)  # 12:00 EDT

    def test_add_weeks(self, utc, make_date):
        assert utc.add_weeks(make_date(2025, 12, 29), 1) == make_date(2026, 1, 5)

    def test_add_months_clamps_day_of_month(self, utc, make_date):
        assert utc.add_months(make_date(2025, 1, 31), 1) == make_date(2025, 2, 28)
        assert utc.add_months(make_date(2024, 1, 31), 1) == make_date(2024, 2, 29)

    def test_add_months_rolls_over_the_year(self, utc, make_date):
        assert utc.add_months(make_date(2025, 12, 1), 1) == make_date(2026, 1, 1)
        assert utc.add_months(make_date(2025, 1, 1), -1) == make_date(2024, 12, 1)

    @pytest.mark.parametrize(
        ("year", "month", "expected"),
        [(2024, 2, 29), (2025, 2, 28), (2025, 4, 30), (2025, 12, 31), (1900, 2, 28), (2000, 2, 29)],
    )
    def test_days_in_month(self, utc, year, month, expected):
        assert utc.days_in_month(year, month) == expected

    def test_results_are_utc(self, new_york, make_date):
        result = new_york.add_days(make_date(2025, 6, 1, 12, 0), 3)
        assert result.utcoffset() == timedelta(0)


class TestNormalized:
    def test_defaults_to_noon_and_clears_seconds(self, utc):
        original = datetime(2025, 6, 15, 9, 30, 45, 123456, tzinfo=timezone.utc)
        assert utc.normalized(original) == datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)

    def test_custom_hour_and_minute(self, utc, make_date):
        assert utc.normalized(make_date(2025, 3, 20, 14, 30), hour=8, minute=15) == make_date(2025, 3, 20, 8, 15)

    def test_preserves_local_day(self, utc, make_date):
        normalized = utc.normalized(make_date(2024, 12, 31, 23, 59), hour=0, minute=0)
        assert utc.local_date(normalized) == date(2024, 12, 31)

    def test_same_day_different_times_normalize_equal(self, utc, make_date):
        morning = utc.normalized(make_date(2025, 6, 15, 9, 0))
        evening = utc.normalized(make_date(2025, 6, 15, 23, 59))
        assert morning == evening

    def test_invalid_time_of_day(self, utc, make_date):
        with pytest.raises(CalendarResolutionError):
            utc.normalized(make_date(2025, 6, 15), hour=24)


class TestResolutionErrors:
    def test_unknown_timezone(self):
        with pytest.raises(CalendarResolutionError):
            CalendarContext("Nowhere/Nope")

    def test_invalid_first_weekday(self):
        with pytest.raises(CalendarResolutionError):
            CalendarContext("UTC", first_weekday=7)

    def test_invalid_month(self, utc):
        with pytest.raises(CalendarResolutionError):
            utc.month_start(2025, 13)

    def test_arithmetic_past_the_end_of_the_calendar(self, utc):
        with pytest.raises(CalendarResolutionError):
            utc.add_days(datetime(9999, 12, 31, tzinfo=timezone.utc), 1)
