from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from kinnect_calendar.domain import (
    MONDAY,
    SUNDAY,
    CalendarContext,
    CalendarResolutionError,
    Day,
    Month,
    Week,
)


class TestDay:
    def test_instants_in_the_same_bucket_are_equal(self, utc, make_date):
        morning = Day(make_date(2025, 3, 10, 9, 0), utc)
        night = Day(make_date(2025, 3, 10, 23, 0), utc)
        assert morning == night
        assert hash(morning) == hash(night)
        assert len({morning, night}) == 1

    def test_date_is_start_of_day(self, utc, make_date):
        day = Day(make_date(2025, 3, 10, 15, 45), utc)
        assert day.date == make_date(2025, 3, 10)
        assert day.start == day.date
        assert day.end == make_date(2025, 3, 11)
        assert day.interval == (day.start, day.end)
        assert day.local_date == date(2025, 3, 10)

    def test_bucket_and_from_date(self, utc, make_date):
        assert Day.bucket(make_date(2025, 3, 10, 8, 0), utc) == Day.from_date(date(2025, 3, 10), utc)

    def test_navigation(self, utc, make_date):
        day = Day(make_date(2024, 12, 31, 12, 0), utc)
        assert day.next.local_date == date(2025, 1, 1)
        assert day.prev.local_date == date(2024, 12, 30)
        assert day.adding(60).local_date == date(2025, 3, 1)
        assert day.adding(0) == day

    def test_ordering(self, utc, make_date):
        days = [Day(make_date(2025, 3, d), utc) for d in (12, 10, 11)]
        assert [d.local_date.day for d in sorted(days)] == [10, 11, 12]
        assert days[1] < days[2] < days[0]

    def test_spring_forward_day_is_23_hours(self, new_york, make_date):
        day = Day(make_date(2025, 3, 9, 18, 0), new_york)
        assert day.start == make_date(2025, 3, 9, 5, 0)
        assert day.end == make_date(2025, 3, 10, 4, 0)
        assert day.end - day.start == timedelta(hours=23)

    def test_fall_back_day_is_25_hours(self, new_york, make_date):
        day = Day(make_date(2025, 11, 2, 18, 0), new_york)
        assert day.end - day.start == timedelta(hours=25)

    def test_navigation_across_dst_keeps_midnight(self, new_york, make_date):
        day = Day(datetime(2025, 3, 8, 12, 0), new_york)
        assert day.next.start == make_date(2025, 3, 9, 5, 0)
        assert day.next.next.start == make_date(2025, 3, 10, 4, 0)
        assert day.adding(2).local_date == date(2025, 3, 10)

    def test_day_after_midnight_gap_ends_at_next_midnight(self, make_date):
        sao_paulo = CalendarContext("America/Sao_Paulo")
        day = Day(make_date(2018, 11, 4, 15, 0), sao_paulo)
        assert day.start == make_date(2018, 11, 4, 3, 0)
        assert day.end == day.next.start == make_date(2018, 11, 5, 2, 0)
        assert day.end - day.start == timedelta(hours=23)
        assert not day.contains(make_date(2018, 11, 5, 2, 30))


class TestWeek:
    def test_week_spanning_midnight_gap_ends_at_next_week_start(self, make_date):
        sao_paulo = CalendarContext("America/Sao_Paulo")
        week = Week(make_date(2018, 11, 4, 15, 0), sao_paulo)
        assert week.start == make_date(2018, 10, 29, 3, 0)
        assert week.end == week.next.start == make_date(2018, 11, 5, 2, 0)

    def test_days_are_seven_consecutive_local_days(self, utc, make_date):
        week = Week.containing(make_date(2025, 3, 12, 18, 0), utc)
        assert week.start == make_date(2025, 3, 10)
        days = week.days
        assert len(days) == 7
        assert [d.local_date for d in days] == [date(2025, 3, 10) + timedelta(days=i) for i in range(7)]
        assert week.end == make_date(2025, 3, 17)

    def test_sunday_first_week(self, new_york):
        week = Week(datetime(2025, 3, 12, 9, 0), new_york)
        assert week.days[0].local_date == date(2025, 3, 9)
        assert week.days[0].local_date.weekday() == SUNDAY

    def test_equality_and_navigation(self, utc, make_date):
        week = Week(make_date(2025, 12, 30), utc)
        assert week == Week(make_date(2026, 1, 4, 23, 0), utc)
        assert week.next.start == make_date(2026, 1, 5)
        assert week.prev.start == make_date(2025, 12, 22)
        assert week.adding(2) > week.next


class TestMonth:
    def test_containing_normalizes_to_first_day_midnight(self, utc, make_date):
        month = Month.containing(make_date(2025, 1, 18, 15, 30), utc)
        assert (month.year, month.month) == (2025, 1)
        assert month.start == make_date(2025, 1, 1)
        assert month.end == make_date(2025, 2, 1)

    def test_navigation(self, utc, make_date):
        jan = Month.containing(make_date(2025, 1, 15), utc)
        assert jan.next.month == 2
        assert jan.next.next.month == 3
        assert jan.prev == Month(2024, 12, utc)
        assert jan.adding(14) == Month(2026, 3, utc)

    def test_december_rolls_over_to_january(self, utc, make_date):
        assert Month(2025, 12, utc).next == Month(2026, 1, utc)
        assert Month.next_month_start(make_date(2025, 12, 15, 10, 0), utc) == make_date(2026, 1, 1)
        assert Month.start_of_month(make_date(2025, 12, 15, 10, 0), utc) == make_date(2025, 12, 1)

    def test_days_cover_the_month(self, utc):
        feb = Month(2024, 2, utc)
        assert feb.number_of_days == 29
        days = feb.days
        assert len(days) == 29
        assert days[0].local_date == date(2024, 2, 1)
        assert days[-1].local_date == date(2024, 2, 29)

    def test_weeks_intersecting_the_month(self, utc, make_date):
        weeks = Month(2026, 3, utc).weeks
        assert len(weeks) == 6
        assert weeks[0].start == make_date(2026, 2, 23)
        assert weeks[-1].start == make_date(2026, 3, 30)

    def test_four_row_grid(self, utc):
        rows = Month(2021, 2, utc).grid_weeks
        assert len(rows) == 4
        assert rows[0][0].local_date == date(2021, 2, 1)

    def test_six_row_grid(self, utc):
        rows = Month(2026, 3, utc).grid_weeks
        assert len(rows) == 6
        assert rows[0][0].local_date == date(2026, 2, 23)
        assert rows[-1][-1].local_date == date(2026, 4, 5)

    @pytest.mark.parametrize("first_weekday", [MONDAY, SUNDAY])
    @pytest.mark.parametrize("timezone", ["UTC", "America/New_York", "Australia/Sydney"])
    def test_grid_is_complete_for_every_month(self, first_weekday, timezone):
        context = CalendarContext(timezone, first_weekday=first_weekday)
        for year in (2024, 2025, 2026):
            for number in range(1, 13):
                month = Month(year, number, context)
                rows = month.grid_weeks
                assert 4 <= len(rows) <= 6
                assert all(len(row) == 7 for row in rows)
                assert rows[0][0].local_date.weekday() == first_weekday

                flat = [day for row in rows for day in row]
                days = month.days
                offset = flat.index(days[0])
                assert flat[offset : offset + len(days)] == days

    def test_equality_and_ordering(self, utc, make_date):
        assert Month(2025, 3, utc) == Month.containing(make_date(2025, 3, 31, 23, 59), utc)
        assert sorted([Month(2025, 3, utc), Month(2024, 12, utc), Month(2025, 1, utc)]) == [
            Month(2024, 12, utc),
            Month(2025, 1, utc),
            Month(2025, 3, utc),
        ]

    @pytest.mark.parametrize("number", [0, 13])
    def test_invalid_month(self, utc, number):
        with pytest.raises(CalendarResolutionError):
            Month(2025, number, utc)
