from datetime import date, datetime

import pytest

from taxitariff.holidays import (
    easter_sunday,
    holiday_list_for_year,
    holidays_for_year,
    is_holiday,
    norwegian_holidays,
)


class TestEasterSunday:
    @pytest.mark.parametrize(
        "year,expected",
        [
            (2000, date(2000, 4, 23)),
            (2019, date(2019, 4, 21)),
            (2024, date(2024, 3, 31)),
            (2025, date(2025, 4, 20)),
            (2026, date(2026, 4, 5)),
            (2038, date(2038, 4, 25)),
        ],
    )
    def test_known_dates(self, year, expected):
        assert easter_sunday(year) == expected

    def test_always_a_sunday(self):
        for year in range(1900, 2101):
            assert easter_sunday(year).weekday() == 6


class TestHolidaysForYear:
    def test_twelve_dates(self):
        assert len(holidays_for_year(2025)) == 12

    def test_fixed_dates(self):
        days = holidays_for_year(2025)
        for month, day in [(1, 1), (5, 1), (5, 17), (12, 25), (12, 26)]:
            assert date(2025, month, day) in days

    def test_easter_relative_dates(self):
        days = holidays_for_year(2025)
        assert date(2025, 4, 17) in days  # Maundy Thursday
        assert date(2025, 4, 18) in days  # Good Friday
        assert date(2025, 4, 20) in days
        assert date(2025, 4, 21) in days
        assert date(2025, 5, 29) in days  # Ascension
        assert date(2025, 6, 8) in days
        assert date(2025, 6, 9) in days

    def test_christmas_eve_is_not_a_holiday(self):
        assert date(2025, 12, 24) not in holidays_for_year(2025)


class TestHolidayList:
    def test_sorted_and_named(self):
        named = holiday_list_for_year(2025)
        assert [day for day, _ in named] == sorted(day for day, _ in named)
        assert named[0] == (date(2025, 1, 1), "Nyttårsdag")
        assert (date(2025, 4, 17), "Skjærtorsdag") in named
        assert named[-1] == (date(2025, 12, 26), "2. juledag")


class TestNorwegianHolidays:
    def test_spans_previous_to_two_years_ahead(self):
        days = norwegian_holidays(2025)
        assert date(2024, 5, 17) in days
        assert date(2027, 12, 26) in days
        assert date(2023, 5, 17) not in days
        assert date(2028, 1, 1) not in days

    def test_defaults_to_current_year(self):
        assert date(date.today().year, 1, 1) in norwegian_holidays()


class TestIsHoliday:
    def test_ignores_time_of_day(self, holidays):
        assert is_holiday(datetime(2025, 5, 17, 23, 59), holidays)
        assert is_holiday(date(2025, 5, 17), holidays)

    def test_ordinary_day(self, holidays):
        assert not is_holiday(datetime(2025, 12, 24, 16, 0), holidays)

    def test_frozenset_of_datetimes(self):
        assert is_holiday(date(2025, 5, 17), frozenset({datetime(2025, 5, 17)}))

    def test_accepts_a_list(self):
        assert is_holiday(date(2025, 1, 1), [datetime(2025, 1, 1, 0, 0)])
        assert not is_holiday(date(2025, 1, 2), [date(2025, 1, 1)])
