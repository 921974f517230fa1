"""Tests for Date and TimeOfDay."""

import pytest

from loxjax.errors import InvalidDate, InvalidTimeOfDay
from loxjax.time import Date, Subsecond, TimeOfDay, days_in_month, is_leap_year


class TestLeapYears:
    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False), (0, True), (-4, True)],
    )
    def test_gregorian_rule(self, year, expected):
        assert is_leap_year(year) is expected

    def test_days_in_month(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 12) == 31


class TestDate:
    def test_j2000_day_number(self):
        assert Date(2000, 1, 1).j2000_day_number() == 0
        assert Date(1999, 12, 31).j2000_day_number() == -1
        assert Date(2000, 3, 1).j2000_day_number() == 60
        assert Date(2001, 1, 1).j2000_day_number() == 366

    def test_day_number_roundtrip(self):
        for days in (-730_000, -36_525, -1, 0, 59, 60, 9_000, 400_000):
            assert Date.from_days_since_j2000(days).j2000_day_number() == days

    def test_day_number_is_monotone(self):
        dates = [Date(1899, 12, 31), Date(1900, 1, 1), Date(1900, 3, 1), Date(2000, 2, 29), Date(2000, 3, 1)]
        numbers = [d.j2000_day_number() for d in dates]
        assert numbers == sorted(numbers)
        assert len(set(numbers)) == len(numbers)

    def test_from_day_of_year(self):
        assert Date.from_day_of_year(2000, 60) == Date(2000, 2, 29)
        assert Date.from_day_of_year(2001, 60) == Date(2001, 3, 1)
        assert Date(2024, 12, 31).day_of_year() == 366

    def test_from_day_of_year_invalid(self):
        with pytest.raises(InvalidDate):
            Date.from_day_of_year(2023, 366)

    def test_from_seconds_since_j2000(self):
        assert Date.from_seconds_since_j2000(0) == Date(2000, 1, 1)
        assert Date.from_seconds_since_j2000(43199) == Date(2000, 1, 1)
        assert Date.from_seconds_since_j2000(43200) == Date(2000, 1, 2)
        assert Date.from_seconds_since_j2000(-43201) == Date(1999, 12, 31)

    def test_seconds_since_j2000(self):
        assert Date(2000, 1, 1).seconds_since_j2000() == -43200

    @pytest.mark.parametrize(("year", "month", "day"), [(2023, 2, 29), (2100, 2, 29), (2000, 13, 1), (2000, 4, 31)])
    def test_invalid_dates_raise(self, year, month, day):
        with pytest.raises(InvalidDate):
            Date(year, month, day)

    def test_iso_roundtrip(self):
        assert Date.from_iso("2024-07-05") == Date(2024, 7, 5)
        assert Date(-44, 3, 15).isoformat() == "-0044-03-15"
        assert Date.from_iso("-0044-03-15") == Date(-44, 3, 15)

    def test_iso_malformed_raises(self):
        with pytest.raises(InvalidDate):
            Date.from_iso("2024/07/05")

    def test_ordering(self):
        assert Date(2000, 1, 1) < Date(2000, 1, 2) < Date(2001, 1, 1)


class TestTimeOfDay:
    def test_second_of_day(self):
        assert TimeOfDay(12, 30, 15).second_of_day() == 45015

    def test_from_second_of_day(self):
        assert TimeOfDay.from_second_of_day(45015) == TimeOfDay(12, 30, 15)

    def test_from_iso_with_fraction(self):
        tod = TimeOfDay.from_iso("09:09:18.173")
        assert (tod.hour, tod.minute, tod.second) == (9, 9, 18)
        assert tod.subsecond == Subsecond.new(milliseconds=173)

    def test_leap_second_only_at_end_of_day(self):
        assert TimeOfDay(23, 59, 60).is_leap_second()
        with pytest.raises(InvalidTimeOfDay):
            TimeOfDay(12, 0, 60)

    @pytest.mark.parametrize(("hour", "minute", "second"), [(24, 0, 0), (0, 60, 0), (0, 0, -1)])
    def test_out_of_range_raises(self, hour, minute, second):
        with pytest.raises(InvalidTimeOfDay):
            TimeOfDay(hour, minute, second)

    def test_from_hms_f64(self):
        tod = TimeOfDay.from_hms_f64(1, 2, 3.25)
        assert tod.second == 3
        assert tod.subsecond.milliseconds() == 250

    def test_isoformat_truncates(self):
        tod = TimeOfDay(1, 2, 3, Subsecond.from_digits("123999"))
        assert tod.isoformat() == "01:02:03.123"
        assert tod.isoformat(digits=0) == "01:02:03"
