"""Tests for Utc, the leap-second providers and the 1960-1971 drift model."""

import pytest

from loxjax.errors import InvalidLeapSecondKernel, InvalidTimeOfDay, NonLeapSecondDate, UtcUndefined
from loxjax.time import (
    BuiltinLeapSeconds,
    Date,
    LeapSecondsKernel,
    LeapSecondsProvider,
    Time,
    TimeDelta,
    TimeOfDay,
    TimeScale,
    Utc,
)

KERNEL = r"""
KPL/LSK

\begindata

DELTET/DELTA_T_A       =   32.184
DELTET/K               =    1.657D-3
DELTET/DELTA_AT        = ( 10,   @1972-JAN-1
                           11,   @1972-JUL-1
                           12,   @1973-JAN-1
                           36,   @2015-JUL-1
                           37,   @2017-JAN-1 )

\begintext
"""


def _tai_minus_utc(utc: Utc) -> float:
    return (utc.to_tai().to_delta() - utc.to_delta()).to_seconds_f64()


class TestUtcConstruction:
    def test_leap_second_accepted_on_leap_date(self):
        utc = Utc(Date(2016, 12, 31), TimeOfDay(23, 59, 60))
        assert utc.is_leap_second()
        assert utc.second == 60

    def test_leap_second_rejected_on_other_dates(self):
        with pytest.raises(NonLeapSecondDate):
            Utc(Date(2016, 12, 30), TimeOfDay(23, 59, 60))

    def test_before_1960_undefined(self):
        with pytest.raises(UtcUndefined):
            Utc(Date(1959, 12, 31))

    @pytest.mark.parametrize("iso", ["2016-12-31T23:59:60.000Z", "2016-12-31T23:59:60 UTC", "2016-12-31T23:59:60"])
    def test_from_iso(self, iso):
        assert Utc.from_iso(iso) == Utc(Date(2016, 12, 31), TimeOfDay(23, 59, 60))

    def test_from_iso_other_scale_raises(self):
        with pytest.raises(InvalidTimeOfDay):
            Utc.from_iso("2016-12-31T23:59:59 TAI")

    def test_isoformat(self):
        assert Utc.from_iso("2016-12-31T23:59:60.5Z").isoformat() == "2016-12-31T23:59:60.500 UTC"

    def test_julian_date(self):
        assert Utc.from_components(2000, 1, 1, 12).jd() == 2451545.0


class TestLeapSecondConversion:
    def test_offsets(self):
        assert _tai_minus_utc(Utc.from_components(1972, 1, 1)) == 10.0
        assert _tai_minus_utc(Utc.from_components(2007, 4, 5, 12)) == 33.0
        assert _tai_minus_utc(Utc.from_components(2017, 1, 1)) == 37.0
        assert _tai_minus_utc(Utc.from_components(2024, 7, 5)) == 37.0

    def test_leap_second_roundtrip(self):
        utc = Utc.from_iso("2016-12-31T23:59:60Z")
        tai = utc.to_tai()
        back = Utc.from_tai(tai)
        assert back == utc
        assert back.is_leap_second()

    def test_tai_is_continuous_across_leap_second(self):
        labels = ["2016-12-31T23:59:58", "2016-12-31T23:59:59", "2016-12-31T23:59:60", "2017-01-01T00:00:00"]
        tai = [Utc.from_iso(label).to_tai() for label in labels]
        steps = [b - a for a, b in zip(tai, tai[1:])]
        assert steps == [TimeDelta(1)] * 3

    @pytest.mark.parametrize(
        "iso",
        ["1972-01-01T00:00:00", "1999-12-31T23:59:59.999", "2000-01-01T12:00:00", "2017-01-01T00:00:00", "2024-07-05T09:09:18.173"],
    )
    def test_roundtrip_is_exact(self, iso):
        utc = Utc.from_iso(iso)
        assert Utc.from_tai(utc.to_tai()) == utc

    def test_to_time(self):
        tt = Utc.from_components(2000, 1, 1, 12).to_time("TT")
        assert tt.scale is TimeScale.TT
        assert tt.to_delta() == TimeDelta(64, 184_000_000_000_000_000)

    def test_from_time(self):
        tt = Time.from_delta("TT", TimeDelta(64, 184_000_000_000_000_000))
        assert Utc.from_time(tt) == Utc.from_components(2000, 1, 1, 12)

    def test_from_tai_requires_tai(self):
        with pytest.raises(ValueError):
            Utc.from_tai(Time.j2000("TT"))


class TestBefore1972:
    def test_drift_offset(self):
        utc = Utc.from_components(1968, 6, 15, 12)
        assert _tai_minus_utc(utc) == pytest.approx(4.213170 + 896.5 * 0.002592, abs=1e-9)

    def test_interval_start(self):
        assert _tai_minus_utc(Utc.from_components(1965, 1, 1)) == pytest.approx(3.540130, abs=1e-9)

    @pytest.mark.parametrize(
        "iso",
        [
            "1960-01-01T00:00:00",
            "1960-01-01T00:00:00.5",
            "1961-01-01T00:00:00",
            "1962-06-01T06:00:00",
            "1968-06-15T12:00:00",
            "1971-12-31T23:59:59",
        ],
    )
    def test_roundtrip(self, iso):
        utc = Utc.from_iso(iso)
        assert utc.to_tai().to_utc() == utc

    def test_first_instant_of_utc(self):
        tai = Utc.from_iso("1960-01-01T00:00:00").to_tai()
        assert tai.to_delta() - Utc.from_iso("1960-01-01T00:00:00").to_delta() == TimeDelta(0, 943_482_000_000_000_000)
        assert str(tai.to_utc()) == "1960-01-01T00:00:00.000 UTC"

    def test_offset_is_whole_nanoseconds(self):
        tai = Utc.from_iso("1968-06-15T12:00:00.125").to_tai()
        offset = tai.to_delta() - Utc.from_iso("1968-06-15T12:00:00.125").to_delta()
        assert offset.attoseconds % 10**9 == 0

    def test_tai_before_first_utc_instant_undefined(self):
        with pytest.raises(UtcUndefined):
            Utc.from_tai(Time.from_iso("1960-01-01T00:00:00.5 TAI"))

    def test_before_1960_tai_undefined(self):
        with pytest.raises(UtcUndefined):
            Utc.from_tai(Time.from_iso("1959-06-01T00:00:00 TAI"))


class TestBuiltinLeapSeconds:
    def test_entries(self):
        table = BuiltinLeapSeconds()
        assert len(table) == 28
        assert table.leap_seconds[0] == 10
        assert table.leap_seconds[-1] == 37

    def test_implements_protocol(self):
        assert isinstance(BuiltinLeapSeconds(), LeapSecondsProvider)

    def test_leap_second_dates(self):
        table = BuiltinLeapSeconds()
        assert table.is_leap_second_date(Date(2016, 12, 31))
        assert table.is_leap_second_date(Date(1972, 6, 30))
        assert not table.is_leap_second_date(Date(2017, 1, 1))
        assert not table.is_leap_second_date(Date(1971, 12, 31))

    def test_none_before_1972(self):
        table = BuiltinLeapSeconds()
        assert table.delta_tai_utc(Time.from_iso("1971-06-01T00:00:00 TAI")) is None
        assert table.delta_utc_tai(Utc.from_components(1971, 6, 1)) is None


class TestLeapSecondsKernel:
    def test_from_string(self):
        kernel = LeapSecondsKernel.from_string(KERNEL)
        assert len(kernel) == 5
        assert list(kernel.leap_seconds) == [10, 11, 12, 36, 37]
        assert kernel.is_leap_second_date(Date(2016, 12, 31))
        assert kernel.is_leap_second_date(Date(1972, 12, 31))

    def test_matches_builtin(self):
        kernel = LeapSecondsKernel.from_string(KERNEL)
        utc = Utc.from_iso("2016-12-31T23:59:60Z", leap_seconds=kernel)
        assert utc.to_tai(kernel) == utc.to_tai()

    def test_from_file(self, tmp_path):
        path = tmp_path / "naif0012.tls"
        path.write_text(KERNEL)
        assert len(LeapSecondsKernel.from_file(path)) == 5

    def test_missing_key_raises(self):
        with pytest.raises(InvalidLeapSecondKernel, match="DELTET/DELTA_AT"):
            LeapSecondsKernel.from_string("\\begindata\nDELTET/K = 1.657D-3\n")

    def test_invalid_month_raises(self):
        with pytest.raises(InvalidLeapSecondKernel):
            LeapSecondsKernel.from_string("DELTET/DELTA_AT = ( 10, @1972-FOO-1 )")

    def test_unsorted_raises(self):
        with pytest.raises(InvalidLeapSecondKernel):
            LeapSecondsKernel.from_string("DELTET/DELTA_AT = ( 11, @1972-JUL-1 10, @1972-JAN-1 )")
