"""Tests for Time, TimeScale and Julian-date projections."""

import math

import pytest

from loxjax.errors import InvalidTimeOfDay, MissingProvider, UnknownScale
from loxjax.time import (
    Date,
    DeltaUt1TaiProvider,
    Epoch,
    Time,
    TimeDelta,
    TimeOfDay,
    TimeScale,
    Unit,
    Utc,
    tdb_minus_tt,
)
from loxjax.time._offsets import J77


class ConstantUt1Provider:
    """UT1 - TAI held at a fixed value."""

    def __init__(self, offset: float):
        self.offset = TimeDelta.from_seconds_f64(offset)

    def delta_ut1_tai(self, tai):
        return self.offset

    def delta_tai_ut1(self, ut1):
        return -self.offset


def _seconds_between(a: Time, b: Time) -> float:
    return (a.to_delta() - b.to_delta()).to_seconds_f64()


class TestTimeScale:
    def test_parse(self):
        assert TimeScale.parse("tdb") is TimeScale.TDB
        assert TimeScale.parse(" TAI ") is TimeScale.TAI

    @pytest.mark.parametrize("name", ["UTC", "GPS", ""])
    def test_parse_unknown_raises(self, name):
        with pytest.raises(UnknownScale):
            TimeScale.parse(name)

    def test_names(self):
        assert TimeScale.TT.abbreviation == "TT"
        assert TimeScale.TCB.long_name == "Barycentric Coordinate Time"
        assert str(TimeScale.UT1) == "UT1"

    def test_paths(self):
        tai, tt, tcg, tdb, tcb, ut1 = (
            TimeScale.TAI,
            TimeScale.TT,
            TimeScale.TCG,
            TimeScale.TDB,
            TimeScale.TCB,
            TimeScale.UT1,
        )
        assert tai.path_to(tcb) == [tai, tt, tdb, tcb]
        assert tcb.path_to(tai) == [tcb, tdb, tt, tai]
        assert ut1.path_to(tcg) == [ut1, tai, tt, tcg]
        assert tdb.path_to(tcg) == [tdb, tt, tcg]
        assert tt.path_to(tt) == [tt]


class TestTimeConstruction:
    def test_j2000_tt_julian_date(self):
        t = Time.j2000(TimeScale.TT)
        assert t.jd() == 2451545.0
        assert t.centuries_since_j2000() == 0.0
        assert t.mjd() == 51544.5

    def test_from_iso_with_scale_suffix(self):
        t = Time.from_iso("2000-01-01T12:00:00.000 TT")
        assert t == Time.j2000("TT")

    def test_from_iso_defaults_to_tai(self):
        assert Time.from_iso("2000-01-01T12:00:00").scale is TimeScale.TAI
        assert Time.from_iso("2000-01-01T12:00:00", scale="TDB").scale is TimeScale.TDB

    def test_from_iso_unknown_scale_raises(self):
        with pytest.raises(UnknownScale):
            Time.from_iso("2000-01-01T12:00:00 XYZ")

    def test_from_components(self):
        assert Time.from_components("TAI", 2000, 1, 1, 12) == Time.j2000("TAI")
        t = Time.from_components("TAI", 2024, 7, 5, 9, 9, 18.173)
        assert t.isoformat() == "2024-07-05T09:09:18.173 TAI"

    def test_from_date_and_time_rejects_leap_second(self):
        with pytest.raises(InvalidTimeOfDay):
            Time.from_date_and_time("TAI", Date(2016, 12, 31), TimeOfDay(23, 59, 60))

    def test_from_julian_date(self):
        assert Time.from_julian_date("TT", 2451545.0) == Time.j2000("TT")
        assert Time.from_julian_date("TT", 51544.5, Epoch.MODIFIED_JULIAN_DATE) == Time.j2000("TT")

    def test_from_two_part_julian_date(self):
        assert Time.from_two_part_julian_date("TT", 2400000.5, 51544.5) == Time.j2000("TT")

    def test_date_and_time_of_day(self):
        t = Time(TimeScale.TAI, -1)
        assert t.date() == Date(2000, 1, 1)
        assert t.time_of_day() == TimeOfDay(11, 59, 59)

    def test_repr(self):
        assert repr(Time("TT", 5)) == "Time(TT, seconds=5, attoseconds=0)"


class TestJulianProjections:
    def test_two_part_julian_date(self):
        assert Time.j2000("TT").two_part_julian_date() == (2451545.0, 0.0)
        assert Time.from_iso("2000-01-01T00:00:00 TT").two_part_julian_date() == (2451544.0, 0.5)

    def test_units(self):
        t = Time.from_delta("TT", TimeDelta.from_days(1))
        assert t.days_since_j2000() == 1.0
        assert t.seconds_since_j2000() == 86400.0
        assert t.julian_date(Epoch.J2000, Unit.CENTURIES) == pytest.approx(1.0 / 36525.0, rel=1e-15)

    def test_j1950(self):
        assert Time.j2000("TT").days_since_j1950() == 18262.5

    def test_fraction_keeps_attoseconds(self):
        t = Time.from_delta("TT", TimeDelta(0, 1_000_000_000))
        assert t.seconds_since_j2000() == 1e-9

    def test_nan_delta_projects_to_nan(self):
        assert TimeDelta.nan().julian_date() != TimeDelta.nan().julian_date()


class TestTimeArithmetic:
    def test_add_delta(self):
        assert Time.j2000("TAI") + TimeDelta(60) == Time("TAI", 60)
        assert TimeDelta(60) + Time.j2000("TAI") == Time("TAI", 60)

    def test_difference(self):
        assert Time("TT", 100) - Time("TT", 40) == TimeDelta(60)

    def test_mixed_scales_raise(self):
        with pytest.raises(ValueError, match="different scales"):
            Time("TT", 1) - Time("TAI", 0)
        with pytest.raises(ValueError):
            Time("TT", 1) < Time("TAI", 0)

    def test_equality_includes_scale(self):
        assert Time("TT", 0) != Time("TAI", 0)
        assert Time("TT", 0).with_scale("TAI") == Time("TAI", 0)


class TestScaleConversion:
    def test_tai_to_tt(self):
        tt = Time.j2000("TAI").to_tt()
        assert tt.scale is TimeScale.TT
        assert tt.to_delta() == TimeDelta(32, 184_000_000_000_000_000)

    def test_tt_to_tai_exact(self):
        t = Time.from_iso("2024-07-05T09:09:18.173 TAI")
        assert t.to_tt().to_tai() == t

    def test_tcg_equals_tt_at_1977(self):
        tt = Time.from_delta("TT", J77)
        assert tt.to_tcg().to_delta() == J77

    def test_tdb_minus_tcb_at_1977(self):
        tcb = Time.from_delta("TCB", J77)
        assert _seconds_between(tcb.to_tdb(), tcb) == pytest.approx(-6.55e-5, abs=1e-12)

    def test_tcg_rate(self):
        tt = Time.from_delta("TT", J77 + TimeDelta.from_days(36525))
        offset = _seconds_between(tt.to_tcg(), tt)
        assert offset == pytest.approx(6.969290134e-10 / (1 - 6.969290134e-10) * 36525 * 86400, rel=1e-12)

    def test_tdb_minus_tt_at_j2000(self):
        assert tdb_minus_tt(TimeDelta(0)) == pytest.approx(-9.5757e-5, abs=1e-8)

    def test_tdb_minus_tt_amplitude(self):
        for years in range(-100, 101, 7):
            assert abs(tdb_minus_tt(TimeDelta.from_julian_years(years))) < 2e-3

    @pytest.mark.parametrize("scale", ["TCG", "TDB", "TCB"])
    def test_roundtrip_through_scale(self, scale):
        tt = Time.from_iso("2024-07-05T09:09:18.173 TT")
        back = tt.to_scale(scale).to_scale("TT")
        assert abs(_seconds_between(back, tt)) < 1e-12

    def test_conversion_is_transitive(self):
        tai = Time.from_iso("2010-03-15T06:00:00 TAI")
        direct = tai.to_tcg()
        via_tdb = tai.to_tdb().to_tcb().to_tcg()
        assert abs(_seconds_between(via_tdb, direct)) < 1e-9

    def test_ut1_requires_provider(self):
        with pytest.raises(MissingProvider):
            Time.j2000("TAI").to_ut1()

    def test_ut1_with_provider(self):
        provider = ConstantUt1Provider(-32.1)
        assert isinstance(provider, DeltaUt1TaiProvider)
        tai = Time.from_iso("2005-01-01T00:00:00 TAI")
        ut1 = tai.to_ut1(provider)
        assert ut1.scale is TimeScale.UT1
        assert _seconds_between(ut1, tai) == pytest.approx(-32.1, abs=1e-12)
        assert ut1.to_tai(provider) == tai

    def test_ut1_to_tt_goes_through_tai(self):
        provider = ConstantUt1Provider(-32.1)
        ut1 = Time.from_iso("2005-01-01T00:00:00 UT1")
        tt = ut1.to_tt(provider)
        assert _seconds_between(tt, ut1) == pytest.approx(32.1 + 32.184, abs=1e-12)

    def test_to_utc(self):
        tai = Time.from_iso("2017-01-01T00:00:37 TAI")
        assert tai.to_utc() == Utc.from_components(2017, 1, 1)


class TestNonFiniteInstants:
    @pytest.mark.parametrize("delta", [TimeDelta.nan(), TimeDelta.infinity(), TimeDelta.neg_infinity()])
    @pytest.mark.parametrize("origin", list(TimeScale))
    @pytest.mark.parametrize("target", list(TimeScale))
    def test_conversion_does_not_raise(self, delta, origin, target):
        time = Time.from_delta(origin, delta)
        converted = time.to_scale(target, ConstantUt1Provider(-32.1))
        assert converted.scale is target
        assert not converted.to_delta().is_finite()

    def test_nan_stays_nan(self):
        tdb = Time.from_delta("TT", TimeDelta.nan()).to_scale("TDB")
        assert tdb.to_delta().is_nan()

    def test_tdb_minus_tt_of_infinity_is_nan(self):
        assert math.isnan(tdb_minus_tt(TimeDelta.infinity()))


class TestTimeRejectsRealSeconds:
    def test_float_seconds_raise(self):
        with pytest.raises(TypeError):
            Time("TAI", 1.5)

    def test_real_seconds_via_from_delta(self):
        time = Time.from_delta("TAI", TimeDelta.from_seconds_f64(1.5))
        assert time.to_delta() == TimeDelta(1, 500_000_000_000_000_000)
