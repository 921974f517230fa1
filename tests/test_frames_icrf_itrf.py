"""Tests for the ICRF -> CIRF -> TIRF -> ITRF chain.

The reference case is the worked example of the SOFA "Tools for Earth
Attitude" cookbook: 2007-04-05 12:00 UTC with the IERS values of the day.
"""

import erfa
import jax.numpy as jnp
import numpy as np
import pytest

from loxjax.constants import AS2RAD, OMEGA_EARTH
from loxjax.eop import EOPExtrapolation, EopProvider, static_eop, zero_eop
from loxjax.errors import MissingEopProvider, ProviderOutOfRange
from loxjax.frames import (
    cirf_to_icrf,
    cirf_to_tirf,
    icrf_to_cirf,
    icrf_to_itrf,
    itrf_to_icrf,
    itrf_to_tirf,
    state_icrf_to_itrf,
    state_itrf_to_icrf,
    tirf_to_cirf,
    tirf_to_itrf,
)
from loxjax.rotations import Rotation
from loxjax.time import Time, TimeScale, Utc

XP = 0.0349282 * AS2RAD
YP = 0.4833163 * AS2RAD
UT1_UTC = -0.072073685
DX = 0.1750e-3 * AS2RAD
DY = -0.2259e-3 * AS2RAD

R_LEO = jnp.array([6068279.27, -1692843.94, -2516619.18])
V_LEO = jnp.array([-660.415582, 5495.938726, -5303.093233])


@pytest.fixture
def utc():
    return Utc.from_iso("2007-04-05T12:00:00")


@pytest.fixture
def eop():
    return EopProvider(static_eop(pm_x=XP, pm_y=YP, ut1_utc=UT1_UTC, dX=DX, dY=DY))


def _erfa_c2t(utc, eop):
    tt = utc.to_time(TimeScale.TT).two_part_julian_date()
    ut1 = utc.to_time(TimeScale.UT1, eop).two_part_julian_date()
    x, y, s = erfa.xys06a(*tt)
    rc2i = erfa.c2ixys(x + DX, y + DY, s)
    era = erfa.era00(*ut1)
    rpom = erfa.pom00(XP, YP, erfa.sp00(*tt))
    return erfa.c2tcio(rc2i, era, rpom)


class TestIcrfToItrf:
    def test_matches_erfa(self, utc, eop):
        rot = icrf_to_itrf(utc, eop)
        np.testing.assert_allclose(np.asarray(rot.m), _erfa_c2t(utc, eop), atol=1e-12)

    def test_orthonormal(self, utc, eop):
        m = np.asarray(icrf_to_itrf(utc, eop).m)
        np.testing.assert_allclose(m @ m.T, np.eye(3), atol=1e-14)

    def test_derivative_is_earth_rotation(self, utc, eop):
        rot = icrf_to_itrf(utc, eop)
        omega = np.asarray(rot.angular_velocity)
        assert np.linalg.norm(omega) == pytest.approx(OMEGA_EARTH, rel=1e-12)

    def test_velocity_matches_finite_difference(self, eop):
        # dm carries Earth rotation only; precession-nutation adds ~1e-11 per second
        rot = icrf_to_itrf(Time.from_iso("2007-04-05T12:00:33 TAI"), eop)
        before = np.asarray(icrf_to_itrf(Time.from_iso("2007-04-05T12:00:32 TAI"), eop).m)
        after = np.asarray(icrf_to_itrf(Time.from_iso("2007-04-05T12:00:34 TAI"), eop).m)
        fd = (after - before) / 2.0
        np.testing.assert_allclose(np.asarray(rot.dm), fd, atol=1e-10)

    def test_composition_of_steps(self, utc, eop):
        expected = icrf_to_cirf(utc, eop).compose(cirf_to_tirf(utc, eop)).compose(tirf_to_itrf(utc, eop))
        rot = icrf_to_itrf(utc, eop)
        np.testing.assert_allclose(np.asarray(rot.m), np.asarray(expected.m), atol=0.0)
        np.testing.assert_allclose(np.asarray(rot.dm), np.asarray(expected.dm), atol=0.0)

    def test_returns_rotation(self, utc, eop):
        assert isinstance(icrf_to_itrf(utc, eop), Rotation)

    def test_bare_table_accepted(self, utc, eop):
        table = static_eop(pm_x=XP, pm_y=YP, ut1_utc=UT1_UTC, dX=DX, dY=DY)
        expected = np.asarray(icrf_to_itrf(utc, eop).m)
        np.testing.assert_allclose(np.asarray(icrf_to_itrf(utc, table).m), expected, atol=0.0)


class TestRoundTrip:
    def test_state_round_trip(self, utc, eop):
        x = jnp.concatenate([R_LEO, V_LEO])
        back = state_itrf_to_icrf(utc, state_icrf_to_itrf(utc, x, eop), eop)
        np.testing.assert_allclose(np.asarray(back), np.asarray(x), rtol=1e-10, atol=1e-6)

    def test_inverse_functions(self, utc, eop):
        ident = icrf_to_itrf(utc, eop).compose(itrf_to_icrf(utc, eop))
        np.testing.assert_allclose(np.asarray(ident.m), np.eye(3), atol=1e-14)

    @pytest.mark.parametrize(
        ("forward", "backward"),
        [(icrf_to_cirf, cirf_to_icrf), (cirf_to_tirf, tirf_to_cirf), (tirf_to_itrf, itrf_to_tirf)],
    )
    def test_step_inverses(self, utc, eop, forward, backward):
        ident = forward(utc, eop).compose(backward(utc, eop))
        np.testing.assert_allclose(np.asarray(ident.m), np.eye(3), atol=1e-14)
        np.testing.assert_allclose(np.asarray(ident.dm), np.zeros((3, 3)), atol=1e-18)

    def test_position_magnitude_preserved(self, utc, eop):
        r, _ = icrf_to_itrf(utc, eop).rotate_state(R_LEO, V_LEO)
        assert float(jnp.linalg.norm(r)) == pytest.approx(float(jnp.linalg.norm(R_LEO)), rel=1e-14)


class TestSteps:
    def test_bpn_has_no_derivative(self, utc, eop):
        np.testing.assert_array_equal(np.asarray(icrf_to_cirf(utc, eop).dm), np.zeros((3, 3)))

    def test_bpn_without_eop(self, utc):
        tt = utc.to_time(TimeScale.TT).two_part_julian_date()
        expected = erfa.c2ixys(*erfa.xys06a(*tt))
        np.testing.assert_allclose(np.asarray(icrf_to_cirf(utc).m), expected, atol=1e-14)

    def test_earth_rotation_about_z(self, utc, eop):
        m = np.asarray(cirf_to_tirf(utc, eop).m)
        assert m[2, 2] == 1.0
        np.testing.assert_allclose(m[2, :2], [0.0, 0.0], atol=0.0)

    def test_zero_eop_polar_motion_is_tio_only(self, utc):
        m = np.asarray(tirf_to_itrf(utc, zero_eop()).m)
        np.testing.assert_allclose(m, np.eye(3), atol=1e-10)


class TestErrors:
    def test_missing_eop(self, utc):
        with pytest.raises(MissingEopProvider):
            icrf_to_itrf(utc)

    def test_missing_eop_for_earth_rotation(self, utc):
        with pytest.raises(MissingEopProvider):
            cirf_to_tirf(utc)

    def test_missing_eop_for_polar_motion(self, utc):
        with pytest.raises(MissingEopProvider):
            tirf_to_itrf(utc)

    def test_out_of_range_names_the_step(self, utc):
        eop = EopProvider(static_eop(mjd_min=50000.0, mjd_max=51000.0))
        with pytest.raises(ProviderOutOfRange) as info:
            cirf_to_tirf(utc, eop)
        assert info.value.context == "CIRF -> TIRF"
        assert "CIRF -> TIRF" in str(info.value)

    def test_out_of_range_in_full_chain(self, utc):
        eop = EopProvider(static_eop(mjd_min=50000.0, mjd_max=51000.0))
        with pytest.raises(ProviderOutOfRange) as info:
            icrf_to_itrf(utc, eop)
        assert info.value.context == "ICRF -> CIRF"
        assert info.value.mjd_max == 51000.0

    def test_extrapolation_avoids_error(self, utc):
        eop = EopProvider(static_eop(mjd_min=50000.0, mjd_max=51000.0), EOPExtrapolation.HOLD)
        assert isinstance(icrf_to_itrf(utc, eop), Rotation)
