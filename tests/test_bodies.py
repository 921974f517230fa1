"""Tests for origins and IAU rotational elements."""

import math

import jax
import numpy as np
import pytest

from loxjax.bodies import ElementType, Origin, has_rotational_elements, rotational_elements
from loxjax.constants import SECONDS_PER_DAY
from loxjax.errors import LoxError, UndefinedRotationalElements, UnknownOrigin


class TestOrigin:
    def test_naif_ids(self):
        assert Origin.EARTH.id == 399
        assert Origin.MOON.id == 301
        assert Origin.SOLAR_SYSTEM_BARYCENTER.id == 0

    def test_names(self):
        assert Origin.JUPITER.name_str == "Jupiter"
        assert str(Origin.EARTH_BARYCENTER) == "Earth Barycenter"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Earth", Origin.EARTH),
            ("earth", Origin.EARTH),
            ("Luna", Origin.MOON),
            ("moon", Origin.MOON),
            ("SSB", Origin.SOLAR_SYSTEM_BARYCENTER),
            ("jupiter_barycenter", Origin.JUPITER_BARYCENTER),
            ("Sycorax", Origin.SYCORAX),
        ],
    )
    def test_parse(self, name, expected):
        assert Origin.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(UnknownOrigin):
            Origin.parse("Rupert")

    def test_from_id(self):
        assert Origin.from_id(599) is Origin.JUPITER

    def test_from_id_unknown(self):
        with pytest.raises(UnknownOrigin):
            Origin.from_id(12345)

    def test_is_barycenter(self):
        assert Origin.MARS_BARYCENTER.is_barycenter
        assert not Origin.MARS.is_barycenter


class TestElementType:
    def test_time_units(self):
        assert ElementType.ROTATION.dt == SECONDS_PER_DAY
        assert ElementType.RIGHT_ASCENSION.dt == 36525 * SECONDS_PER_DAY
        assert ElementType.DECLINATION.dt == 36525 * SECONDS_PER_DAY

    @pytest.mark.parametrize("typ", list(ElementType))
    def test_time_units_are_floats(self, typ):
        assert isinstance(typ.dt, float)


class TestRotationalElements:
    def test_jupiter_at_j2000(self):
        jupiter = rotational_elements(Origin.JUPITER)
        ra, dec, w = jupiter.elements(0.0)
        assert float(ra) == pytest.approx(4.678480799964803, rel=1e-8)
        assert float(dec) == pytest.approx(1.1256642372977634, rel=1e-8)
        assert float(w) == pytest.approx(4.973315703557842, rel=1e-8)

    def test_jupiter_rates_at_j2000(self):
        jupiter = rotational_elements(Origin.JUPITER)
        ra_dot, dec_dot, w_dot = jupiter.rates(0.0)
        assert float(ra_dot) == pytest.approx(-1.3266588500099516e-13, rel=1e-8)
        assert float(dec_dot) == pytest.approx(3.004482367136341e-15, rel=1e-8)
        assert float(w_dot) == pytest.approx(0.00017585323445765458, rel=1e-8)

    def test_earth_rotation_rate(self):
        # 360.9856235 deg/day
        earth = rotational_elements(Origin.EARTH)
        expected = math.radians(360.9856235) / SECONDS_PER_DAY
        assert float(earth.rotation_rate(0.0)) == pytest.approx(expected, rel=1e-12)

    def test_earth_pole_at_j2000(self):
        earth = rotational_elements(Origin.EARTH)
        assert float(earth.right_ascension_at(0.0)) == pytest.approx(0.0, abs=1e-15)
        assert float(earth.declination_at(0.0)) == pytest.approx(math.pi / 2, abs=1e-15)

    @pytest.mark.parametrize("origin", [Origin.MARS, Origin.JUPITER, Origin.NEPTUNE, Origin.MOON])
    def test_rates_match_finite_difference(self, origin):
        model = rotational_elements(origin)
        t, h = 3.0e8, 10.0
        for angle, rate in (
            (model.right_ascension_at, model.right_ascension_rate),
            (model.declination_at, model.declination_rate),
            (model.rotation_angle, model.rotation_rate),
        ):
            fd = (float(angle(t + h)) - float(angle(t - h))) / (2 * h)
            assert float(rate(t)) == pytest.approx(fd, rel=1e-6, abs=1e-14)

    @pytest.mark.parametrize("t", [0, 3_000_000_000, 3.0e9])
    def test_rates_with_quadratic_terms(self, t):
        jupiter = rotational_elements(Origin.JUPITER)
        rates = jupiter.rates(t)
        assert all(np.isfinite(float(r)) for r in rates)
        assert float(rates.rotation_angle) == pytest.approx(0.00017585323445765458, rel=1e-6)

    def test_rates_under_jit(self):
        jupiter = rotational_elements(Origin.JUPITER)
        ra_dot = jax.jit(jupiter.right_ascension_rate)(1.0e8)
        assert float(ra_dot) == pytest.approx(float(jupiter.right_ascension_rate(1.0e8)), rel=1e-14)

    def test_jit(self):
        jupiter = rotational_elements(Origin.JUPITER)
        w = jax.jit(jupiter.rotation_angle)(1.0e6)
        assert float(w) == pytest.approx(float(jupiter.rotation_angle(1.0e6)), rel=1e-14)

    def test_has_rotational_elements(self):
        assert has_rotational_elements(Origin.MARS)
        assert not has_rotational_elements(Origin.MARS_BARYCENTER)
        assert not has_rotational_elements(Origin.SYCORAX)

    @pytest.mark.parametrize("origin", [Origin.SOLAR_SYSTEM_BARYCENTER, Origin.SYCORAX])
    def test_undefined(self, origin):
        with pytest.raises(UndefinedRotationalElements):
            rotational_elements(origin)

    def test_undefined_is_lox_error(self):
        assert issubclass(UndefinedRotationalElements, LoxError)

    def test_elements_are_arrays(self):
        ra, dec, w = rotational_elements(Origin.SUN).elements(np.float64(0.0))
        assert np.ndim(ra) == 0 and np.ndim(dec) == 0 and np.ndim(w) == 0
