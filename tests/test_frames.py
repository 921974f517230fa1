"""Tests for frame naming and the frame-to-frame rotation dispatcher."""

import numpy as np
import pytest

from loxjax.bodies import Origin
from loxjax.eop import zero_eop
from loxjax.errors import MissingEopProvider, UndefinedRotationalElements, UnknownFrame
from loxjax.frames import Frame, FrameKind, icrf_to_cirf, icrf_to_iau, icrf_to_itrf, rotation
from loxjax.time import Time, TimeScale, Utc


@pytest.fixture
def tai():
    return Utc.from_iso("2024-07-05T09:09:18.173").to_time(TimeScale.TAI)


class TestFrameParse:
    @pytest.mark.parametrize("name", ["ICRF", "icrf", "CIRF", "TIRF", "ITRF", "itrf"])
    def test_earth_frames(self, name):
        assert Frame.parse(name).abbreviation == name.upper()

    def test_iau_earth(self):
        frame = Frame.parse("IAU_EARTH")
        assert frame.kind is FrameKind.IAU
        assert frame.origin is Origin.EARTH

    def test_iau_lowercase_body(self):
        assert Frame.parse("IAU_jupiter") == Frame.iau(Origin.JUPITER)

    @pytest.mark.parametrize("name", ["FOO_EARTH", "IAU_RUPERT", "IAU_SYCORAX", "IAU_", "GCRF", ""])
    def test_unknown(self, name):
        with pytest.raises(UnknownFrame):
            Frame.parse(name)


class TestFrameProperties:
    def test_names(self):
        assert Frame.ICRF.name == "International Celestial Reference Frame"
        assert Frame.ITRF.name == "International Terrestrial Reference Frame"
        assert Frame.iau(Origin.EARTH).name == "IAU Body-Fixed Reference Frame for Earth"
        assert Frame.iau(Origin.MOON).name == "IAU Body-Fixed Reference Frame for the Moon"

    def test_abbreviations(self):
        assert str(Frame.iau("Jupiter")) == "IAU_JUPITER"
        assert str(Frame.TIRF) == "TIRF"

    def test_rotating(self):
        assert not Frame.ICRF.is_rotating
        assert not Frame.CIRF.is_rotating
        assert Frame.ITRF.is_rotating
        assert Frame.iau(Origin.MARS).is_rotating

    def test_iau_needs_rotational_elements(self):
        with pytest.raises(UndefinedRotationalElements):
            Frame.iau(Origin.SYCORAX)

    def test_earth_frames_take_no_origin(self):
        with pytest.raises(ValueError):
            Frame(FrameKind.ICRF, Origin.EARTH)

    def test_hashable(self):
        assert len({Frame.ICRF, Frame.parse("ICRF"), Frame.iau(Origin.MARS), Frame.parse("IAU_MARS")}) == 2


class TestRotationDispatch:
    def test_identity(self, tai):
        rot = rotation(Frame.ICRF, Frame.ICRF, tai)
        np.testing.assert_array_equal(np.asarray(rot.m), np.eye(3))

    def test_icrf_to_itrf(self, tai):
        eop = zero_eop()
        expected = icrf_to_itrf(tai, eop)
        rot = rotation("ICRF", "ITRF", tai, eop)
        np.testing.assert_allclose(np.asarray(rot.m), np.asarray(expected.m), atol=1e-15)
        np.testing.assert_allclose(np.asarray(rot.dm), np.asarray(expected.dm), atol=1e-20)

    def test_itrf_to_icrf(self, tai):
        eop = zero_eop()
        expected = icrf_to_itrf(tai, eop).transpose()
        rot = rotation(Frame.ITRF, Frame.ICRF, tai, eop)
        np.testing.assert_allclose(np.asarray(rot.m), np.asarray(expected.m), atol=1e-15)

    def test_partial_chain(self, tai):
        rot = rotation("ICRF", "CIRF", tai)
        np.testing.assert_array_equal(np.asarray(rot.m), np.asarray(icrf_to_cirf(tai).m))

    def test_icrf_to_iau(self, tai):
        rot = rotation("ICRF", "IAU_EARTH", tai)
        np.testing.assert_allclose(np.asarray(rot.m), np.asarray(icrf_to_iau(tai, Origin.EARTH).m), atol=1e-15)

    def test_iau_to_iau(self, tai):
        rot = rotation("IAU_MOON", "IAU_EARTH", tai)
        expected = icrf_to_iau(tai, Origin.MOON).transpose().compose(icrf_to_iau(tai, Origin.EARTH))
        np.testing.assert_allclose(np.asarray(rot.m), np.asarray(expected.m), atol=1e-15)
        np.testing.assert_allclose(np.asarray(rot.dm), np.asarray(expected.dm), atol=1e-18)

    def test_iau_to_itrf(self, tai):
        eop = zero_eop()
        rot = rotation("IAU_MOON", "ITRF", tai, eop)
        back = rotation("ITRF", "IAU_MOON", tai, eop)
        np.testing.assert_allclose(np.asarray(rot.compose(back).m), np.eye(3), atol=1e-14)

    def test_terrestrial_needs_eop(self, tai):
        with pytest.raises(MissingEopProvider):
            rotation("ICRF", "ITRF", tai)

    def test_unknown_frame(self, tai):
        with pytest.raises(UnknownFrame):
            rotation("ICRF", "IAU_RUPERT", tai)

    def test_j2000_tdb(self):
        rot = rotation("ICRF", "IAU_JUPITER", Time.j2000(TimeScale.TDB))
        expected = icrf_to_iau(Time.j2000(TimeScale.TDB), Origin.JUPITER)
        np.testing.assert_array_equal(np.asarray(rot.m), np.asarray(expected.m))
