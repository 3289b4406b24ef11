"""
Unit tests for the lunar theory.
"""

import pytest
import libkepler as ephem
from libkepler.constants import *
from libkepler.models import MoonPosition
from libkepler.moon import true_position

# (days since 1900 Jan 0.5, longitude, latitude, distance, parallax, motion)
MOON_CASES = [
    (-10000.5, 253.85478, -0.35884, 0.002475, 0.98681, 14.073505),
    (-7000.5, 183.03298, -5.10613, 0.0025318451878263725, 0.96482, 13.614904285991807),
    (-4000.5, 114.49714, 0.29899, 0.002661387458557927, 0.91786, 12.284203442108854),
    (-1000.5, 46.33258, 5.03904, 0.0027150753763781643, 0.89971, 11.86016463804351),
    (1999.5, 340.74811, -0.76686, 0.002665042330735118, 0.91660, 12.137096046101872),
    (4999.5, 273.11888, -5.22297, 0.0026145243283283597, 0.93431, 12.706509343283184),
    (7999.5, 198.76809, 0.13467, 0.0025060386483159646, 0.97476, 13.79049510733593),
    (10999.5, 123.17331, 5.01217, 0.002393311553917354, 1.02067, 15.25014893599962),
    (13999.5, 50.40519, 0.59539, 0.002440903741394359, 1.00077, 14.567332957243783),
    (16999.5, 336.88148, -5.04905, 0.0025896311772431097, 0.94329, 13.015006558327384),
    (19999.5, 266.43192, -1.18331, 0.0026726946153555506, 0.91398, 12.05705112860313),
    (22999.5, 200.91657, 5.13843, 0.00270357511434672, 0.90354, 11.883519914105939),
    (25999.5, 134.05765, 0.87204, 0.0026941433274419316, 0.90670, 11.945823078908266),
    (28999.5, 64.16216, -4.94147, 0.0025731373392409293, 0.94934, 13.2314091077357),
    (31999.5, 354.53313, -0.77311, 0.0024513561792419898, 0.99650, 14.398538661582212),
    (34999.5, 280.10165, 5.06817, 0.002455022531559789, 0.99501, 14.431229034360273),
    (37999.5, 201.62149, 2.25573, 0.0025070947174279036, 0.97435, 13.731560363493482),
    (40999.5, 128.41649, -4.51661, 0.0025554365866768364, 0.95591, 13.279315343224834),
    (43999.5, 61.54198, -2.45092, 0.0026505164857345337, 0.92162, 12.374443595332336),
    (46999.5, 353.93133, 4.49791, 0.00271630014162966, 0.89930, 11.857387239871063),
]


@pytest.mark.unit
class TestTruePosition:
    """Tests for the Moon position formula."""

    @pytest.mark.parametrize("djd,lon,lat,dist,parallax,motion", MOON_CASES)
    def test_reference_values(self, djd, lon, lat, dist, parallax, motion):
        res = true_position(djd + J1900)
        assert res.position.lon == pytest.approx(lon, abs=1e-4)
        assert res.position.lat == pytest.approx(lat, abs=1e-4)
        assert res.position.dist == pytest.approx(dist, abs=1e-4)
        assert res.parallax == pytest.approx(parallax, abs=1e-4)
        assert res.motion == pytest.approx(motion, abs=1e-4)

    def test_result_type(self):
        res = true_position(2451545.0)
        assert isinstance(res, MoonPosition)
        position, parallax, motion = res
        assert 0 <= position.lon < 360
        assert -5.5 < position.lat < 5.5
        assert 0.89 < parallax < 1.03
        assert 11.7 < motion < 15.5

    def test_distance_from_parallax(self):
        res = true_position(2451545.0)
        assert res.position.dist == pytest.approx(8.794 / (res.parallax * 3600))


@pytest.mark.integration
class TestMoonVsSwisseph:
    """Compare with the Moshier ephemeris."""

    def test_apparent_position(self, test_dates, compare_with_swisseph):
        for year, month, day, hour, name in test_dates:
            jd = ephem.swe_julday(year, month, day, hour)
            diffs = compare_with_swisseph(jd, SE_MOON)
            assert diffs["lon"] < 0.05, f"{name}: {diffs}"
            assert diffs["lat"] < 0.05, f"{name}: {diffs}"
            assert diffs["dist"] < 0.005, f"{name}: {diffs}"

    def test_speed(self, standard_jd):
        import swisseph as swe

        pos_swe, _ = swe.calc_ut(standard_jd, swe.MOON, swe.FLG_MOSEPH | swe.FLG_SPEED)
        pos, _ = ephem.swe_calc_ut(standard_jd, SE_MOON, SEFLG_SPEED)
        assert abs(pos[3] - pos_swe[3]) < 0.05
