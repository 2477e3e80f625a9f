"""Tests for spherical averaging."""

import pytest

from positioning.nmea import Fix
from positioning.tracker import spherical_mean


class TestSphericalMean:
    def test_empty_is_none(self):
        assert spherical_mean([]) is None

    def test_single_fix_returned_unchanged(self):
        fix = Fix(51.595578, 0.131)
        assert spherical_mean([fix]) is fix

    @pytest.mark.parametrize(
        "fix",
        [Fix(51.595578, 0.131), Fix(-33.5, -151.2), Fix(12.0, -0.5), Fix(89.9, 45.0)],
    )
    def test_identical_fixes_average_to_themselves(self, fix):
        result = spherical_mean([fix] * 5)
        assert result is not None
        assert result.latitude_degrees == pytest.approx(fix.latitude_degrees, abs=1e-9)
        assert result.longitude_degrees == pytest.approx(fix.longitude_degrees, abs=1e-9)

    def test_identical_fixes_on_antimeridian(self):
        result = spherical_mean([Fix(0.0, 180.0)] * 5)
        assert result is not None
        assert result.latitude_degrees == pytest.approx(0.0, abs=1e-9)
        assert abs(result.longitude_degrees) == pytest.approx(180.0, abs=1e-9)

    def test_negative_longitudes_keep_sign(self):
        result = spherical_mean([Fix(-10.0, -20.0), Fix(-10.0, -30.0)])
        assert result is not None
        assert result.longitude_degrees == pytest.approx(-25.0)
        assert result.latitude_degrees == pytest.approx(-10.0, abs=0.1)

    def test_antimeridian_cluster(self):
        fixes = [Fix(10.0, 179.0), Fix(10.0, -179.0), Fix(10.0, 179.5), Fix(10.0, -179.5)]
        result = spherical_mean(fixes)
        assert result is not None
        assert abs(result.longitude_degrees) == pytest.approx(180.0, abs=1e-6)
        assert result.latitude_degrees == pytest.approx(10.0, abs=0.01)

    def test_antimeridian_pair_is_not_near_zero(self):
        result = spherical_mean([Fix(0.0, 179.0), Fix(0.0, -179.0)])
        assert result is not None
        assert abs(result.longitude_degrees) > 179.0

    def test_symmetric_pair_on_equator(self):
        result = spherical_mean([Fix(0.0, 10.0), Fix(0.0, 20.0)])
        assert result is not None
        assert result.latitude_degrees == pytest.approx(0.0, abs=1e-12)
        assert result.longitude_degrees == pytest.approx(15.0)

    def test_pair_across_pole(self):
        result = spherical_mean([Fix(80.0, 0.0), Fix(80.0, 180.0)])
        assert result is not None
        assert result.latitude_degrees == pytest.approx(90.0)

    def test_result_within_range(self):
        fixes = [Fix(-89.0, -179.9), Fix(-88.0, 179.9), Fix(-89.5, 90.0)]
        result = spherical_mean(fixes)
        assert result is not None
        assert -90.0 <= result.latitude_degrees <= 90.0
        assert -180.0 <= result.longitude_degrees <= 180.0
