import datetime
from math import cos, pi, radians, sin

import pytest

from vicforcing.core import ForcingConstants
from vicforcing.core.solar import declination, hour_angle, solar_geometry


def test_declination():
    assert declination(172) == pytest.approx(radians(23.45))
    assert declination(172 + 365) == pytest.approx(radians(23.45))
    assert declination(172 - 365 / 2) == pytest.approx(-radians(23.45))


@pytest.mark.parametrize(
    "hour, expected",
    [(13, 15.0), (18, 90.0), (23, 165.0), (0, 180.0), (6, 270.0), (-1, -195.0)],
)
def test_hour_angle_on_time_zone_meridian(hour, expected):
    assert hour_angle(hour, 0, 0) == pytest.approx(expected)


def test_hour_angle_boundary():
    # strict comparisons, so noon itself uses the formula counted from midnight
    assert hour_angle(12, 0, 0) == 360.0
    assert hour_angle(12 + 1e-9, 0, 0) == pytest.approx(0, abs=1e-6)
    assert cos(radians(hour_angle(12, 0, 0))) == pytest.approx(
        cos(radians(hour_angle(12 + 1e-9, 0, 0)))
    )


def test_hour_angle_boundary_off_meridian():
    shift = (-120 - -122) * 24 / 360
    correction = -1 / 15 * (122 - 120)
    boundary = 12 + shift
    assert hour_angle(boundary, -122, -120) == pytest.approx(
        (boundary + 12 - correction) * 15
    )
    assert hour_angle(boundary + 1e-6, -122, -120) == pytest.approx(
        (boundary + 1e-6 - 12 - correction) * 15
    )
    assert hour_angle(13, -122, -120) == pytest.approx(17.0)
    assert hour_angle(12, -122, -120) == pytest.approx(362.0)


def test_hour_angle_eastern_hemisphere():
    # cell 5 degrees east of its time zone meridian
    assert hour_angle(13, 125, 120) == pytest.approx((13 - 12 - 5 / 15) * 15)


def test_solar_geometry_noon():
    geometry = solar_geometry(172, 12, 23.45, 0, 0)
    radius = 1 + 0.017 * cos(2 * pi / 365 * 14)
    assert geometry.declination == pytest.approx(radians(23.45))
    assert geometry.hour_angle == 360.0
    assert geometry.sin_alpha == pytest.approx(1.0)
    assert geometry.radius == pytest.approx(radius)
    assert geometry.extraterrestrial == pytest.approx(1353 / radius ** 2)
    assert geometry.sun_up


def test_solar_geometry_night():
    geometry = solar_geometry(172, 0, 45, 0, 0)
    dec = radians(23.45)
    assert geometry.sin_alpha == pytest.approx(
        sin(dec) * sin(radians(45)) - cos(dec) * cos(radians(45))
    )
    assert geometry.extraterrestrial < 0
    assert not geometry.sun_up


def test_solar_time_offset():
    shifted = solar_geometry(100, 13, 40, -100, -105, ForcingConstants(solar_time_offset=1))
    assert shifted == solar_geometry(100, 12, 40, -100, -105)


def test_solar_constant():
    geometry = solar_geometry(100, 12, 40, 0, 0, ForcingConstants(solar_constant=1367))
    reference = solar_geometry(100, 12, 40, 0, 0)
    assert geometry.extraterrestrial == pytest.approx(
        reference.extraterrestrial * 1367 / 1353
    )


def test_solar_geometry_from_date():
    assert solar_geometry(datetime.date(1998, 6, 21), 9, 47, -120, -120) == (
        solar_geometry(172, 9, 47, -120, -120)
    )
