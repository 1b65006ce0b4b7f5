import datetime
from dataclasses import dataclass
from math import cos, pi, sin
from typing import Union

from .constants import DEFAULT_CONSTANTS, ForcingConstants
from .utils import date2doy


@dataclass(frozen=True)
class SolarGeometry:
    """Position of the sun for one time step of one grid cell.

    Attributes
    ----------
    declination
        solar declination, radians.
    hour_angle
        hour angle ``tau``, degrees.
    sin_alpha
        sine of the solar altitude.
    radius
        earth-sun distance relative to its mean.
    extraterrestrial
        irradiance at the top of the atmosphere on a horizontal plane, W m-2.
    """

    declination: float
    hour_angle: float
    sin_alpha: float
    radius: float
    extraterrestrial: float

    @property
    def sun_up(self) -> bool:
        return self.extraterrestrial > 0


def declination(day_of_year: float) -> float:
    """Solar declination in radians.

    Examples
    --------
    >>> round(declination(172), 6)
    0.40928
    """
    return 23.45 * pi / 180 * cos(2 * pi / 365 * (172 - day_of_year))


def hour_angle(hour: float, cell_longitude: float, timezone_longitude: float) -> float:
    """Hour angle ``tau`` in degrees.

    The hour is local standard time of the time zone whose meridian is
    ``timezone_longitude``. When the hour falls after noon and before midnight of
    the cell (both shifted by the longitude difference), or before that shifted
    midnight, ``tau`` counts from noon; otherwise it counts from the previous
    midnight plus 12 hours. The comparisons are strict, so an hour lying exactly
    on a boundary uses the second formula. Both formulas differ by 360 degrees,
    so the sun position does not jump at the boundary.

    Arguments
    ---------
    hour
        hour of the day.
    cell_longitude
        longitude of the grid cell (theta_s), degrees.
    timezone_longitude
        longitude defining the time zone (theta_l), degrees.

    Examples
    --------
    >>> hour_angle(13, 0, 0)
    15.0
    >>> hour_angle(12, 0, 0)
    360.0
    """
    i_var = 1.0 if timezone_longitude >= 0 else -1.0
    shift = (timezone_longitude - cell_longitude) * 24 / 360
    correction = i_var / 15 * (abs(cell_longitude) - abs(timezone_longitude))
    if 12 + shift < hour < 24 + shift or hour < shift:
        return (hour - 12 - correction) * 15
    return (hour + 12 - correction) * 15


def solar_geometry(  # pylint: disable=too-many-arguments
    day_of_year: Union[float, datetime.date],
    hour: float,
    latitude: float,
    cell_longitude: float,
    timezone_longitude: float,
    constants: ForcingConstants = DEFAULT_CONSTANTS,
) -> SolarGeometry:
    """Computes the sun position and the extraterrestrial irradiance.

    Equations are based on Bras (1990), pp. 21-47. The hour is first moved back
    by ``constants.solar_time_offset``, assuming the shortwave measurement of a
    time step was made during the previous hour.

    Arguments
    ---------
    day_of_year
        day in year of the time step, or its date.
    hour
        hour of the time step.
    latitude
        latitude of the grid cell (phi), degrees.
    """
    if isinstance(day_of_year, datetime.date):
        day_of_year = date2doy(day_of_year)
    hour = hour - constants.solar_time_offset
    dec = declination(day_of_year)
    tau = hour_angle(hour, cell_longitude, timezone_longitude)
    phi = latitude * pi / 180
    sin_alpha = sin(dec) * sin(phi) + cos(dec) * cos(phi) * cos(tau * pi / 180)
    radius = 1 + 0.017 * cos(2 * pi / 365 * (186 - day_of_year))
    return SolarGeometry(
        declination=dec,
        hour_angle=tau,
        sin_alpha=sin_alpha,
        radius=radius,
        extraterrestrial=constants.solar_constant * sin_alpha / radius / radius,
    )
