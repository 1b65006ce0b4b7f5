"""Incoming shortwave and longwave radiation for one time step of one grid cell.

Depending on the available data, the shortwave radiation is estimated from the
cloud cover, or the cloud cover is estimated from the measured shortwave
radiation. The longwave radiation is then estimated from the cloud cover, the
vapor pressure and the air temperature. Equations are based on Bras (1990),
pp. 21-47.

Reference
---------
Bras, R.L., 1990. Hydrology: an introduction to hydrologic science.
Addison-Wesley, Reading, Massachusetts.
"""
import datetime
import logging
from dataclasses import dataclass
from enum import IntEnum
from math import asin, exp, log10, sqrt
from typing import Optional, Union

from .constants import DEFAULT_CONSTANTS, ForcingConstants
from .errors import ConfigurationError
from .solar import SolarGeometry, solar_geometry

log = logging.getLogger("VICFORCING")


class RadiationMode(IntEnum):
    CLOUD_COVER = 1  # shortwave from cloud cover
    MEASURED_SHORTWAVE = 2  # cloud cover from shortwave
    MEASURED = 3  # shortwave and longwave both measured
    NIGHT = 4


@dataclass
class CellContext:
    """State of one grid cell carried from one time step to the next.

    Attributes
    ----------
    cloud_fraction
        last cloud cover fraction derived from measured shortwave radiation,
        used when no other estimate is available.
    calls
        number of time steps estimated with this context.
    clamped_shortwave
        number of estimated shortwave values set to zero because negative.
    exceeded_clear_sky
        number of measured shortwave values above the clear sky estimate.
    """

    cloud_fraction: float = 0.0
    calls: int = 0
    clamped_shortwave: int = 0
    exceeded_clear_sky: int = 0

    def report(self) -> None:
        """Logs a warning for every diagnostic counter that is not zero."""
        if self.exceeded_clear_sky > 0:
            log.warning(
                "measured shortwave exceeded calculated maximum %d out of %d times",
                self.exceeded_clear_sky,
                self.calls,
            )
        if self.clamped_shortwave > 0:
            log.warning(
                "estimated shortwave was set to zero %d out of %d times",
                self.clamped_shortwave,
                self.calls,
            )

    def reset_diagnostics(self) -> None:
        self.calls = 0
        self.clamped_shortwave = 0
        self.exceeded_clear_sky = 0


@dataclass(frozen=True)
class RadiationResult:  # pylint: disable=too-many-instance-attributes
    shortwave: float
    longwave: float
    cloud_fraction: float
    mode: RadiationMode
    geometry: SolarGeometry
    clear_sky: Optional[float] = None
    clamped_shortwave: bool = False
    exceeded_clear_sky: bool = False


def optical_air_mass(sin_alpha: float) -> float:
    """Relative optical path length through the atmosphere for a sun whose
    altitude has sine ``sin_alpha``.

    Examples
    --------
    >>> round(optical_air_mass(1), 3)
    0.982
    """
    sin_alpha = min(sin_alpha, 1.0)
    return 1 / (sin_alpha + 0.15 * (asin(sin_alpha) + 3.885) ** -1.253)


def clear_sky_irradiance(extraterrestrial: float, sin_alpha: float) -> float:
    """Shortwave irradiance reaching the surface under a cloudless sky, W m-2."""
    m = optical_air_mass(sin_alpha)
    return extraterrestrial * exp(-2 * (0.128 - 0.054 * log10(m)) * m)


def shortwave_from_cloud(
    clear_sky: float,
    cloud_fraction: float,
    constants: ForcingConstants = DEFAULT_CONSTANTS,
) -> float:
    """Shortwave radiation attenuated by cloud cover, not clamped.

    Examples
    --------
    >>> shortwave_from_cloud(800, 0)
    800.0
    """
    return (
        1 - 0.65 * cloud_fraction * cloud_fraction / constants.cloud_attenuation_scale
    ) * clear_sky


def cloud_from_shortwave(shortwave: float, clear_sky: float) -> float:
    """Cloud cover fraction explaining a shortwave radiation below the clear sky
    value.

    Examples
    --------
    >>> cloud_from_shortwave(800, 800)
    0.0
    """
    return sqrt((1 - shortwave / clear_sky) / 0.65)


def incoming_longwave(
    cloud_fraction: float,
    air_temperature: float,
    vapor_pressure: float,
    constants: ForcingConstants = DEFAULT_CONSTANTS,
) -> float:
    """Incoming longwave radiation, W m-2.

    The clear sky emissivity is a linear function of the vapor pressure and is
    enhanced by the square of the cloud cover fraction.

    Arguments
    ---------
    air_temperature
        air temperature, C.
    vapor_pressure
        vapor pressure of the air, kPa.

    Examples
    --------
    >>> round(incoming_longwave(0, 0, 0), 1)
    233.6
    """
    emissivity = (1 + 0.17 * cloud_fraction * cloud_fraction) * (
        0.740 + 0.0049 * vapor_pressure * 10
    )
    return (
        emissivity
        * constants.stefan_boltzmann
        * (air_temperature + constants.kelvin) ** 4
        / constants.lwave_cor
    )


def select_mode(
    sun_up: bool, have_shortwave: bool, have_longwave: bool, have_cloud_fraction: bool
) -> RadiationMode:
    """Chooses how the missing radiation terms are estimated.

    Raises
    ------
    ConfigurationError
        if the sun is up and neither the shortwave radiation nor the cloud cover
        is known.
    """
    if not sun_up:
        return RadiationMode.NIGHT
    if not have_shortwave:
        if have_cloud_fraction:
            return RadiationMode.CLOUD_COVER
        raise ConfigurationError(
            "To compute long and shortwave radiation, need cloud cover fraction, "
            "or measured shortwave"
            + (" (measured longwave alone is not enough)" if have_longwave else "")
        )
    if not have_longwave:
        return RadiationMode.MEASURED_SHORTWAVE
    return RadiationMode.MEASURED


def estimate_radiation(  # pylint: disable=too-many-arguments,too-many-branches
    context: CellContext,
    geometry: SolarGeometry,
    air_temperature: float,
    vapor_pressure: float,
    *,
    shortwave: Optional[float] = None,
    longwave: Optional[float] = None,
    cloud_fraction: Optional[float] = None,
    constants: ForcingConstants = DEFAULT_CONSTANTS,
) -> RadiationResult:
    """Computes the radiation terms that are not given.

    ``shortwave``, ``longwave`` and ``cloud_fraction`` are measured values, or
    ``None`` when they must be estimated. ``context`` holds the cloud cover
    fraction of the grid cell carried over from previous time steps; it is
    updated whenever the cloud cover is derived from measured shortwave.
    """
    mode = select_mode(
        geometry.sun_up,
        shortwave is not None,
        longwave is not None,
        cloud_fraction is not None,
    )
    context.calls += 1
    clear_sky = None
    clamped = exceeded = False
    if shortwave is not None and shortwave < 0:
        shortwave = 0.0

    if mode is RadiationMode.CLOUD_COVER:
        clear_sky = clear_sky_irradiance(geometry.extraterrestrial, geometry.sin_alpha)
        shortwave = shortwave_from_cloud(clear_sky, cloud_fraction, constants)
        if shortwave < 0:
            clamped = True
            context.clamped_shortwave += 1
            log.debug("estimated shortwave %.3f set to zero", shortwave)
            shortwave = 0.0
    elif mode is RadiationMode.MEASURED_SHORTWAVE:
        if constants.measured_shortwave_uses_i0:
            # the transmission equation appears to over correct measured data
            clear_sky = geometry.extraterrestrial
        else:
            clear_sky = clear_sky_irradiance(
                geometry.extraterrestrial, geometry.sin_alpha
            )
        if shortwave <= clear_sky:
            cloud_fraction = cloud_from_shortwave(shortwave, clear_sky)
            context.cloud_fraction = cloud_fraction
        else:
            exceeded = True
            context.exceeded_clear_sky += 1
            log.debug(
                "measured shortwave %.3f exceeds clear sky estimate %.3f",
                shortwave,
                clear_sky,
            )
            cloud_fraction = context.cloud_fraction
    elif mode is RadiationMode.NIGHT:
        if shortwave is None:
            shortwave = 0.0
        if cloud_fraction is None:
            cloud_fraction = context.cloud_fraction
    elif cloud_fraction is None:
        cloud_fraction = context.cloud_fraction

    if longwave is None:
        longwave = incoming_longwave(
            cloud_fraction, air_temperature, vapor_pressure, constants
        )
    return RadiationResult(
        shortwave=shortwave,
        longwave=longwave,
        cloud_fraction=cloud_fraction,
        mode=mode,
        geometry=geometry,
        clear_sky=clear_sky,
        clamped_shortwave=clamped,
        exceeded_clear_sky=exceeded,
    )


class RadiationEstimator:
    """Radiation estimates for a single grid cell.

    The estimator owns the `CellContext` of its cell, so cells processed in
    parallel never share state.

    Arguments
    ---------
    latitude
        latitude of the grid cell, degrees.
    cell_longitude
        longitude of the grid cell, degrees.
    timezone_longitude
        longitude defining the time zone of the time steps, degrees.
    """

    def __init__(
        self,
        latitude: float,
        cell_longitude: float,
        timezone_longitude: float,
        context: Optional[CellContext] = None,
        constants: ForcingConstants = DEFAULT_CONSTANTS,
    ):
        self.latitude = latitude
        self.cell_longitude = cell_longitude
        self.timezone_longitude = timezone_longitude
        self.context = CellContext() if context is None else context
        self.constants = constants

    def geometry(
        self, day_of_year: Union[float, datetime.date], hour: float
    ) -> SolarGeometry:
        return solar_geometry(
            day_of_year,
            hour,
            self.latitude,
            self.cell_longitude,
            self.timezone_longitude,
            self.constants,
        )

    def __call__(  # pylint: disable=too-many-arguments
        self,
        day_of_year: Union[float, datetime.date],
        hour: float,
        air_temperature: float,
        vapor_pressure: float,
        *,
        shortwave: Optional[float] = None,
        longwave: Optional[float] = None,
        cloud_fraction: Optional[float] = None,
    ) -> RadiationResult:
        return estimate_radiation(
            self.context,
            self.geometry(day_of_year, hour),
            air_temperature,
            vapor_pressure,
            shortwave=shortwave,
            longwave=longwave,
            cloud_fraction=cloud_fraction,
            constants=self.constants,
        )
