import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Union

from scipy import constants

from .errors import ConfigurationError


@dataclass(frozen=True)
class ForcingConstants:  # pylint: disable=too-many-instance-attributes
    """Named constants consumed by the disaggregation routines.

    Attributes
    ----------
    hours_per_day
        number of hours in a day.
    solar_time_offset
        hours subtracted from the time step before the solar geometry is
        computed, shortwave measurements being attributed to the previous hour.
    solar_constant
        extraterrestrial irradiance at mean earth-sun distance, W m-2.
    stefan_boltzmann
        Stefan-Boltzmann constant, W m-2 K-4.
    lwave_cor
        divisor applied to the estimated incoming longwave radiation.
    kelvin
        0 C in K.
    cloud_attenuation_scale
        divisor of the squared cloud fraction when shortwave is estimated from
        cloud cover.
    measured_shortwave_uses_i0
        when shortwave is measured, use the extraterrestrial irradiance as the
        clear sky reference instead of the transmission formula.
    """

    hours_per_day: int = 24
    solar_time_offset: float = 0.0
    solar_constant: float = 1353.0
    stefan_boltzmann: float = constants.sigma
    lwave_cor: float = 1.0
    kelvin: float = constants.zero_Celsius
    cloud_attenuation_scale: float = 100.0
    measured_shortwave_uses_i0: bool = True

    def replace(self, **changes: Any) -> "ForcingConstants":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_CONSTANTS = ForcingConstants()


def load_constants(source: Union[Path, str, dict]) -> ForcingConstants:
    """Builds the constants from a mapping or a JSON file, missing keys keep
    their defaults.

    Examples
    --------
    >>> load_constants({"solar_time_offset": 1}).solar_time_offset
    1
    """
    if isinstance(source, dict):
        values = source
    else:
        values = json.loads(Path(source).read_text())
    if not isinstance(values, dict):
        raise ConfigurationError("forcing constants must be a JSON object")
    known = {f.name for f in fields(ForcingConstants)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(f"unknown forcing constants: {', '.join(unknown)}")
    return ForcingConstants(**values)
