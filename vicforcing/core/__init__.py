"""Sub-daily disaggregation of air temperature and radiation forcing."""
from .constants import DEFAULT_CONSTANTS, ForcingConstants, load_constants
from .errors import ConfigurationError, PreconditionViolation
from .hermite import HermiteSpline, hermint, hermite
from .radiation import (
    CellContext,
    RadiationEstimator,
    RadiationMode,
    RadiationResult,
    estimate_radiation,
)
from .solar import SolarGeometry, solar_geometry
from .temperature import disaggregate_temperature, hourly_temperature

__all__ = (
    "DEFAULT_CONSTANTS",
    "CellContext",
    "ConfigurationError",
    "ForcingConstants",
    "HermiteSpline",
    "PreconditionViolation",
    "RadiationEstimator",
    "RadiationMode",
    "RadiationResult",
    "SolarGeometry",
    "disaggregate_temperature",
    "estimate_radiation",
    "hermint",
    "hermite",
    "hourly_temperature",
    "load_constants",
    "solar_geometry",
)
