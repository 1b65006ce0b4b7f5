import logging
from collections.abc import Sequence
from typing import Optional

import numpy as np
import numpy.typing as npt

from .constants import DEFAULT_CONSTANTS, ForcingConstants
from .errors import PreconditionViolation
from .hermite import hermint, hermite

log = logging.getLogger("VICFORCING")


def temperature_knots(
    tmin_hour: Sequence[float],
    tmin: Sequence[float],
    tmax_hour: Sequence[float],
    tmax: Sequence[float],
    step: float = 1,
    hours_per_day: int = 24,
) -> tuple[npt.NDArray[np.double], npt.NDArray[np.double]]:
    """Times and values of the daily extremes of three consecutive days.

    Within a day the extreme occurring first comes first. Times are counted in
    hours from the start of the first day, shifted by half a time step so that
    a value is centered on its period.

    Examples
    --------
    >>> x, y = temperature_knots([6, 5, 7], [1, 2, 3], [15, 16, 14], [10, 11, 12])
    >>> x.tolist()
    [6.5, 15.5, 29.5, 40.5, 55.5, 62.5]
    >>> y.tolist()
    [1.0, 10.0, 2.0, 11.0, 3.0, 12.0]
    """
    for name, values in (
        ("tmin_hour", tmin_hour),
        ("tmin", tmin),
        ("tmax_hour", tmax_hour),
        ("tmax", tmax),
    ):
        if len(values) != 3:
            raise PreconditionViolation(
                f"{name} must hold yesterday, today and tomorrow, got {len(values)} values"
            )
    x = np.zeros(6, dtype=np.double)
    yc1 = np.zeros(6, dtype=np.double)
    hour = 0.5 * step
    for i in range(3):
        if tmin_hour[i] < tmax_hour[i]:
            x[2 * i : 2 * i + 2] = tmin_hour[i] + hour, tmax_hour[i] + hour
            yc1[2 * i : 2 * i + 2] = tmin[i], tmax[i]
        else:
            x[2 * i : 2 * i + 2] = tmax_hour[i] + hour, tmin_hour[i] + hour
            yc1[2 * i : 2 * i + 2] = tmax[i], tmin[i]
        hour += hours_per_day
    return x, yc1


def hourly_temperature(  # pylint: disable=too-many-arguments
    tmin_hour: Sequence[float],
    tmin: Sequence[float],
    tmax_hour: Sequence[float],
    tmax: Sequence[float],
    step: float = 1,
    periods: Optional[int] = None,
    constants: ForcingConstants = DEFAULT_CONSTANTS,
    check_bounds: bool = False,
) -> npt.NDArray[np.double]:
    """Computes the sub-daily air temperature of a day from the daily minimum and
    maximum of that day and the days before and after it.

    The six extremes are joined by cubic Hermite polynomials whose first
    derivative is zero at every knot, so the interpolated curve passes through
    the measured minima and maxima and has its local extremes there.

    Arguments
    ---------
    tmin_hour
        hour of the minimum temperature of yesterday, today and tomorrow.
    tmin
        minimum temperatures, C.
    tmax_hour
        hour of the maximum temperature.
    tmax
        maximum temperatures, C.
    step
        length of the sub-daily period, hours.
    periods
        number of sub-daily periods, ``hours_per_day // step`` by default.
    check_bounds
        log a warning for every period outside today's measured range.

    Returns
    -------
    numpy.ndarray
        temperature of every period of today.

    Examples
    --------
    >>> tair = hourly_temperature([6, 6, 6], [5, 5, 5], [18, 18, 18], [20, 20, 20])
    >>> len(tair), float(tair[6]), float(tair[18])
    (24, 5.0, 20.0)
    """
    hours_per_day = constants.hours_per_day
    if periods is None:
        periods = int(hours_per_day // step)
    x, yc1 = temperature_knots(tmin_hour, tmin, tmax_hour, tmax, step, hours_per_day)
    # we want to preserve maxima and minima, so the first derivative is zero at
    # every knot
    yc2 = np.zeros_like(x)
    yc3, yc4 = hermite(x, yc1, yc2)
    hours = 0.5 * step + hours_per_day + step * np.arange(periods, dtype=np.double)
    tair = hermint(hours, x, yc1, yc2, yc3, yc4)
    if check_bounds:
        for i in out_of_range_periods(tair, tmin[1], tmax[1]):
            log.warning(
                "estimated air temperature %.2f in period %d is outside the daily "
                "range [%.2f, %.2f]",
                tair[i],
                i,
                tmin[1],
                tmax[1],
            )
    return tair


def out_of_range_periods(
    tair: npt.ArrayLike, tmin: float, tmax: float
) -> npt.NDArray[np.intp]:
    """Indices of the periods whose temperature is below ``tmin`` or above
    ``tmax``.

    Examples
    --------
    >>> out_of_range_periods([4.9, 5, 12, 20, 20.1], 5, 20).tolist()
    [0, 4]
    """
    tair = np.asarray(tair, dtype=np.double)
    return np.flatnonzero((tair < tmin) | (tair > tmax))


def disaggregate_temperature(  # pylint: disable=too-many-arguments
    tmin_hour: Sequence[float],
    tmin: Sequence[float],
    tmax_hour: Sequence[float],
    tmax: Sequence[float],
    step: float = 1,
    periods: Optional[int] = None,
    constants: ForcingConstants = DEFAULT_CONSTANTS,
    check_bounds: bool = False,
) -> npt.NDArray[np.double]:
    """Sub-daily temperature of every day of a daily record but the first and the
    last, which only serve as neighbours.

    Returns
    -------
    numpy.ndarray
        array of shape ``(days - 2, periods)``.
    """
    days = len(tmin)
    if days < 3 or any(len(a) != days for a in (tmin_hour, tmax_hour, tmax)):
        raise PreconditionViolation(
            "daily records must have equal length and cover at least 3 days"
        )
    if periods is None:
        periods = int(constants.hours_per_day // step)
    result = np.zeros((days - 2, periods), dtype=np.double)
    for day in range(1, days - 1):
        window = slice(day - 1, day + 2)
        result[day - 1] = hourly_temperature(
            tmin_hour[window],
            tmin[window],
            tmax_hour[window],
            tmax[window],
            step,
            periods,
            constants,
            check_bounds,
        )
    return result
