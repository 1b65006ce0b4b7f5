"""Piecewise cubic Hermite interpolation through a small set of knots.

Each segment between two consecutive knots is a cubic matching the values and
the first derivatives at both ends. On the segment starting at ``x[i]`` the
polynomial is written as

    yc1[i] + dx * (yc2[i] + dx * (yc3[i] + dx * yc4[i]))

with ``dx`` the distance from ``x[i]``, so ``yc1`` and ``yc2`` are the knot
values and derivatives and ``yc3``, ``yc4`` are computed by `hermite`.
"""
from collections.abc import Sequence
from typing import Union, overload

import numpy as np
import numpy.typing as npt

from .errors import PreconditionViolation

ArrayLike = Union[Sequence[float], npt.NDArray[np.double]]


def _as_knots(*arrays: ArrayLike) -> tuple[npt.NDArray[np.double], ...]:
    result = tuple(np.asarray(a, dtype=np.double) for a in arrays)
    n = len(result[0])
    if n < 2:
        raise PreconditionViolation(f"at least 2 knots are required, got {n}")
    if any(a.ndim != 1 or len(a) != n for a in result):
        raise PreconditionViolation("knot arrays must be one-dimensional and equal length")
    return result


def hermite(
    x: ArrayLike, yc1: ArrayLike, yc2: ArrayLike
) -> tuple[npt.NDArray[np.double], npt.NDArray[np.double]]:
    """Computes the higher order coefficients of the Hermite polynomials.

    Parameters
    ----------
    x
        knot times, strictly increasing.
    yc1
        values at the knots.
    yc2
        first derivatives at the knots.

    Returns
    -------
    tuple
        ``(yc3, yc4)``, the second and third order coefficients of the ``n - 1``
        segments.

    Raises
    ------
    PreconditionViolation
        if two consecutive knot times are not strictly increasing.

    Examples
    --------
    >>> yc3, yc4 = hermite([0, 1], [0, 1], [0, 0])
    >>> float(yc3[0]), float(yc4[0])
    (3.0, -2.0)
    """
    x, yc1, yc2 = _as_knots(x, yc1, yc2)
    dx = np.diff(x)
    bad = np.flatnonzero(dx <= 0)
    if bad.size:
        i = int(bad[0])
        raise PreconditionViolation(
            f"knot times must be strictly increasing: x[{i}] = {x[i]}, "
            f"x[{i + 1}] = {x[i + 1]}"
        )
    divdf1 = np.diff(yc1) / dx  # divided difference of the values
    divdf3 = yc2[:-1] + yc2[1:] - 2 * divdf1
    yc3 = (divdf1 - yc2[:-1] - divdf3) / dx
    yc4 = divdf3 / (dx * dx)
    return yc3, yc4


def _segment(xbar, x: npt.NDArray[np.double]):
    # index of the last knot not greater than xbar, limited to the defined
    # segments so that queries out of range use the outermost ones.
    return np.clip(np.searchsorted(x, xbar, side="right") - 1, 0, len(x) - 2)


@overload
def hermint(
    xbar: float,
    x: ArrayLike,
    yc1: ArrayLike,
    yc2: ArrayLike,
    yc3: ArrayLike,
    yc4: ArrayLike,
) -> float:
    ...


@overload
def hermint(
    xbar: npt.NDArray[np.double],
    x: ArrayLike,
    yc1: ArrayLike,
    yc2: ArrayLike,
    yc3: ArrayLike,
    yc4: ArrayLike,
) -> npt.NDArray[np.double]:
    ...


def hermint(xbar, x, yc1, yc2, yc3, yc4):  # pylint: disable=too-many-arguments
    """Evaluates the Hermite polynomials at ``xbar``.

    Values before the first or after the last knot are extrapolated with the
    nearest segment.

    Examples
    --------
    >>> hermint(0.5, [0, 1], [0, 1], [0, 0], [3], [-2])
    0.5
    >>> hermint(1.0, [0, 1], [0, 1], [0, 0], [3], [-2])
    1.0
    """
    x = np.asarray(x, dtype=np.double)
    yc1, yc2, yc3, yc4 = (np.asarray(a, dtype=np.double) for a in (yc1, yc2, yc3, yc4))
    klo = _segment(xbar, x)
    dx = np.asarray(xbar, dtype=np.double) - x[klo]
    result = yc1[klo] + dx * (yc2[klo] + dx * (yc3[klo] + dx * yc4[klo]))
    if np.ndim(result) == 0:
        return float(result)
    return result


class HermiteSpline:
    """Hermite interpolant of a knot set.

    The coefficients are computed once on construction.

    Examples
    --------
    >>> spline = HermiteSpline([0, 1, 2], [0, 1, 0])
    >>> spline(1.5)
    0.5
    >>> spline.derivative(1.0)
    0.0
    """

    def __init__(self, x: ArrayLike, yc1: ArrayLike, yc2: "ArrayLike | None" = None):
        if yc2 is None:
            yc2 = np.zeros(len(x), dtype=np.double)
        self.x, self.yc1, self.yc2 = _as_knots(x, yc1, yc2)
        self.yc3, self.yc4 = hermite(self.x, self.yc1, self.yc2)

    def __len__(self) -> int:
        return len(self.x)

    def __call__(self, xbar):
        return hermint(xbar, self.x, self.yc1, self.yc2, self.yc3, self.yc4)

    def derivative(self, xbar):
        """first derivative of the interpolant at ``xbar``."""
        klo = _segment(xbar, self.x)
        dx = np.asarray(xbar, dtype=np.double) - self.x[klo]
        result = self.yc2[klo] + dx * (2 * self.yc3[klo] + 3 * dx * self.yc4[klo])
        if np.ndim(result) == 0:
            return float(result)
        return result
