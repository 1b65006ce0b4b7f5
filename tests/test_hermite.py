import numpy as np
import pytest

from vicforcing.core.errors import PreconditionViolation
from vicforcing.core.hermite import HermiteSpline, hermint, hermite

X = [6.5, 18.5, 30.5, 42.5, 53.5, 67.5]
Y = [5.0, 20.0, 4.0, 21.0, 6.0, 19.0]


def test_hermite_coefficients():
    yc3, yc4 = hermite([0, 2], [1, 5], [0, 0])
    # divided difference 2, defect -4
    assert yc3.tolist() == [3.0]
    assert yc4.tolist() == [-1.0]
    assert len(hermite(X, Y, np.zeros(6))[0]) == 5


def test_hermite_with_derivatives():
    spline = HermiteSpline([0, 1], [0, 1], [1, 1])
    # a straight line has no higher order terms
    assert spline.yc3.tolist() == [0.0]
    assert spline.yc4.tolist() == [0.0]
    assert spline(0.25) == pytest.approx(0.25)


@pytest.mark.parametrize("x", [[0, 1, 1], [0, 2, 1], [3, 2]])
def test_hermite_rejects_unordered_knots(x):
    with pytest.raises(PreconditionViolation):
        hermite(x, np.zeros(len(x)), np.zeros(len(x)))


def test_hermite_rejects_bad_shapes():
    with pytest.raises(PreconditionViolation):
        hermite([0], [1], [0])
    with pytest.raises(PreconditionViolation):
        hermite([0, 1, 2], [1, 2], [0, 0, 0])


def test_interpolation_exactness():
    spline = HermiteSpline(X, Y)
    for x, y in zip(X, Y):
        assert spline(x) == pytest.approx(y, abs=1e-9)
        assert spline.derivative(x) == pytest.approx(0, abs=1e-9)


def test_continuity():
    spline = HermiteSpline(X, Y)
    for x, y in zip(X[1:-1], Y[1:-1]):
        for eps in (1e-3, 1e-6, 1e-9):
            assert spline(x - eps) == pytest.approx(y, abs=10 * eps)
            assert spline(x + eps) == pytest.approx(y, abs=10 * eps)


def test_extremes_are_preserved():
    spline = HermiteSpline(X, Y)
    for lo, hi in zip(X[:-1], X[1:]):
        values = spline(np.linspace(lo, hi, 50))
        assert values.min() >= min(spline(lo), spline(hi)) - 1e-9
        assert values.max() <= max(spline(lo), spline(hi)) + 1e-9


def test_hermint_array_and_scalar():
    spline = HermiteSpline(X, Y)
    hours = np.array([10.0, 30.5, 50.0])
    values = hermint(hours, spline.x, spline.yc1, spline.yc2, spline.yc3, spline.yc4)
    assert isinstance(values, np.ndarray)
    assert values.tolist() == pytest.approx([spline(h) for h in hours])
    assert isinstance(spline(10.0), float)


def test_extrapolation_uses_outermost_segments():
    spline = HermiteSpline(X, Y)
    before = X[0] - 2
    after = X[-1] + 2
    dx = before - X[0]
    assert spline(before) == pytest.approx(
        Y[0] + dx * dx * (spline.yc3[0] + dx * spline.yc4[0])
    )
    dx = after - X[-2]
    assert spline(after) == pytest.approx(
        Y[-2] + dx * dx * (spline.yc3[-1] + dx * spline.yc4[-1])
    )
