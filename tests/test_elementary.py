import math

import pytest

from ieeemath.elementary import asinh, atan, cbrt, expm1, log1p, tanh


def _close(a: float, b: float, ulps: int = 2) -> bool:
    return abs(a - b) <= ulps * math.ulp(max(abs(a), abs(b), 5e-324))


SAMPLES = [1e-310, 1e-20, 1e-9, 0.1, 0.3, 0.45, 0.6, 0.9, 1.1, 1.5, 2.0, 2.5,
           3.0, 10.0, 21.0, 30.0, 100.0, 1e10, 1e30, 1e300]


@pytest.mark.parametrize("x", SAMPLES)
def test_asinh_matches_reference_and_is_odd(x):
    assert _close(asinh(x), math.asinh(x))
    assert asinh(-x) == -asinh(x)


def test_asinh_special_values():
    assert asinh(math.inf) == math.inf
    assert asinh(-math.inf) == -math.inf
    assert math.isnan(asinh(math.nan))
    assert math.copysign(1.0, asinh(-0.0)) == -1.0


@pytest.mark.parametrize("x", SAMPLES)
def test_atan_matches_reference_and_is_odd(x):
    assert _close(atan(x), math.atan(x))
    assert atan(-x) == -atan(x)


def test_atan_limits():
    assert atan(math.inf) == math.pi / 2
    assert atan(-math.inf) == -math.pi / 2
    assert atan(1e80) == math.pi / 2
    assert math.isnan(atan(math.nan))
    assert atan(0.0) == 0.0


def test_atan_of_one_is_quarter_pi():
    assert atan(1.0) == math.pi / 4


@pytest.mark.parametrize("x", SAMPLES + [5e-324, 2.0**-1060])
def test_cbrt_cubes_back(x):
    r = cbrt(x)
    assert math.isclose(r * r * r, x, rel_tol=1e-14)
    assert cbrt(-x) == -r


@pytest.mark.parametrize("n", [1.0, 2.0, 3.0, 5.0, 0.5, 0.25, 1024.0])
def test_cbrt_exact_cubes(n):
    assert cbrt(n * n * n) == n


def test_cbrt_special_values():
    assert cbrt(math.inf) == math.inf
    assert cbrt(-math.inf) == -math.inf
    assert math.isnan(cbrt(math.nan))
    assert math.copysign(1.0, cbrt(-0.0)) == -1.0


@pytest.mark.parametrize(
    "x", [1e-20, 1e-10, 0.1, 0.3, 0.5, 0.9, 1.0, 2.0, 5.0, 14.0, 20.0, 30.0,
          39.0, 45.0, 100.0, 700.0, 709.7]
)
def test_expm1_matches_reference(x):
    positive = expm1(x)
    expected_positive = math.expm1(x)
    assert abs(positive - expected_positive) <= 2 * math.ulp(expected_positive)
    negative = expm1(-x)
    expected_negative = math.expm1(-x)
    assert abs(negative - expected_negative) <= 2 * math.ulp(expected_negative)


def test_expm1_special_values():
    assert expm1(0.0) == 0.0
    assert expm1(math.inf) == math.inf
    assert expm1(-math.inf) == -1.0
    assert expm1(-50.0) == -1.0
    assert expm1(710.0) == math.inf
    assert math.isnan(expm1(math.nan))
    assert expm1(1e-300) == 1e-300


@pytest.mark.parametrize(
    "x", [1e-20, 1e-10, -0.2, -0.29, -0.3, -0.5, -0.9, 0.1, 0.4, 0.5, 1.0, 3.0,
          1e5, 1e17, 1e300]
)
def test_log1p_matches_reference(x):
    result = log1p(x)
    expected = math.log1p(x)
    assert abs(result - expected) <= 2 * math.ulp(expected)


@pytest.mark.parametrize("x", [1e-6, 0.25, 1.0, 7.5, 40.0])
def test_log1p_inverts_expm1(x):
    assert math.isclose(log1p(expm1(x)), x, rel_tol=1e-14)


def test_log1p_special_values():
    assert log1p(0.0) == 0.0
    assert log1p(-1.0) == -math.inf
    assert math.isnan(log1p(-2.0))
    assert math.isnan(log1p(-math.inf))
    assert log1p(math.inf) == math.inf
    assert math.isnan(log1p(math.nan))


@pytest.mark.parametrize("x", [1e-20, 1e-10, 0.1, 0.5, 0.99, 1.0, 2.0, 10.0, 21.9])
def test_tanh_matches_reference_and_is_odd(x):
    assert _close(tanh(x), math.tanh(x))
    assert tanh(-x) == -tanh(x)


def test_tanh_special_values():
    assert tanh(math.inf) == 1.0
    assert tanh(-math.inf) == -1.0
    assert tanh(30.0) == 1.0
    assert tanh(-30.0) == -1.0
    assert math.isnan(tanh(math.nan))
    assert tanh(0.0) == 0.0


@pytest.mark.parametrize("x", [0.05, 0.7, 3.0])
def test_tanh_bounded_by_one(x):
    assert 0.0 < tanh(x) < 1.0
    assert tanh(x) < x