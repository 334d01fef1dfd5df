import math
from fractions import Fraction

import pytest

from ieeemath.ieee import ilogb, scalbn
from ieeemath.kernels import kernel_rem_pio2, kernel_sin, kernel_tan

_PI_BITS = 1800
_CHUNKS = 66


def _arctan_inv(n, bits):
    one = 1 << bits
    term = one // n
    total = term
    n2 = n * n
    k = 1
    sign = -1
    while term:
        term //= n2
        total += sign * (term // (2 * k + 1))
        sign = -sign
        k += 1
    return total


_PI_FIXED = 16 * _arctan_inv(5, _PI_BITS) - 4 * _arctan_inv(239, _PI_BITS)
_PI = Fraction(_PI_FIXED, 1 << _PI_BITS)


def _two_over_pi_chunks():
    value = (2 << (_PI_BITS + 24 * _CHUNKS)) // _PI_FIXED
    return [(value >> (24 * (_CHUNKS - 1 - i))) & 0xFFFFFF for i in range(_CHUNKS)]


_IPIO2 = _two_over_pi_chunks()


def _split(z):
    e0 = ilogb(z) - 23
    z = scalbn(z, -e0)
    chunks = []
    for _ in range(3):
        chunk = float(math.floor(z))
        chunks.append(chunk)
        z = (z - chunk) * 16777216.0
    while len(chunks) > 1 and chunks[-1] == 0.0:
        chunks.pop()
    return chunks, e0


def _reference(z):
    t = Fraction(z) * 2 / _PI
    big_n = math.floor(t + Fraction(1, 2))
    return big_n, Fraction(z) - big_n * _PI / 2


LARGE = [1.0e10, 1.0e22, 3.0e100, 1.0e300, 1.7976931348623157e308, 123456789.0 * 2.0**40]


@pytest.mark.parametrize("z", LARGE)
def test_rem_pio2_single_precision(z):
    chunks, e0 = _split(z)
    n, y = kernel_rem_pio2(chunks, e0, 0, _IPIO2)
    big_n, r = _reference(z)
    assert n == big_n % 8
    assert len(y) == 1
    assert math.isclose(y[0], float(r), rel_tol=1e-7)


@pytest.mark.parametrize("z", LARGE)
def test_rem_pio2_quad_precision(z):
    chunks, e0 = _split(z)
    n, y = kernel_rem_pio2(chunks, e0, 3, _IPIO2)
    big_n, r = _reference(z)
    assert n == big_n % 8
    assert len(y) == 3
    total = sum((Fraction(v) for v in y), Fraction(0))
    assert abs(total - r) <= abs(r) * Fraction(1, 2**110)


def test_rem_pio2_rejects_bad_precision():
    with pytest.raises(ValueError):
        kernel_rem_pio2([1.0], 30, 4, _IPIO2)


def test_rem_pio2_rejects_empty_input():
    with pytest.raises(ValueError):
        kernel_rem_pio2([], 30, 1, _IPIO2)


@pytest.mark.parametrize("x", [0.1, 0.3, -0.5, 0.7, 0.785, -0.78, 1e-5])
def test_kernel_sin_matches_math_sin(x):
    expected = math.sin(x)
    assert abs(kernel_sin(x, 0.0, 0) - expected) <= 2 * math.ulp(expected)


@pytest.mark.parametrize("x", [1e-9, -3e-10, 5e-300, 0.0])
def test_kernel_sin_tiny_returns_argument(x):
    assert kernel_sin(x, 0.0, 0) == x


def test_kernel_sin_is_odd():
    for x in (0.2, 0.4, 0.77):
        assert kernel_sin(-x, 0.0, 0) == -kernel_sin(x, 0.0, 0)


def test_kernel_sin_uses_tail():
    x, y = 0.5, 1e-17
    expected = math.sin(x) + math.cos(x) * y
    result = kernel_sin(x, y, 1)
    assert math.isclose(result, expected, rel_tol=4e-16)
    assert kernel_sin(x, 0.0, 1) == pytest.approx(kernel_sin(x, 0.0, 0), rel=1e-15)


@pytest.mark.parametrize("x", [0.1, 0.4, -0.6, 0.7, 0.78, -0.785])
def test_kernel_tan_matches_math_tan(x):
    expected = math.tan(x)
    assert math.isclose(kernel_tan(x, 0.0, 1), expected, rel_tol=4e-16)


@pytest.mark.parametrize("x", [0.1, 0.4, -0.6, 0.7, 0.78, 1e-10])
def test_kernel_tan_negative_reciprocal(x):
    expected = -1.0 / math.tan(x)
    assert math.isclose(kernel_tan(x, 0.0, -1), expected, rel_tol=4e-16)


def test_kernel_tan_tiny_returns_argument():
    assert kernel_tan(1e-10, 0.0, 1) == 1e-10
    assert kernel_tan(-2e-300, 0.0, 1) == -2e-300


def test_kernel_tan_zero_with_reciprocal_is_infinite():
    assert kernel_tan(0.0, 0.0, -1) == math.inf


def test_kernel_tan_is_odd():
    for x in (0.3, 0.7):
        assert kernel_tan(-x, 0.0, 1) == -kernel_tan(x, 0.0, 1)


def test_kernel_tan_rejects_bad_iy():
    with pytest.raises(ValueError):
        kernel_tan(0.5, 0.0, 0)


def test_kernels_after_reduction_give_sine():
    z = 1.0e22
    chunks, e0 = _split(z)
    n, (y0, y1) = kernel_rem_pio2(chunks, e0, 1, _IPIO2)
    # 1e22 reduces into quadrant n; sin and tan must agree in sign pattern.
    tangent = kernel_tan(y0, y1, 1 - ((n & 1) << 1))
    sine = kernel_sin(y0, y1, 1)
    assert abs(sine) <= 1.0
    if n & 1 == 0:
        assert math.copysign(1.0, tangent) == math.copysign(1.0, sine)
    else:
        assert math.copysign(1.0, tangent) == -math.copysign(1.0, sine)