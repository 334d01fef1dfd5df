"""Bit-level access to IEEE 754 doubles and the basic IEEE support functions.

A double is viewed as two 32-bit words: the high word holds the sign, the
exponent and the top 20 bits of the fraction, and the low word holds the
remaining 32 fraction bits.  ``high_word`` returns the high word as a signed
32-bit integer; ``low_word`` returns the low word as an unsigned one.
"""

from __future__ import annotations

import operator
import struct

_MASK32 = 0xFFFFFFFF
_SIGN64 = 0x8000000000000000
_MAG64 = 0x7FFFFFFFFFFFFFFF

_TWO54 = 1.80143985094819840000e16  # 0x43500000, 0x00000000
_TWOM54 = 5.55111512312578270212e-17  # 0x3C900000, 0x00000000
_HUGE = 1.0e300
_TINY = 1.0e-300

_ILOGB_ZERO = -0x7FFFFFFF  # 0x80000001 as a signed 32-bit integer
_ILOGB_INF_NAN = 0x7FFFFFFF


def _to_bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits & 0xFFFFFFFFFFFFFFFF))[0]


def high_word(x: float) -> int:
    """Return the high 32 bits of ``x`` as a signed integer."""
    hi = _to_bits(x) >> 32
    return hi - (1 << 32) if hi & 0x80000000 else hi


def low_word(x: float) -> int:
    """Return the low 32 bits of ``x`` as an unsigned integer."""
    return _to_bits(x) & _MASK32


def from_words(hi: int, lo: int) -> float:
    """Build a double from its high and low 32-bit words."""
    return _from_bits(((hi & _MASK32) << 32) | (lo & _MASK32))


def with_high(x: float, hi: int) -> float:
    """Return ``x`` with its high word replaced by ``hi``."""
    return from_words(hi, low_word(x))


def with_low(x: float, lo: int) -> float:
    """Return ``x`` with its low word replaced by ``lo``."""
    return from_words(high_word(x), lo)


def copysign(x: float, y: float) -> float:
    """Return a value with the magnitude of ``x`` and the sign bit of ``y``."""
    return with_high(x, (high_word(x) & 0x7FFFFFFF) | (high_word(y) & 0x80000000))


def fabs(x: float) -> float:
    """Return ``x`` with its sign bit cleared."""
    return with_high(x, high_word(x) & 0x7FFFFFFF)


def finite(x: float) -> bool:
    """Return True if ``x`` is neither infinite nor NaN."""
    return (high_word(x) & 0x7FFFFFFF) < 0x7FF00000


def isnan(x: float) -> bool:
    """Return True if ``x`` is a NaN."""
    ix = high_word(x) & 0x7FFFFFFF
    return ix > 0x7FF00000 or (ix == 0x7FF00000 and low_word(x) != 0)


def ilogb(x: float) -> int:
    """Return the unbiased binary exponent of ``x``.

    ``ilogb(0)`` is 0x80000001 read as a signed 32-bit integer and
    ``ilogb(inf)`` and ``ilogb(nan)`` are 0x7fffffff.
    """
    hx = high_word(x) & 0x7FFFFFFF
    if hx < 0x00100000:
        lx = low_word(x)
        if (hx | lx) == 0:
            return _ILOGB_ZERO
        if hx == 0:
            return -1043 - (32 - lx.bit_length())
        return -1022 - (32 - ((hx << 11) & _MASK32).bit_length())
    if hx < 0x7FF00000:
        return (hx >> 20) - 1023
    return _ILOGB_INF_NAN


def logb(x: float) -> float:
    """IEEE 754 logb: the exponent of ``x`` as a double.

    Subnormal numbers give -1022, zero gives -inf, inf and NaN give x*x.
    """
    ix = high_word(x) & 0x7FFFFFFF
    if (ix | low_word(x)) == 0:
        return float("-inf")
    if ix >= 0x7FF00000:
        return x * x
    ix >>= 20
    if ix == 0:
        return -1022.0
    return float(ix - 1023)


def frexp(x: float) -> tuple[float, int]:
    """Split ``x`` into ``(m, e)`` with ``x == m * 2**e`` and 0.5 <= |m| < 1.

    Zero, infinities and NaN come back unchanged with an exponent of 0.
    """
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x7FF00000 or (ix | low_word(x)) == 0:
        return x, 0
    exponent = 0
    if ix < 0x00100000:
        x *= _TWO54
        hx = high_word(x)
        ix = hx & 0x7FFFFFFF
        exponent = -54
    exponent += (ix >> 20) - 1022
    return with_high(x, (hx & 0x800FFFFF) | 0x3FE00000), exponent


def ldexp(value: float, exp: int) -> float:
    """Return ``value * 2**exp``.

    Raises OverflowError when a finite non-zero value overflows and
    ArithmeticError when it underflows to zero.
    """
    if not finite(value) or value == 0.0:
        return value
    result = scalbn(value, exp)
    if not finite(result):
        raise OverflowError("ldexp: result out of range")
    if result == 0.0:
        raise ArithmeticError("ldexp: result underflows to zero")
    return result


def scalbn(x: float, n: int) -> float:
    """Return ``x * 2**n`` by exponent manipulation."""
    n = operator.index(n)
    hx = high_word(x)
    lx = low_word(x)
    k = (hx & 0x7FF00000) >> 20
    if k == 0:
        if (lx | (hx & 0x7FFFFFFF)) == 0:
            return x
        x *= _TWO54
        hx = high_word(x)
        k = ((hx & 0x7FF00000) >> 20) - 54
        if n < -50000:
            return _TINY * x
    if k == 0x7FF:
        return x + x
    k += n
    if k > 0x7FE:
        return _HUGE * copysign(_HUGE, x)
    if k > 0:
        return with_high(x, (hx & 0x800FFFFF) | (k << 20))
    if k <= -54:
        if n > 50000:
            return _HUGE * copysign(_HUGE, x)
        return _TINY * copysign(_TINY, x)
    k += 54
    return with_high(x, (hx & 0x800FFFFF) | (k << 20)) * _TWOM54


def nextafter(x: float, y: float) -> float:
    """Return the next representable double after ``x`` in the direction of ``y``.

    When ``x == y`` the result is ``x``.
    """
    if isnan(x) or isnan(y):
        return x + y
    if x == y:
        return x
    if x == 0.0:
        return from_words(high_word(y) & 0x80000000, 1)
    bits = _to_bits(x)
    sign = bits & _SIGN64
    magnitude = bits & _MAG64
    if (x > y) == (x > 0.0):
        magnitude -= 1
    else:
        magnitude += 1
    if (magnitude >> 52) == 0x7FF:
        return x + x
    return _from_bits(sign | magnitude)


def significand(x: float) -> float:
    """Return ``x`` scaled by ``2**-ilogb(x)``, so that 1 <= |result| < 2."""
    return scalbn(x, -ilogb(x))