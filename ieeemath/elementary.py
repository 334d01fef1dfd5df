"""Elementary functions: asinh, atan, cbrt, expm1, log1p and tanh."""

from __future__ import annotations

import math

from .ieee import fabs, from_words, high_word, low_word, with_high

_ONE = 1.0
_HUGE = 1.0e300
_TINY = 1.0e-300
_LN2 = 6.93147180559945286227e-01  # 0x3FE62E42, 0xFEFA39EF

_ATANHI = (
    4.63647609000806093515e-01,  # atan(0.5)hi
    7.85398163397448278999e-01,  # atan(1.0)hi
    9.82793723247329054082e-01,  # atan(1.5)hi
    1.57079632679489655800e00,  # atan(inf)hi
)
_ATANLO = (
    2.26987774529616870924e-17,  # atan(0.5)lo
    3.06161699786838301793e-17,  # atan(1.0)lo
    1.39033110312309984516e-17,  # atan(1.5)lo
    6.12323399573676603587e-17,  # atan(inf)lo
)
_AT = (
    3.33333333333329318027e-01,
    -1.99999999998764832476e-01,
    1.42857142725034663711e-01,
    -1.11111104054623557880e-01,
    9.09088713343650656196e-02,
    -7.69187620504482999495e-02,
    6.66107313738753120669e-02,
    -5.83357013379057348645e-02,
    4.97687799461593236017e-02,
    -3.65315727442169155270e-02,
    1.62858201153657823623e-02,
)

_B1 = 715094163  # (682-0.03306235651)*2**20
_B2 = 696219795  # (664-0.03306235651)*2**20
_C = 5.42857142857142815906e-01  # 19/35
_D = -7.05306122448979611050e-01  # -864/1225
_E = 1.41428571428571436819e00  # 99/70
_F = 1.60714285714285720630e00  # 45/28
_G = 3.57142857142857150787e-01  # 5/14

_O_THRESHOLD = 7.09782712893383973096e02  # 0x40862E42, 0xFEFA39EF
_LN2_HI = 6.93147180369123816490e-01  # 0x3fe62e42, 0xfee00000
_LN2_LO = 1.90821492927058770002e-10  # 0x3dea39ef, 0x35793c76
_INVLN2 = 1.44269504088896338700e00  # 0x3ff71547, 0x652b82fe
_Q1 = -3.33333333333331316428e-02
_Q2 = 1.58730158725481460165e-03
_Q3 = -7.93650757867487942473e-05
_Q4 = 4.00821782732936239552e-06
_Q5 = -2.01099218183624371326e-07

_LP1 = 6.666666666666735130e-01
_LP2 = 3.999999999940941908e-01
_LP3 = 2.857142874366239149e-01
_LP4 = 2.222219843214978396e-01
_LP5 = 1.818357216161805012e-01
_LP6 = 1.531383769920937332e-01
_LP7 = 1.479819860511658591e-01

_LOG1P_NEG_LIMIT = 0xBFD2BEC3 - (1 << 32)  # high word of about -0.2929


def asinh(x: float) -> float:
    """Return the inverse hyperbolic sine of ``x``."""
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x7FF00000:  # inf or NaN
        return x + x
    if ix < 0x3E300000:  # |x| < 2**-28
        return x
    if ix > 0x41B00000:  # |x| > 2**28
        w = math.log(fabs(x)) + _LN2
    elif ix > 0x40000000:  # 2 < |x| <= 2**28
        t = fabs(x)
        w = math.log(2.0 * t + _ONE / (math.sqrt(x * x + _ONE) + t))
    else:
        t = x * x
        w = log1p(fabs(x) + t / (_ONE + math.sqrt(_ONE + t)))
    return w if hx > 0 else -w


def atan(x: float) -> float:
    """Return the arctangent of ``x`` in [-pi/2, pi/2]."""
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x44100000:  # |x| >= 2**66
        if ix > 0x7FF00000 or (ix == 0x7FF00000 and low_word(x) != 0):
            return x + x  # NaN
        if hx > 0:
            return _ATANHI[3] + _ATANLO[3]
        return -_ATANHI[3] - _ATANLO[3]
    if ix < 0x3FDC0000:  # |x| < 0.4375
        if ix < 0x3E200000:  # |x| < 2**-29
            return x
        ident = -1
    else:
        x = fabs(x)
        if ix < 0x3FF30000:  # |x| < 1.1875
            if ix < 0x3FE60000:  # 7/16 <= |x| < 11/16
                ident = 0
                x = (2.0 * x - _ONE) / (2.0 + x)
            else:
                ident = 1
                x = (x - _ONE) / (x + _ONE)
        elif ix < 0x40038000:  # |x| < 2.4375
            ident = 2
            x = (x - 1.5) / (_ONE + 1.5 * x)
        else:
            ident = 3
            x = -1.0 / x
    z = x * x
    w = z * z
    at = _AT
    s1 = z * (at[0] + w * (at[2] + w * (at[4] + w * (at[6] + w * (at[8] + w * at[10])))))
    s2 = w * (at[1] + w * (at[3] + w * (at[5] + w * (at[7] + w * at[9]))))
    if ident < 0:
        return x - x * (s1 + s2)
    z = _ATANHI[ident] - ((x * (s1 + s2) - _ATANLO[ident]) - x)
    return -z if hx < 0 else z


def cbrt(x: float) -> float:
    """Return the real cube root of ``x``."""
    word = high_word(x)
    sign = word & 0x80000000
    hx = word & 0x7FFFFFFF
    if hx >= 0x7FF00000:  # NaN or inf
        return x + x
    if (hx | low_word(x)) == 0:  # signed zero
        return x
    x = with_high(x, hx)  # |x|

    if hx < 0x00100000:  # subnormal
        t = from_words(0x43500000, 0) * x  # 2**54 * x
        t = from_words(high_word(t) // 3 + _B2, 0)
    else:
        t = from_words(hx // 3 + _B1, 0)

    r = t * t / x
    s = _C + r * t
    t *= _G + _F / (s + _E + _D / s)

    t = from_words(high_word(t) + 1, 0)  # chop to 20 bits, round up

    s = t * t
    r = x / s
    w = t + t
    r = (r - t) / (w + r)
    t = t + t * r

    return with_high(t, high_word(t) | sign)


def _add_exponent(y: float, k: int) -> float:
    return with_high(y, high_word(y) + (k << 20))


def expm1(x: float) -> float:
    """Return exp(x) - 1, accurate also for small ``x``."""
    hx = high_word(x) & 0xFFFFFFFF
    xsb = hx & 0x80000000
    hx &= 0x7FFFFFFF

    if hx >= 0x4043687A:  # |x| >= 56*ln2
        if hx >= 0x40862E42:  # |x| >= 709.78...
            if hx >= 0x7FF00000:
                if ((hx & 0xFFFFF) | low_word(x)) != 0:
                    return x + x  # NaN
                return x if xsb == 0 else -1.0
            if x > _O_THRESHOLD:
                return _HUGE * _HUGE  # overflow to inf
        if xsb != 0:
            return _TINY - _ONE

    c = 0.0
    if hx > 0x3FD62E42:  # |x| > 0.5 ln2
        if hx < 0x3FF0A2B2:  # |x| < 1.5 ln2
            if xsb == 0:
                hi, lo, k = x - _LN2_HI, _LN2_LO, 1
            else:
                hi, lo, k = x + _LN2_HI, -_LN2_LO, -1
        else:
            k = int(_INVLN2 * x + (0.5 if xsb == 0 else -0.5))
            t = float(k)
            hi = x - t * _LN2_HI
            lo = t * _LN2_LO
        x = hi - lo
        c = (hi - x) - lo
    elif hx < 0x3C900000:  # |x| < 2**-54
        return x
    else:
        k = 0

    hfx = 0.5 * x
    hxs = x * hfx
    r1 = _ONE + hxs * (_Q1 + hxs * (_Q2 + hxs * (_Q3 + hxs * (_Q4 + hxs * _Q5))))
    t = 3.0 - r1 * hfx
    e = hxs * ((r1 - t) / (6.0 - x * t))
    if k == 0:
        return x - (x * e - hxs)

    e = x * (e - c) - c
    e -= hxs
    if k == -1:
        return 0.5 * (x - e) - 0.5
    if k == 1:
        if x < -0.25:
            return -2.0 * (e - (x + 0.5))
        return _ONE + 2.0 * (x - e)
    if k <= -2 or k > 56:
        y = _ONE - (e - x)
        return _add_exponent(y, k) - _ONE
    if k < 20:
        t = from_words(0x3FF00000 - (0x200000 >> k), 0)  # 1 - 2**-k
        y = t - (e - x)
    else:
        t = from_words((0x3FF - k) << 20, 0)  # 2**-k
        y = x - (e + t)
        y += _ONE
    return _add_exponent(y, k)


def log1p(x: float) -> float:
    """Return log(1 + x), accurate also for small ``x``.

    log1p(-1) is -inf and arguments below -1 give NaN.
    """
    hx = high_word(x)
    ax = hx & 0x7FFFFFFF

    k = 1
    c = 0.0
    f = 0.0
    hu = 0
    if hx < 0x3FDA827A:  # x < 0.41422
        if ax >= 0x3FF00000:  # x <= -1.0
            if x == -1.0:
                return -math.inf
            return math.nan
        if ax < 0x3E200000:  # |x| < 2**-29
            if ax < 0x3C900000:  # |x| < 2**-54
                return x
            return x - x * x * 0.5
        if hx > 0 or hx <= _LOG1P_NEG_LIMIT:  # -0.2929 < x < 0.41422
            k = 0
            f = x
            hu = 1
    if hx >= 0x7FF00000:
        return x + x
    if k != 0:
        if hx < 0x43400000:
            u = 1.0 + x
            hu = high_word(u)
            k = (hu >> 20) - 1023
            c = 1.0 - (u - x) if k > 0 else x - (u - 1.0)
            c /= u
        else:
            u = x
            hu = high_word(u)
            k = (hu >> 20) - 1023
            c = 0.0
        hu &= 0x000FFFFF
        if hu < 0x6A09E:
            u = with_high(u, hu | 0x3FF00000)  # normalize u
        else:
            k += 1
            u = with_high(u, hu | 0x3FE00000)  # normalize u/2
            hu = (0x00100000 - hu) >> 2
        f = u - 1.0

    hfsq = 0.5 * f * f
    if hu == 0:  # |f| < 2**-20
        if f == 0.0:
            if k == 0:
                return 0.0
            c += k * _LN2_LO
            return k * _LN2_HI + c
        r = hfsq * (1.0 - 0.66666666666666666 * f)
        if k == 0:
            return f - r
        return k * _LN2_HI - ((r - (k * _LN2_LO + c)) - f)
    s = f / (2.0 + f)
    z = s * s
    r = z * (_LP1 + z * (_LP2 + z * (_LP3 + z * (_LP4 + z * (_LP5 + z * (_LP6 + z * _LP7))))))
    if k == 0:
        return f - (hfsq - s * (hfsq + r))
    return k * _LN2_HI - ((hfsq - (s * (hfsq + r) + (k * _LN2_LO + c))) - f)


def tanh(x: float) -> float:
    """Return the hyperbolic tangent of ``x``."""
    jx = high_word(x)
    ix = jx & 0x7FFFFFFF

    if ix >= 0x7FF00000:  # inf or NaN
        if jx >= 0:
            return _ONE / x + _ONE
        return _ONE / x - _ONE

    if ix < 0x40360000:  # |x| < 22
        if ix < 0x3C800000:  # |x| < 2**-55
            return x * (_ONE + x)
        if ix >= 0x3FF00000:  # |x| >= 1
            t = expm1(2.0 * fabs(x))
            z = _ONE - 2.0 / (t + 2.0)
        else:
            t = expm1(-2.0 * fabs(x))
            z = -t / (t + 2.0)
    else:
        z = _ONE - _TINY
    return z if jx >= 0 else -z