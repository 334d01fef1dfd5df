"""The error function and the complementary error function.

Both are evaluated piecewise with rational approximations:

* |x| < 0.84375: erf(x) = x + x*R(x^2), with R = P/Q.
* 0.84375 <= |x| < 1.25: erf(x) = sign(x)*(c + P1(s)/Q1(s)), s = |x| - 1.
* 1.25 <= |x| < 1/0.35 and 1/0.35 <= |x| < 28: erfc(x) is
  (1/x)*exp(-x*x - 0.5625 + R/S) with two different rational fits.
* Beyond that range the results saturate at their limits.
"""

from __future__ import annotations

import math

from .ieee import fabs, high_word, with_low

_TINY = 1e-300
_HALF = 5.00000000000000000000e-01
_ONE = 1.00000000000000000000e00
_TWO = 2.00000000000000000000e00
# c = (float)0.84506291151
_ERX = 8.45062911510467529297e-01  # 0x3FEB0AC1, 0x60000000

# Coefficients for the approximation to erf on [0, 0.84375].
_EFX = 1.28379167095512586316e-01  # 0x3FC06EBA, 0x8214DB69
_EFX8 = 1.02703333676410069053e00  # 0x3FF06EBA, 0x8214DB69
_PP0 = 1.28379167095512558561e-01
_PP1 = -3.25042107247001499370e-01
_PP2 = -2.84817495755985104766e-02
_PP3 = -5.77027029648944159157e-03
_PP4 = -2.37630166566501626084e-05
_QQ1 = 3.97917223959155352819e-01
_QQ2 = 6.50222499887672944485e-02
_QQ3 = 5.08130628187576562776e-03
_QQ4 = 1.32494738004321644526e-04
_QQ5 = -3.96022827877536812320e-06

# Coefficients for the approximation to erf on [0.84375, 1.25].
_PA0 = -2.36211856075265944077e-03
_PA1 = 4.14856118683748331666e-01
_PA2 = -3.72207876035701323847e-01
_PA3 = 3.18346619901161753674e-01
_PA4 = -1.10894694282396677476e-01
_PA5 = 3.54783043256182359371e-02
_PA6 = -2.16637559486879084300e-03
_QA1 = 1.06420880400844228286e-01
_QA2 = 5.40397917702171048937e-01
_QA3 = 7.18286544141962662868e-02
_QA4 = 1.26171219808761642112e-01
_QA5 = 1.36370839120290507362e-02
_QA6 = 1.19844998467991074170e-02

# Coefficients for the approximation to erfc on [1.25, 1/0.35].
_RA0 = -9.86494403484714822705e-03
_RA1 = -6.93858572707181764372e-01
_RA2 = -1.05586262253232909814e01
_RA3 = -6.23753324503260060396e01
_RA4 = -1.62396669462573470355e02
_RA5 = -1.84605092906711035994e02
_RA6 = -8.12874355063065934246e01
_RA7 = -9.81432934416914548592e00
_SA1 = 1.96512716674392571292e01
_SA2 = 1.37657754143519042600e02
_SA3 = 4.34565877475229228821e02
_SA4 = 6.45387271733267880336e02
_SA5 = 4.29008140027567833386e02
_SA6 = 1.08635005541779435134e02
_SA7 = 6.57024977031928170135e00
_SA8 = -6.04244152148580987438e-02

# Coefficients for the approximation to erfc on [1/0.35, 28].
_RB0 = -9.86494292470009928597e-03
_RB1 = -7.99283237680523006574e-01
_RB2 = -1.77579549177547519889e01
_RB3 = -1.60636384855821916062e02
_RB4 = -6.37566443368389627722e02
_RB5 = -1.02509513161107724954e03
_RB6 = -4.83519191608651397019e02
_SB1 = 3.03380607434824582924e01
_SB2 = 3.25792512996573918826e02
_SB3 = 1.53672958608443695994e03
_SB4 = 3.19985821950859553908e03
_SB5 = 2.55305040643316442583e03
_SB6 = 4.74528541206955367215e02
_SB7 = -2.24409524465858183362e01


def _small_ratio(x: float) -> float:
    """R(x^2) = P/Q for |x| < 0.84375."""
    z = x * x
    r = _PP0 + z * (_PP1 + z * (_PP2 + z * (_PP3 + z * _PP4)))
    s = _ONE + z * (_QQ1 + z * (_QQ2 + z * (_QQ3 + z * (_QQ4 + z * _QQ5))))
    return r / s


def _near_one_ratio(x: float) -> float:
    """P1(s)/Q1(s) with s = |x| - 1, for 0.84375 <= |x| < 1.25."""
    s = fabs(x) - _ONE
    p = _PA0 + s * (_PA1 + s * (_PA2 + s * (_PA3 + s * (_PA4 + s * (_PA5 + s * _PA6)))))
    q = _ONE + s * (_QA1 + s * (_QA2 + s * (_QA3 + s * (_QA4 + s * (_QA5 + s * _QA6)))))
    return p / q


def _tail_ratio_a(s: float) -> float:
    r = _RA0 + s * (_RA1 + s * (_RA2 + s * (_RA3 + s * (_RA4 + s * (
        _RA5 + s * (_RA6 + s * _RA7))))))
    q = _ONE + s * (_SA1 + s * (_SA2 + s * (_SA3 + s * (_SA4 + s * (
        _SA5 + s * (_SA6 + s * (_SA7 + s * _SA8)))))))
    return r / q


def _tail_ratio_b(s: float) -> float:
    r = _RB0 + s * (_RB1 + s * (_RB2 + s * (_RB3 + s * (_RB4 + s * (
        _RB5 + s * _RB6)))))
    q = _ONE + s * (_SB1 + s * (_SB2 + s * (_SB3 + s * (_SB4 + s * (
        _SB5 + s * (_SB6 + s * _SB7))))))
    return r / q


def _scaled_tail(ax: float, ratio: float) -> float:
    """exp(-ax*ax - 0.5625 + ratio), with -ax*ax split for accuracy."""
    z = with_low(ax, 0)
    return math.exp(-z * z - 0.5625) * math.exp((z - ax) * (z + ax) + ratio)


def erf(x: float) -> float:
    """Return the error function of ``x``.

    erf(0) is 0, erf(+-inf) is +-1 and erf(NaN) is NaN.
    """
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x7FF00000:  # erf(nan) = nan, erf(+-inf) = +-1
        sign_term = 2 if hx < 0 else 0
        return float(1 - sign_term) + _ONE / x

    if ix < 0x3FEB0000:  # |x| < 0.84375
        if ix < 0x3E300000:  # |x| < 2**-28
            if ix < 0x00800000:  # avoid underflow
                return 0.125 * (8.0 * x + _EFX8 * x)
            return x + _EFX * x
        return x + x * _small_ratio(x)

    if ix < 0x3FF40000:  # 0.84375 <= |x| < 1.25
        ratio = _near_one_ratio(x)
        return _ERX + ratio if hx >= 0 else -_ERX - ratio

    if ix >= 0x40180000:  # inf > |x| >= 6
        return _ONE - _TINY if hx >= 0 else _TINY - _ONE

    ax = fabs(x)
    s = _ONE / (ax * ax)
    if ix < 0x4006DB6E:  # |x| < 1/0.35
        ratio = _tail_ratio_a(s)
    else:
        ratio = _tail_ratio_b(s)
    r = _scaled_tail(ax, ratio)
    return _ONE - r / ax if hx >= 0 else r / ax - _ONE


def erfc(x: float) -> float:
    """Return the complementary error function 1 - erf(x).

    erfc(0) is 1, erfc(+inf) is 0, erfc(-inf) is 2 and erfc(NaN) is NaN.
    """
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x7FF00000:  # erfc(nan) = nan, erfc(+-inf) = 0, 2
        return float(2 if hx < 0 else 0) + _ONE / x

    if ix < 0x3FEB0000:  # |x| < 0.84375
        if ix < 0x3C700000:  # |x| < 2**-56
            return _ONE - x
        y = _small_ratio(x)
        if hx < 0x3FD00000:  # x < 1/4
            return _ONE - (x + x * y)
        r = x * y
        r += x - _HALF
        return _HALF - r

    if ix < 0x3FF40000:  # 0.84375 <= |x| < 1.25
        ratio = _near_one_ratio(x)
        if hx >= 0:
            return (_ONE - _ERX) - ratio
        return _ONE + (_ERX + ratio)

    if ix < 0x403C0000:  # |x| < 28
        ax = fabs(x)
        s = _ONE / (ax * ax)
        if ix < 0x4006DB6D:  # |x| < 1/0.35
            ratio = _tail_ratio_a(s)
        else:
            if hx < 0 and ix >= 0x40180000:  # x < -6
                return _TWO - _TINY
            ratio = _tail_ratio_b(s)
        r = _scaled_tail(ax, ratio)
        return r / ax if hx > 0 else _TWO - r / ax

    return _TINY * _TINY if hx > 0 else _TWO - _TINY