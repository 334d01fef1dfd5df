"""Kernel routines for the trigonometric functions.

``kernel_sin`` and ``kernel_tan`` evaluate sine and tangent on roughly
[-pi/4, pi/4] for an argument given as a head ``x`` plus a tail ``y``.
``kernel_rem_pio2`` reduces a large positive argument modulo pi/2 using a
table of the bits of 2/pi.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .ieee import high_word, low_word, scalbn, with_low

_INIT_JK = (2, 3, 4, 6)

_PIO2 = (
    1.57079625129699707031e00,  # 0x3FF921FB, 0x40000000
    7.54978941586159635335e-08,  # 0x3E74442D, 0x00000000
    5.39030252995776476554e-15,  # 0x3CF84698, 0x80000000
    3.28200341580791294123e-22,  # 0x3B78CC51, 0x60000000
    1.27065575308067607349e-29,  # 0x39F01B83, 0x80000000
    1.22933308981111328932e-36,  # 0x387A2520, 0x40000000
    2.73370053816464559624e-44,  # 0x36E38222, 0x80000000
    2.16741683877804819444e-51,  # 0x3569F31D, 0x00000000
)

_TWO24 = 1.67772160000000000000e07  # 0x41700000, 0x00000000
_TWON24 = 5.96046447753906250000e-08  # 0x3E700000, 0x00000000

_HALF = 5.00000000000000000000e-01
_S1 = -1.66666666666666324348e-01
_S2 = 8.33333333332248946124e-03
_S3 = -1.98412698298579493134e-04
_S4 = 2.75573137070700676789e-06
_S5 = -2.50507602534068634195e-08
_S6 = 1.58969099521155010221e-10

_T = (
    3.33333333333334091986e-01,
    1.33333333333201242699e-01,
    5.39682539762260521377e-02,
    2.18694882948595424599e-02,
    8.86323982359930005737e-03,
    3.59207910759131235356e-03,
    1.45620945432529025516e-03,
    5.88041240820264096874e-04,
    2.46463134818469906812e-04,
    7.81794442939557092300e-05,
    7.14072491382608190305e-05,
    -1.85586374855275456654e-05,
    2.59073051863633712884e-05,
)
_PIO4 = 7.85398163397448278999e-01  # 0x3FE921FB, 0x54442D18
_PIO4LO = 3.06161699786838301793e-17  # 0x3C81A626, 0x33145C07


def kernel_sin(x: float, y: float, iy: int) -> float:
    """Return sin(x + y) for |x| <= ~pi/4; ``iy == 0`` means ``y`` is zero."""
    ix = high_word(x) & 0x7FFFFFFF
    if ix < 0x3E400000 and int(x) == 0:  # |x| < 2**-27
        return x
    z = x * x
    v = z * x
    r = _S2 + z * (_S3 + z * (_S4 + z * (_S5 + z * _S6)))
    if iy == 0:
        return x + v * (_S1 + z * r)
    return x - ((z * (_HALF * y - v * r) - y) - v * _S1)


def _negative_reciprocal(w: float) -> float:
    if w == 0.0:
        return -math.copysign(math.inf, w)
    return -1.0 / w


def _accurate_negative_reciprocal(head: float, w: float, tail: float) -> float:
    """Compute -1/w carefully, where w = head + tail."""
    z = with_low(w, 0)
    v = tail - (z - head)
    t = a = _negative_reciprocal(w)
    t = with_low(t, 0)
    s = 1.0 + t * z
    return t + a * (s + t * v)


def kernel_tan(x: float, y: float, iy: int) -> float:
    """Return tan(x + y) when ``iy`` is 1 and -1/tan(x + y) when it is -1.

    ``x`` must be bounded by about pi/4 in magnitude.
    """
    if iy not in (1, -1):
        raise ValueError("kernel_tan: iy must be 1 or -1")
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix < 0x3E300000 and int(x) == 0:  # |x| < 2**-28
        if ((ix | low_word(x)) | (iy + 1)) == 0:
            return math.inf
        if iy == 1:
            return x
        return _accurate_negative_reciprocal(x, x + y, y)
    big = ix >= 0x3FE59428  # |x| >= 0.6744
    if big:
        if hx < 0:
            x = -x
            y = -y
        z = _PIO4 - x
        w = _PIO4LO - y
        x = z + w
        y = 0.0
    z = x * x
    w = z * z
    t = _T
    r = t[1] + w * (t[3] + w * (t[5] + w * (t[7] + w * (t[9] + w * t[11]))))
    v = z * (t[2] + w * (t[4] + w * (t[6] + w * (t[8] + w * (t[10] + w * t[12])))))
    s = z * x
    r = y + z * (s * (r + v) + y)
    r += t[0] * s
    w = x + r
    if big:
        v = float(iy)
        return float(1 - ((hx >> 30) & 2)) * (v - 2.0 * (x - (w * w / (w + v) - r)))
    if iy == 1:
        return w
    return _accurate_negative_reciprocal(x, w, r)


def _dot(xs: Sequence[float], f: Sequence[float], jx: int, i: int) -> float:
    fw = 0.0
    for j, xj in enumerate(xs):
        fw += xj * f[jx + i - j]
    return fw


def kernel_rem_pio2(
    x: Iterable[float], e0: int, prec: int, ipio2: Sequence[int]
) -> tuple[int, tuple[float, ...]]:
    """Reduce a positive argument modulo pi/2.

    ``x`` holds the argument as 24-bit integral chunks, the first scaled by
    ``2**e0``.  ``prec`` selects the precision (0: 24, 1: 53, 2: 64,
    3: 113 bits) and ``ipio2`` holds successive 24-bit chunks of 2/pi.
    Returns ``(n, y)`` where ``n`` is the last three bits of N with
    ``sum(y) = x - N*pi/2`` and ``y`` has one, two or three terms.
    """
    if prec not in range(len(_INIT_JK)):
        raise ValueError("kernel_rem_pio2: prec must be 0, 1, 2 or 3")
    xs = [float(v) for v in x]
    if not xs:
        raise ValueError("kernel_rem_pio2: x must hold at least one chunk")

    jk = _INIT_JK[prec]
    jp = jk
    jx = len(xs) - 1
    jv = max((e0 - 3) // 24, 0)
    q0 = e0 - 24 * (jv + 1)

    f = [0.0 if j < 0 else float(ipio2[j]) for j in range(jv - jx, jv + jk + 1)]
    q = [_dot(xs, f, jx, i) for i in range(jk + 1)]

    jz = jk
    while True:
        iq = [0] * (jz + 2)
        z = q[jz]
        for i, j in enumerate(range(jz, 0, -1)):
            fw = float(int(_TWON24 * z))
            iq[i] = int(z - _TWO24 * fw)
            z = q[j - 1] + fw

        z = scalbn(z, q0)
        z -= 8.0 * math.floor(z * 0.125)
        n = int(z)
        z -= float(n)
        ih = 0
        if q0 > 0:
            i = iq[jz - 1] >> (24 - q0)
            n += i
            iq[jz - 1] -= i << (24 - q0)
            ih = iq[jz - 1] >> (23 - q0)
        elif q0 == 0:
            ih = iq[jz - 1] >> 23
        elif z >= 0.5:
            ih = 2

        if ih > 0:
            n += 1
            carry = 0
            for i in range(jz):
                j = iq[i]
                if carry == 0:
                    if j != 0:
                        carry = 1
                        iq[i] = 0x1000000 - j
                else:
                    iq[i] = 0xFFFFFF - j
            if q0 == 1:
                iq[jz - 1] &= 0x7FFFFF
            elif q0 == 2:
                iq[jz - 1] &= 0x3FFFFF
            if ih == 2:
                z = 1.0 - z
                if carry != 0:
                    z -= scalbn(1.0, q0)

        if z == 0.0 and not any(iq[jk:jz]):
            k = 1
            while iq[jk - k] == 0:
                k += 1
            for i in range(jz + 1, jz + k + 1):
                f.append(float(ipio2[jv + i]))
                q.append(_dot(xs, f, jx, i))
            jz += k
            continue
        break

    if z == 0.0:
        jz -= 1
        q0 -= 24
        while iq[jz] == 0:
            jz -= 1
            q0 -= 24
    else:
        z = scalbn(z, -q0)
        if z >= _TWO24:
            fw = float(int(_TWON24 * z))
            iq[jz] = int(z - _TWO24 * fw)
            jz += 1
            q0 += 24
            iq[jz] = int(fw)
        else:
            iq[jz] = int(z)

    fw = scalbn(1.0, q0)
    qf = [0.0] * (jz + 1)
    for i in range(jz, -1, -1):
        qf[i] = fw * float(iq[i])
        fw *= _TWON24

    fq = [0.0] * (jz + 1)
    for i in range(jz, -1, -1):
        fw = 0.0
        for k in range(min(jp, jz - i) + 1):
            fw += _PIO2[k] * qf[i + k]
        fq[jz - i] = fw

    def signed(value: float) -> float:
        return value if ih == 0 else -value

    if prec == 0:
        fw = 0.0
        for value in reversed(fq):
            fw += value
        return n & 7, (signed(fw),)

    if prec in (1, 2):
        fw = 0.0
        for value in reversed(fq):
            fw += value
        head = signed(fw)
        fw = fq[0] - fw
        for value in fq[1:]:
            fw += value
        return n & 7, (head, signed(fw))

    for i in range(jz, 0, -1):
        fw = fq[i - 1] + fq[i]
        fq[i] += fq[i - 1] - fw
        fq[i - 1] = fw
    for i in range(jz, 1, -1):
        fw = fq[i - 1] + fq[i]
        fq[i] += fq[i - 1] - fw
        fq[i - 1] = fw
    fw = 0.0
    for i in range(jz, 1, -1):
        fw += fq[i]
    second = fq[1] if jz >= 1 else 0.0
    return n & 7, (signed(fq[0]), signed(second), signed(fw))