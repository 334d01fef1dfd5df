# ieeemath

A pure-Python library of IEEE 754 double-precision math functions. The
functions read and write the two 32-bit words of a double directly. Their
results come from fixed polynomial and rational approximations, so they do
not depend on the platform's C library.

## Installation

```
pip install ieeemath
```

To install the test dependencies as well:

```
pip install "ieeemath[test]"
```

## Modules

### `ieeemath.ieee`

This module gives bit access to doubles and the basic IEEE helper functions.

- `high_word(x)` returns the high 32 bits as a signed integer. These bits hold
  the sign, the exponent and the top 20 fraction bits.
- `low_word(x)` returns the low 32 bits as an unsigned integer.
- `from_words(hi, lo)`, `with_high(x, hi)` and `with_low(x, lo)` build doubles
  from words.
- `copysign(x, y)`, `fabs(x)`, `finite(x)` and `isnan(x)` work on the bits.
- `ilogb(x)` returns the unbiased exponent as an integer. Zero gives
  `-0x7fffffff`. Infinity and NaN give `0x7fffffff`.
- `logb(x)` returns the exponent as a float. Zero gives `-inf` and subnormal
  numbers give `-1022.0`.
- `frexp(x)` returns a tuple `(m, e)` with `x == m * 2**e` and
  `0.5 <= |m| < 1`. Zero, infinity and NaN come back unchanged with `e == 0`.
- `scalbn(x, n)` returns `x * 2**n`, computed by changing the exponent.
- `ldexp(value, exp)` does the same as `scalbn`, but it raises errors at the
  limits:
  - a finite non-zero value that overflows raises `OverflowError`;
  - one that underflows to zero raises `ArithmeticError`.
- `nextafter(x, y)` returns the next representable double from `x` towards
  `y`.
- `significand(x)` returns `x` scaled into `[1, 2)` in magnitude.

### `ieeemath.kernels`

This module holds the building blocks for trigonometric functions.

- `kernel_sin(x, y, iy)` evaluates sine of `x + y` for `|x|` up to about pi/4.
  Pass `iy == 0` when the tail `y` is zero.
- `kernel_tan(x, y, iy)` evaluates `tan(x + y)` when `iy` is 1 and
  `-1/tan(x + y)` when `iy` is -1. Any other value of `iy` raises
  `ValueError`.
- `kernel_rem_pio2(x, e0, prec, ipio2)` reduces a large positive argument
  modulo pi/2.
  - `x` holds the argument as 24-bit integral chunks. The first chunk is
    scaled by `2**e0`.
  - `ipio2` holds 24-bit chunks of 2/pi.
  - `prec` selects 24, 53, 64 or 113 bits with the values 0 to 3.
  - It returns `(n, y)`. Here `n` is the last three bits of the quotient and
    `y` is a tuple of one, two or three terms whose sum is the remainder.
  - A bad `prec` or an empty `x` raises `ValueError`.

### `ieeemath.elementary`

This module provides `asinh`, `atan`, `cbrt`, `expm1`, `log1p` and `tanh`.
`log1p(-1.0)` is `-inf` and arguments below -1 give NaN.

### `ieeemath.errfunc`

This module provides `erf` and `erfc`. `erf(+-inf)` is `+-1`. `erfc(+inf)` is
0 and `erfc(-inf)` is 2.

## Examples

```python
from ieeemath.ieee import frexp, nextafter, high_word, ilogb, significand
from ieeemath.elementary import atan, log1p, tanh
from ieeemath.errfunc import erf, erfc

frexp(8.0)              # (0.5, 4)
nextafter(1.0, 2.0)     # 1.0000000000000002
hex(high_word(1.0))     # '0x3ff00000'
ilogb(0.0)              # -2147483647
significand(12.0)       # 1.5
atan(float("inf"))      # 1.5707963267948966
log1p(0.0)              # 0.0
tanh(float("inf"))      # 1.0
erf(0.0)                # 0.0
erfc(float("-inf"))     # 2.0
```

## What the package does not do

- It has no rounding helpers of its own.
- It has no complete sine, cosine or tangent entry points. Only the kernels
  above are provided, and argument reduction is left to the caller.
- It has no selectable error-reporting conventions. Apart from `ldexp`, the
  functions follow plain IEEE behaviour and return NaN or infinities instead
  of raising.

## Running the tests

```
pytest
```