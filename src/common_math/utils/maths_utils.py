"""Mathematics utility functions."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction


def pow10(n: int) -> float:
    """Float nearest to 10**`n`.

    Returns `inf` or 0.0 where 10**`n` lies outside the range of floats.
    """
    return float(f"1e{n}")


def log10_floor(x: float) -> int:
    """Floor of log10 of the absolute value of a finite, nonzero float.

    `math.log10` can return an integer for values lying immediately below
    a power of ten (for example 999.9999999999999). The estimate is
    corrected against the powers of ten either side of it.

    Examples
    --------
    >>> log10_floor(123.4)
    2
    >>> log10_floor(-0.0012)
    -3
    >>> log10_floor(999.9999999999999)
    2
    """
    x = abs(x)
    m = math.floor(math.log10(x))
    if pow10(m) > x:
        m -= 1
    elif pow10(m + 1) <= x:
        m += 1
    return m


def magnitude(value: numbers.Real | Decimal) -> int:
    """Order of magnitude of a finite, nonzero number.

    Integers, fractions and decimals are evaluated exactly, other values
    with `log10_floor`.

    Examples
    --------
    >>> magnitude(123456)
    5
    >>> magnitude(10**20 - 1)
    19
    >>> magnitude(Decimal("0.00120"))
    -3
    >>> magnitude(Fraction(999, 1000))
    -1
    >>> magnitude(9.96)
    0
    """
    if isinstance(value, Decimal):
        return value.adjusted()
    if isinstance(value, numbers.Integral):
        return len(str(abs(int(value)))) - 1
    if isinstance(value, numbers.Rational):
        value = abs(Fraction(value))
        m = len(str(value.numerator)) - len(str(value.denominator))
        if Fraction(10) ** m > value:
            m -= 1
        return m
    return log10_floor(float(value))
