"""Rounding modes and the primitives that apply them.

Every public rounding operation reduces to one of three primitives, each
parameterised by a `RoundingMode`:

round_scaled
    Round a number, already scaled to the target precision, to an integer.

round_div
    Integer division rounded according to the mode. Exact for `int` of
    any size.

decimal_rounding
    The `decimal` module rounding constant equivalent to the mode.
"""

from __future__ import annotations

import decimal
import enum
from collections.abc import Callable
from decimal import Decimal

from common_math.errors import InvalidParameterError


class RoundingMode(enum.Enum):
    """Direction in which to round.

    NEAREST
        Round to the nearest value. Ties are rounded away from zero.

    CEILING
        Round toward positive infinity.

    FLOOR
        Round toward negative infinity.
    """

    NEAREST = enum.auto()
    CEILING = enum.auto()
    FLOOR = enum.auto()

    @classmethod
    def parse(cls, value: RoundingMode | str) -> RoundingMode:
        """Return member corresponding with `value`.

        Parameters
        ----------
        value
            Member or its name. Names are not case sensitive.

        Examples
        --------
        >>> RoundingMode.parse("ceiling")
        <RoundingMode.CEILING: 2>
        >>> RoundingMode.parse(RoundingMode.FLOOR)
        <RoundingMode.FLOOR: 3>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        valid = tuple(name.lower() for name in cls.__members__)
        raise InvalidParameterError("mode", value, f"one of {valid}")


integer_rounding_bias: dict[RoundingMode, Callable[[int, int], int]] = {
    RoundingMode.NEAREST: lambda n, d: (d - (n < 0)) // 2,
    RoundingMode.CEILING: lambda n, d: d - 1,
    RoundingMode.FLOOR: lambda n, d: 0,
}

decimal_rounding_rules: dict[RoundingMode, str] = {
    RoundingMode.NEAREST: decimal.ROUND_HALF_UP,
    RoundingMode.CEILING: decimal.ROUND_CEILING,
    RoundingMode.FLOOR: decimal.ROUND_FLOOR,
}


def round_scaled(scaled: Decimal | float, mode: RoundingMode) -> int:
    """Round a finite number to an integer according to `mode`.

    `scaled` is typically a value that has been scaled by a power of ten to
    bring the target precision to the units position. A float is evaluated
    at its exact binary value.

    Parameters
    ----------
    scaled
        Finite number to round.

    mode
        Rounding mode.

    Examples
    --------
    >>> round_scaled(2.5, RoundingMode.NEAREST)
    3
    >>> round_scaled(-2.5, RoundingMode.NEAREST)
    -3
    >>> round_scaled(-1.5, RoundingMode.CEILING)
    -1
    >>> round_scaled(Decimal("0.07").scaleb(2), RoundingMode.CEILING)
    7
    """
    if not isinstance(scaled, Decimal):
        scaled = Decimal(scaled)
    return int(scaled.to_integral_value(rounding=decimal_rounding(mode)))


def round_div(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """Integer division with rounding according to `mode`.

    Unlike `//`, which always floors, the quotient is rounded according
    to `mode`. The numerator is biased by an integer before applying `//`,
    hence no float conversion takes place and the result is exact for
    integers of any size.

    Parameters
    ----------
    numerator
        Dividend.

    denominator
        Divisor. Must be positive.

    mode
        Rounding mode.

    Examples
    --------
    >>> round_div(15, 10, RoundingMode.NEAREST)
    2
    >>> round_div(-15, 10, RoundingMode.NEAREST)
    -2
    >>> round_div(-19, 10, RoundingMode.CEILING)
    -1
    >>> round_div(-11, 10, RoundingMode.FLOOR)
    -2
    """
    assert denominator > 0, "`denominator` must be positive"
    bias = integer_rounding_bias[mode](numerator, denominator)
    return (numerator + bias) // denominator


def decimal_rounding(mode: RoundingMode) -> str:
    """Return `decimal` module rounding constant equivalent to `mode`.

    Examples
    --------
    >>> decimal_rounding(RoundingMode.NEAREST)
    'ROUND_HALF_UP'
    """
    return decimal_rounding_rules[mode]
