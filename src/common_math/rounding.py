"""Round numbers to decimal places, trailing zeros or significant figures.

Each of the three families of operation is offered with three rounding
modes:

                        NEAREST       CEILING       FLOOR
    decimal places      round         ceil          floor
    trailing zeros      round_zeros   ceil_zeros    floor_zeros
    significant figs    round_sf      ceil_sf       floor_sf

NEAREST rounds ties away from zero. CEILING always rounds toward positive
infinity and FLOOR toward negative infinity, regardless of sign.

Generic forms of each family take the mode as an argument:
`round_to_places`, `round_to_zeros` and `round_to_sf`.

Values can be `int`, `float`, `fractions.Fraction`, `decimal.Decimal` or
numpy scalars. The return has the same type as the value. Integers,
fractions and decimals are rounded exactly. A float is rounded as the
shortest decimal that represents it, such that `ceil(0.07, 2)` is 0.07
and `round(2.675, 2)` is 2.68. A float result beyond the float range is
returned as infinity. Non-finite values are returned unchanged.
"""

import logging
import math
import numbers
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext
from fractions import Fraction

import valimp

from common_math import config
from common_math.errors import InvalidParameterError
from common_math.modes import (
    RoundingMode,
    decimal_rounding,
    round_div,
    round_scaled,
)
from common_math.utils.maths_utils import log10_floor, magnitude

logger = logging.getLogger(__name__)

Number = numbers.Real | Decimal


def _check_param(name: str, value: int, minimum: int):
    if value < minimum:
        raise InvalidParameterError(name, value, f">= {minimum}")


def _is_finite(value: Number) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Rational):
        return True
    return math.isfinite(value)


def _float_to_places(x: float, places: int, mode: RoundingMode) -> float:
    if x == 0:
        return x
    if places + log10_floor(x) >= config.FLOAT_DIGITS:
        logger.debug(
            "%d decimal places exceeds float resolution of %r, value returned"
            " unchanged.",
            places,
            x,
        )
        return x
    with localcontext() as ctx:
        ctx.Emax, ctx.Emin = MAX_EMAX, MIN_EMIN
        # shortest repr is the decimal value that the float represents
        scaled = Decimal(repr(x)).scaleb(places)
        rtrn = float(Decimal(round_scaled(scaled, mode)).scaleb(-places))
    if math.isinf(rtrn):
        logger.debug("Rounded value of %r exceeds float range.", x)
    return rtrn


def _rational_to_places(
    value: numbers.Rational, places: int, mode: RoundingMode
) -> Fraction:
    scaled = Fraction(value) * Fraction(10) ** places
    rounded = round_div(scaled.numerator, scaled.denominator, mode)
    return rounded / Fraction(10) ** places


def _decimal_to_places(value: Decimal, places: int, mode: RoundingMode) -> Decimal:
    exp = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(exp, rounding=decimal_rounding(mode))


def _to_places(value: Number, places: int, mode: RoundingMode) -> Number:
    """Round `value` to a signed number of decimal places.

    Negative `places` round to the left of the decimal point, for example
    -2 rounds to the nearest hundred.
    """
    if not _is_finite(value):
        logger.debug("Non-finite value %r returned unchanged.", value)
        return value
    if isinstance(value, Decimal):
        return _decimal_to_places(value, places, mode)
    if isinstance(value, numbers.Integral):
        if places >= 0:
            return value
        factor = 10**-places
        return type(value)(round_div(int(value), factor, mode) * factor)
    if isinstance(value, numbers.Rational):
        return _rational_to_places(value, places, mode)
    return type(value)(_float_to_places(float(value), places, mode))


def _to_sf(value: Number, sig_figs: int, mode: RoundingMode) -> Number:
    # magnitude is evaluated once, before rounding. Rounding can carry the
    # value into the next power of ten (9.96 -> 10) without losing a figure.
    if value == 0 or not _is_finite(value):
        return value
    shift = sig_figs - 1 - magnitude(value)
    return _to_places(value, shift, mode)


# Generic forms


@valimp.parse
def round_to_places(
    value: Number,
    decimal_places: int,
    mode: RoundingMode | str = RoundingMode.NEAREST,
) -> Number:
    """Round a number to a given number of decimal places.

    Parameters
    ----------
    value
        Number to round.

    decimal_places
        Number of digits to retain after the decimal point. Must be
        non-negative. 0 rounds to an integer value.

    mode
        Rounding mode, as a `RoundingMode` or its name.

    Examples
    --------
    >>> round_to_places(123.456, 2, "ceiling")
    123.46
    >>> round_to_places(-123.456, 2, RoundingMode.FLOOR)
    -123.46
    """
    _check_param("decimal_places", decimal_places, 0)
    return _to_places(value, decimal_places, RoundingMode.parse(mode))


@valimp.parse
def round_to_zeros(
    value: Number,
    zeros: int,
    mode: RoundingMode | str = RoundingMode.NEAREST,
) -> Number:
    """Round a number to a multiple of a power of ten.

    Parameters
    ----------
    value
        Number to round.

    zeros
        Number of trailing zeros the integer part of the result should
        have, i.e. the result will be a multiple of 10**`zeros`. Must be
        non-negative.

    mode
        Rounding mode, as a `RoundingMode` or its name.

    Examples
    --------
    >>> round_to_zeros(1234, 2, "floor")
    1200
    >>> round_to_zeros(-1234.5, 1, RoundingMode.CEILING)
    -1230.0
    """
    _check_param("zeros", zeros, 0)
    return _to_places(value, -zeros, RoundingMode.parse(mode))


@valimp.parse
def round_to_sf(
    value: Number,
    sig_figs: int,
    mode: RoundingMode | str = RoundingMode.NEAREST,
) -> Number:
    """Round a number to a given number of significant figures.

    The order of magnitude of the return can be one greater than that of
    `value` where rounding carries into the next power of ten.

    Parameters
    ----------
    value
        Number to round.

    sig_figs
        Number of significant figures. Must be at least 1.

    mode
        Rounding mode, as a `RoundingMode` or its name.

    Examples
    --------
    >>> round_to_sf(0.0012345, 2, "ceiling")
    0.0013
    >>> round_to_sf(9.96, 2)
    10.0
    """
    _check_param("sig_figs", sig_figs, 1)
    return _to_sf(value, sig_figs, RoundingMode.parse(mode))


# Decimal places


@valimp.parse
def round(value: Number, decimal_places: int) -> Number:  # noqa: A001
    """Round a number to a given number of decimal places.

    Ties are rounded away from zero.

    Examples
    --------
    >>> round(123.456, 2)
    123.46
    >>> round(123.456, 0)
    123.0
    >>> round(-123.456, 1)
    -123.5
    >>> round(2.5, 0)
    3.0
    """
    _check_param("decimal_places", decimal_places, 0)
    return _to_places(value, decimal_places, RoundingMode.NEAREST)


@valimp.parse
def ceil(value: Number, decimal_places: int) -> Number:
    """Round a number up to a given number of decimal places.

    Examples
    --------
    >>> ceil(123.454, 2)
    123.46
    >>> ceil(123.456, 0)
    124.0
    >>> ceil(-123.456, 1)
    -123.4
    """
    _check_param("decimal_places", decimal_places, 0)
    return _to_places(value, decimal_places, RoundingMode.CEILING)


@valimp.parse
def floor(value: Number, decimal_places: int) -> Number:
    """Round a number down to a given number of decimal places.

    Examples
    --------
    >>> floor(123.456, 2)
    123.45
    >>> floor(-123.426, 1)
    -123.5
    """
    _check_param("decimal_places", decimal_places, 0)
    return _to_places(value, decimal_places, RoundingMode.FLOOR)


# Trailing zeros


@valimp.parse
def round_zeros(value: Number, zeros: int) -> Number:
    """Round a number to a given number of trailing zeros.

    Examples
    --------
    >>> round_zeros(123.456, 1)
    120.0
    >>> round_zeros(123, 2)
    100
    >>> round_zeros(12345, 1)
    12350
    """
    _check_param("zeros", zeros, 0)
    return _to_places(value, -zeros, RoundingMode.NEAREST)


@valimp.parse
def ceil_zeros(value: Number, zeros: int) -> Number:
    """Round a number up to a given number of trailing zeros.

    Examples
    --------
    >>> ceil_zeros(123.456, 1)
    130.0
    >>> ceil_zeros(123, 2)
    200
    >>> ceil_zeros(-12645, 3)
    -12000
    """
    _check_param("zeros", zeros, 0)
    return _to_places(value, -zeros, RoundingMode.CEILING)


@valimp.parse
def floor_zeros(value: Number, zeros: int) -> Number:
    """Round a number down to a given number of trailing zeros.

    Examples
    --------
    >>> floor_zeros(156, 2)
    100
    >>> floor_zeros(-12345, 3)
    -13000
    """
    _check_param("zeros", zeros, 0)
    return _to_places(value, -zeros, RoundingMode.FLOOR)


# Significant figures


@valimp.parse
def round_sf(value: Number, sig_figs: int) -> Number:
    """Round a number to a given number of significant figures.

    Examples
    --------
    >>> round_sf(123456, 4)
    123500
    >>> round_sf(123.456, 2)
    120.0
    >>> round_sf(0.0999, 1)
    0.1
    """
    _check_param("sig_figs", sig_figs, 1)
    return _to_sf(value, sig_figs, RoundingMode.NEAREST)


@valimp.parse
def ceil_sf(value: Number, sig_figs: int) -> Number:
    """Round a number up to a given number of significant figures.

    Examples
    --------
    >>> ceil_sf(123.456, 2)
    130.0
    >>> ceil_sf(-1.23, 2)
    -1.2
    """
    _check_param("sig_figs", sig_figs, 1)
    return _to_sf(value, sig_figs, RoundingMode.CEILING)


@valimp.parse
def floor_sf(value: Number, sig_figs: int) -> Number:
    """Round a number down to a given number of significant figures.

    Examples
    --------
    >>> floor_sf(123456, 2)
    120000
    >>> floor_sf(-1.23, 2)
    -1.3
    """
    _check_param("sig_figs", sig_figs, 1)
    return _to_sf(value, sig_figs, RoundingMode.FLOOR)
