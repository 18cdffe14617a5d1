"""Common Math.

Convenience functions for rounding numbers to a number of decimal places,
trailing zeros or significant figures, with ceiling and floor variants of
each.

The common math package comprises the following modules:

rounding
    Rounding operations. All are re-exported at the package level.

modes
    Rounding modes and the primitives that apply them.

vectorized
    Apply rounding operations element-wise to numpy arrays and pandas
    objects.

accessors
    pandas accessors offering each rounding operation as a method of
    `pd.Series` and `pd.DataFrame`, for example
    `series.rounding.round_sf(3)`.

errors
    Errors raised by the package.

config
    Package constants.

utils subpackage
    Various utility modules
"""

import logging

from . import accessors  # noqa: F401  registers pandas accessors
from .errors import InvalidParameterError
from .modes import RoundingMode
from .rounding import (
    ceil,
    ceil_sf,
    ceil_zeros,
    floor,
    floor_sf,
    floor_zeros,
    round,
    round_sf,
    round_to_places,
    round_to_sf,
    round_to_zeros,
    round_zeros,
)

__all__ = [
    "InvalidParameterError",
    "RoundingMode",
    "ceil",
    "ceil_sf",
    "ceil_zeros",
    "floor",
    "floor_sf",
    "floor_zeros",
    "round",
    "round_sf",
    "round_to_places",
    "round_to_sf",
    "round_to_zeros",
    "round_zeros",
]

__copyright__ = "Copyright (c) 2022 Andrew Twigg"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Resolve version
__version__ = None

from importlib.metadata import version  # noqa: E402

try:
    # get version from installed package
    __version__ = version("common_math")
except ImportError:
    pass

if __version__ is None:
    try:
        # if package not installed, get version as set when package built
        from ._version import version
    except Exception:
        # If package not installed and not built, leave __version__ as None
        pass
    else:
        __version__ = version

del version
