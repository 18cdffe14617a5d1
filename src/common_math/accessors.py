"""pandas accessors offering each rounding operation as a method.

Registered on import under `config.ACCESSOR_NAME`:

>>> import pandas as pd
>>> s = pd.Series([1234, 5678])
>>> s.rounding.round_zeros(2).tolist()
[1200, 5700]
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partialmethod

import pandas as pd

from common_math import config, rounding, vectorized


class _RoundingAccessor:
    """Base for accessors that round each element of a pandas object.

    Every method takes a single parameter, the number of decimal places,
    zeros or significant figures, and returns a new object of the same
    type as the accessed object.
    """

    def __init__(self, pandas_obj: pd.Series | pd.DataFrame):
        self._obj = pandas_obj

    def _apply(self, func: Callable, n: int) -> pd.Series | pd.DataFrame:
        return vectorized.apply(func, self._obj, n)

    round = partialmethod(_apply, rounding.round)
    ceil = partialmethod(_apply, rounding.ceil)
    floor = partialmethod(_apply, rounding.floor)

    round_zeros = partialmethod(_apply, rounding.round_zeros)
    ceil_zeros = partialmethod(_apply, rounding.ceil_zeros)
    floor_zeros = partialmethod(_apply, rounding.floor_zeros)

    round_sf = partialmethod(_apply, rounding.round_sf)
    ceil_sf = partialmethod(_apply, rounding.ceil_sf)
    floor_sf = partialmethod(_apply, rounding.floor_sf)


@pd.api.extensions.register_series_accessor(config.ACCESSOR_NAME)
class SeriesRoundingAccessor(_RoundingAccessor):
    """Round each value of a `pd.Series`."""


@pd.api.extensions.register_dataframe_accessor(config.ACCESSOR_NAME)
class DataFrameRoundingAccessor(_RoundingAccessor):
    """Round each value of a `pd.DataFrame`."""
