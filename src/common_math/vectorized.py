"""Apply rounding operations element-wise to arrays and pandas objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
import pandas as pd

Container = np.ndarray | pd.Series | pd.DataFrame


def apply(func: Callable[[Any, int], Any], data: Container, n: int) -> Container:
    """Apply a rounding operation to each element of `data`.

    Parameters
    ----------
    func
        Rounding operation of `common_math.rounding`, for example
        `round_sf`.

    data
        Values to round. Dtype, shape, index and columns are preserved.
        Missing values are left as missing.

    n
        Parameter to pass to `func` (number of decimal places, zeros or
        significant figures). Validated before any element is rounded.

    Examples
    --------
    >>> from common_math.rounding import round_sf
    >>> apply(round_sf, np.array([123456, 987654]), 2)
    array([120000, 990000])
    """
    func(0, n)  # raises if `n` is invalid

    def f(value):
        return func(value, n)

    if isinstance(data, np.ndarray):
        return np.vectorize(f, otypes=[data.dtype])(data)
    if isinstance(data, pd.Series):
        return data.map(f, na_action="ignore").astype(data.dtype)
    if isinstance(data, pd.DataFrame):
        return data.map(f, na_action="ignore").astype(data.dtypes.to_dict())
    raise TypeError(
        "`data` must be a `np.ndarray`, `pd.Series` or `pd.DataFrame`,"
        f" although received {type(data)}."
    )
