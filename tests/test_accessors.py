"""Tests for the `common_math.accessors` module."""

from collections import abc

import pandas as pd
import pytest
from pandas.testing import assert_frame_equal, assert_series_equal

import common_math
from common_math import rounding
from common_math import vectorized
from common_math.errors import InvalidParameterError

OPERATIONS = [
    "round",
    "ceil",
    "floor",
    "round_zeros",
    "ceil_zeros",
    "floor_zeros",
    "round_sf",
    "ceil_sf",
    "floor_sf",
]


@pytest.fixture
def ser() -> abc.Iterator[pd.Series]:
    yield pd.Series([0.0012345, -9.96, 123.456, 98765.4321], name="values")


@pytest.fixture
def df() -> abc.Iterator[pd.DataFrame]:
    yield pd.DataFrame(
        {"a": [1234, -1250, 1299], "b": [3.14159, -0.0999, 9.96]},
        index=pd.Index(["x", "y", "z"]),
    )


def test_registered(ser, df):
    assert common_math.config.ACCESSOR_NAME == "rounding"
    assert isinstance(ser.rounding, common_math.accessors.SeriesRoundingAccessor)
    assert isinstance(df.rounding, common_math.accessors.DataFrameRoundingAccessor)


def test_series_accessor(ser):
    assert ser.rounding.round(2).tolist() == [0.0, -9.96, 123.46, 98765.43]
    assert ser.rounding.ceil_sf(2).tolist() == [0.0013, -9.9, 130.0, 99000.0]
    assert ser.rounding.floor_zeros(1).tolist() == [0.0, -10.0, 120.0, 98760.0]

    for name in OPERATIONS:
        func = getattr(rounding, name)
        for n in range(1, 4):
            rtrn = getattr(ser.rounding, name)(n)
            assert_series_equal(rtrn, vectorized.apply(func, ser, n))


def test_dataframe_accessor(df):
    rtrn = df.rounding.round_zeros(2)
    expected = pd.DataFrame(
        {"a": [1200, -1300, 1300], "b": [0.0, 0.0, 0.0]},
        index=pd.Index(["x", "y", "z"]),
    )
    assert_frame_equal(rtrn, expected)

    for name in OPERATIONS:
        func = getattr(rounding, name)
        for n in range(1, 4):
            rtrn = getattr(df.rounding, name)(n)
            assert_frame_equal(rtrn, vectorized.apply(func, df, n))


def test_accessor_invalid(ser, df):
    with pytest.raises(InvalidParameterError):
        ser.rounding.round(-1)
    with pytest.raises(InvalidParameterError):
        df.rounding.round_sf(0)
