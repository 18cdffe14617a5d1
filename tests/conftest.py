"""Common pytest fixtures and test utility functions."""

from __future__ import annotations

from collections import abc

import pytest


@pytest.fixture
def floats() -> abc.Iterator[list[float]]:
    """Positive floats, including values prone to representation error.

    Tests requiring negative values should negate these.
    """
    yield [
        0.0012345,
        0.0999,
        0.1,
        0.29,
        0.7,
        1.1,
        2.5,
        3.14159,
        9.96,
        123.456,
        98765.4321,
        1234567.891,
        6.02214076e23,
    ]


@pytest.fixture
def ints() -> abc.Iterator[list[int]]:
    """Positive integers, including values beyond float precision.

    Tests requiring negative values should negate these.
    """
    yield [
        1,
        5,
        15,
        99,
        1234,
        12345,
        987654,
        123456789,
        2**53 + 1,
        10**30 + 5,
    ]


@pytest.fixture
def adjacent_floats() -> abc.Iterator[list[float]]:
    """Positive floats one unit in the last place either side of round values.

    Tests requiring negative values should negate these.
    """
    yield [
        1 + 2**-52,
        1 - 2**-53,
        2.0000000000000004,
        99.99999999999999,
        0.30000000000000004,
        0.09999999999999999,
        1234.5000000000002,
    ]
