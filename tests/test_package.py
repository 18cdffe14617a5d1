"""Tests for the `common_math` package namespace."""

import logging

import common_math as m
from common_math import rounding


def test_exports():
    for name in m.__all__:
        assert hasattr(m, name)
    for name in [
        "round",
        "ceil",
        "floor",
        "round_zeros",
        "ceil_zeros",
        "floor_zeros",
        "round_sf",
        "ceil_sf",
        "floor_sf",
    ]:
        assert getattr(m, name) is getattr(rounding, name)


def test_examples():
    assert m.round(3.14159, 2) == 3.14
    assert m.ceil(3.141, 2) == 3.15
    assert m.floor(3.149, 2) == 3.14
    assert m.round_zeros(1234, 2) == 1200
    assert m.ceil_zeros(1234, 2) == 1300
    assert m.floor_zeros(1299, 2) == 1200
    assert m.round_sf(123456, 3) == 123000
    assert m.round_sf(0.0012345, 2) == 0.0012
    assert m.ceil_sf(-1.23, 2) == -1.2
    assert m.round_sf(9.96, 2) == 10.0
    assert m.round_sf(0.0999, 1) == 0.1


def test_logging_silent_by_default():
    logger = logging.getLogger("common_math")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="common_math"):
        m.round(float("inf"), 2)
        m.ceil(0.1, 30)
        m.ceil_zeros(1.5, 400)
    messages = caplog.messages
    assert "Non-finite value inf returned unchanged." in messages
    assert any("exceeds float resolution" in msg for msg in messages)
    assert "Rounded value of 1.5 exceeds float range." in messages
