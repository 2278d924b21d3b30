from datetime import timedelta

import pytest

from reqkit.timeout import ConnectTimeout, LowSpeed, Timeout


def test_integer_timeout():
    assert Timeout(0).milliseconds() == 0
    assert Timeout(10000).milliseconds() == 10000


def test_timedelta_timeout_matches_integer():
    assert Timeout(timedelta(milliseconds=10000)) == Timeout(10000)
    assert Timeout(timedelta(milliseconds=1)).milliseconds() == 1


def test_largest_value_is_accepted():
    assert Timeout(2**63 - 1).milliseconds() == 2**63 - 1


def test_overflow_raises():
    with pytest.raises(OverflowError, match="overflow"):
        Timeout(2**63).milliseconds()


def test_underflow_raises():
    with pytest.raises(ArithmeticError, match="underflow"):
        Timeout(-(2**63) - 1).milliseconds()


def test_connect_timeout_behaves_like_timeout():
    timeout = ConnectTimeout(timedelta(milliseconds=1))
    assert isinstance(timeout, Timeout)
    assert timeout.milliseconds() == 1
    assert timeout != Timeout(1)


def test_low_speed_fields():
    low_speed = LowSpeed(1000, 1)
    assert low_speed.limit == 1000
    assert low_speed.time == 1
    assert low_speed == LowSpeed(limit=1000, time=1)