from __future__ import annotations

from scaledivision.utils import range_limits, sign, sort_values, value_limits


def test_sign():
    assert sign(3.5) == 1
    assert sign(-0.1) == -1
    assert sign(0.0) == 0
    assert sign(-0.0) == 0


def test_value_limits_ignores_bound_order():
    assert value_limits(5.0, 0.0, 10.0) == 5.0
    assert value_limits(15.0, 10.0, 0.0) == 10.0
    assert value_limits(-1.0, 10.0, 0.0) == 0.0


def test_sort_values():
    assert sort_values(2.0, 1.0) == (1.0, 2.0)
    assert sort_values(1.0, 2.0) == (1.0, 2.0)
    assert sort_values(3, 3) == (3, 3)


def test_range_limits_inside():
    assert range_limits(5.0, 0.0, 10.0) == (True, 5.0)
    assert range_limits(5.0, 10.0, 0.0) == (True, 5.0)


def test_range_limits_outside_is_clamped_and_rejected():
    assert range_limits(11.0, 0.0, 10.0) == (False, 10.0)
    assert range_limits(-1.0, 0.0, 10.0) == (False, 0.0)


def test_range_limits_relative_tolerance():
    ok, val = range_limits(10.0 + 1e-10, 0.0, 10.0, eps_rel=1e-10)
    assert ok
    assert val == 10.0

    # a relative tolerance has no slack at a zero bound
    ok, val = range_limits(-1e-12, 0.0, 10.0, eps_rel=1e-10)
    assert not ok
    assert val == 0.0


def test_range_limits_absolute_tolerance():
    assert range_limits(-0.4, 0.0, 10.0, eps_abs=0.5) == (True, 0.0)
    assert range_limits(-0.6, 0.0, 10.0, eps_abs=0.5) == (False, 0.0)
