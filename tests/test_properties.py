from __future__ import annotations

import math

import numpy as np
import pytest

from scaledivision.config import STEP_EPS
from scaledivision.rounding import ceil_125, floor_125
from scaledivision.scale_div import ScaleDivision
from scaledivision.sequences import Monotonicity, check_mono, lin_space

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
settings = hypothesis.settings
st = hypothesis.strategies
assume = hypothesis.assume

MAGNITUDES = st.floats(min_value=1e-300, max_value=1e300, allow_nan=False, allow_infinity=False)
BOUNDS = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
MAJOR_STEPS = st.integers(min_value=1, max_value=20)
MINOR_STEPS = st.integers(min_value=0, max_value=10)


def _is_nice(value: float) -> bool:
    exponent = math.floor(math.log10(value))
    return any(
        math.isclose(value, m * 10.0 ** e, rel_tol=1e-12)
        for m in (1.0, 2.0, 5.0, 10.0)
        for e in (exponent - 1, exponent, exponent + 1)
    )


@settings(deadline=None)
@given(x=MAGNITUDES)
def test_ceil_125_is_nice_and_not_below(x: float) -> None:
    result = ceil_125(x)
    assert result >= x
    assert result <= 2.5 * x
    assert _is_nice(result)


@settings(deadline=None)
@given(x=MAGNITUDES)
def test_floor_125_is_nice_and_not_above(x: float) -> None:
    result = floor_125(x)
    assert result <= x
    assert result >= x / 2.5
    assert _is_nice(result)


@settings(deadline=None)
@given(x=MAGNITUDES)
def test_rounding_mirrors_negative_values(x: float) -> None:
    assert ceil_125(-x) == -ceil_125(x)
    assert floor_125(-x) == -floor_125(x)


@settings(deadline=None)
@given(n=st.integers(min_value=2, max_value=200), a=BOUNDS, b=BOUNDS)
def test_lin_space_shape(n: int, a: float, b: float) -> None:
    assume(abs(b - a) > 1e-3)
    values = lin_space(n, a, b)
    assert len(values) == n
    assert values[0] == a
    assert values[-1] == b
    expected = Monotonicity.INCREASING if b > a else Monotonicity.DECREASING
    assert check_mono(values) is expected


@settings(deadline=None)
@given(a=BOUNDS, b=BOUNDS, max_major=MAJOR_STEPS, max_minor=MINOR_STEPS)
def test_linear_major_marks_are_ordered_and_bounded(a: float, b: float, max_major: int, max_minor: int) -> None:
    assume(abs(b - a) > 1e-3)
    division = ScaleDivision()
    assert division.rebuild(a, b, max_major, max_minor, False, 0.0, True)

    major = division.major_marks
    assert np.all(np.diff(major) >= 0.0)
    assert len(major) <= max_major + 1

    lower, upper = min(a, b), max(a, b)
    tol = STEP_EPS * division.major_step * 1.01 + 1e-9 * max(abs(lower), abs(upper))
    assert np.all(major >= lower - tol)
    assert np.all(major <= upper + tol)

    minor = division.minor_marks
    assert np.all(minor >= lower)
    assert np.all(minor <= upper)


@settings(deadline=None)
@given(a=BOUNDS, b=BOUNDS, max_major=MAJOR_STEPS, max_minor=MINOR_STEPS)
def test_descending_call_reverses_ascending_result(a: float, b: float, max_major: int, max_minor: int) -> None:
    assume(abs(b - a) > 1e-3)
    lo, hi = min(a, b), max(a, b)

    ascending = ScaleDivision()
    ascending.rebuild(lo, hi, max_major, max_minor, False, 0.0, True)
    descending = ScaleDivision()
    descending.rebuild(hi, lo, max_major, max_minor, False, 0.0, False)

    assert np.array_equal(descending.major_marks, ascending.major_marks[::-1])
    assert np.array_equal(descending.minor_marks, ascending.minor_marks[::-1])
    assert (descending.lower_bound, descending.upper_bound) == (hi, lo)


@settings(deadline=None)
@given(a=BOUNDS, b=BOUNDS, max_major=MAJOR_STEPS, max_minor=MINOR_STEPS, log=st.booleans())
def test_rebuild_is_idempotent(a: float, b: float, max_major: int, max_minor: int, log: bool) -> None:
    if log:
        a, b = abs(a) + 1e-3, abs(b) + 1e-3
    first = ScaleDivision()
    first.rebuild(a, b, max_major, max_minor, log)
    second = first.copy()
    second.rebuild(a, b, max_major, max_minor, log)
    assert first == second


@settings(deadline=None)
@given(
    a=st.floats(min_value=1e-50, max_value=1e50),
    b=st.floats(min_value=1e-50, max_value=1e50),
    max_major=MAJOR_STEPS,
    max_minor=MINOR_STEPS,
)
def test_log_marks_are_positive_and_ordered(a: float, b: float, max_major: int, max_minor: int) -> None:
    division = ScaleDivision()
    division.rebuild(a, b, max_major, max_minor, True)
    assert np.all(division.major_marks > 0.0)
    assert np.all(np.diff(division.major_marks) >= 0.0)
    assert np.all(division.minor_marks >= min(a, b))
    assert np.all(division.minor_marks <= max(a, b))
