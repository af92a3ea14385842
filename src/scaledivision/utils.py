from __future__ import annotations

from typing import TypeVar

T = TypeVar("T", int, float)


def sign(x: float) -> int:
    """Return 1 if x is positive, -1 if x is negative and 0 otherwise."""
    return 1 if x > 0 else -1 if x < 0 else 0

def value_limits(val: T, bound1: T, bound2: T) -> T:
    """
    Limit a value to fit into an interval.

    The order of the two bounds does not matter.

    Args:
        val: Input value.
        bound1: First interval boundary.
        bound2: Second interval boundary.

    Returns:
        `val` clamped into [min(bound1, bound2), max(bound1, bound2)].
    """
    val_min = min(bound1, bound2)
    val_max = max(bound1, bound2)
    if val > val_max:
        return val_max
    if val < val_min:
        return val_min
    return val

def sort_values(x1: T, x2: T) -> tuple[T, T]:
    """Return the two values in ascending order. Equal values keep their order."""
    if x2 < x1:
        return x2, x1
    return x1, x2

def range_limits(
    val: float,
    v1: float,
    v2: float,
    eps_rel: float = 0.0,
    eps_abs: float = 0.0,
) -> tuple[bool, float]:
    """
    Clamp a value into an interval and report whether it was (nearly) inside.

    The allowed slack at each bound is max(|eps_rel * bound|, |eps_abs|).
    A value outside the interval but within that slack is still accepted.

    Args:
        val: Value to check.
        v1: First interval boundary.
        v2: Second interval boundary.
        eps_rel: Tolerance relative to the nearer bound.
        eps_abs: Absolute tolerance.

    Returns:
        A tuple (ok, clamped) where `clamped` always lies within the interval
        and `ok` is False if `val` was further outside than the slack allows.
    """
    vmin = min(v1, v2)
    vmax = max(v1, v2)
    delta_min = max(abs(eps_rel * vmin), abs(eps_abs))
    delta_max = max(abs(eps_rel * vmax), abs(eps_abs))

    if val < vmin:
        return val >= vmin - delta_min, vmin
    if val > vmax:
        return val <= vmax + delta_max, vmax
    return True, val
