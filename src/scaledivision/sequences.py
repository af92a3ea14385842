"""
Sequence Generation
===================
Evenly spaced value sequences in the linear and logarithmic domain, plus
the small array utilities the scale division engine relies on.

Note: This module should be pure Python/NumPy and holds no state.
"""
from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

ArrayLike = Union[Sequence[float], "npt.NDArray[np.float64]"]


class Monotonicity(IntEnum):
    """Result of `check_mono`."""
    DECREASING = -1
    NONE = 0
    INCREASING = 1


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"Unsupported number of points: {n}. 'n' must be at least 1.")


def lin_space(n: int, xmin: float, xmax: float) -> npt.NDArray[np.float64]:
    """
    Create an array of `n` equally spaced values over [xmin, xmax].

    Both endpoints are reproduced exactly.

    Args:
        n: Number of values.
        xmin: First value.
        xmax: Last value.

    Raises:
        ValueError: If `n` is smaller than 1.

    Returns:
        A float64 array of length `n`. For n == 1 it holds only `xmin`.
    """
    _check_size(n)
    if n == 1:
        return np.array([xmin], dtype=np.float64)

    step = (xmax - xmin) / (n - 1)
    if not np.isfinite(step):
        # span beyond the float range
        step = xmax / (n - 1) - xmin / (n - 1)
    with np.errstate(over="ignore"):
        values = xmin + np.arange(n, dtype=np.float64) * step
    values[0] = xmin
    values[-1] = xmax
    return values

def log_space(n: int, xmin: float, xmax: float) -> npt.NDArray[np.float64]:
    """
    Create an array of `n` values equally spaced on a logarithmic scale.

    Args:
        n: Number of values.
        xmin: First value, must be positive.
        xmax: Last value, must be positive.

    Raises:
        ValueError: If `n` is smaller than 1 or an endpoint is not positive.

    Returns:
        A float64 array of length `n` whose log10 values are equally spaced.
        Both endpoints are reproduced exactly.
    """
    _check_size(n)
    if xmin <= 0.0 or xmax <= 0.0:
        raise ValueError(f"Logarithmic spacing needs positive endpoints, got [{xmin}, {xmax}].")
    if n == 1:
        return np.array([xmin], dtype=np.float64)

    lxmin = np.log10(xmin)
    lstep = (np.log10(xmax) - lxmin) / (n - 1)
    values = 10.0 ** (lxmin + np.arange(n, dtype=np.float64) * lstep)
    values[0] = xmin
    values[-1] = xmax
    return values

def array_min(array: ArrayLike) -> float:
    """Return the smallest element. Raises ValueError on an empty array."""
    if len(array) == 0:
        raise ValueError("array_min() of an empty array.")
    return float(np.min(array))

def array_max(array: ArrayLike) -> float:
    """Return the largest element. Raises ValueError on an empty array."""
    if len(array) == 0:
        raise ValueError("array_max() of an empty array.")
    return float(np.max(array))

def check_mono(array: ArrayLike) -> Monotonicity:
    """
    Check if an array is strictly monotonic.

    Args:
        array: Values to check.

    Returns:
        INCREASING or DECREASING for a strictly monotonic array, NONE
        otherwise. Arrays with fewer than two elements are NONE.
    """
    if len(array) < 2:
        return Monotonicity.NONE

    diffs = np.diff(np.asarray(array, dtype=np.float64))
    if np.all(diffs > 0.0):
        return Monotonicity.INCREASING
    if np.all(diffs < 0.0):
        return Monotonicity.DECREASING
    return Monotonicity.NONE

def twist_array(array: Union[list[float], npt.NDArray[np.float64]]) -> None:
    """Reverse the order of the elements in place."""
    if isinstance(array, list):
        array.reverse()
    else:
        array[:] = array[::-1].copy()
