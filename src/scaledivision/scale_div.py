"""
Scale Division Engine
=====================
Computes major and minor tick marks for a linear or logarithmic axis.

Why is this file needed?
------------------------
1. Step Selection: It picks a round major step from {1, 2, 5} x 10^n (or a
   whole number of decades) that fits a limited number of intervals.
2. Tick Placement: It generates the major marks inside the requested range
   and fills each major interval with minor marks.
3. Direction: It can hand the marks back in descending order without
   computing them twice.

Note: This module has no knowledge of rendering or pixel mapping. Callers
map the returned values into screen space themselves.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from scaledivision.config import BORDER_EPS, LOG_MAX, LOG_MIN, MAX_MAJOR_TICKS, RANGE_FUDGE, STEP_EPS
from scaledivision.rounding import ceil_125
from scaledivision.sequences import lin_space, log_space, twist_array
from scaledivision.utils import range_limits, sort_values

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _empty() -> npt.NDArray[np.float64]:
    return np.empty(0, dtype=np.float64)


@dataclass(frozen=True)
class _Division:
    """Result of one builder run, committed to a ScaleDivision at once."""
    lower: float
    upper: float
    major_step: float = 0.0
    major_marks: npt.NDArray[np.float64] = field(default_factory=_empty)
    minor_marks: npt.NDArray[np.float64] = field(default_factory=_empty)


def _pow10(exponent: float) -> float:
    with np.errstate(over="ignore"):
        return float(np.power(10.0, exponent))

def _step_for_range(lower: float, upper: float, max_major: int) -> float:
    """Nice step for at most `max_major` intervals. Halved first so the width cannot overflow."""
    half_width = upper * 0.5 - lower * 0.5
    raw_step = half_width * RANGE_FUDGE / max_major * 2.0
    if not math.isfinite(raw_step):
        return math.inf
    return ceil_125(raw_step)

def _major_count(k_first: float, k_last: float) -> int:
    """Number of step multiples from k_first to k_last inclusive."""
    count = k_last - k_first + 1
    if np.isnan(count):
        return 0
    if count > MAX_MAJOR_TICKS:
        logger.debug(f"Major tick count capped at {MAX_MAJOR_TICKS}.")
        return MAX_MAJOR_TICKS
    return int(count)

def _log_minor_factors(max_minor: int) -> tuple[int, ...]:
    """Multipliers for the minor marks inside one decade."""
    if max_minor >= 8:
        return (2, 3, 4, 5, 6, 7, 8, 9)
    if max_minor >= 4:
        return (2, 4, 6, 8)
    if max_minor >= 2:
        return (2, 5)
    return (5,)


def _build_lin_div(lower: float, upper: float, max_major: int, max_minor: int, step: float) -> _Division:
    """
    Build a linear scale division in ascending order.

    Args:
        lower: Lower boundary, must not exceed `upper`.
        upper: Upper boundary.
        max_major: Max. number of major step intervals.
        max_minor: Max. number of minor step intervals.
        step: Fixed major step width, 0.0 to choose one automatically.

    Returns:
        The new division.
    """
    max_major = max(1, max_major)
    max_minor = max(0, max_minor)
    step = abs(step)

    if lower == upper:
        return _Division(lower, upper)

    # major divisions
    if step == 0.0:
        major_step = _step_for_range(lower, upper, max_major)
    else:
        major_step = step

    # Zero (underflow) or overflowing steps give an empty division. Every
    # rebuild replaces the marks, so none are carried over from before.
    if major_step == 0.0 or not math.isfinite(major_step):
        return _Division(lower, upper)

    k_first = np.ceil((lower - STEP_EPS * major_step) / major_step)
    k_last = np.floor((upper + STEP_EPS * major_step) / major_step)
    first_tick = k_first * major_step + 0.0  # no -0.0
    last_tick = k_last * major_step
    if not (np.isfinite(first_tick) and np.isfinite(last_tick)):
        return _Division(lower, upper)

    n_major = _major_count(k_first, k_last)
    if n_major < 1:
        return _Division(lower, upper, major_step)

    major_marks = lin_space(n_major, float(first_tick), float(last_tick))

    # minor divisions
    if max_minor < 1:
        return _Division(lower, upper, major_step, major_marks)

    minor_step = ceil_125(major_step / max_minor)
    if minor_step == 0.0:
        return _Division(lower, upper, major_step, major_marks)

    n_minor = abs(int(np.floor(major_step / minor_step + 0.5))) - 1

    # Do the minor steps fit into the interval? If not, use the midpoint.
    if abs((n_minor + 1) * minor_step - major_step) > STEP_EPS * major_step:
        n_minor = 1
        minor_step = major_step * 0.5

    # one extra interval when there is room below the first major mark
    i0 = -1 if major_marks[0] > lower else 0

    buffer: list[float] = []
    for i in range(i0, len(major_marks)):
        val = float(major_marks[i]) if i >= 0 else float(major_marks[0]) - major_step
        for _ in range(n_minor):
            val += minor_step
            ok, mval = range_limits(val, lower, upper, BORDER_EPS)
            if ok:
                buffer.append(mval)

    return _Division(lower, upper, major_step, major_marks, np.array(buffer, dtype=np.float64))

def _build_log_div(lower: float, upper: float, max_major: int, max_minor: int, step: float) -> _Division:
    """
    Build a logarithmic scale division in ascending order.

    If the range spans less than one decade a linear division is built
    instead and its step is converted to decades.

    Args:
        lower: Lower boundary, positive and not above `upper`.
        upper: Upper boundary, positive.
        max_major: Max. number of major step intervals.
        max_minor: Max. number of minor step intervals.
        step: Fixed major step width in decades, 0.0 to choose one automatically.

    Returns:
        The new division. Its major step is measured in decades.
    """
    max_major = max(1, abs(max_major))
    max_minor = max(0, abs(max_minor))
    step = abs(step)

    _, upper = range_limits(upper, LOG_MIN, LOG_MAX)
    _, lower = range_limits(lower, LOG_MIN, LOG_MAX)

    if lower == upper:
        return _Division(lower, upper)

    width = math.log10(upper) - math.log10(lower)

    if width < 1.0:
        division = _build_lin_div(lower, upper, max_major, max_minor, 0.0)
        if division.major_step > 0.0:
            division = replace(division, major_step=math.log10(division.major_step))
        return division

    # major divisions, at least one decade
    if step == 0.0:
        major_step = ceil_125(width * RANGE_FUDGE / max_major)
    else:
        major_step = step
    major_step = max(major_step, 1.0)

    if not math.isfinite(major_step):
        return _Division(lower, upper)

    k_first = np.ceil((math.log10(lower) - STEP_EPS * major_step) / major_step)
    k_last = np.floor((math.log10(upper) + STEP_EPS * major_step) / major_step)
    l_first = k_first * major_step
    l_last = k_last * major_step

    n_major = _major_count(k_first, k_last)
    if n_major < 1:
        return _Division(lower, upper, major_step)

    first_tick = _pow10(l_first)
    last_tick = _pow10(l_last)
    major_marks = log_space(n_major, first_tick, last_tick)

    if max_minor < 1:
        return _Division(lower, upper, major_step, major_marks)

    # one extra interval when there is room below the first major mark
    i0 = -1 if lower < first_tick else 0
    buffer: list[float] = []

    if major_step < 1.1:
        # major step is one decade
        factors = _log_minor_factors(max_minor)
        for i in range(i0, len(major_marks)):
            val = float(major_marks[i]) if i >= 0 else float(major_marks[0]) / _pow10(major_step)
            for k in factors:
                ok, sval = range_limits(val * k, lower, upper, BORDER_EPS)
                if ok:
                    buffer.append(sval)
    else:
        # substep width in decades, at least one decade
        minor_step = ceil_125((major_step - STEP_EPS * (major_step / max_minor)) / max_minor)
        minor_step = max(1.0, minor_step)

        n_minor = int(np.floor(major_step / minor_step + 0.5)) - 1

        # no midpoint fallback on a multi-decade scale
        if abs((n_minor + 1) * minor_step - major_step) > STEP_EPS * major_step:
            n_minor = 0

        if n_minor < 1:
            return _Division(lower, upper, major_step, major_marks)

        factor = max(_pow10(minor_step), 10.0)
        if math.isinf(factor):
            return _Division(lower, upper, major_step, major_marks)
        for i in range(i0, len(major_marks)):
            val = float(major_marks[i]) if i >= 0 else first_tick / _pow10(major_step)
            for _ in range(n_minor):
                val *= factor
                ok, sval = range_limits(val, lower, upper, BORDER_EPS)
                if ok:
                    buffer.append(sval)

    return _Division(lower, upper, major_step, major_marks, np.array(buffer, dtype=np.float64))


class ScaleDivision:
    """
    A scale division: boundaries, a major step and the major and minor marks.

    Instances start out empty and are overwritten in place by `rebuild`.
    A single instance must not be rebuilt from several threads at once.
    """
    def __init__(self) -> None:
        self._lower_bound: float = 0.0
        self._upper_bound: float = 0.0
        self._major_step: float = 0.0
        self._log: bool = False
        self._major_marks: npt.NDArray[np.float64] = _empty()
        self._minor_marks: npt.NDArray[np.float64] = _empty()

    # --------------------------------------------------------------------------
    # Accessors
    # --------------------------------------------------------------------------
    @property
    def lower_bound(self) -> float:
        """First boundary. Equals the caller's x1 for a descending division."""
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        """Second boundary. Equals the caller's x2 for a descending division."""
        return self._upper_bound

    @property
    def major_step(self) -> float:
        """Major step width, in decades for a logarithmic division."""
        return self._major_step

    @property
    def log_scale(self) -> bool:
        return self._log

    @property
    def major_marks(self) -> npt.NDArray[np.float64]:
        return self._read_only(self._major_marks)

    @property
    def minor_marks(self) -> npt.NDArray[np.float64]:
        return self._read_only(self._minor_marks)

    @property
    def major_count(self) -> int:
        return len(self._major_marks)

    @property
    def minor_count(self) -> int:
        return len(self._minor_marks)

    def major_mark(self, index: int) -> float:
        return float(self._major_marks[index])

    def minor_mark(self, index: int) -> float:
        return float(self._minor_marks[index])

    @staticmethod
    def _read_only(array: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        view = array.view()
        view.flags.writeable = False
        return view

    # --------------------------------------------------------------------------
    # Building
    # --------------------------------------------------------------------------
    def rebuild(
        self,
        x1: float,
        x2: float,
        max_major: int,
        max_minor: int,
        log: bool = False,
        step: float = 0.0,
        ascend: bool = True,
    ) -> bool:
        """
        Build a scale with major and minor divisions.

        If `step` is 0.0 the major step is chosen automatically so that at
        most `max_major` intervals are needed. Linear steps are taken from
        {1, 2, 5} x 10^n. The minor step is always chosen automatically.

        For logarithmic scales there are three cases:

        - The major step is one decade: minor marks follow one of the
          schemes {2,...,9}, {2,4,6,8}, {2,5} or {5}, depending on `max_minor`.
        - The major step spans several decades: the minor step is
          {1, 2, 5} x 10^n decades, or there are no minor marks if it does
          not fit the major step.
        - The whole range is less than one decade: a linear division is
          built.

        Args:
            x1: First boundary value.
            x2: Second boundary value.
            max_major: Max. number of major step intervals.
            max_minor: Max. number of minor step intervals.
            log: Build a logarithmic division.
            step: Fixed major step width, in decades for logarithmic scales.
            ascend: If True, sort the marks from min(x1, x2) to max(x1, x2).
                If False, sort them in the direction from x1 to x2.

        Raises:
            ValueError: If a boundary is not finite, or if `log` is set and a
                boundary is not positive. The division is left unchanged.

        Returns:
            True. Degenerate ranges produce an empty division, not an error.
        """
        if not (math.isfinite(x1) and math.isfinite(x2)):
            raise ValueError(f"Scale boundaries must be finite, got [{x1}, {x2}].")
        if log and (x1 <= 0.0 or x2 <= 0.0):
            logger.warning(f"Rejected logarithmic scale with non-positive boundary [{x1}, {x2}].")
            raise ValueError(f"Logarithmic scale boundaries must be positive, got [{x1}, {x2}].")

        lower, upper = sort_values(float(x1), float(x2))
        if log:
            division = _build_log_div(lower, upper, max_major, max_minor, step)
        else:
            division = _build_lin_div(lower, upper, max_major, max_minor, step)

        major_marks = division.major_marks
        minor_marks = division.minor_marks
        lower, upper = division.lower, division.upper

        if not ascend and x2 < x1:
            lower, upper = float(x1), float(x2)
            twist_array(major_marks)
            twist_array(minor_marks)

        self._lower_bound = lower
        self._upper_bound = upper
        self._major_step = division.major_step
        self._log = log
        self._major_marks = major_marks
        self._minor_marks = minor_marks

        logger.debug(
            f"Rebuilt {'log' if log else 'linear'} division [{x1}, {x2}]: "
            f"step={self._major_step}, {len(major_marks)} major, {len(minor_marks)} minor marks."
        )
        return True

    def reset(self) -> None:
        """Clear the marks and set the boundaries, step and log flag to zero."""
        self._major_marks = _empty()
        self._minor_marks = _empty()
        self._lower_bound = 0.0
        self._upper_bound = 0.0
        self._major_step = 0.0
        self._log = False

    def copy(self) -> ScaleDivision:
        other = ScaleDivision()
        other._lower_bound = self._lower_bound
        other._upper_bound = self._upper_bound
        other._major_step = self._major_step
        other._log = self._log
        other._major_marks = self._major_marks.copy()
        other._minor_marks = self._minor_marks.copy()
        return other

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        # exact floating point comparison
        if not isinstance(other, ScaleDivision):
            return NotImplemented
        return (
            self._lower_bound == other._lower_bound
            and self._upper_bound == other._upper_bound
            and self._log == other._log
            and self._major_step == other._major_step
            and np.array_equal(self._major_marks, other._major_marks)
            and np.array_equal(self._minor_marks, other._minor_marks)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bounds=({self._lower_bound}, {self._upper_bound}), "
            f"log={self._log}, major_step={self._major_step}, "
            f"major={self._major_marks.tolist()}, minor={self._minor_marks.tolist()})"
        )
