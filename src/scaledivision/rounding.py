"""
Nice Number Rounding
====================
Rounds magnitudes to the canonical sequence {1, 2, 5} x 10^n used for
human-friendly axis steps.

Both functions work on the magnitude and restore the sign afterwards, so
for negative inputs `ceil_125` moves away from zero and `floor_125` moves
towards it (ceil_125(-3) == -5, floor_125(-3) == -2).
"""
from __future__ import annotations

import math

from scaledivision.utils import sign

_MANTISSAS = (1.0, 2.0, 5.0)
_MAX_EXP10 = 308


def _decade_value(mantissa: float, exponent: int) -> float:
    """Return mantissa * 10^exponent rounded correctly for negative exponents."""
    if exponent >= 0:
        if exponent > _MAX_EXP10:
            return math.inf
        return mantissa * 10.0 ** exponent
    if exponent < -_MAX_EXP10:
        # subnormal range
        return mantissa / 10.0 ** _MAX_EXP10 / 10.0 ** (-exponent - _MAX_EXP10)
    return mantissa / 10.0 ** -exponent

def _candidates(magnitude: float) -> list[float]:
    """Nice values from the decade below to the decade above `magnitude`, ascending."""
    # log10 can be off by one near exact powers of ten, so look one decade either side
    exponent = math.floor(math.log10(magnitude))
    return [
        _decade_value(m, e)
        for e in range(exponent - 1, exponent + 2)
        for m in _MANTISSAS
    ] + [_decade_value(1.0, exponent + 2)]

def _check_finite(x: float) -> None:
    if not math.isfinite(x):
        raise ValueError(f"Cannot round non-finite value {x!r} to a nice number.")


def ceil_125(x: float) -> float:
    """
    Round up to the next value in the sequence {1, 2, 5} x 10^n.

    Args:
        x: Input value.

    Raises:
        ValueError: If `x` is NaN or infinite.

    Returns:
        The smallest value sign(x) * {1, 2, 5} x 10^n whose magnitude is
        greater than or equal to |x|. Zero maps to zero.
    """
    _check_finite(x)
    if x == 0.0:
        return 0.0

    magnitude = abs(x)
    result = next(c for c in _candidates(magnitude) if c >= magnitude)
    return sign(x) * result

def floor_125(x: float) -> float:
    """
    Round down to the next value in the sequence {1, 2, 5} x 10^n.

    Args:
        x: Input value.

    Raises:
        ValueError: If `x` is NaN or infinite.

    Returns:
        The largest value sign(x) * {1, 2, 5} x 10^n whose magnitude is
        less than or equal to |x|. Zero maps to zero.
    """
    _check_finite(x)
    if x == 0.0:
        return 0.0

    magnitude = abs(x)
    result = [c for c in _candidates(magnitude) if c <= magnitude][-1]
    return sign(x) * result
