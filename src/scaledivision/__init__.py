"""
Scale division engine: "nice" major and minor tick marks for linear and
logarithmic axes. Pure Python/NumPy, no knowledge of any GUI toolkit.
"""
from scaledivision.autoscale import Autoscaler
from scaledivision.logging_config import get_package_logger, setup_logging
from scaledivision.rounding import ceil_125, floor_125
from scaledivision.scale_div import ScaleDivision
from scaledivision.sequences import (
    Monotonicity,
    array_max,
    array_min,
    check_mono,
    lin_space,
    log_space,
    twist_array,
)

__all__ = [
    "Autoscaler",
    "Monotonicity",
    "ScaleDivision",
    "array_max",
    "array_min",
    "ceil_125",
    "check_mono",
    "floor_125",
    "get_package_logger",
    "lin_space",
    "log_space",
    "setup_logging",
    "twist_array",
]

# silent unless the application calls setup_logging()
get_package_logger()
