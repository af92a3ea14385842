"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for the global constants used by
the scale division engine.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (tolerances, tick caps, log-domain
   limits) from being scattered throughout the algorithm.
2. Immutability: Every value here is read-only process-wide configuration.
   Nothing in the package assigns to these names after import.

Exports:
    LOG_MIN (float): Smallest magnitude representable on a logarithmic scale.
    LOG_MAX (float): Largest magnitude representable on a logarithmic scale.
    STEP_EPS (float): Relative tolerance for step fitting and tick inclusion.
    BORDER_EPS (float): Relative tolerance for the minor tick boundary check.
    MAX_MAJOR_TICKS (int): Upper limit on the number of major ticks.
    RANGE_FUDGE (float): Factor applied to the range width before a step is chosen.
    LOGGER_NAME, LOG_FORMAT, LOG_DATE_FORMAT (str): Package logger settings.
"""
from typing import Final

# Log-domain limits
LOG_MIN: Final[float] = 1.0e-100
LOG_MAX: Final[float] = 1.0e100

# Tolerances
STEP_EPS: Final[float] = 1.0e-3
BORDER_EPS: Final[float] = 1.0e-10

# Ranges exactly divisible by a candidate step must not overshoot the step count
RANGE_FUDGE: Final[float] = 0.999999

MAX_MAJOR_TICKS: Final[int] = 10000

# Logging
LOGGER_NAME: Final[str] = "scaledivision"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"
