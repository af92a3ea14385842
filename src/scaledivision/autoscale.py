"""
Autoscaling
Collects data extents from several sources (e.g. the bounding boxes of all
curves on one axis) and rebuilds a scale division for their union.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from scaledivision.scale_div import ScaleDivision
from scaledivision.utils import sort_values

logger = logging.getLogger(__name__)


class Autoscaler:
    """
    Drives one ScaleDivision through begin / extend / end cycles.

    Typical use, once per layout or data change:

        scaler.begin()
        for curve in curves:
            scaler.extend(curve.x_min, curve.x_max)
        scaler.end()
    """

    def __init__(
        self,
        max_major: int = 8,
        max_minor: int = 5,
        log: bool = False,
        step: float = 0.0,
        ascend: bool = True,
        division: Optional[ScaleDivision] = None,
    ) -> None:
        self.max_major = max_major
        self.max_minor = max_minor
        self.log = log
        self.step = step
        self.ascend = ascend
        self.enabled: bool = True
        self.division: ScaleDivision = division if division is not None else ScaleDivision()

        self._min: Optional[float] = None
        self._max: Optional[float] = None

    @property
    def collected_range(self) -> Optional[tuple[float, float]]:
        """The union of all extents since `begin()`, or None if there were none."""
        if self._min is None or self._max is None:
            return None
        return self._min, self._max

    def begin(self) -> None:
        """Start a new collection cycle."""
        self._min = None
        self._max = None

    def extend(self, x1: float, x2: float) -> None:
        """Widen the collected range to include [x1, x2]. NaN extents are ignored."""
        if math.isnan(x1) or math.isnan(x2):
            logger.debug(f"Ignoring NaN extent [{x1}, {x2}].")
            return
        lo, hi = sort_values(float(x1), float(x2))
        self._min = lo if self._min is None else min(self._min, lo)
        self._max = hi if self._max is None else max(self._max, hi)

    def end(self) -> bool:
        """
        Rebuild the division for the collected range.

        Raises:
            ValueError: Propagated from `ScaleDivision.rebuild` for ranges a
                logarithmic scale cannot show.

        Returns:
            False if autoscaling is disabled or nothing was collected, in which
            case the division is left as it was. Otherwise the result of
            `ScaleDivision.rebuild`.
        """
        if not self.enabled:
            return False
        collected = self.collected_range
        if collected is None:
            logger.debug("No extents collected, keeping the previous scale division.")
            return False
        return self.division.rebuild(
            collected[0], collected[1],
            self.max_major, self.max_minor,
            log=self.log, step=self.step, ascend=self.ascend,
        )

    def autoscale(self, extents: Iterable[tuple[float, float]]) -> bool:
        """Run a full begin / extend / end cycle over `extents`."""
        self.begin()
        for x1, x2 in extents:
            self.extend(x1, x2)
        return self.end()

    def set_range(self, x1: float, x2: float) -> bool:
        """Switch autoscaling off and rebuild the division for a fixed range."""
        self.enabled = False
        return self.division.rebuild(
            x1, x2,
            self.max_major, self.max_minor,
            log=self.log, step=self.step, ascend=self.ascend,
        )
