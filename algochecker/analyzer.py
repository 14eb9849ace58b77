"""Classification of a sample set into a time-complexity class.

The heuristic compares tangents (scaled time/size ratios) of the two
largest-size samples. A flat ratio is the signature of linear growth; any
other shape is reported as polynomial. Logarithmic and quadratic detection
are not implemented, so those classes are never returned.
"""

from __future__ import annotations

from typing import Iterable, Union

from algochecker.logging import get_logger
from algochecker.samples import TANGENT_AMPLIFIER, ComputeTimePoint, SampleSet
from algochecker.types import TimeComplexity, Tolerance

logger = get_logger(__name__)


class ComplexityAnalyzer:
    """Classifies (size, time) samples under a tolerance band."""

    def __init__(self, amplifier: float = TANGENT_AMPLIFIER) -> None:
        if amplifier <= 0:
            raise ValueError("amplifier must be positive")
        self.amplifier = amplifier

    def classify(
        self,
        samples: Union[SampleSet, Iterable[ComputeTimePoint]],
        tolerance: Tolerance,
    ) -> TimeComplexity:
        """Return the complexity class the samples exhibit.

        Args:
            samples: Observed points, in any order.
            tolerance: Band within which the two largest-size tangents match.

        Returns:
            LINEAR when fewer than two samples exist or the tangent of the
            second-largest size lies within the band around the tangent of
            the largest size; POLYNOMIAL otherwise.
        """
        if not isinstance(samples, SampleSet):
            samples = SampleSet(samples)

        if len(samples) < 2:
            return TimeComplexity.LINEAR

        tangents = samples.tangents(self.amplifier)
        last, second_last = float(tangents[-1]), float(tangents[-2])

        if tolerance.contains(last, second_last):
            return TimeComplexity.LINEAR

        logger.debug(
            "Tangent %.6g outside %s band around %.6g",
            second_last,
            tolerance.name,
            last,
        )
        return TimeComplexity.POLYNOMIAL
