"""Sample size planners deciding which input size to try next.

A planner is a two-state machine: it either has a next size or it is
exhausted. `SizePlanner` adapts its growth to the complexity hypothesis
formed from the samples seen so far; `FixedSchedulePlanner` walks a fixed
list of sizes. Both stop as soon as a trial hits the configured time limit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from algochecker.analyzer import ComplexityAnalyzer
from algochecker.config import CHECKER_CONFIG, CheckerConfig
from algochecker.logging import get_logger
from algochecker.samples import ComputeTimePoint, SampleSet
from algochecker.types import TimeComplexity

logger = get_logger(__name__)


class BasePlanner(ABC):
    """Shared sample ownership and the time-limit circuit breaker."""

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        samples: Iterable[ComputeTimePoint] = (),
    ) -> None:
        self.config = config or CHECKER_CONFIG
        self.samples = SampleSet()
        for point in samples:
            self.record(point)

    def record(self, point: ComputeTimePoint) -> None:
        """Append one observed trial."""
        self.samples.add(point)

    @property
    def last_size(self) -> Optional[int]:
        last = self.samples.last
        return last.size if last is not None else None

    @property
    def last_time(self) -> Optional[float]:
        last = self.samples.last
        return last.compute_time if last is not None else None

    @property
    def exhausted(self) -> bool:
        return self.next_size() is None

    def _time_limit_reached(self) -> bool:
        last_time = self.last_time
        if last_time is not None and last_time >= self.config.time_limit:
            logger.debug(
                "Last trial took %.3fs (limit %.3fs); stopping",
                last_time,
                self.config.time_limit,
            )
            return True
        return False

    @abstractmethod
    def next_size(self) -> Optional[int]:
        """Return the next size to probe, or None when exhausted."""


class SizePlanner(BasePlanner):
    """Adaptive planner driven by a working complexity hypothesis.

    After every recorded sample the hypothesis is re-derived from all
    samples using the planning tolerance. Cheap hypotheses grow fast
    (``size ** 2`` for linear, ``size * 2`` for logarithmic) and are capped at
    ``max_samples``; expensive ones grow by doubling and rely on the time
    limit alone. A growth step overshooting ``max_size`` falls back to
    doubling, and the planner is exhausted once doubling overshoots too.
    """

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        samples: Iterable[ComputeTimePoint] = (),
        analyzer: Optional[ComplexityAnalyzer] = None,
    ) -> None:
        config = config or CHECKER_CONFIG
        self.analyzer = analyzer or ComplexityAnalyzer(config.tangent_amplifier)
        self.hypothesis: Optional[TimeComplexity] = None
        super().__init__(config, samples)

    def record(self, point: ComputeTimePoint) -> None:
        super().record(point)
        self.hypothesis = self.analyzer.classify(
            self.samples, self.config.planning_tolerance
        )

    def next_size(self) -> Optional[int]:
        last_size = self.last_size
        if last_size is None:
            return self.config.seed_size

        if self._time_limit_reached():
            return None

        hypothesis = self.hypothesis
        if hypothesis in (TimeComplexity.LINEAR, TimeComplexity.LOGARITHMIC):
            if len(self.samples) > self.config.max_samples:
                logger.debug(
                    "Collected %d samples under %s hypothesis; stopping",
                    len(self.samples),
                    hypothesis.name,
                )
                return None
            if hypothesis == TimeComplexity.LINEAR:
                grown = last_size**2
            else:
                grown = last_size * 2
        else:
            grown = last_size * 2

        if self.config.within_max_size(grown):
            return grown

        doubled = last_size * 2
        if self.config.within_max_size(doubled):
            return doubled

        logger.debug(
            "Next probe after size %d would exceed max_size %s; stopping",
            last_size,
            self.config.max_size,
        )
        return None


class FixedSchedulePlanner(BasePlanner):
    """Planner that walks a predetermined, strictly increasing size schedule."""

    DEFAULT_SIZES = (10, 100, 1000, 10000)

    def __init__(
        self,
        sizes: Sequence[int] = DEFAULT_SIZES,
        config: Optional[CheckerConfig] = None,
        samples: Iterable[ComputeTimePoint] = (),
    ) -> None:
        sizes = tuple(sizes)
        if not sizes:
            raise ValueError("schedule must contain at least one size")
        if any(s <= 0 for s in sizes):
            raise ValueError("schedule sizes must be positive")
        if any(b <= a for a, b in zip(sizes, sizes[1:])):
            raise ValueError("schedule sizes must be strictly increasing")
        self.sizes = sizes
        super().__init__(config, samples)

    def next_size(self) -> Optional[int]:
        if self._time_limit_reached():
            return None
        index = len(self.samples)
        if index >= len(self.sizes):
            return None
        return self.sizes[index]
