"""Top-level orchestration of a complexity check.

Example:
    from algochecker import AlgorithmChecker, IntSource, TimeComplexity, Tolerance

    checker = AlgorithmChecker(seed=7)
    ok = checker.assert_complexity(
        lambda provider: sum(provider.sequence(IntSource())),
        TimeComplexity.LINEAR,
        Tolerance.LOW,
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import pandas as pd

from algochecker.analyzer import ComplexityAnalyzer
from algochecker.config import CHECKER_CONFIG, CheckerConfig
from algochecker.driver import Operation, TimedExecutionDriver
from algochecker.logging import get_logger
from algochecker.planner import BasePlanner, SizePlanner
from algochecker.provider import InputProvider
from algochecker.samples import SampleSet
from algochecker.seed_manager import SeedManager
from algochecker.types import TimeComplexity, Tolerance

logger = get_logger(__name__)

PlannerFactory = Callable[[CheckerConfig], BasePlanner]


@dataclass
class CheckResult:
    """Outcome of one check run.

    Attributes:
        operation: Name of the checked operation.
        expected: Complexity the caller expected.
        detected: Complexity the analyzer derived from all samples.
        tolerance: Tolerance used for the final classification.
        samples: Every trial recorded during the run.
    """

    operation: str
    expected: TimeComplexity
    detected: TimeComplexity
    tolerance: Tolerance
    samples: SampleSet

    @property
    def passed(self) -> bool:
        return self.detected == self.expected

    def __bool__(self) -> bool:
        return self.passed

    def to_dataframe(self) -> pd.DataFrame:
        """Samples of the run as a DataFrame (see `SampleSet.to_dataframe`)."""
        return self.samples.to_dataframe()


class AlgorithmChecker:
    """Checks whether an algorithm's measured growth matches an expectation.

    Each check owns a fresh planner and runs trials sequentially until the
    planner is exhausted, then classifies all samples with the caller's
    tolerance. Timing is empirical, so results can be false positives or
    negatives on a noisy machine.
    """

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        seed: Optional[int] = None,
        planner_factory: Optional[PlannerFactory] = None,
    ) -> None:
        """Initialize the checker.

        Args:
            config: Sampling and timing configuration (defaults to CHECKER_CONFIG).
            seed: Master seed making generated input reproducible.
            planner_factory: Builds a planner per run from the config
                (defaults to the adaptive SizePlanner).
        """
        self.config = config or CHECKER_CONFIG
        self.seed_manager = SeedManager(seed)
        self.planner_factory = planner_factory or _adaptive_planner
        self.analyzer = ComplexityAnalyzer(self.config.tangent_amplifier)
        self.driver = TimedExecutionDriver(self.config)

    def check(
        self,
        algorithm: Union[Operation[Any], Callable[[InputProvider], Any]],
        expected: TimeComplexity,
        tolerance: Tolerance = Tolerance.NONE,
    ) -> CheckResult:
        """Run the algorithm across planned sizes and classify its growth.

        Args:
            algorithm: Operation, or a plain callable taking an InputProvider.
            expected: Complexity the algorithm is expected to have.
            tolerance: Tolerance for the final classification.

        Returns:
            CheckResult with the detected class and all recorded samples.
        """
        operation = _as_operation(algorithm)
        planner = self.planner_factory(self.config)

        trial = 0
        provider = InputProvider.from_planner(
            planner, self.seed_manager.create_generator("trial", trial)
        )
        while provider is not None:
            self.driver.run_trial(operation, provider, planner)
            trial += 1
            provider = InputProvider.from_planner(
                planner, self.seed_manager.create_generator("trial", trial)
            )

        detected = self.analyzer.classify(planner.samples, tolerance)
        result = CheckResult(
            operation=operation.name,
            expected=expected,
            detected=detected,
            tolerance=tolerance,
            samples=planner.samples,
        )
        logger.info(
            "%s: %d trials, largest size %s, detected %s (expected %s, tolerance %s)",
            operation.name,
            len(planner.samples),
            max(planner.samples.sizes, default=None),
            detected.name,
            expected.name,
            tolerance.name,
        )
        return result

    def assert_complexity(
        self,
        algorithm: Union[Operation[Any], Callable[[InputProvider], Any]],
        expected: TimeComplexity,
        tolerance: Tolerance = Tolerance.NONE,
    ) -> bool:
        """Return True if the algorithm's detected complexity equals ``expected``."""
        return self.check(algorithm, expected, tolerance).passed


def _adaptive_planner(config: CheckerConfig) -> BasePlanner:
    return SizePlanner(config)


def _as_operation(
    algorithm: Union[Operation[Any], Callable[[InputProvider], Any]],
) -> Operation[Any]:
    if isinstance(algorithm, Operation):
        return algorithm
    return Operation(algorithm)
