"""AlgoChecker: empirical time-complexity checks for Python callables.

AlgoChecker runs an algorithm against progressively larger random inputs,
times each run, and classifies the resulting (size, time) curve. It does not
read or parse source code.

Primary API:
    AlgorithmChecker - Runs a check and compares against an expectation
    Operation - Wraps an algorithm under test
    InputProvider - Random input bound to one planned size
    IntSource, FloatSource, ChoiceSource - Built-in random value sources
    TimeComplexity, Tolerance - Classification classes and tolerance bands

Example:
    from algochecker import AlgorithmChecker, IntSource, TimeComplexity, Tolerance

    def summation(provider):
        return sum(provider.sequence(IntSource()))

    checker = AlgorithmChecker()
    checker.assert_complexity(summation, TimeComplexity.LINEAR, Tolerance.LOW)
"""

from __future__ import annotations

from algochecker import logging
from algochecker._version import __version__
from algochecker.analyzer import ComplexityAnalyzer
from algochecker.checker import AlgorithmChecker, CheckResult
from algochecker.config import CHECKER_CONFIG, CheckerConfig
from algochecker.driver import (
    Operation,
    OperationContractError,
    TimedExecutionDriver,
    TrialOutcome,
)
from algochecker.planner import BasePlanner, FixedSchedulePlanner, SizePlanner
from algochecker.provider import InputProvider
from algochecker.random_source import (
    ChoiceSource,
    FloatSource,
    IntSource,
    RandomSource,
    random_sequence,
    random_value,
)
from algochecker.samples import ComputeTimePoint, SampleSet
from algochecker.seed_manager import SeedManager
from algochecker.types import TimeComplexity, Tolerance

__all__ = [
    # Version
    "__version__",
    # Orchestration (primary API)
    "AlgorithmChecker",
    "CheckResult",
    "Operation",
    "OperationContractError",
    # Components
    "ComplexityAnalyzer",
    "TimedExecutionDriver",
    "TrialOutcome",
    "BasePlanner",
    "SizePlanner",
    "FixedSchedulePlanner",
    "InputProvider",
    # Random input
    "RandomSource",
    "IntSource",
    "FloatSource",
    "ChoiceSource",
    "random_value",
    "random_sequence",
    "SeedManager",
    # Data model
    "ComputeTimePoint",
    "SampleSet",
    "TimeComplexity",
    "Tolerance",
    # Configuration
    "CheckerConfig",
    "CHECKER_CONFIG",
    # Logging
    "logging",
]
