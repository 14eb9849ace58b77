"""Tests for AlgorithmChecker and CheckResult."""

import logging

import pandas as pd
import pytest

from algochecker import (
    AlgorithmChecker,
    CheckerConfig,
    CheckResult,
    FixedSchedulePlanner,
    IntSource,
    Operation,
    OperationContractError,
    TimedExecutionDriver,
    TimeComplexity,
    Tolerance,
)

SINGLE_SHOT = CheckerConfig(warmup_runs=0, timed_runs=1)


def _fixed(sizes):
    return lambda config: FixedSchedulePlanner(sizes=sizes, config=config)


class _CostClock:
    """Nanosecond clock advanced by a synthetic cost model instead of real work."""

    def __init__(self, cost):
        self.cost = cost
        self.now = 0

    def __call__(self):
        return self.now

    def run(self, provider):
        self.now += self.cost(provider.current_size)


def _synthetic_checker(cost):
    checker = AlgorithmChecker(seed=1)
    clock = _CostClock(cost)
    checker.driver = TimedExecutionDriver(checker.config, clock)
    return checker, clock


class _Always:
    def __init__(self, complexity):
        self.complexity = complexity
        self.calls = []

    def classify(self, samples, tolerance):
        self.calls.append((len(samples), tolerance))
        return self.complexity


def test_linear_sum_detected_as_linear():
    checker = AlgorithmChecker(seed=7)
    assert checker.assert_complexity(
        lambda provider: sum(provider.sequence(IntSource())),
        TimeComplexity.LINEAR,
        Tolerance.LOW,
    )


def test_quadratic_loop_detected_as_polynomial():
    def pairs(provider):
        values = provider.sequence(IntSource())
        count = 0
        for a in values:
            for b in values:
                if a < b:
                    count += 1
        return count

    config = CheckerConfig(time_limit=0.2, max_size=4096, warmup_runs=1, timed_runs=3)
    checker = AlgorithmChecker(config, seed=3)
    result = checker.check(pairs, TimeComplexity.LINEAR, Tolerance.MEDIUM)

    assert result.detected == TimeComplexity.POLYNOMIAL
    assert not result.passed
    assert not result


def test_linear_cost_is_linear_under_low_tolerance():
    checker, clock = _synthetic_checker(lambda n: 100 * n)
    result = checker.check(clock.run, TimeComplexity.LINEAR, Tolerance.LOW)

    assert result.passed
    # Squaring up to 65536, then doubling up to the size ceiling
    expected_sizes = [2, 4, 16, 256, 65536] + [2**k for k in range(17, 22)]
    assert result.samples.sizes == expected_sizes


def test_quadratic_cost_is_polynomial_under_low_tolerance():
    checker, clock = _synthetic_checker(lambda n: n * n)
    result = checker.check(clock.run, TimeComplexity.LINEAR, Tolerance.LOW)

    assert result.detected == TimeComplexity.POLYNOMIAL
    assert not result.passed
    # Doubling stops once a trial reaches the 10 s time limit
    assert result.samples.sizes[-1] == 2**17
    assert result.samples.last.compute_time >= 10.0


def test_constant_cost_is_not_linear():
    checker, clock = _synthetic_checker(lambda n: 5_000)
    result = checker.check(clock.run, TimeComplexity.LINEAR, Tolerance.MEDIUM)
    assert result.detected == TimeComplexity.POLYNOMIAL


def test_check_result_carries_every_trial():
    checker = AlgorithmChecker(planner_factory=_fixed((10, 100, 1000)))

    def summation(provider):
        return sum(provider.sequence(IntSource()))

    result = checker.check(summation, TimeComplexity.LINEAR)

    assert isinstance(result, CheckResult)
    assert result.operation == "summation"
    assert result.expected == TimeComplexity.LINEAR
    assert result.tolerance == Tolerance.NONE
    assert result.samples.sizes == [10, 100, 1000]

    df = result.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert df["size"].tolist() == [10, 100, 1000]


def test_final_classification_uses_caller_tolerance():
    checker = AlgorithmChecker(planner_factory=_fixed((10, 20)))
    checker.analyzer = _Always(TimeComplexity.LINEAR)

    result = checker.check(lambda p: None, TimeComplexity.LINEAR, Tolerance.LOW)

    assert result.passed
    assert checker.analyzer.calls == [(2, Tolerance.LOW)]


@pytest.mark.parametrize(
    "detected,expected,passed",
    [
        (TimeComplexity.LINEAR, TimeComplexity.LINEAR, True),
        (TimeComplexity.POLYNOMIAL, TimeComplexity.POLYNOMIAL, True),
        (TimeComplexity.POLYNOMIAL, TimeComplexity.LINEAR, False),
        (TimeComplexity.LINEAR, TimeComplexity.QUADRATIC, False),
    ],
)
def test_assert_complexity_compares_detected_with_expected(detected, expected, passed):
    checker = AlgorithmChecker(planner_factory=_fixed((10,)))
    checker.analyzer = _Always(detected)
    assert checker.assert_complexity(lambda p: 0, expected) is passed


def test_completion_operation_runs_every_planned_size():
    sizes = []

    def algorithm(provider, complete):
        sizes.append(provider.current_size)
        complete(len(provider.sequence(IntSource())))

    checker = AlgorithmChecker(SINGLE_SHOT, planner_factory=_fixed((10, 100)))
    result = checker.check(
        Operation.with_completion(algorithm, name="length"), TimeComplexity.LINEAR
    )

    assert sizes == [10, 100]
    assert result.operation == "length"


def test_contract_violation_aborts_the_run():
    def algorithm(provider, complete):
        return None

    checker = AlgorithmChecker(planner_factory=_fixed((10, 100)))
    with pytest.raises(OperationContractError):
        checker.check(Operation.with_completion(algorithm), TimeComplexity.LINEAR)


def test_algorithm_errors_propagate():
    def broken(provider):
        raise ZeroDivisionError

    checker = AlgorithmChecker(planner_factory=_fixed((10,)))
    with pytest.raises(ZeroDivisionError):
        checker.check(broken, TimeComplexity.LINEAR)


def test_seeded_runs_see_identical_input():
    def capture(seen):
        def algorithm(provider):
            seen.append(provider.sequence(IntSource()))

        return algorithm

    first, second, other = [], [], []
    for seen, seed in ((first, 42), (second, 42), (other, 43)):
        checker = AlgorithmChecker(seed=seed, planner_factory=_fixed((10, 100)))
        checker.check(capture(seen), TimeComplexity.LINEAR)

    assert first == second
    assert first != other


def test_each_check_uses_a_fresh_planner():
    checker = AlgorithmChecker(planner_factory=_fixed((10, 100)))
    assert len(checker.check(lambda p: 0, TimeComplexity.LINEAR).samples) == 2
    assert len(checker.check(lambda p: 0, TimeComplexity.LINEAR).samples) == 2


def test_summary_logged_at_info(caplog):
    caplog.set_level(logging.INFO, logger="algochecker.checker")

    def summation(provider):
        return sum(provider.sequence(IntSource()))

    AlgorithmChecker(planner_factory=_fixed((10, 100))).check(
        summation, TimeComplexity.LINEAR
    )
    messages = [r.getMessage() for r in caplog.records]
    assert any("summation" in m and "2 trials" in m for m in messages)


def test_every_trial_repeats_the_algorithm():
    sizes = []
    config = CheckerConfig(warmup_runs=1, timed_runs=2)

    AlgorithmChecker(config, planner_factory=_fixed((10, 100))).check(
        lambda p: sizes.append(p.current_size), TimeComplexity.LINEAR
    )
    assert sizes == [10, 10, 10, 100, 100, 100]
