"""Timed execution of one trial of an algorithm under test."""

from __future__ import annotations

import gc
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Generator, Generic, Optional, Tuple, TypeVar

from algochecker.config import CHECKER_CONFIG, CheckerConfig
from algochecker.logging import get_logger
from algochecker.planner import BasePlanner
from algochecker.provider import NANOSECONDS_TO_SECONDS, InputProvider
from algochecker.samples import ComputeTimePoint

logger = get_logger(__name__)

U = TypeVar("U")

CompletionSink = Callable[[U], None]
Clock = Callable[[], int]


class OperationContractError(RuntimeError):
    """An operation did not deliver its result exactly once."""


class Operation(Generic[U]):
    """Algorithm under test, invoked once per trial with an InputProvider.

    The direct form ``Operation(fn)`` takes ``fn(provider) -> result``.
    `with_completion` wraps the callback form ``fn(provider, complete)`` in
    which the algorithm hands its result to ``complete`` exactly once before
    returning.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        name: Optional[str] = None,
        *,
        completion: bool = False,
    ) -> None:
        if not callable(fn):
            raise TypeError(f"operation must be callable, got {type(fn).__name__}")
        self._invoke: Callable[[InputProvider, CompletionSink[U]], None] = (
            fn if completion else _direct(fn)
        )
        self.name = name or getattr(fn, "__name__", type(fn).__name__)

    @classmethod
    def with_completion(
        cls,
        fn: Callable[[InputProvider, CompletionSink[U]], None],
        name: Optional[str] = None,
    ) -> "Operation[U]":
        return cls(fn, name, completion=True)

    def invoke(self, provider: InputProvider, complete: CompletionSink[U]) -> None:
        self._invoke(provider, complete)

    def __repr__(self) -> str:
        return f"Operation({self.name})"


def _direct(
    fn: Callable[[InputProvider], U],
) -> Callable[[InputProvider, CompletionSink[U]], None]:
    def invoke(provider: InputProvider, complete: CompletionSink[U]) -> None:
        complete(fn(provider))

    return invoke


class _Completion:
    """Latches the first delivered result and its timestamp."""

    def __init__(self, clock: Clock) -> None:
        self.clock = clock
        self.delivered = False
        self.result: Any = None
        self.stop_ns = 0

    def __call__(self, result: Any) -> None:
        stop_ns = self.clock()
        if self.delivered:
            raise OperationContractError("operation delivered its result twice")
        self.stop_ns = stop_ns
        self.result = result
        self.delivered = True


@dataclass(frozen=True)
class TrialOutcome:
    """Recorded sample plus the value the algorithm produced."""

    point: ComputeTimePoint
    result: Any


class TimedExecutionDriver:
    """Runs trials and records one compute time per trial on a planner.

    A trial invokes the algorithm ``warmup_runs`` times untimed, then
    ``timed_runs`` times timed, and records the fastest timed invocation.
    Every invocation is measured from just before the call to the moment
    its result is delivered.
    """

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        """Initialize the driver.

        Args:
            config: Timing configuration (defaults to CHECKER_CONFIG).
            clock: Monotonic nanosecond clock used for start and stop stamps.
        """
        self.config = config or CHECKER_CONFIG
        self.clock = clock

    @contextmanager
    def _gc_paused(self) -> Generator[None, None, None]:
        gc_was_enabled = gc.isenabled()
        if self.config.disable_gc and gc_was_enabled:
            gc.collect()
            gc.disable()
        try:
            yield
        finally:
            if self.config.disable_gc and gc_was_enabled:
                gc.enable()

    def _time_once(
        self, operation: Operation[U], provider: InputProvider
    ) -> Tuple[float, Any]:
        completion = _Completion(self.clock)
        generated_before = provider.generation_time

        start_ns = self.clock()
        operation.invoke(provider, completion)

        if not completion.delivered:
            raise OperationContractError(
                f"{operation.name} returned without delivering a result"
            )

        elapsed = (completion.stop_ns - start_ns) / NANOSECONDS_TO_SECONDS
        if self.config.exclude_input_generation:
            generated = provider.generation_time - generated_before
            elapsed = max(0.0, elapsed - generated)
        return elapsed, completion.result

    def run_trial(
        self,
        operation: Operation[U],
        provider: InputProvider,
        planner: BasePlanner,
    ) -> TrialOutcome:
        """Time ``operation`` against ``provider`` and record one sample.

        Args:
            operation: Algorithm under test.
            provider: Input bound to the trial's size.
            planner: Planner receiving the recorded ComputeTimePoint.

        Returns:
            TrialOutcome with the recorded point and the result of the last
            timed invocation.

        Raises:
            OperationContractError: If an invocation never delivered its
                result or delivered it more than once.
        """
        timings = []
        result: Any = None

        with self._gc_paused():
            for run in range(self.config.runs_per_trial):
                if self.config.disable_gc:
                    gc.collect(0)
                elapsed, result = self._time_once(operation, provider)
                if run >= self.config.warmup_runs:
                    timings.append(elapsed)

        point = ComputeTimePoint(size=provider.current_size, compute_time=min(timings))
        planner.record(point)
        logger.debug(
            "Trial %s: size=%d compute_time=%.6fs (best of %d)",
            operation.name,
            point.size,
            point.compute_time,
            len(timings),
        )
        return TrialOutcome(point=point, result=result)
