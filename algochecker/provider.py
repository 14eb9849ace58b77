"""Random input bound to one planned size."""

from __future__ import annotations

import time
from typing import Callable, Iterable, List, Optional, TypeVar

import numpy as np

from algochecker.planner import BasePlanner
from algochecker.random_source import ScalarSource, SequenceSource

T = TypeVar("T")
C = TypeVar("C")

NANOSECONDS_TO_SECONDS = 1e9


class InputProvider:
    """Exposes random input of exactly ``current_size`` elements.

    Providers are created per trial. Time spent generating values is summed
    in `generation_time` so the driver can optionally subtract it.
    """

    def __init__(self, size: int, rng: Optional[np.random.Generator] = None) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self.current_size = size
        self.rng = rng if rng is not None else np.random.default_rng()
        self._generation_ns = 0

    @classmethod
    def from_planner(
        cls, planner: BasePlanner, rng: Optional[np.random.Generator] = None
    ) -> Optional["InputProvider"]:
        """Build a provider for the planner's next size.

        Returns:
            A provider, or None when the planner is exhausted.
        """
        size = planner.next_size()
        if size is None:
            return None
        return cls(size, rng)

    @property
    def generation_time(self) -> float:
        """Seconds spent generating input so far."""
        return self._generation_ns / NANOSECONDS_TO_SECONDS

    def scalar(self, source: ScalarSource[T]) -> T:
        """Return one random value from ``source``."""
        start = time.perf_counter_ns()
        try:
            return source.draw(self.rng)
        finally:
            self._generation_ns += time.perf_counter_ns() - start

    def sequence(
        self,
        source: SequenceSource[T],
        into: Callable[[List[T]], C] = list,  # type: ignore[assignment]
    ) -> C:
        """Return ``current_size`` random values built into a collection.

        Args:
            source: Element source.
            into: Builder turning the generated list into the target
                collection type (e.g. ``tuple``, ``np.array``, ``deque``).

        Raises:
            ValueError: If the built collection does not hold exactly
                ``current_size`` elements.
        """
        start = time.perf_counter_ns()
        try:
            values = source.draw_sequence(self.rng, self.current_size)
            collection = into(values)
            _check_length(collection, self.current_size)
            return collection
        finally:
            self._generation_ns += time.perf_counter_ns() - start

    def __repr__(self) -> str:
        return f"InputProvider(current_size={self.current_size})"


def _check_length(collection: Iterable, expected: int) -> None:
    try:
        actual = len(collection)  # type: ignore[arg-type]
    except TypeError:
        raise ValueError(
            f"builder returned {type(collection).__name__}, which has no length"
        ) from None
    if actual != expected:
        raise ValueError(
            f"builder returned {actual} elements, expected {expected}; "
            "use a collection type that keeps every generated value"
        )
