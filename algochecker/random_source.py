"""Random value sources used to build input for algorithms under test.

A source offers two separate capabilities, chosen explicitly by the caller:

* scalar: ``draw(rng)`` returns one uniformly random value;
* sequence: ``draw_sequence(rng, count)`` returns ``count`` independently
  drawn values, shuffled so their order never reflects generation order.

Built-in numeric sources draw from a bounded range (``[-1000, 1000)`` by
default) so that summing or otherwise accumulating generated values inside
the algorithm under test cannot overflow fixed-width arithmetic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

#: Inclusive lower bound for built-in numeric sources.
DEFAULT_LOW = -1000

#: Exclusive upper bound for built-in numeric sources.
DEFAULT_HIGH = 1000


class ScalarSource(Protocol[T_co]):
    """Capability: produce one random value."""

    def draw(self, rng: np.random.Generator) -> T_co: ...


class SequenceSource(Protocol[T_co]):
    """Capability: produce a shuffled sequence of random values."""

    def draw_sequence(self, rng: np.random.Generator, count: int) -> List[T_co]: ...


class RandomSource(ABC, Generic[T]):
    """Base class implementing both capabilities for one element type.

    Subclasses implement `draw`. The default `draw_sequence` calls it
    ``count`` times and shuffles the result; numeric sources override it
    with vectorized numpy draws.
    """

    @abstractmethod
    def draw(self, rng: np.random.Generator) -> T:
        """Return one random value."""

    def draw_sequence(self, rng: np.random.Generator, count: int) -> List[T]:
        """Return ``count`` random values in shuffled order."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        values = [self.draw(rng) for _ in range(count)]
        order = rng.permutation(count)
        return [values[i] for i in order]


class IntSource(RandomSource[int]):
    """Uniform integers in ``[low, high)``."""

    def __init__(self, low: int = DEFAULT_LOW, high: int = DEFAULT_HIGH) -> None:
        if low >= high:
            raise ValueError(f"low must be < high, got [{low}, {high})")
        self.low = low
        self.high = high

    def draw(self, rng: np.random.Generator) -> int:
        return int(rng.integers(self.low, self.high))

    def draw_sequence(self, rng: np.random.Generator, count: int) -> List[int]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        values = rng.integers(self.low, self.high, size=count)
        rng.shuffle(values)
        return values.tolist()

    def __repr__(self) -> str:
        return f"IntSource(low={self.low}, high={self.high})"


class FloatSource(RandomSource[float]):
    """Uniform floats in ``[low, high)``."""

    def __init__(
        self, low: float = float(DEFAULT_LOW), high: float = float(DEFAULT_HIGH)
    ) -> None:
        if low >= high:
            raise ValueError(f"low must be < high, got [{low}, {high})")
        self.low = low
        self.high = high

    def draw(self, rng: np.random.Generator) -> float:
        return float(rng.uniform(self.low, self.high))

    def draw_sequence(self, rng: np.random.Generator, count: int) -> List[float]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        values = rng.uniform(self.low, self.high, size=count)
        rng.shuffle(values)
        return values.tolist()

    def __repr__(self) -> str:
        return f"FloatSource(low={self.low}, high={self.high})"


class ChoiceSource(RandomSource[T]):
    """Uniform choice among a fixed population of arbitrary values."""

    def __init__(self, values: Sequence[T]) -> None:
        self.values = list(values)
        if not self.values:
            raise ValueError("ChoiceSource requires at least one value")

    def draw(self, rng: np.random.Generator) -> T:
        return self.values[int(rng.integers(len(self.values)))]

    def draw_sequence(self, rng: np.random.Generator, count: int) -> List[T]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        indices = rng.integers(len(self.values), size=count)
        rng.shuffle(indices)
        return [self.values[i] for i in indices]

    def __repr__(self) -> str:
        return f"ChoiceSource({len(self.values)} values)"


def random_value(
    source: ScalarSource[T], rng: Optional[np.random.Generator] = None
) -> T:
    """Draw one value from ``source`` with ``rng`` or a fresh generator."""
    return source.draw(rng if rng is not None else np.random.default_rng())


def random_sequence(
    source: SequenceSource[T], count: int, rng: Optional[np.random.Generator] = None
) -> List[T]:
    """Draw a shuffled sequence of ``count`` values from ``source``."""
    return source.draw_sequence(
        rng if rng is not None else np.random.default_rng(), count
    )
