"""Observed (size, time) samples collected during a check run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import numpy as np
import pandas as pd

#: Default scaling constant for time/size ratios.
TANGENT_AMPLIFIER = 1000.0


@dataclass(frozen=True)
class ComputeTimePoint:
    """One observed trial.

    Attributes:
        size: Input size the trial ran against.
        compute_time: Elapsed wall-clock time in seconds.
    """

    size: int
    compute_time: float

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.compute_time < 0:
            raise ValueError(
                f"compute_time must be non-negative, got {self.compute_time}"
            )

    def tangent(self, amplifier: float = TANGENT_AMPLIFIER) -> float:
        """Scaled time-to-size ratio used to compare growth."""
        return (self.compute_time * amplifier) / self.size


class SampleSet:
    """Append-only collection of ComputeTimePoints in recording order.

    Repeated sizes are allowed. Consumers that need size order use
    `sorted_by_size()` or `tangents()`, both stable for equal sizes.
    """

    def __init__(self, points: Iterable[ComputeTimePoint] = ()) -> None:
        self._points: List[ComputeTimePoint] = []
        for point in points:
            self.add(point)

    def add(self, point: ComputeTimePoint) -> None:
        if not isinstance(point, ComputeTimePoint):
            raise TypeError(f"expected ComputeTimePoint, got {type(point).__name__}")
        self._points.append(point)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ComputeTimePoint]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"SampleSet({len(self._points)} points)"

    @property
    def last(self) -> Optional[ComputeTimePoint]:
        """Most recently recorded point, or None if empty."""
        return self._points[-1] if self._points else None

    @property
    def sizes(self) -> List[int]:
        return [p.size for p in self._points]

    @property
    def times(self) -> List[float]:
        return [p.compute_time for p in self._points]

    def sorted_by_size(self) -> List[ComputeTimePoint]:
        return sorted(self._points, key=lambda p: p.size)

    def tangents(self, amplifier: float = TANGENT_AMPLIFIER) -> np.ndarray:
        """Tangents of all points, ordered by ascending size."""
        if not self._points:
            return np.empty(0, dtype=float)
        sizes = np.asarray(self.sizes, dtype=float)
        times = np.asarray(self.times, dtype=float)
        order = np.argsort(sizes, kind="stable")
        return (times[order] * amplifier) / sizes[order]

    def to_dataframe(self, amplifier: float = TANGENT_AMPLIFIER) -> pd.DataFrame:
        """Convert samples to a DataFrame ordered by size.

        Returns:
            DataFrame with ``size``, ``compute_time`` and ``tangent`` columns.
        """
        points = self.sorted_by_size()
        return pd.DataFrame(
            {
                "size": [p.size for p in points],
                "compute_time": [p.compute_time for p in points],
                "tangent": [p.tangent(amplifier) for p in points],
            },
            columns=["size", "compute_time", "tangent"],
        )
