"""Enums shared by the planner, analyzer and checker."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple


class TimeComplexity(IntEnum):
    """Complexity classes a sample set can be classified into.

    Only LINEAR and POLYNOMIAL are ever detected by the analyzer; the other
    two members exist so callers can state expectations and so the planner
    can react to them if a finer analyzer is plugged in.
    """

    LINEAR = 1
    LOGARITHMIC = 2
    QUADRATIC = 3
    POLYNOMIAL = 4

    @classmethod
    def from_string(cls, value: str) -> "TimeComplexity":
        """Parse a string into a TimeComplexity enum value.

        Args:
            value: Case-insensitive member name (e.g., "linear", "POLYNOMIAL").

        Returns:
            The corresponding TimeComplexity member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid time complexity '{value}'. Valid values are: {valid}"
            ) from None


class Tolerance(IntEnum):
    """How close two tangents must be to count as matching."""

    NONE = 1  # ±1%
    LOW = 2  # ±10%
    MEDIUM = 3  # ±25%

    @property
    def fraction(self) -> float:
        """Relative half-width of the tolerance band."""
        return _TOLERANCE_FRACTIONS[self]

    def tolerated_range(self, value: float) -> Tuple[float, float]:
        """Return the half-open band ``[lower, upper)`` around ``value``."""
        return value * (1.0 - self.fraction), value * (1.0 + self.fraction)

    def contains(self, reference: float, value: float) -> bool:
        """Check whether ``value`` falls inside the band around ``reference``.

        A zero reference has an empty band; only an equal value matches it.
        """
        if reference == 0:
            return value == 0
        lower, upper = self.tolerated_range(reference)
        return lower <= value < upper

    @classmethod
    def from_string(cls, value: str) -> "Tolerance":
        """Parse a string into a Tolerance enum value.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid tolerance '{value}'. Valid values are: {valid}"
            ) from None


_TOLERANCE_FRACTIONS = {
    Tolerance.NONE: 0.01,
    Tolerance.LOW: 0.10,
    Tolerance.MEDIUM: 0.25,
}
