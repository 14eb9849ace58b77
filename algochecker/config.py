"""Configuration classes for AlgoChecker components."""

from dataclasses import dataclass
from typing import Optional

from algochecker.types import Tolerance


@dataclass
class CheckerConfig:
    """Configuration for sampling, timing and classification."""

    # First probe size when no samples exist yet
    seed_size: int = 2

    # Circuit breaker: stop once a trial took at least this many seconds
    time_limit: float = 10.0

    # Sample-count cap applied under linear/logarithmic hypotheses
    max_samples: int = 512

    # Largest input size ever probed; None disables the ceiling
    max_size: Optional[int] = 2**21

    # Scaling constant applied to time/size ratios
    tangent_amplifier: float = 1000.0

    # Tolerance used for the planner's working hypothesis
    planning_tolerance: Tolerance = Tolerance.MEDIUM

    # Untimed invocations before the timed ones in every trial
    warmup_runs: int = 2

    # Timed invocations per trial; the fastest one is recorded
    timed_runs: int = 5

    # Subtract time spent generating random input from compute time
    exclude_input_generation: bool = False

    # Pause the garbage collector while a trial runs
    disable_gc: bool = True

    def __post_init__(self) -> None:
        if self.seed_size < 2:
            raise ValueError("seed_size must be >= 2")
        if self.time_limit <= 0:
            raise ValueError("time_limit must be positive")
        if self.max_samples <= 0:
            raise ValueError("max_samples must be positive")
        if self.max_size is not None and self.max_size < self.seed_size:
            raise ValueError("max_size must be >= seed_size")
        if self.tangent_amplifier <= 0:
            raise ValueError("tangent_amplifier must be positive")
        if self.warmup_runs < 0:
            raise ValueError("warmup_runs must be >= 0")
        if self.timed_runs < 1:
            raise ValueError("timed_runs must be >= 1")

    @property
    def runs_per_trial(self) -> int:
        """Total invocations of the algorithm in one trial."""
        return self.warmup_runs + self.timed_runs

    def within_max_size(self, size: int) -> bool:
        """Return True if ``size`` is within the probe-size ceiling."""
        return self.max_size is None or size <= self.max_size


# Global configuration instance
CHECKER_CONFIG = CheckerConfig()
