"""Deterministic seed derivation for reproducible random input."""

from __future__ import annotations

import hashlib
from typing import Any, Optional

import numpy as np


class SeedManager:
    """Derives isolated seeds for each trial from one master seed.

    Every trial of a check run draws its input from its own generator so the
    values a trial sees depend only on the master seed and the trial's
    identity, not on how many values earlier trials consumed.

    Usage:
        seed_mgr = SeedManager(42)
        rng = seed_mgr.create_generator("trial", 3)
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        """Initialize the seed manager.

        Args:
            master_seed: Master seed for deterministic input. If None,
                        derived seeds are None and generators are unseeded.
        """
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Derive a deterministic seed from the master seed and component ids.

        Args:
            *components: Identifiers (strings, integers, etc.) of the consumer.

        Returns:
            Derived seed as a positive 32-bit integer, or None if no master seed.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        hash_digest = hashlib.sha256(seed_input.encode()).digest()

        seed_value = int.from_bytes(hash_digest[:4], byteorder="big")
        return seed_value & 0x7FFFFFFF

    def create_generator(self, *components: Any) -> np.random.Generator:
        """Create a numpy Generator seeded with a derived seed.

        Args:
            *components: Component identifiers for seed derivation.

        Returns:
            New Generator, unseeded (OS entropy) if no master seed is set.
        """
        return np.random.default_rng(self.derive_seed(*components))
