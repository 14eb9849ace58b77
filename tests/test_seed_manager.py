"""Tests for seed management functionality."""

import numpy as np

from algochecker.seed_manager import SeedManager


class TestSeedManager:
    """Test SeedManager functionality."""

    def test_init_with_and_without_master_seed(self):
        assert SeedManager(42).master_seed == 42
        assert SeedManager().master_seed is None

    def test_derive_seed_with_master_seed(self):
        seed_mgr = SeedManager(42)

        seed1 = seed_mgr.derive_seed("trial", 0)
        seed2 = seed_mgr.derive_seed("trial", 0)
        assert seed1 == seed2
        assert isinstance(seed1, int)
        assert 0 <= seed1 <= 0x7FFFFFFF

        assert seed1 != seed_mgr.derive_seed("trial", 1)
        # Order matters
        assert seed_mgr.derive_seed("a", "b") != seed_mgr.derive_seed("b", "a")

    def test_derive_seed_without_master_seed(self):
        assert SeedManager().derive_seed("trial", 0) is None

    def test_different_master_seeds(self):
        assert SeedManager(42).derive_seed("trial", 0) != SeedManager(
            123
        ).derive_seed("trial", 0)

    def test_create_generator_with_seed(self):
        seed_mgr = SeedManager(42)

        gen1 = seed_mgr.create_generator("trial", 3)
        gen2 = seed_mgr.create_generator("trial", 3)
        assert isinstance(gen1, np.random.Generator)
        assert gen1.integers(0, 1_000_000, size=10).tolist() == gen2.integers(
            0, 1_000_000, size=10
        ).tolist()

    def test_create_generator_without_seed(self):
        seed_mgr = SeedManager()

        gen1 = seed_mgr.create_generator("trial", 3)
        gen2 = seed_mgr.create_generator("trial", 3)
        # Unseeded generators differ (very high probability)
        assert gen1.integers(0, 2**62, size=4).tolist() != gen2.integers(
            0, 2**62, size=4
        ).tolist()

    def test_seed_distribution(self):
        seed_mgr = SeedManager(42)
        seeds = [seed_mgr.derive_seed("trial", i) for i in range(1000)]

        assert len(set(seeds)) > 990
        assert max(seeds) - min(seeds) > 0x1FFFFFFF
