"""Deterministic seed derivation for the random graph generators."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional


class SeedManager:
    """Derives independent, reproducible seeds from a single master seed.

    Each generator stage (node synthesis, link synthesis, ...) gets its own
    ``random.Random`` seeded from ``sha256(master_seed:components)``, so the
    output of one stage does not shift when another stage draws more or fewer
    numbers.

    Usage:
        seeds = SeedManager(42)
        node_rng = seeds.create_random_state("nodes")
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        """Initialize the seed manager.

        Args:
            master_seed: Master seed. If None, derived seeds are None and
                created random states are unseeded.
        """
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Derive a deterministic seed from the master seed and component ids.

        Args:
            *components: Identifiers (strings, integers, ...) naming the
                consumer of the seed.

        Returns:
            Positive 31-bit integer, or None if no master seed is set.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        hash_digest = hashlib.sha256(seed_input.encode()).digest()

        seed_value = int.from_bytes(hash_digest[:4], byteorder="big")
        return seed_value & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Create a new Random instance seeded with the derived seed.

        Args:
            *components: Identifiers for seed derivation.

        Returns:
            Seeded Random instance, or an unseeded one if no master seed.
        """
        derived_seed = self.derive_seed(*components)
        rng = random.Random()
        if derived_seed is not None:
            rng.seed(derived_seed)
        return rng
