"""Seeded random source for reproducible races."""

import hashlib

import numpy as np


def seed_to_int(seed: int | str) -> int:
    """Map an int or string seed onto a non-negative integer seed.

    String seeds are hashed so that the same text always yields the same
    sequence, independent of ``PYTHONHASHSEED``.
    """
    if isinstance(seed, int):
        return abs(seed)
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class RacePRNG:
    """Sequential generator of draws in [0, 1).

    Each race owns its own instance; two instances built from the same
    seed produce identical sequences.
    """

    def __init__(self, seed: int | str | None = None):
        """Initialize the generator.

        Args:
            seed: Integer or string seed. ``None`` seeds from OS entropy.
        """
        self.seed = seed
        self._rng = np.random.default_rng(None if seed is None else seed_to_int(seed))

    def next(self) -> float:
        """Next draw in [0, 1)."""
        return float(self._rng.random())

    def uniform(self, low: float, high: float) -> float:
        """Draw uniformly from [low, high) using a single ``next()``."""
        return self.next() * (high - low) + low

    def spawn(self, label: str) -> "RacePRNG":
        """Independent generator derived from this seed and a label.

        Draws from the child never advance this generator.
        """
        if self.seed is None:
            return RacePRNG(None)
        return RacePRNG(f"{self.seed}:{label}")
