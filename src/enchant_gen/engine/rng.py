"""Seeded random source for reproducible effect selection.

Wraps Python's random.Random.  Callers own their instance and pass it into
every selection call; nothing in the engine touches a process-global
generator, so two callers holding separate instances never disturb each
other's streams.
"""

from __future__ import annotations

import hashlib
import random


class SelectionRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_int(self, low: int, high: int) -> int:
        """Return a random integer *N* such that ``low <= N <= high``."""
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        """Return a random float in the half-open interval ``[0.0, 1.0)``."""
        return self._rng.random()

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> SelectionRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        Forking with the same *name* always produces the same child seed, so
        batch tooling can give each run its own stream without consuming
        values from the parent.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return SelectionRNG(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"SelectionRNG(seed={self._seed})"
