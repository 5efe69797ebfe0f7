from __future__ import annotations
from typing import Optional, Protocol

import numpy as np

class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        """Uniform integer in ``[0, stop)``."""
        ...

class NumpyRandom:
    """Default random source; unseeded instances are not reproducible."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def randrange(self, stop: int) -> int:
        return int(self._rng.integers(0, stop))
