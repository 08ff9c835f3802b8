"""Random seed generation for image requests.

``RandomSeedSource`` draws uniformly from ``[0, 2**31 - 1)``. Pass a seeded
``random.Random`` to make the sequence reproducible.
"""

from __future__ import annotations

import random
from typing import Optional

from .dto.generation import MAX_SEED


class RandomSeedSource:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.SystemRandom()

    def next_seed(self) -> int:
        return self._rng.randrange(0, MAX_SEED)


__all__ = ["RandomSeedSource"]
