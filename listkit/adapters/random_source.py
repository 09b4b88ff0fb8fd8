import random
from collections.abc import Sequence
from typing import Any


class SeededRandom:
    """RandomPort backed by its own ``random.Random`` instance."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def sample(self, population: Sequence[Any], k: int) -> list[Any]:
        return self._rng.sample(list(population), k)
