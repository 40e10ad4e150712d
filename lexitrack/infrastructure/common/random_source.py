"""Random source adapter backed by the standard library generator."""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class SeededRandomSource:
    """
    RandomSource over random.Random.

    A fixed seed makes shuffles and distractor picks reproducible; without
    one the generator is seeded from system entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        shuffled = list(items)
        self._rng.shuffle(shuffled)
        return shuffled

    def sample(self, items: Sequence[T], count: int) -> list[T]:
        return self._rng.sample(list(items), count)
