"""Random source consumed by the scheduling and quiz services."""

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """
    Request-scoped source of randomness.

    Implementations must not mutate their inputs; both operations return
    new lists.
    """

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return the items in a uniformly random order."""
        ...

    def sample(self, items: Sequence[T], count: int) -> list[T]:
        """Return `count` items picked uniformly without replacement."""
        ...
