"""Random integer sources."""

import random
from collections.abc import Iterable
from itertools import cycle

from hbshelpers.interfaces.random_source import RandomSource

# pylint: disable=too-few-public-methods


class SystemRandomSource(RandomSource):
    """Random integers from the standard library's `random` module.

    A private `random.Random` instance is used so that seeding elsewhere in the
    process does not make cache-busting tokens repeat.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        """Return a random integer in ``[low, high]``."""
        return self._random.randint(low, high)


class SequenceRandomSource(RandomSource):
    """Replay a fixed sequence of integers, clamped into the requested range.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = cycle(list(values) or [0])

    def randint(self, low: int, high: int) -> int:
        """Return the next value of the sequence, clamped into ``[low, high]``."""
        return max(low, min(high, next(self._values)))
