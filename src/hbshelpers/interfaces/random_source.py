"""Interface for random integer sources."""

import abc

# pylint: disable=too-few-public-methods


class RandomSource(abc.ABC):
    """Contract for drawing random integers."""

    @abc.abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Return an integer N such that ``low <= N <= high``."""
