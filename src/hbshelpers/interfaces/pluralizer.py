"""Interface for pluralizers."""

import abc

# pylint: disable=too-few-public-methods


class Pluralizer(abc.ABC):
    """Contract for turning a singular noun into its plural."""

    @abc.abstractmethod
    def pluralize(self, word: str) -> str:
        """Return the plural form of *word*."""
