"""Pluralizers."""

import inflection

from hbshelpers.interfaces.pluralizer import Pluralizer

# pylint: disable=too-few-public-methods


class InflectionPluralizer(Pluralizer):
    """English pluralizer using the `inflection` library's rule tables."""

    def pluralize(self, word: str) -> str:
        """Return the plural form of *word* (``"category"`` -> ``"categories"``)."""
        return inflection.pluralize(word)
