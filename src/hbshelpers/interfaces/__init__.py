"""Abstract contracts for the collaborators the helpers delegate to."""

from .date_formatter import DateFormatter
from .pluralizer import Pluralizer
from .random_source import RandomSource
from .url_builder import UrlBuilder

__all__ = ["DateFormatter", "Pluralizer", "RandomSource", "UrlBuilder"]
