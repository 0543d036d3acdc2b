"""Interface for date formatters."""

import abc
from typing import Any


class DateFormatter(abc.ABC):
    """Contract for a date/time formatter.

    Values may be datetimes, dates, ISO-8601 strings, epoch milliseconds or
    None. None means "now".
    """

    @abc.abstractmethod
    def format(self, value: Any, pattern: str) -> str:
        """Format *value* with a moment-style token *pattern* (e.g. ``MMM Do, YYYY``)."""

    @abc.abstractmethod
    def relative(self, value: Any) -> str:
        """Describe *value* relative to now (e.g. ``2 hours ago``)."""
