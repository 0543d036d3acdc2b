"""Date formatters backed by the `arrow` library."""

from __future__ import annotations

from datetime import date, datetime
from numbers import Number
from typing import Any

import arrow

from hbshelpers.interfaces.date_formatter import DateFormatter


class ArrowDateFormatter(DateFormatter):
    """Format dates with arrow's moment-compatible tokens.

    Arrow understands the same format tokens as moment.js (``MMM``, ``Do``,
    ``YYYY`` ...), so template authors can keep their existing patterns.

    Args:
        tz: Timezone to render in (e.g. ``"Europe/Paris"``). Defaults to the
            local timezone.
        locale: Arrow locale used for month names and relative phrasing.
    """

    def __init__(self, tz: str | None = None, locale: str = "en-us") -> None:
        self._tz = tz
        self._locale = locale

    def _coerce(self, value: Any) -> arrow.Arrow:
        if value is None:
            moment = arrow.now()
        elif isinstance(value, arrow.Arrow):
            moment = value
        elif isinstance(value, (datetime, date)):
            moment = arrow.get(value)
        elif isinstance(value, Number) and not isinstance(value, bool):
            # epoch milliseconds
            moment = arrow.get(float(value) / 1000)  # type: ignore[arg-type]
        else:
            moment = arrow.get(str(value))
        return moment.to(self._tz) if self._tz else moment

    def format(self, value: Any, pattern: str) -> str:
        """Format *value* with *pattern*."""
        return self._coerce(value).format(pattern, locale=self._locale)

    def relative(self, value: Any) -> str:
        """Describe *value* relative to now."""
        return self._coerce(value).humanize(locale=self._locale)
