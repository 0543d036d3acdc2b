"""Date helper.

Usage::

    {{ date(format='MM YYYY') }}
    {{ date(post.publishedDate, format='MMM Do, YYYY') }}
    {{ date(post.publishedDate, timeago=true) }}

Without an explicit date the helper uses ``publishedDate`` from the rendering
scope, and falls back to the current instant when the scope has none. This
makes ``{{ date(format='YYYY') }}`` a convenient "current year".
"""

from typing import Any

from hbshelpers.config import DEFAULT_DATE_FORMAT
from hbshelpers.domain.call_shape import normalize_call
from hbshelpers.domain.descriptors import get_field
from hbshelpers.interfaces.date_formatter import DateFormatter


def _published_date(scope: Any) -> Any:
    return get_field(scope, "publishedDate")


def date(
    context: Any = None,
    options: Any = None,
    *,
    formatter: DateFormatter,
    default_date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    """Format a date, or describe it relative to now.

    Args:
        context: Date-like value, or the options payload when omitted.
        options: Call options. Hash keys: ``format`` (moment-style pattern) and
            ``timeago`` (relative phrasing; ``format`` is then ignored).
        formatter: Date formatting collaborator.
        default_date_format: Pattern used when no ``format`` is given.

    Returns:
        The formatted date string.
    """
    value, opts = normalize_call(context, options, from_scope=_published_date)
    if opts.hash.get("timeago"):
        return formatter.relative(value)
    return formatter.format(value, opts.hash.get("format") or default_date_format)
