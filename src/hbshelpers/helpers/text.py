"""String helpers.

All helpers here are pure: they take the value shown in the template and
return a new string. ``None`` is treated as the empty string so a missing field
renders blank instead of aborting the page.
"""

from __future__ import annotations

import math
import re
from typing import Any

from hbshelpers.interfaces.pluralizer import Pluralizer

_CLEAN_CHARS = re.compile(r"[\\'\-\[\]/{}()*+?.^$|]")
_FIRST_PARAGRAPH = re.compile(r"<\s*p(?:\s[^>]*)?>(.*?)<\s*/\s*p\s*>", re.DOTALL)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def trim(value: Any) -> str:
    """Lowercase *value* and replace spaces with hyphens (``"Elvis Costello"`` -> ``"elvis-costello"``)."""
    return _text(value).replace(" ", "-").lower()


def _leading_int(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if match := _LEADING_INT.match(_text(value)):
        return int(match.group(1))
    return None


def limit(value: Any, length: Any) -> str:
    """Truncate *value* to *length* characters, appending ``...`` when cut.

    *length* is read like `inc_index` reads its index (``"20"`` and ``20.0``
    both work). When no length can be read the text is returned unchanged; a
    negative length cuts everything but the ellipsis.
    """
    text = _text(value)
    if (size := _leading_int(length)) is None or len(text) <= size:
        return text
    return text[: max(size, 0)] + "..."


def clean_string(value: Any) -> str:
    """Remove regex metacharacters, quotes, slashes and hyphens from *value*."""
    return _CLEAN_CHARS.sub("", _text(value))


def email_format(value: Any) -> str:
    """Spell out the first ``@`` of an email address as `` at ``."""
    return _text(value).replace("@", " at ", 1)


def upper_case(value: Any) -> str:
    """Uppercase the first character of *value*."""
    text = _text(value)
    return text[:1].upper() + text[1:]


def lower_case(value: Any) -> str:
    """Lowercase *value*."""
    return _text(value).lower()


def pluralize(value: Any, *, pluralizer: Pluralizer) -> str:
    """Pluralize a singular noun."""
    text = _text(value)
    return pluralizer.pluralize(text) if text else text


def trim_pluralize(value: Any, *, pluralizer: Pluralizer) -> str:
    """Pluralize, then `trim` (``"Blog Post"`` -> ``"blog-posts"``)."""
    return trim(pluralize(value, pluralizer=pluralizer))


def secure_url(value: Any) -> Any:
    """Upgrade an ``http://`` URL to ``https://``; non-strings pass through."""
    if not isinstance(value, str):
        return value
    return value.replace("http://", "https://", 1)


def remove_para(value: Any) -> str | None:
    """Return the body of the first ``<p>`` element in an HTML string.

    Returns:
        The paragraph's inner HTML, or None when *value* is empty or has no
        paragraph.
    """
    if not value:
        return None
    if match := _FIRST_PARAGRAPH.search(str(value)):
        return match.group(1)
    return None


def inc_index(index: Any) -> int | None:
    """Turn a 0-based loop index into a 1-based position.

    Accepts ints and integer-like strings (``"4"`` -> 5, ``"4.7"`` -> 5).
    Returns None when no integer can be read.
    """
    position = _leading_int(index)
    return None if position is None else position + 1
