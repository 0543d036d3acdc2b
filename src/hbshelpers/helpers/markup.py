"""Markup and debug output helpers.

Usage::

    {{ link("See more...", story.url) }}
    {{ jsonPrint(data) }}
"""

import json
from typing import Any

from markupsafe import Markup


def json_str(obj: Any) -> str:
    """Pretty-print *obj* as JSON with a 2-space indent.

    Values JSON cannot represent (datetimes, decimals, ...) are rendered with
    `str`.
    """
    return json.dumps(obj, indent=2, ensure_ascii=False, default=str)


def json_print(obj: Any) -> Markup:
    """Wrap the pretty-printed JSON of *obj* in a debug ``<div>``."""
    return Markup(
        '<div class="debug-data" style="min-width:1000px">{0}</div>'
    ).format(json_str(obj))


def link(text: Any, url: Any) -> Markup:
    """Return an ``<a>`` element; both *text* and *url* are HTML-escaped."""
    return Markup("<a href='{0}'>{1}</a>").format(
        "" if url is None else url, "" if text is None else text
    )
