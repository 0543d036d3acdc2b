"""Read-only access to externally supplied records.

File and image descriptors reach the helpers either as mappings (decoded JSON,
template contexts) or as objects with attributes (ORM rows, dataclasses).
`get_field` reads both without raising, so a missing field is just a default.
"""

from collections.abc import Mapping
from typing import Any


def get_field(record: Any, name: str, default: Any = None) -> Any:
    """Return ``record[name]`` or ``record.name``, else *default*.

    Args:
        record: A mapping, an attribute-bearing object, or None.
        name: Field name to read.
        default: Value returned when the field is absent or None.

    Returns:
        The field value, or *default*.
    """
    if record is None:
        return default
    if isinstance(record, Mapping):
        value = record.get(name, default)
    elif hasattr(record, "get") and not isinstance(record, (str, bytes)):
        # jinja2.runtime.Context and similar mapping-like scopes
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value
