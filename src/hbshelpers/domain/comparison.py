"""Loose (coercive) equality for template comparisons.

Template values frequently arrive with mixed types: a numeric id from the data
layer compared against the string form of the same id from a query parameter.
`loosely_equal` mirrors JavaScript's abstract equality for the scalar types a
template deals with, so ``loosely_equal(1, "1")`` is True.
"""

from __future__ import annotations

import math
from numbers import Number
from typing import Any


def _to_number(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, Number):
        return float(value)  # type: ignore[arg-type]
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (bool, Number))


def loosely_equal(a: Any, b: Any) -> bool:
    """Compare two template values with coercion.

    Rules:
        - None only equals None.
        - Values of the same type compare with ``==``.
        - A number or boolean compared with a string (or another number or
          boolean) compares numerically; NaN never equals anything.
        - Anything else falls back to ``==``.
    """
    if a is None or b is None:
        return a is None and b is None
    if type(a) is type(b):
        return bool(a == b)
    if (_is_numeric(a) and (_is_numeric(b) or isinstance(b, str))) or (
        _is_numeric(b) and isinstance(a, str)
    ):
        return _to_number(a) == _to_number(b)
    return bool(a == b)
