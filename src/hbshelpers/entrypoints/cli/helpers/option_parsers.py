"""Click callbacks for repeatable ``NAME=VALUE`` style options.

- ``-L/--logger-level NAME=LEVEL`` is parsed into logger levels.
- ``-o/--option KEY=VALUE`` is parsed into a helper's keyword options, with
  each value decoded as JSON when possible (``width=640`` gives an int,
  ``timeago=true`` a bool, ``crop=fill`` stays a string).

Logger levels accept repeated flags or a single comma/space-separated string
(as supplied through an environment variable). Helper options are taken one
pair per flag, since values such as date patterns contain spaces and commas.
"""

import json
import logging
import re
from typing import Any

import click

DEFAULT_LIB_LEVELS = {"jinja2": logging.WARNING, "urllib3": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Split the option value(s) on commas and whitespace, dropping empty fragments."""
    return [s for v in _as_items(value) for s in re.split(r"[,\s]+", v) if s]


def _as_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    if not value:
        return []
    return list(value) if isinstance(value, (tuple, list)) else [value]


def _split_pair(item: str, expected: str) -> tuple[str, str]:
    try:
        name, raw = item.split("=", 1)
    except ValueError as e:
        raise click.BadParameter(f"Expected {expected}, got {item!r}") from e
    if not name.strip():
        raise click.BadParameter(f"Expected {expected}, got {item!r}")
    return name.strip(), raw.strip()


def parse_value(raw: str) -> Any:
    """Decode *raw* as JSON, falling back to the string itself."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LIB_LEVELS with any overrides supplied via the CLI.

    Raises:
        click.BadParameter: If an item is malformed or LEVEL is not a logging level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, level_str = _split_pair(item, "NAME=LEVEL")
        if not isinstance(lvl := getattr(logging, level_str.upper(), None), int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name] = lvl
    return levels


def parse_hash_options(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, Any]:
    """Click callback that parses KEY=VALUE pairs into a helper options hash.

    Each flag holds exactly one pair; later pairs override earlier ones for
    the same key.

    Raises:
        click.BadParameter: If an item is not of the form KEY=VALUE.
    """
    return {
        key: parse_value(raw)
        for key, raw in (_split_pair(item, "KEY=VALUE") for item in _as_items(value))
    }
