"""CLI helpers for hbshelpers.

Utilities used by the command-line interface: a stderr warning emitter with
emoji→ASCII fallbacks, and Click callbacks that parse ``NAME=LEVEL`` and
``KEY=VALUE`` options.
"""

from .messages import warn
from .option_parsers import parse_hash_options, parse_log_level, parse_value

__all__ = ["warn", "parse_hash_options", "parse_log_level", "parse_value"]
