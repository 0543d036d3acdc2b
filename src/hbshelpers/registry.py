"""Helper registry: the name -> helper mapping handed to a template engine."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from hbshelpers.domain.errors import DuplicateHelperError, UnknownHelperError

logger = logging.getLogger(__name__)

Helper = Callable[..., Any]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _accepts_options(helper: Helper, nargs: int) -> bool:
    """Return True if *helper* can take one more positional argument after *nargs*."""
    try:
        params = inspect.signature(helper).parameters.values()
    except (TypeError, ValueError):
        return False
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return True
    return sum(p.kind in _POSITIONAL for p in params) > nargs


class HelperRegistry:
    """A registry of named template helpers.

    The registry's main responsibility is to route a helper name to its
    callable. It also logs every dispatch and any exception raised by a helper
    (typically a failing collaborator such as the date formatter), then
    re-raises it unchanged so the caller decides how to handle it.

    Args:
        helpers: A mapping of helper names to callables. Collaborators must
            already be bound (see `hbshelpers.bootstrap.build_registry`).

    Note:
        Registered helpers are stateless, so a single registry can be shared
        by concurrent renders.
    """

    def __init__(self, helpers: Mapping[str, Helper] | None = None) -> None:
        self._helpers: dict[str, Helper] = dict(helpers or {})

    def register(self, name: str, helper: Helper, *, replace: bool = False) -> None:
        """Register *helper* under *name*.

        Raises:
            DuplicateHelperError: If *name* is taken and *replace* is False.
        """
        if name in self._helpers and not replace:
            raise DuplicateHelperError(name)
        logger.debug("Registering helper %s as %s", self._get_helper_name(helper), name)
        self._helpers[name] = helper

    def __getitem__(self, name: str) -> Helper:
        try:
            return self._helpers[name]
        except KeyError as e:
            raise UnknownHelperError(name) from e

    def __contains__(self, name: object) -> bool:
        return name in self._helpers

    def __iter__(self) -> Iterator[str]:
        return iter(self._helpers)

    def __len__(self) -> int:
        return len(self._helpers)

    def names(self) -> list[str]:
        """Return the registered helper names, sorted."""
        return sorted(self._helpers)

    def as_mapping(self) -> Mapping[str, Helper]:
        """Return a read-only view of the registered helpers."""
        return MappingProxyType(self._helpers)

    def call(self, name: str, *args: Any) -> Any:
        """Invoke the helper registered under *name* with *args*.

        Args:
            name: Registered helper name.
            *args: Positional arguments, usually ending with the call's options.

        Returns:
            Whatever the helper returns.

        Raises:
            UnknownHelperError: If no helper is registered under *name*.
            Exception: If the helper raises an exception.
        """
        if (helper := self._helpers.get(name)) is None:
            logger.error("No helper registered under the name %s", name)
            raise UnknownHelperError(name)

        helper_name = self._get_helper_name(helper)
        logger.debug("Calling helper %s (%s) with %r", name, helper_name, args)
        try:
            return helper(*args)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Exception in helper %s (%s)", name, helper_name)
            raise

    def call_with_options(self, name: str, args: Sequence[Any], options: Any) -> Any:
        """Invoke a helper the way a template engine does.

        *options* is appended to *args* only when the helper has a positional
        slot left for it, so ``trim(value)`` and ``date(value, options)`` can
        both be driven by the same call site.
        """
        helper = self[name]
        if _accepts_options(helper, len(args)):
            return self.call(name, *args, options)
        return self.call(name, *args)

    @staticmethod
    def _get_helper_name(fn: Helper) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
