"""Call shapes for template helpers.

A template engine can invoke the same helper in two ways:

- ``helper(value, options)`` when the template supplies an explicit context, or
- ``helper(options)`` when it only supplies keyword options, in which case the
  context has to be recovered from the current rendering scope.

`classify_call` turns the raw arguments into one of the two explicit variants,
and `normalize_call` resolves either variant into a ``(value, options)`` pair.
Every helper that accepts an optional context goes through `normalize_call`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

Block: TypeAlias = Callable[[Any], str]


def _freeze(values: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class HelperOptions:
    """Keyword options and rendering state passed along with a helper call.

    Attributes:
        hash: Keyword options given at the call site (read-only).
        scope: The current rendering scope. Helpers read the implicit context
            from here instead of relying on ambient binding.
        fn: Block continuation rendering the "then" branch, if any.
        inverse: Block continuation rendering the "else" branch, if any.
    """

    hash: Mapping[str, Any] = field(default_factory=dict)
    scope: Any = None
    fn: Block | None = None
    inverse: Block | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hash", _freeze(self.hash))

    def with_hash(self, **updates: Any) -> HelperOptions:
        """Return a copy whose hash is extended with *updates*."""
        return HelperOptions(
            hash={**self.hash, **updates},
            scope=self.scope,
            fn=self.fn,
            inverse=self.inverse,
        )


@dataclass(frozen=True)
class WithContext:
    """A call that supplied an explicit context value."""

    value: Any
    options: HelperOptions


@dataclass(frozen=True)
class OptionsOnly:
    """A call that supplied keyword options but no context."""

    options: HelperOptions


CallShape: TypeAlias = WithContext | OptionsOnly


def is_options(value: Any) -> bool:
    """Return True if *value* is an options payload rather than a context.

    Anything carrying a ``hash`` attribute counts, so option objects built by
    other engine bridges are recognised as well as `HelperOptions`.
    """
    return isinstance(value, HelperOptions) or hasattr(value, "hash")


def as_options(value: Any) -> HelperOptions:
    """Coerce an options payload into `HelperOptions`."""
    if isinstance(value, HelperOptions):
        return value
    return HelperOptions(
        hash=getattr(value, "hash", None) or {},
        scope=getattr(value, "scope", None),
        fn=getattr(value, "fn", None),
        inverse=getattr(value, "inverse", None),
    )


def classify_call(context: Any = None, options: Any = None) -> CallShape:
    """Work out which calling convention was used.

    Args:
        context: First positional argument received by the helper.
        options: Second positional argument, or None when omitted.

    Returns:
        `OptionsOnly` when *options* is missing and *context* is itself an
        options payload, otherwise `WithContext` (with empty options when none
        were supplied).
    """
    if options is None and is_options(context):
        return OptionsOnly(as_options(context))
    if options is None:
        return WithContext(context, HelperOptions())
    return WithContext(context, as_options(options))


def normalize_call(
    context: Any = None,
    options: Any = None,
    *,
    from_scope: Callable[[Any], Any] | None = None,
) -> tuple[Any, HelperOptions]:
    """Resolve a helper call into an explicit ``(value, options)`` pair.

    Args:
        context: First positional argument received by the helper.
        options: Second positional argument, or None when omitted.
        from_scope: Extracts the implicit context from the rendering scope for
            options-only calls. Defaults to using the scope itself.

    Returns:
        The context value and the call's options.
    """
    shape = classify_call(context, options)
    if isinstance(shape, OptionsOnly):
        scope = shape.options.scope
        value = from_scope(scope) if from_scope is not None else scope
        return value, shape.options
    return shape.value, shape.options
