"""Install a helper registry into a Jinja2 environment.

Every helper becomes a Jinja global (and optionally a filter). Calls are
bridged to the registry's calling convention:

- keyword arguments become the options ``hash``;
- the template context becomes the options ``scope``, which is where helpers
  called without an explicit context read it from;
- the body of a ``{% call %}`` block becomes the ``fn`` continuation;
- undefined template variables are passed as None, and a None result renders
  as an empty string.

Example:
    ```python
    env = jinja2.Environment(autoescape=True)
    install_helpers(env, bootstrap().registry)
    env.from_string("{{ date(format='YYYY') }}").render()
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from jinja2 import Environment, Undefined, pass_context
from jinja2.runtime import Context

from hbshelpers.domain.call_shape import HelperOptions
from hbshelpers.registry import HelperRegistry


def _defined(value: Any) -> Any:
    return None if isinstance(value, Undefined) else value


def make_jinja_callable(registry: HelperRegistry, name: str) -> Callable[..., Any]:
    """Wrap the helper *name* as a context-aware Jinja callable."""

    @pass_context
    def call_helper(context: Context, *args: Any, **kwargs: Any) -> Any:
        caller = kwargs.pop("caller", None)
        options = HelperOptions(
            hash={key: _defined(value) for key, value in kwargs.items()},
            scope=context,
            fn=(lambda scope: caller()) if caller is not None else None,
        )
        result = registry.call_with_options(
            name, [_defined(arg) for arg in args], options
        )
        return "" if result is None else result

    call_helper.__name__ = name
    return call_helper


def install_helpers(
    env: Environment, registry: HelperRegistry, *, filters: bool = False
) -> Environment:
    """Expose every helper of *registry* in *env*.

    Args:
        env: The Jinja environment to extend.
        registry: Helpers to expose.
        filters: Also register the helpers as filters, so that
            ``{{ title|trim }}`` works. Note that this shadows Jinja's built-in
            ``trim`` filter.

    Returns:
        The same environment, for chaining.
    """
    for name in registry:
        bridged = make_jinja_callable(registry, name)
        env.globals[name] = bridged
        if filters:
            env.filters[name] = bridged
    return env
