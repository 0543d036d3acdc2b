"""Block helpers for conditional rendering.

Usage in a template::

    {% call ifeq(post.category_id, request.args.category) %}selected{% endcall %}

Both helpers compare with `loosely_equal`, so ``ifeq(1, "1")`` renders the
"then" branch. A missing branch renders as an empty string.
"""

from typing import Any

from hbshelpers.domain.call_shape import Block, as_options
from hbshelpers.domain.comparison import loosely_equal


def _render(block: Block | None, scope: Any) -> str:
    return block(scope) if block is not None else ""


def ifeq(a: Any, b: Any, options: Any) -> str:
    """Render ``options.fn`` when *a* loosely equals *b*, else ``options.inverse``."""
    opts = as_options(options)
    if loosely_equal(a, b):
        return _render(opts.fn, opts.scope)
    return _render(opts.inverse, opts.scope)


def ifnoteq(a: Any, b: Any, options: Any) -> str:
    """Render ``options.fn`` when *a* does not loosely equal *b*, else ``options.inverse``."""
    opts = as_options(options)
    if not loosely_equal(a, b):
        return _render(opts.fn, opts.scope)
    return _render(opts.inverse, opts.scope)
