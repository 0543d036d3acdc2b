"""hbshelpers

Handlebars-style template helpers for server-side HTML rendering: date
formatting, Cloudinary image and CDN URLs, string manipulation, loose
comparisons and debug JSON output, exposed through a helper registry that a
template engine (Jinja2) can call with or without an explicit context.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
