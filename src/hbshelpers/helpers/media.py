"""Image, file and CDN helpers.

Usage::

    {{ cloudinaryUrl(image, width=640, height=480, crop='fill', gravity='north') }}
    {{ cdnAsset(product='my-site-module', type='js') }}
    {{ img(local_file) }}
    <i class="fa fa-{{ fileType(attachment) }}"></i>
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from markupsafe import Markup, escape

from hbshelpers.config import CDN_VERSION_RANGE
from hbshelpers.domain.call_shape import normalize_call
from hbshelpers.domain.descriptors import get_field
from hbshelpers.interfaces.random_source import RandomSource
from hbshelpers.interfaces.url_builder import UrlBuilder

from .text import secure_url

# application/* subtype -> icon name
APPLICATION_ICONS: Mapping[str, str] = {
    "pdf": "pdf",
    "zip": "zip",
    "ogg": "audio",
    "vnd.openxmlformats-officedocument.wordprocessingml.document": "word",
    "vnd.openxmlformats-officedocument.presentationml.presentation": "powerpoint",
    "vnd.openxmlformats-officedocument.spreadsheetml.sheet": "excel",
}

MEDIA_TYPES = frozenset({"audio", "video", "image"})

_VERSION_SEGMENT = re.compile(r"/v1/")


# ============================================================================
#                               Cloudinary
# ============================================================================


def cloudinary_url(
    context: Any = None, options: Any = None, *, url_builder: UrlBuilder
) -> str | None:
    """Return an https URL for a Cloudinary image.

    The context is either an image descriptor (``public_id`` and ``format``)
    or a string public id. When called with options only, the rendering scope
    is used as the descriptor. WebP/AVIF delivery is enabled through
    ``fetch_format=auto`` unless ``format`` is ``svg``.

    Returns:
        The URL, or None when the context is neither a descriptor nor a string.
    """
    image, opts = normalize_call(context, options)
    url_options = dict(opts.hash)
    if url_options.get("format") != "svg":
        url_options["fetch_format"] = "auto"

    if public_id := get_field(image, "public_id"):
        asset_id = f"{public_id}.{get_field(image, 'format', '')}".rstrip(".")
    elif isinstance(image, str) and image:
        asset_id = image
    else:
        return None
    return secure_url(url_builder.build_url(asset_id, url_options))


def cloudinary_img(
    context: Any = None, options: Any = None, *, url_builder: UrlBuilder
) -> str | None:
    """Alias of `cloudinary_url`."""
    return cloudinary_url(context, options, url_builder=url_builder)


def cdn_asset(
    context: Any = None,
    options: Any = None,
    *,
    url_builder: UrlBuilder,
    random_source: RandomSource,
) -> str | None:
    """Return the URL of the latest build of a CDN-hosted asset.

    Hash keys:
        product: Asset folder (required).
        type: File extension (required).
        env: Environment file name used when ``path`` is absent
            (default ``production``).
        path: Explicit file path inside the product folder.
        fetch: Cloudinary resource type (default ``raw``).

    Without ``path`` the URL targets ``product/env.type`` and its version
    segment is replaced with a random number so caches are bypassed.

    Returns:
        The asset URL, or None when ``product`` or ``type`` is missing.
    """
    _, opts = normalize_call(context, options)
    product = opts.hash.get("product")
    ext = opts.hash.get("type")
    if not product or not ext:
        return None

    url_options = {"resource_type": opts.hash.get("fetch") or "raw", "secure": True}
    if path := opts.hash.get("path"):
        return url_builder.build_url(f"{product}/{path}.{ext}", url_options)

    env = opts.hash.get("env") or "production"
    url = url_builder.build_url(f"{product}/{env}.{ext}", url_options)
    version = random_source.randint(*CDN_VERSION_RANGE)
    return _VERSION_SEGMENT.sub(f"/v{version}/", url, count=1)


# ============================================================================
#                               Local files
# ============================================================================


def img(image: Any) -> Markup:
    """Return an ``<img>`` tag for a local file descriptor.

    The descriptor's ``path`` has its ``./public/`` prefix removed. An empty
    safe string is returned when the descriptor has no ``filename``.
    """
    filename = get_field(image, "filename")
    if filename is None:
        return Markup("")
    path = escape(get_field(image, "path", "")).replace("./public/", "")
    return Markup("<img src='{0}/{1}' alt='{1}'>").format(path, filename)


def file_type(file: Any) -> str:
    """Return a Font Awesome style icon token for a file's MIME type.

    ``audio/*``, ``video/*`` and ``image/*`` map to their top-level type; a
    handful of ``application/*`` subtypes have their own icons. Matches get an
    ``-o`` suffix (``pdf-o``); everything else is ``file``.
    """
    mime = get_field(file, "filetype")
    if not isinstance(mime, str) or not mime:
        return "file"

    top_level = mime.split("/", 1)[0]
    if top_level in MEDIA_TYPES:
        icon = top_level
    else:
        icon = APPLICATION_ICONS.get(mime.removeprefix("application/"))
    return f"{icon}-o" if icon else "file"
