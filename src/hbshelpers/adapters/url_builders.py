"""Cloudinary delivery URL builder backed by the Cloudinary SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import cloudinary.utils

from hbshelpers import config
from hbshelpers.interfaces.url_builder import UrlBuilder

# pylint: disable=too-few-public-methods


class CloudinaryUrlBuilder(UrlBuilder):
    """Build Cloudinary delivery URLs with `cloudinary.utils.cloudinary_url`.

    Options use the SDK's parameter names (``width``, ``crop``,
    ``fetch_format``, ``resource_type``, ``secure`` ...). Only URL
    construction is performed; nothing is uploaded or signed.

    Args:
        cloud_name: Cloud to build URLs for. When None, the cloud name is read
            from the environment each time a URL is built.
        secure: Default scheme choice; a ``secure`` option overrides it.
    """

    def __init__(self, cloud_name: str | None = None, secure: bool = False) -> None:
        self._cloud_name = cloud_name
        self._secure = secure

    def build_url(self, asset_id: str, options: Mapping[str, Any]) -> str:
        """Build the delivery URL for *asset_id*.

        Raises:
            CloudNameNotSetError: If neither the builder, *options* nor the
                environment supply a cloud name.
        """
        sdk_options = {"secure": self._secure, **options}
        sdk_options["cloud_name"] = (
            sdk_options.get("cloud_name")
            or self._cloud_name
            or config.require_cloud_name()
        )
        url, _ = cloudinary.utils.cloudinary_url(str(asset_id), **sdk_options)
        return url
