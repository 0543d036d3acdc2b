"""Interface for media/asset URL builders."""

import abc
from collections.abc import Mapping
from typing import Any

# pylint: disable=too-few-public-methods


class UrlBuilder(abc.ABC):
    """Contract for building URLs to hosted media assets."""

    @abc.abstractmethod
    def build_url(self, asset_id: str, options: Mapping[str, Any]) -> str:
        """Build the delivery URL for *asset_id*.

        Args:
            asset_id: Logical asset identifier (public id, optionally with an
                extension).
            options: Transformation and delivery options. Implementations must
                honour ``resource_type`` and ``secure``, and must produce a
                versioned URL (``/v<N>/``) for identifiers inside a folder.

        Returns:
            The asset URL.
        """
