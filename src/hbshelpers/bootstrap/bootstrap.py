"""Bootstrap the helper registry with its collaborators."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

from hbshelpers import config
from hbshelpers.adapters.date_formatters import ArrowDateFormatter
from hbshelpers.adapters.pluralizers import InflectionPluralizer
from hbshelpers.adapters.random_sources import SystemRandomSource
from hbshelpers.adapters.url_builders import CloudinaryUrlBuilder
from hbshelpers.helpers import HELPERS
from hbshelpers.registry import HelperRegistry


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    registry: HelperRegistry


def default_dependencies(
    cloud_name: str | None = None, date_format: str | None = None
) -> dict[str, object]:
    """Build the production collaborators, falling back to configuration."""
    return {
        "formatter": ArrowDateFormatter(),
        "default_date_format": date_format or config.get_date_format(),
        "url_builder": CloudinaryUrlBuilder(cloud_name=cloud_name),
        "pluralizer": InflectionPluralizer(),
        "random_source": SystemRandomSource(),
    }


def build_registry(
    helpers: Mapping[str, Callable[..., object]],
    dependencies: Mapping[str, object],
) -> HelperRegistry:
    """Build a helper registry with injected dependencies."""
    injected_helpers = {
        name: inject_dependencies(helper, dependencies)
        for name, helper in helpers.items()
    }
    return HelperRegistry(injected_helpers)


def bootstrap(
    *,
    cloud_name: str | None = None,
    date_format: str | None = None,
    dependencies: Mapping[str, object] | None = None,
) -> AppContainer:
    """Bootstrap the helper registry.

    Args:
        cloud_name: Cloudinary cloud name; defaults to the environment.
        date_format: Default ``date`` pattern; defaults to the environment.
        dependencies: Collaborators overriding the defaults by name.
    """
    deps = {
        **default_dependencies(cloud_name=cloud_name, date_format=date_format),
        **(dependencies or {}),
    }
    return AppContainer(registry=build_registry(HELPERS, deps))


def inject_dependencies(
    helper: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a helper function based on its parameters."""
    params = inspect.signature(helper).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    if not deps:
        return helper
    return partial(helper, **deps)
