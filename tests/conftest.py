"""Global pytest fixtures for hbshelpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from hbshelpers.adapters.random_sources import SequenceRandomSource
from hbshelpers.bootstrap import build_registry
from hbshelpers.helpers import HELPERS
from hbshelpers.registry import HelperRegistry
from tests.fakes import FakeDateFormatter, FakePluralizer, FakeUrlBuilder

# pylint: disable=redefined-outer-name

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKS = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark items with the name of their top-level test directory (unit/integration/e2e)."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        relative = path.relative_to(TESTS_ROOT)
        marker_name = relative.parts[0] if len(relative.parts) > 1 else None
        if marker_name not in DEFAULT_MARKS:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def formatter() -> FakeDateFormatter:
    """A date formatter that echoes its inputs."""
    return FakeDateFormatter()


@pytest.fixture
def url_builder() -> FakeUrlBuilder:
    """A URL builder producing ``http(s)://cdn.example.com/v1/<id>``."""
    return FakeUrlBuilder()


@pytest.fixture
def pluralizer() -> FakePluralizer:
    """A pluralizer that appends "s"."""
    return FakePluralizer()


@pytest.fixture
def random_source() -> SequenceRandomSource:
    """A deterministic random source replaying 4242, 777777."""
    return SequenceRandomSource([4242, 777777])


@pytest.fixture
def fake_registry(formatter, url_builder, pluralizer, random_source) -> HelperRegistry:
    """The full helper set wired to fake collaborators."""
    return build_registry(
        HELPERS,
        {
            "formatter": formatter,
            "default_date_format": "MMM Do, YYYY",
            "url_builder": url_builder,
            "pluralizer": pluralizer,
            "random_source": random_source,
        },
    )
