"""Fixtures for end-to-end CLI tests.

Provides a CliRunner, an isolated filesystem per test and a clean
configuration environment, so results never depend on the developer's shell.
"""

import pytest
from click.testing import CliRunner

from hbshelpers import config

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove hbshelpers/Cloudinary configuration from the environment."""
    for name in (
        config.CLOUD_NAME_ENV,
        config.CLOUDINARY_URL_ENV,
        config.DATE_FORMAT_ENV,
        "HBSHELPERS_LOGGER_LEVELS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield
