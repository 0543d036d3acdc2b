"""Unit tests for the logging helpers."""

import logging

from rich.logging import RichHandler

from hbshelpers.logging import ThirdPartyPrefixFilter, config_console_handler, log_startup


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


def test_prefix_filter_marks_third_party_records():
    """Third-party records get a bracketed top-level package prefix."""
    record = _record("jinja2.environment")
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == "[jinja2]"  # type: ignore[attr-defined]


def test_prefix_filter_leaves_project_records_bare():
    """Project records get an empty prefix."""
    record = _record("hbshelpers.registry")
    ThirdPartyPrefixFilter().filter(record)
    assert record.prefix == ""  # type: ignore[attr-defined]


def test_console_handler_defaults():
    """The default handler keeps the requested level and filters prefixes."""
    handler = config_console_handler(level=logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode_forces_debug():
    """Debug mode lowers the level and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True, color=False)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_log_startup_reports_versions(caplog):
    """Startup logging includes the app version and library diagnostics."""
    logger = logging.getLogger("hbshelpers.test")
    with caplog.at_level(logging.DEBUG, logger="hbshelpers.test"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.INFO,
            handlers=[logging.NullHandler()],
            logger_levels={"jinja2": logging.WARNING},
        )
    messages = [rec.getMessage() for rec in caplog.records]
    assert "hbshelpers 9.9.9 (console=INFO)" in messages
    assert any(m.startswith("jinja2: ") for m in messages)
    assert "Handlers: ['NullHandler']" in messages
    assert "Per-logger overrides: {'jinja2': 'WARNING'}" in messages
