"""Unit tests for the HelperRegistry."""

import logging
from functools import partial

import pytest

from hbshelpers.domain.call_shape import HelperOptions
from hbshelpers.domain.errors import DuplicateHelperError, UnknownHelperError
from hbshelpers.registry import HelperRegistry

# pylint: disable=unused-argument


# --- Assert Helpers ---


def assert_log_message(records, message, level: str) -> None:
    """Assert that a log message is in the log records."""
    log_msgs = [rec.getMessage() for rec in records if rec.levelname == level]
    assert message in log_msgs


# --- Fake helpers ---


def shout(value):
    """One positional argument, no room for options."""
    return f"{value}!"


def with_options(value=None, options=None):
    """Returns what it received."""
    return (value, options)


def explode(options=None):
    """Always fails."""
    raise ValueError("boom")


# --- Tests ---


def test_call_dispatches_and_logs(caplog):
    """call() routes to the helper and logs the dispatch at DEBUG."""
    registry = HelperRegistry({"shout": shout})
    with caplog.at_level(logging.DEBUG, logger="hbshelpers.registry"):
        assert registry.call("shout", "hey") == "hey!"
    assert_log_message(caplog.records, "Calling helper shout (shout) with ('hey',)", "DEBUG")


def test_unknown_helper_raises_and_logs(caplog):
    """Unknown names raise UnknownHelperError and are logged as errors."""
    registry = HelperRegistry()
    with caplog.at_level(logging.ERROR, logger="hbshelpers.registry"):
        with pytest.raises(UnknownHelperError, match="'missing'"):
            registry.call("missing")
    assert_log_message(caplog.records, "No helper registered under the name missing", "ERROR")


def test_helper_exception_is_logged_and_reraised(caplog):
    """Helper failures propagate unchanged after being logged."""
    registry = HelperRegistry({"explode": explode})
    with caplog.at_level(logging.ERROR, logger="hbshelpers.registry"):
        with pytest.raises(ValueError, match="boom"):
            registry.call("explode", HelperOptions())
    assert_log_message(caplog.records, "Exception in helper explode (explode)", "ERROR")
    assert caplog.records[-1].exc_info is not None


def test_partial_helpers_are_logged_by_function_name(caplog):
    """Helpers with bound collaborators are reported by their wrapped name."""
    registry = HelperRegistry({"p": partial(with_options, options="bound")})
    with caplog.at_level(logging.DEBUG, logger="hbshelpers.registry"):
        registry.call("p", 1)
    assert_log_message(caplog.records, "Calling helper p (with_options) with (1,)", "DEBUG")


def test_register_rejects_duplicates_unless_replacing():
    """Names are unique unless replace=True."""
    registry = HelperRegistry({"shout": shout})
    with pytest.raises(DuplicateHelperError):
        registry.register("shout", with_options)
    registry.register("shout", with_options, replace=True)
    assert registry["shout"] is with_options


def test_mapping_protocol():
    """The registry behaves like a read-only mapping of names."""
    registry = HelperRegistry({"b": shout, "a": with_options})
    assert "a" in registry
    assert "c" not in registry
    assert len(registry) == 2
    assert set(registry) == {"a", "b"}
    assert registry.names() == ["a", "b"]
    with pytest.raises(UnknownHelperError):
        registry["c"]  # pylint: disable=pointless-statement


def test_as_mapping_is_read_only():
    """The exposed mapping cannot be used to add helpers."""
    view = HelperRegistry({"shout": shout}).as_mapping()
    with pytest.raises(TypeError):
        view["other"] = shout  # type: ignore[index]


def test_call_with_options_appends_options_when_there_is_room():
    """A spare positional slot receives the options."""
    registry = HelperRegistry({"w": with_options})
    opts = HelperOptions(hash={"k": 1})
    assert registry.call_with_options("w", ["v"], opts) == ("v", opts)
    assert registry.call_with_options("w", [], opts) == (opts, None)


def test_call_with_options_drops_options_for_plain_helpers():
    """Single-argument helpers are called without options."""
    registry = HelperRegistry({"shout": shout})
    assert registry.call_with_options("shout", ["hi"], HelperOptions()) == "hi!"


def test_call_with_options_supports_varargs():
    """*args helpers always get the options."""
    registry = HelperRegistry({"all": lambda *args: args})
    opts = HelperOptions()
    assert registry.call_with_options("all", [1, 2], opts) == (1, 2, opts)


def test_call_with_options_unknown_name():
    """Unknown names fail before any call is made."""
    with pytest.raises(UnknownHelperError):
        HelperRegistry().call_with_options("nope", [], HelperOptions())
