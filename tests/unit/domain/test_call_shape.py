"""Unit tests for call-shape classification and normalization."""

from types import SimpleNamespace

import pytest

from hbshelpers.domain.call_shape import (
    HelperOptions,
    OptionsOnly,
    WithContext,
    as_options,
    classify_call,
    is_options,
    normalize_call,
)


def test_options_alone_is_options_only():
    """A lone options payload means the template omitted the context."""
    opts = HelperOptions(hash={"format": "YYYY"})
    assert classify_call(opts) == OptionsOnly(opts)


def test_value_and_options_is_with_context():
    """An explicit value followed by options keeps the value."""
    opts = HelperOptions(hash={"width": 640})
    assert classify_call("sample", opts) == WithContext("sample", opts)


def test_value_without_options_gets_empty_options():
    """Direct Python calls may skip the options entirely."""
    shape = classify_call("sample")
    assert isinstance(shape, WithContext)
    assert shape.value == "sample"
    assert dict(shape.options.hash) == {}


def test_no_arguments_is_with_context_none():
    """A bare call has a None context and empty options."""
    shape = classify_call()
    assert isinstance(shape, WithContext)
    assert shape.value is None


def test_foreign_options_objects_are_recognised():
    """Any object with a ``hash`` attribute is an options payload."""
    foreign = SimpleNamespace(hash={"format": "MM"}, scope={"a": 1})
    assert is_options(foreign)
    shape = classify_call(foreign)
    assert isinstance(shape, OptionsOnly)
    assert shape.options.hash["format"] == "MM"
    assert shape.options.scope == {"a": 1}
    assert shape.options.fn is None


@pytest.mark.parametrize("value", ["text", 3, None, {"hash": 1}, ["hash"]])
def test_plain_values_are_not_options(value):
    """Strings, numbers, mappings and lists are context values."""
    assert not is_options(value)


def test_normalize_recovers_context_from_scope():
    """Options-only calls read the context from the scope via from_scope."""
    scope = {"publishedDate": "2024-01-01"}
    opts = HelperOptions(scope=scope)
    value, resolved = normalize_call(opts, from_scope=lambda s: s["publishedDate"])
    assert value == "2024-01-01"
    assert resolved is opts


def test_normalize_defaults_to_the_scope_itself():
    """Without from_scope the scope becomes the context."""
    scope = {"public_id": "abc"}
    value, _ = normalize_call(HelperOptions(scope=scope))
    assert value is scope


def test_normalize_keeps_explicit_context():
    """The scope is ignored when a context was passed."""
    opts = HelperOptions(scope={"publishedDate": "ignored"})
    value, resolved = normalize_call("explicit", opts, from_scope=lambda s: "nope")
    assert value == "explicit"
    assert resolved is opts


def test_hash_is_read_only_and_copied():
    """Options never expose the caller's dict for mutation."""
    source = {"format": "jpg"}
    opts = HelperOptions(hash=source)
    with pytest.raises(TypeError):
        opts.hash["format"] = "png"  # type: ignore[index]
    source["format"] = "png"
    assert opts.hash["format"] == "jpg"


def test_with_hash_returns_extended_copy():
    """with_hash leaves the original options untouched."""
    fn = lambda scope: "yes"  # noqa: E731
    opts = HelperOptions(hash={"a": 1}, scope="s", fn=fn)
    extended = opts.with_hash(b=2)
    assert dict(extended.hash) == {"a": 1, "b": 2}
    assert dict(opts.hash) == {"a": 1}
    assert extended.scope == "s"
    assert extended.fn is fn


def test_as_options_passes_helper_options_through():
    """HelperOptions instances are returned unchanged."""
    opts = HelperOptions()
    assert as_options(opts) is opts
