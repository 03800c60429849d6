"""Tests for the repr configuration."""

from collections.abc import Iterator

import pytest

import pyovariant as pv


@pytest.fixture
def config() -> Iterator[pv.Config]:
    cfg = pv.get_config()
    saved = (cfg.max_items, cfg.depth, cfg.width, cfg.compact)
    yield cfg
    cfg.max_items, cfg.depth, cfg.width, cfg.compact = saved


def test_get_config_is_shared() -> None:
    """Test that the same instance is returned on every call."""
    assert pv.get_config() is pv.get_config()


def test_default_repr() -> None:
    """Test repr with the default settings."""
    assert repr(pv.Some({"a": 1})) == "Some({'a': 1})"
    assert repr(pv.Err("boom")) == "Err('boom')"
    assert repr(pv.Ok((1, "a"))) == "Ok((1, 'a'))"


def test_max_items_truncates(config: pv.Config) -> None:
    """Test that long payloads are truncated."""
    config.max_items = 2
    assert repr(pv.Some([1, 2, 3])) == "Some([1, 2]...)"
    assert repr(pv.Ok({"a": 1, "b": 2, "c": 3})) == "Ok({'a': 1, 'b': 2}...)"
    assert repr(pv.Some([1, 2])) == "Some([1, 2])"


def test_depth_limits_nesting(config: pv.Config) -> None:
    """Test that nested payloads are elided past the configured depth."""
    config.depth = 1
    assert repr(pv.Some([[1], [2]])) == "Some([[...], [...]])"


def test_long_message_stays_on_one_line() -> None:
    """Test that long string payloads use their plain repr."""
    message = "invalid literal for int() with base 10: " + "x " * 40
    rendered = repr(pv.Err(message))
    assert "\n" not in rendered
    assert rendered == f"Err({message!r})"


def test_into_result_error_repr() -> None:
    """Test the repr of a captured failure with a long description."""
    rendered = repr(pv.into_result(int, "y " * 60))
    assert rendered.startswith("Err(\"invalid literal for int() with base 10: ")
    assert "\n" not in rendered
