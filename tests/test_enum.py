"""Tests for the generic tagged union."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

import pyovariant as pv


@dataclass(slots=True, frozen=True)
class V4(pv.Variant):
    value: str


@dataclass(slots=True, frozen=True)
class V6(pv.Variant):
    value: str


@dataclass(slots=True, frozen=True)
class Unknown(pv.Variant):
    tag: ClassVar[str] = "Unspecified"


class IpAddr(pv.Enum[V4 | V6 | Unknown]):
    variants = (V4, V6, Unknown)


def test_tag_defaults_to_class_name() -> None:
    """Test default and explicit tags."""
    assert V4.tag == "V4"
    assert Unknown.tag == "Unspecified"


def test_construct_from_state() -> None:
    """Test construction from a variant object."""
    addr = IpAddr(V6("::1"))
    assert addr.variant == "V6"
    assert addr.value == "::1"


def test_construct_from_pair() -> None:
    """Test construction from a (discriminant, payload) pair."""
    assert IpAddr.of("V4", "127.0.0.1") == IpAddr(V4("127.0.0.1"))
    assert IpAddr.of("Unspecified").value is None


def test_unknown_tag_is_rejected() -> None:
    """Test that of() refuses a tag outside the closed set."""
    with pytest.raises(ValueError, match="expected one of: V4, V6, Unspecified"):
        IpAddr.of("V5", "x")


def test_foreign_variant_is_rejected() -> None:
    """Test that an Enum only accepts its own variants."""
    with pytest.raises(TypeError, match="SomeState is not a variant of IpAddr"):
        IpAddr(pv.Some(1)._inner)  # type: ignore[private-access]


def test_matches() -> None:
    """Test matches with tags and classes."""
    addr = IpAddr.of("V4", "10.0.0.1")
    assert addr.matches("V4")
    assert addr.matches(V4)
    assert not addr.matches("V6")
    assert not addr.matches(V6)
    assert not addr.matches("nonsense")


def test_match_on() -> None:
    """Test that match_on only fires for the active variant."""
    seen: list[object] = []
    addr = IpAddr.of("V4", "10.0.0.1")
    assert addr.match_on("V6", seen.append).match_on("V4", seen.append) is addr
    IpAddr.of("Unspecified").match_on("Unspecified", lambda: seen.append("unit"))
    assert seen == ["10.0.0.1", "unit"]


def test_dispatch() -> None:
    """Test dispatch over every variant."""
    handlers = {"V4": len, "V6": lambda s: -len(s), "Unspecified": lambda: 0}
    assert IpAddr.of("V4", "1.1.1.1").dispatch(handlers) == 7
    assert IpAddr.of("V6", "::1").dispatch(handlers) == -3
    assert IpAddr.of("Unspecified").dispatch(handlers) == 0


def test_dispatch_requires_every_handler() -> None:
    """Test that an incomplete handler mapping is refused."""
    with pytest.raises(ValueError, match="missing handlers for IpAddr variants: V6"):
        IpAddr.of("V4", "1.1.1.1").dispatch({"V4": len, "Unspecified": lambda: 0})


def test_repr() -> None:
    """Test repr for payload and unit variants."""
    assert repr(IpAddr.of("V4", "1.1.1.1")) == "V4('1.1.1.1')"
    assert repr(IpAddr.of("Unspecified")) == "Unspecified()"
    assert repr(pv.Nothing()) == "None()"


def test_into() -> None:
    """Test piping an enum into a function."""
    assert IpAddr.of("V4", "1.1.1.1").into(lambda e: e.variant) == "V4"
