"""Tests for the Result type and the into_result adapter."""

import logging

import pytest

import pyovariant as pv


def test_state_predicates() -> None:
    """Test is_ok / is_err on both variants."""
    assert pv.Ok(1).is_ok()
    assert not pv.Ok(1).is_err()
    assert pv.Err("e").is_err()
    assert not pv.Err("e").is_ok()


def test_ok_discards_error() -> None:
    """Test conversion of a Result into an Option."""
    assert pv.Ok(1).ok() == pv.Some(1)
    assert pv.Err("e").ok() == pv.Nothing()
    assert pv.Err("e").err() == pv.Some("e")
    assert pv.Ok(1).err() == pv.Nothing()


def test_match() -> None:
    """Test that match calls the handler of the active variant."""
    assert pv.Ok(2).match(ok=lambda v: v * 10, err=len) == 20
    assert pv.Err("four").match(ok=lambda v: v * 10, err=len) == 4


def test_unwrap_family() -> None:
    """Test unwrap, unwrap_err and their failures."""
    assert pv.Ok(1).unwrap() == 1
    assert pv.Err("e").unwrap_err() == "e"
    with pytest.raises(pv.ResultUnwrapError, match="called `unwrap` on Err: 'e'"):
        pv.Err("e").unwrap()
    with pytest.raises(pv.ResultUnwrapError, match="called `unwrap_err` on Ok"):
        pv.Ok(1).unwrap_err()


def test_expect_family() -> None:
    """Test expect and expect_err messages."""
    assert pv.Ok(1).expect("unused") == 1
    with pytest.raises(pv.ResultUnwrapError, match="loading failed: disk full"):
        pv.Err("disk full").expect("loading failed")
    with pytest.raises(pv.ResultUnwrapError, match=r"expected Err, got Ok\(1\)"):
        pv.Ok(1).expect_err("should fail")


def test_unwrap_or_variants() -> None:
    """Test unwrap_or and unwrap_or_else."""
    assert pv.Ok(1).unwrap_or(0) == 1
    assert pv.Err("e").unwrap_or(0) == 0
    assert pv.Err("abc").unwrap_or_else(len) == 3


def test_map_and_map_err() -> None:
    """Test that map and map_err only touch their own variant."""
    err: pv.Result[int, str] = pv.Err("e")
    assert pv.Ok(2).map(lambda x: x + 1) == pv.Ok(3)
    assert err.map(lambda x: x + 1) is err
    assert err.map_err(str.upper) == pv.Err("E")
    ok = pv.Ok(2)
    assert ok.map_err(str.upper) is ok


def test_and_then_short_circuits() -> None:
    """Test that and_then never calls the function on Err."""
    calls: list[int] = []

    def _step(x: int) -> pv.Result[int, str]:
        calls.append(x)
        return pv.Ok(x + 1)

    assert pv.Ok(1).and_then(_step).and_then(_step) == pv.Ok(3)
    assert pv.Err("stop").and_then(_step) == pv.Err("stop")
    assert calls == [1, 2]


def test_or_else_recovers() -> None:
    """Test or_else on both variants."""
    assert pv.Err("e").or_else(lambda e: pv.Ok(len(e))) == pv.Ok(1)
    assert pv.Ok(5).or_else(lambda e: pv.Ok(len(e))) == pv.Ok(5)


def test_inspect_hooks() -> None:
    """Test inspect and inspect_err."""
    seen: list[object] = []
    pv.Ok(1).inspect(seen.append).inspect_err(seen.append)
    pv.Err("e").inspect(seen.append).inspect_err(seen.append)
    assert seen == [1, "e"]


def test_predicates_with_functions() -> None:
    """Test is_ok_and and is_err_and."""
    assert pv.Ok(2).is_ok_and(lambda x: x == 2)
    assert not pv.Err(2).is_ok_and(lambda x: x == 2)
    assert pv.Err(2).is_err_and(lambda x: x == 2)


def test_result_is_hashable() -> None:
    """Test that Result values can be used in sets."""
    assert {pv.Ok(1), pv.Ok(1), pv.Err(1)} == {pv.Ok(1), pv.Err(1)}


def test_ok_and_err_are_distinct() -> None:
    """Test equality across variants and types."""
    assert pv.Ok(1) != pv.Err(1)
    assert pv.Ok(1) != pv.Some(1)


def test_into_result_ok() -> None:
    """Test into_result on a successful call."""
    assert pv.into_result(lambda: 5) == pv.Ok(5)
    assert pv.into_result(max, 1, 3) == pv.Ok(3)


def test_into_result_captures_description() -> None:
    """Test that the raised exception becomes an Err with its message."""

    def _boom() -> int:
        msg = "boom"
        raise ValueError(msg)

    assert pv.into_result(_boom) == pv.Err("boom")


def test_into_result_calls_once() -> None:
    """Test that the wrapped function is executed exactly once, immediately."""
    calls: list[None] = []
    pv.into_result(lambda: calls.append(None))
    assert len(calls) == 1


def test_into_result_lets_base_exceptions_through() -> None:
    """Test that KeyboardInterrupt is not converted into an Err."""

    def _interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        pv.into_result(_interrupt)


def test_into_result_logs_captured_failure(caplog: pytest.LogCaptureFixture) -> None:
    """Test that captured failures are logged at debug level."""

    def _fail() -> None:
        msg = "no route"
        raise LookupError(msg)

    with caplog.at_level(logging.DEBUG, logger="pyovariant"):
        pv.into_result(_fail)
    assert "captured LookupError: no route" in caplog.text


def test_catch_into_is_deprecated() -> None:
    """Test the deprecated catch_into alias."""
    with pytest.warns(
        DeprecationWarning, match="`catch_into` is deprecated, use `into_result` instead"
    ):
        assert pv.catch_into(lambda: 1) == pv.Ok(1)
    assert pv.catch_into.__name__ == "catch_into"
    assert pv.catch_into.__doc__ == "Deprecated alias of `into_result`."
