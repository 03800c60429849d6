"""Tests for structural pattern matching on Option and Result."""

import pyovariant as pv


def _describe_result(result: pv.Result[int, str]) -> str:
    match result:
        case pv.Result("Ok", value):
            return f"ok {value}"
        case pv.Result("Err", error):
            return f"err {error}"
        case _:
            raise AssertionError


def _describe_option(option: pv.Option[str]) -> str:
    match option:
        case pv.Option("Some", value):
            return f"some {value}"
        case _:
            return "none"


def test_result_pattern_matching() -> None:
    """Test Result pattern matching."""
    assert _describe_result(pv.Ok(42)) == "ok 42"
    assert _describe_result(pv.Err("Something went wrong")) == "err Something went wrong"


def test_option_pattern_matching() -> None:
    """Test Option pattern matching."""
    assert _describe_option(pv.Some("hello")) == "some hello"
    assert _describe_option(pv.Nothing()) == "none"


def test_nested_pattern_matching() -> None:
    """Test nested Result and Option patterns."""
    results: list[pv.Result[pv.Option[int], str]] = [
        pv.Ok(pv.Some(10)),
        pv.Ok(pv.Nothing()),
        pv.Err("error occurred"),
    ]
    described: list[str] = []
    for result in results:
        match result:
            case pv.Result("Ok", pv.Option("Some", value)):
                described.append(f"Ok(Some({value}))")
            case pv.Result("Ok", _):
                described.append("Ok(None)")
            case pv.Result("Err", error):
                described.append(f"Err({error!r})")
    assert described == ["Ok(Some(10))", "Ok(None)", "Err('error occurred')"]


def test_with_guards() -> None:
    """Test pattern matching with guards."""
    threshold = 10
    results: list[pv.Result[int, str]] = [pv.Ok(5), pv.Ok(15), pv.Err("invalid")]
    described: list[str] = []
    for result in results:
        match result:
            case pv.Result("Ok", value) if value <= threshold:
                described.append("small")
            case pv.Result("Ok", _):
                described.append("large")
            case pv.Result("Err", _):
                described.append("error")
    assert described == ["small", "large", "error"]
