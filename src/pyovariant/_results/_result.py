from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, ClassVar

import cytoolz as cz

from .._core import Enum, Variant, deprecated
from ._option import Nothing, Option, Some
from ._states import ErrState, OkState

logger = logging.getLogger(__name__)


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](Enum[OkState[T] | ErrState[E]]):
    """Either success (`Ok`) or failure (`Err`).

    A `Result` is immutable: every combinator returns a new instance, or **self** when nothing changes.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> def parse_port(raw: str) -> pv.Result[int, str]:
    ...     if not raw.isdigit():
    ...         return pv.Err(f"not a number: {raw!r}")
    ...     return pv.Ok(int(raw))
    >>> parse_port("8080").map(lambda p: p + 1)
    Ok(8081)
    >>> parse_port("http")
    Err("not a number: 'http'")

    ```
    """

    __slots__ = ()
    variants: ClassVar[tuple[type[Variant], ...]] = (OkState, ErrState)

    def is_ok(self) -> bool:
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        return isinstance(self._inner, OkState)

    def is_err(self) -> bool:
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        return isinstance(self._inner, ErrState)

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """
        Returns True if the result is Ok and the value inside of it matches a predicate.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok(2).is_ok_and(lambda x: x > 1)
        True
        >>> pv.Err("hey").is_ok_and(lambda x: x > 1)
        False

        ```
        """
        return self.is_ok() and predicate(self.unwrap())

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """
        Returns True if the result is Err and the error inside of it matches a predicate.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Err("not found").is_err_and(lambda e: "found" in e)
        True
        >>> pv.Ok(1).is_err_and(lambda e: "found" in e)
        False

        ```
        """
        return self.is_err() and predicate(self.unwrap_err())

    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Equivalent to Rust's Result::unwrap().

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok(2).unwrap()
        2
        >>> pv.Err("emergency failure").unwrap()
        Traceback (most recent call last):
            ...
        pyovariant._results._result.ResultUnwrapError: called `unwrap` on Err: 'emergency failure'

        ```
        """
        if isinstance(self._inner, OkState):
            return self._inner.value
        raise ResultUnwrapError(f"called `unwrap` on Err: {self._inner.value!r}")

    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Equivalent to Rust's Result::unwrap_err().
        """
        if isinstance(self._inner, ErrState):
            return self._inner.value
        raise ResultUnwrapError("called `unwrap_err` on Ok")

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Returns:
            The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Equivalent to Rust's Result::expect().
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Equivalent to Rust's Result::expect_err().
        """
        if self.is_err():
            return self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: expected Err, got Ok({self.unwrap()!r})")

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Equivalent to Rust's Result::unwrap_or().
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from the error.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok(2).unwrap_or_else(len)
        2
        >>> pv.Err("foo").unwrap_or_else(len)
        3

        ```
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Equivalent to Rust's Result::map().
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return self  # type: ignore[return-value]

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Err(404).map_err(lambda code: f"error code: {code}")
        Err('error code: 404')
        >>> pv.Ok(2).map_err(lambda code: f"error code: {code}")
        Ok(2)

        ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return self  # type: ignore[return-value]

    def map_or_else[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """
        Calls **ok** with the Ok value, or **err** with the Err value, and returns the result.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok("foo").map_or_else(len, lambda e: -1)
        3
        >>> pv.Err("bar").map_or_else(len, lambda e: -1)
        -1

        ```
        """
        if self.is_ok():
            return ok(self.unwrap())
        return err(self.unwrap_err())

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Calls **f** with the Ok value, then returns the result unchanged."""
        if self.is_ok():
            f(self.unwrap())
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """
        Calls **f** with the Err value, then returns the result unchanged.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Err("oops").inspect_err(print).unwrap_or(0)
        oops
        0

        ```
        """
        if self.is_err():
            f(self.unwrap_err())
        return self

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns Err.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> def half(x: int) -> pv.Result[int, str]:
        ...     return pv.Ok(x // 2) if x % 2 == 0 else pv.Err(f"{x} is odd")
        >>> pv.Ok(8).and_then(half).and_then(half)
        Ok(2)
        >>> pv.Ok(6).and_then(half).and_then(half)
        Err('3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.unwrap())
        return self  # type: ignore[return-value]

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Calls f with the error if the result is Err, otherwise returns Ok.

        Equivalent to Rust's Result::or_else().
        """
        if self.is_ok():
            return self  # type: ignore[return-value]
        return f(self.unwrap_err())

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to None.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok(2).ok()
        Some(2)
        >>> pv.Err("nothing here").ok()
        None()

        ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return Nothing()

    def err(self) -> Option[E]:
        """
        Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to None.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok(2).err()
        None()
        >>> pv.Err("nothing here").err()
        Some('nothing here')

        ```
        """
        if self.is_err():
            return Some(self.unwrap_err())
        return Nothing()

    def match[R](self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """
        Calls **ok** with the Ok value, or **err** with the Err value, and returns the result.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok(3).match(ok=str, err=lambda e: f"failed: {e}")
        '3'
        >>> pv.Err("boom").match(ok=str, err=lambda e: f"failed: {e}")
        'failed: boom'

        ```
        """
        return self.dispatch({"Ok": ok, "Err": err})


def Ok[T](value: T) -> Result[T, Any]:  # noqa: N802
    """Instantiates a `Result` with the `Ok` variant.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> _ = pv.Ok(2).match_on("Ok", print)
    2

    ```
    """
    return Result(OkState(value))


def Err[E](err: E) -> Result[Any, E]:  # noqa: N802
    """Instantiates a `Result` with the `Err` variant.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> _ = pv.Err("bad request").match_on("Err", print)
    bad request

    ```
    """
    return Result(ErrState(err))


def _capture(exc: Exception) -> Result[Any, str]:
    logger.debug("captured %s: %s", type(exc).__name__, exc)
    return Err(str(exc))


def into_result[**P, T](
    func: Callable[P, T], *args: P.args, **kwargs: P.kwargs
) -> Result[T, str]:
    """Call **func** immediately and turn its outcome into a `Result`.

    A normal return is wrapped in `Ok`. An `Exception` raised by the call is converted to `Err` holding its string description.

    Exceptions that are not `Exception` subclasses (`KeyboardInterrupt`, `SystemExit`) propagate.

    Args:
        func (Callable[P, T]): The fallible function.
        *args (P.args): Positional arguments to pass to **func**.
        **kwargs (P.kwargs): Keyword arguments to pass to **func**.

    Returns:
        Result[T, str]: `Ok(func(*args, **kwargs))`, or `Err(str(exc))`.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> pv.into_result(lambda: 5)
    Ok(5)
    >>> pv.into_result(int, "12")
    Ok(12)
    >>> pv.into_result(int, "twelve")
    Err("invalid literal for int() with base 10: 'twelve'")

    ```
    """
    return cz.functoolz.excepts(
        Exception, lambda: Ok(func(*args, **kwargs)), _capture
    )()


@deprecated(into_result)
def catch_into[T](func: Callable[[], T]) -> Result[T, str]:
    return into_result(func)
