from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar

from .._core import Enum, Variant
from ._states import NONE_STATE, NoneState, SomeState

if TYPE_CHECKING:
    from ._result import Result


class OptionUnwrapError(RuntimeError): ...


class Option[T](Enum[SomeState[T] | NoneState]):
    """Either `Some` and contains a value, or `None` and does not.

    Build instances with the `Some` and `Nothing` factories, or from a nullable Python value with `Option.from_`.

    Unlike `Result`, an `Option` can be mutated in place with `insert`, `take`, `replace` and `get_or_insert_with`.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> def divide(numerator: float, denominator: float) -> pv.Option[float]:
    ...     if denominator == 0:
    ...         return pv.Nothing()
    ...     return pv.Some(numerator / denominator)
    >>> divide(2.0, 4.0)
    Some(0.5)
    >>> divide(2.0, 0.0)
    None()

    ```
    """

    __slots__ = ()
    __hash__ = None  # type: ignore[assignment]
    variants: ClassVar[tuple[type[Variant], ...]] = (SomeState, NoneState)

    @classmethod
    def from_[V](cls, value: V | None) -> Option[V]:
        """Wrap a nullable value.

        Args:
            value (V | None): A value that may be `None`.

        Returns:
            Option[V]: `Nothing()` if **value** is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Option.from_({"a": 1}.get("a"))
        Some(1)
        >>> pv.Option.from_({"a": 1}.get("b"))
        None()

        ```
        """
        if value is None:
            return cls(NONE_STATE)  # type: ignore[return-value]
        return cls(SomeState(value))  # type: ignore[return-value]

    def is_some(self) -> bool:
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(2).is_some()
            True
            >>> pv.Nothing().is_some()
            False

            ```
        """
        return isinstance(self._inner, SomeState)

    def is_none(self) -> bool:
        """
        Returns `True` if the option is a `None` value.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(2).is_none()
            False
            >>> pv.Nothing().is_none()
            True

            ```
        """
        return isinstance(self._inner, NoneState)

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """
        Returns `True` if the option is a `Some` and the value inside of it matches a predicate.

        Args:
            predicate: The function called with the contained value.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(2).is_some_and(lambda x: x > 1)
            True
            >>> pv.Some(0).is_some_and(lambda x: x > 1)
            False
            >>> pv.Nothing().is_some_and(lambda x: x > 1)
            False

            ```
        """
        return self.is_some() and predicate(self.unwrap())

    def is_none_or(self, predicate: Callable[[T], bool]) -> bool:
        """
        Returns `True` if the option is a `None` or the value inside of it matches a predicate.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(0).is_none_or(lambda x: x > 1)
            False
            >>> pv.Nothing().is_none_or(lambda x: x > 1)
            True

            ```
        """
        return self.is_none() or predicate(self.unwrap())

    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("car").unwrap()
            'car'
            >>> pv.Nothing().unwrap()
            Traceback (most recent call last):
                ...
            pyovariant._results._option.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        if isinstance(self._inner, SomeState):
            return self._inner.value
        raise OptionUnwrapError("called `unwrap` on a `None`")

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception with a provided message if the value is `None`.

        Args:
            msg: The message to include in the exception if the option is `None`.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("value").expect("fruits are healthy")
            'value'
            >>> pv.Nothing().expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            pyovariant._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("car").unwrap_or("bike")
            'car'
            >>> pv.Nothing().unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        The function is only called if the option is `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> k = 10
            >>> pv.Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> pv.Nothing().unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("Hello, World!").map(len)
            Some(13)
            >>> pv.Nothing().map(len)
            None()

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return Nothing()

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """
        Calls a function with the contained value if `Some`, then returns the option unchanged.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(4).inspect(print).map(lambda x: x + 1)
            4
            Some(5)
            >>> pv.Nothing().inspect(print)
            None()

            ```
        """
        if self.is_some():
            f(self.unwrap())
        return self

    def map_or[U](self, default: T, f: Callable[[T], U]) -> Option[U]:
        """
        Applies a function to the contained value, or to **default** if `None`.

        Both branches are wrapped in `Some`.

        Args:
            default: The value passed to **f** when the option is `None`.
            f: The map function.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("foo").map_or("ab", len)
            Some(3)
            >>> pv.Nothing().map_or("ab", len)
            Some(2)

            ```
        """
        if self.is_some():
            return self.map(f)
        return Some(f(default))

    def map_or_else[U](self, default: Callable[[], T], f: Callable[[T], U]) -> Option[U]:
        """
        Applies a function to the contained value, or to the result of **default** if `None`.

        Both branches are wrapped in `Some`. **default** is only called if the option is `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("foo").map_or_else(lambda: "ab", len)
            Some(3)
            >>> pv.Nothing().map_or_else(lambda: "ab", len)
            Some(2)

            ```
        """
        if self.is_some():
            return self.map(f)
        return Some(f(default()))

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns `None` if the option is `None` or if **predicate** returns `False` for the contained value.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(4).filter(lambda x: x % 2 == 0)
            Some(4)
            >>> pv.Some(3).filter(lambda x: x % 2 == 0)
            None()

            ```
        """
        if self.is_some_and(predicate):
            return Some(self.unwrap())
        return Nothing()

    def flatten[U](self: Option[Option[U]]) -> Option[U]:
        """
        Removes one level of nesting.

        The result is a new `Option`, never the nested instance itself.
        A payload that is not an `Option` flattens to `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(pv.Some(6)).flatten()
            Some(6)
            >>> pv.Some(pv.Nothing()).flatten()
            None()
            >>> pv.Some(5).flatten()
            None()

            ```
        """
        if self.is_some():
            inner = self.unwrap()
            if isinstance(inner, Option) and inner.is_some():
                return Some(inner.unwrap())
        return Nothing()

    def and_[U](self, optb: Option[U]) -> Option[U]:
        """
        Returns `None` if the option is `None`, otherwise returns **optb**.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(2).and_(pv.Some("foo"))
            Some('foo')
            >>> pv.Nothing().and_(pv.Some("foo"))
            None()

            ```
        """
        if self.is_some():
            return optb
        return self  # type: ignore[return-value]

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `None`.
        Some languages call this operation flatmap.

        Args:
            f: The function to call with the `Some` value.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> def sq(x: int) -> pv.Option[int]:
            ...     return pv.Some(x * x)
            >>> def nope(x: int) -> pv.Option[int]:
            ...     return pv.Nothing()
            >>> pv.Some(2).and_then(sq).and_then(sq)
            Some(16)
            >>> pv.Some(2).and_then(sq).and_then(nope)
            None()
            >>> pv.Nothing().and_then(sq).and_then(sq)
            None()

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return Nothing()

    def or_(self, optb: Option[T]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise returns **optb**.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(2).or_(pv.Some(100))
            Some(2)
            >>> pv.Nothing().or_(pv.Some(100))
            Some(100)

            ```
        """
        return self if self.is_some() else optb

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("barbarians").or_else(lambda: pv.Some("vikings"))
            Some('barbarians')
            >>> pv.Nothing().or_else(lambda: pv.Some("vikings"))
            Some('vikings')

            ```
        """
        return self if self.is_some() else f()

    def xor(self, optb: Option[T]) -> Option[T]:
        """
        Returns `Some` if exactly one of **self**, **optb** is `Some`, otherwise returns `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(2).xor(pv.Nothing())
            Some(2)
            >>> pv.Some(2).xor(pv.Some(3))
            None()

            ```
        """
        if self.is_some() and optb.is_none():
            return Some(self.unwrap())
        if self.is_none() and optb.is_some():
            return Some(optb.unwrap())
        return Nothing()

    def insert(self, value: T) -> Option[T]:
        """
        Inserts **value** into the option, whatever its previous state, then returns it.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> opt = pv.Nothing()
            >>> opt.insert(1)
            Some(1)
            >>> opt
            Some(1)

            ```
        """
        self._inner = SomeState(value)
        return self

    def get_or_insert(self, value: T) -> T:
        """
        Inserts **value** if the option is `None`, then returns the contained value.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> opt = pv.Nothing()
            >>> opt.get_or_insert(5)
            5
            >>> opt.get_or_insert(7)
            5

            ```
        """
        if self.is_none():
            self._inner = SomeState(value)
        return self.unwrap()

    def get_or_insert_with(self, f: Callable[[], T]) -> T:
        """
        Inserts the value computed by **f** if the option is `None`, then returns the contained value.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> opt = pv.Nothing()
            >>> opt.get_or_insert_with(lambda: 5)
            5
            >>> opt
            Some(5)

            ```
        """
        if self.is_none():
            self._inner = SomeState(f())
        return self.unwrap()

    def take(self) -> Option[T]:
        """
        Takes the value out of the option, leaving a `None` in its place.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> opt = pv.Some(2)
            >>> opt.take()
            Some(2)
            >>> opt
            None()
            >>> opt.take()
            None()

            ```
        """
        if self.is_some():
            taken = Some(self.unwrap())
            self._inner = NONE_STATE
            return taken
        return Nothing()

    def replace(self, value: T) -> Option[T]:
        """
        Replaces the contained value by **value**, returning the old value.

        Only a `Some` is updated: on a `None`, **value** is discarded and the option stays `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> opt = pv.Some(2)
            >>> opt.replace(5)
            Some(2)
            >>> opt
            Some(5)
            >>> empty = pv.Nothing()
            >>> empty.replace(5)
            None()
            >>> empty
            None()

            ```
        """
        if self.is_some():
            old = self.unwrap()
            self._inner = SomeState(value)
            return Some(old)
        return Nothing()

    def ok_or[E](self, err: E) -> Result[T, E]:
        """
        Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `None` to `Err(err)`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("foo").ok_or(0)
            Ok('foo')
            >>> pv.Nothing().ok_or(0)
            Err(0)

            ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(err)

    def ok_or_else[E](self, err: Callable[[], E]) -> Result[T, E]:
        """
        Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `None` to `Err(err())`.

        **err** is only called if the option is `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some("foo").ok_or_else(lambda: 0)
            Ok('foo')
            >>> pv.Nothing().ok_or_else(lambda: 0)
            Err(0)

            ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(err())

    def zip[U](self, optb: Option[U]) -> Option[tuple[T, U]]:
        """
        Zips **self** with another `Option`.

        If both are `Some`, returns `Some((s, o))`, otherwise `None`.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(1).zip(pv.Some("hi"))
            Some((1, 'hi'))
            >>> pv.Some(1).zip(pv.Nothing())
            None()

            ```
        """
        if self.is_some() and optb.is_some():
            return Some((self.unwrap(), optb.unwrap()))
        return Nothing()

    def unzip(self) -> tuple[Option[Any], Option[Any]]:
        """
        Unzips an option containing a pair.

        If the option is `Some` of a 2 elements `tuple` or `list`, returns `(Some(a), Some(b))`.
        Otherwise, `(None, None)` is returned.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some((1, "hi")).unzip()
            (Some(1), Some('hi'))
            >>> pv.Some(1).unzip()
            (None(), None())

            ```
        """
        if self.is_some():
            pair = self.unwrap()
            if isinstance(pair, (tuple, list)) and len(pair) == 2:
                left, right = pair
                return Some(left), Some(right)
        return Nothing(), Nothing()

    def iter(self) -> Iterator[T]:
        """
        Returns an iterator over the contained value, if any.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> list(pv.Some(4).iter())
            [4]
            >>> list(pv.Nothing())
            []

            ```
        """
        return iter(self)

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.unwrap()

    def match[R](self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """
        Calls **some** with the contained value, or **none** without arguments, and returns the result.

        Example:
            ```python
            >>> import pyovariant as pv
            >>> pv.Some(3).match(some=lambda x: x * 2, none=lambda: 0)
            6
            >>> pv.Nothing().match(some=lambda x: x * 2, none=lambda: 0)
            0

            ```
        """
        return self.dispatch({"Some": some, "None": none})


def Some[T](value: T) -> Option[T]:  # noqa: N802
    """Instantiates an `Option` with the `Some` variant.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> count = pv.Some(1).map(lambda c: c + 1)
    >>> _ = count.match_on("Some", print)
    2

    ```
    """
    return Option(SomeState(value))


def Nothing() -> Option[Any]:  # noqa: N802
    """Instantiates an `Option` with the `None` variant.

    Every call returns a new instance, since options are mutable.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> count = pv.Nothing()
    >>> _ = count.match_on("None", lambda: print("it's a none!"))
    it's a none!
    >>> _ = count.insert(2).match_on("Some", print)
    2

    ```
    """
    return Option(NONE_STATE)
