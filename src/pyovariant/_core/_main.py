from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Concatenate, Self

from ._config import get_config


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Some(3).into(lambda opt: opt.unwrap_or(0) * 2)
        6

        ```
        """
        return func(self, *args, **kwargs)


class Variant:
    """Base class for the variants of an `Enum`.

    A variant is a small dataclass whose class attribute `tag` is the discriminant, and whose optional `value` field is the payload.

    Variants without a `value` field are unit variants.

    The tag defaults to the class name.

    Example:
    ```python
    >>> from dataclasses import dataclass
    >>> from typing import ClassVar
    >>> import pyovariant as pv
    >>> @dataclass(slots=True, frozen=True)
    ... class V4(pv.Variant):
    ...     value: str
    >>> @dataclass(slots=True, frozen=True)
    ... class Loopback(pv.Variant):
    ...     tag: ClassVar[str] = "Local"
    >>> V4.tag, Loopback.tag
    ('V4', 'Local')

    ```
    """

    __slots__ = ()
    tag: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "tag" not in cls.__dict__:
            cls.tag = cls.__name__


class Enum[S: Variant](Pipeable):
    """A tagged union: holds exactly one variant out of a closed set.

    Subclasses declare the closed set in the `variants` class attribute.

    Construct an instance either from a variant object, or from a `(discriminant, payload)` pair with `Enum.of`.

    Structural pattern matching is supported on the `(variant, value)` pair.

    Args:
        state (S): The active variant.

    Example:
    ```python
    >>> from dataclasses import dataclass
    >>> import pyovariant as pv
    >>> @dataclass(slots=True, frozen=True)
    ... class V4(pv.Variant):
    ...     value: str
    >>> @dataclass(slots=True, frozen=True)
    ... class V6(pv.Variant):
    ...     value: str
    >>> class IpAddr(pv.Enum[V4 | V6]):
    ...     variants = (V4, V6)
    >>> home = IpAddr.of("V4", "127.0.0.1")
    >>> home
    V4('127.0.0.1')
    >>> home.matches("V4"), home.matches(V6)
    (True, False)
    >>> match home:
    ...     case IpAddr("V4", addr):
    ...         print(addr)
    127.0.0.1

    ```
    """

    __slots__ = ("_inner",)
    __match_args__ = ("variant", "value")
    variants: ClassVar[tuple[type[Variant], ...]] = ()
    _inner: S

    def __init__(self, state: S) -> None:
        if type(state) not in self.variants:
            msg = f"{type(state).__name__} is not a variant of {type(self).__name__}"
            raise TypeError(msg)
        self._inner = state

    @classmethod
    def of(cls, variant: str, *payload: Any) -> Self:
        """Build an instance from a discriminant and its payload.

        Args:
            variant (str): The tag of one of the declared `variants`.
            *payload (Any): The payload, omitted for unit variants.

        Returns:
            Self: A new instance holding the requested variant.

        Raises:
            ValueError: If **variant** is not a declared tag.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Option.of("Some", 1)
        Some(1)
        >>> pv.Option.of("None")
        None()
        >>> pv.Option.of("Maybe", 1)
        Traceback (most recent call last):
            ...
        ValueError: 'Maybe' is not a variant of Option (expected one of: Some, None)

        ```
        """
        for state_cls in cls.variants:
            if state_cls.tag == variant:
                return cls(state_cls(*payload))  # type: ignore[arg-type]
        expected = ", ".join(state_cls.tag for state_cls in cls.variants)
        msg = f"{variant!r} is not a variant of {cls.__name__} (expected one of: {expected})"
        raise ValueError(msg)

    @property
    def variant(self) -> str:
        """The discriminant of the active variant."""
        return self._inner.tag

    @property
    def value(self) -> Any:
        """The payload of the active variant, `None` for unit variants."""
        return getattr(self._inner, "value", None)

    def _is_unit(self) -> bool:
        return not hasattr(self._inner, "value")

    def matches(self, key: str | type[Variant]) -> bool:
        """Check whether the active variant is **key**.

        Args:
            key (str | type[Variant]): A tag, or a variant class.

        Returns:
            bool: `True` if the active variant matches.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Ok(1).matches("Ok")
        True
        >>> pv.Ok(1).matches("Err")
        False

        ```
        """
        if isinstance(key, str):
            return self._inner.tag == key
        return type(self._inner) is key

    def match_on(self, key: str | type[Variant], func: Callable[..., object]) -> Self:
        """Call **func** with the payload if the active variant is **key**.

        Unit variants call **func** without arguments.

        Args:
            key (str | type[Variant]): A tag, or a variant class.
            func (Callable[..., object]): The function to call.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> _ = pv.Some(2).match_on("Some", print).match_on("None", lambda: print("empty"))
        2
        >>> _ = pv.Nothing().match_on("Some", print).match_on("None", lambda: print("empty"))
        empty

        ```
        """
        if self.matches(key):
            if self._is_unit():
                func()
            else:
                func(self.value)
        return self

    def dispatch[R](self, handlers: Mapping[str, Callable[..., R]]) -> R:
        """Call the handler registered for the active variant and return its result.

        Handlers must cover every declared variant. Unit variants call their handler without arguments.

        Args:
            handlers (Mapping[str, Callable[..., R]]): One handler per tag.

        Returns:
            R: The result of the called handler.

        Raises:
            ValueError: If **handlers** does not cover every variant.

        Example:
        ```python
        >>> import pyovariant as pv
        >>> pv.Err("bad").dispatch({"Ok": str.upper, "Err": len})
        3

        ```
        """
        missing = [
            state_cls.tag for state_cls in self.variants if state_cls.tag not in handlers
        ]
        if missing:
            msg = f"missing handlers for {type(self).__name__} variants: {', '.join(missing)}"
            raise ValueError(msg)
        handler = handlers[self._inner.tag]
        if self._is_unit():
            return handler()
        return handler(self.value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._inner == other._inner  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._inner))

    def __repr__(self) -> str:
        if self._is_unit():
            return f"{self.variant}()"
        return f"{self.variant}({get_config().payload_repr(self.value)})"
