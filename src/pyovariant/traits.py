"""Public mixins traits, to add pyovariant conversions to custom user types.

`Pipeable` and `Checkable` depend only on `Self` for arguments, return types and internal logic, so they can be safely added to any already existing class.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, Self

from ._core import Pipeable

if TYPE_CHECKING:
    from ._results import Option, Result
__all__ = ["Checkable", "Pipeable"]


class Checkable:
    """Mixin class providing conditional wrapping in `Option` or `Result` based on truthiness.

    Truthiness is determined by `__bool__()` if defined, otherwise by `__len__()` if defined (returning `False` if length is 0), otherwise all instances are truthy (Python's default behavior).

    Example:
    ```python
    >>> from pyovariant import traits
    >>> class Basket(list[str], traits.Checkable):
    ...     pass
    >>> Basket(["apple"]).then(len)
    Some(1)
    >>> Basket().ok_or("empty basket")
    Err('empty basket')

    ```
    """

    __slots__ = ()

    def then[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[R]:
        """Wrap the result of **func** in an `Option[R]` based on the truthiness of `Self`.

        The function is only called if `Self` evaluates to `True`.

        Args:
            func (Callable[Concatenate[Self, P], R]): A callable that returns the value to wrap in `Some`.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Option[R]: `Some(R)` if self is truthy, `None` otherwise.
        """
        from ._results import Nothing, Some

        return Some(func(self, *args, **kwargs)) if self else Nothing()

    def then_some(self) -> Option[Self]:
        """Wrap `Self` in an `Option[Self]` based on its truthiness.

        Returns:
            Option[Self]: `Some(self)` if self is truthy, `None` otherwise.
        """
        from ._results import Nothing, Some

        return Some(self) if self else Nothing()

    def ok_or[E](self, err: E) -> Result[Self, E]:
        """Wrap `Self` in a `Result[Self, E]` based on its truthiness.

        Args:
            err (E): The error value to wrap in `Err` if self is falsy.

        Returns:
            Result[Self, E]: `Ok(self)` if self is truthy, `Err(err)` otherwise.
        """
        from ._results import Err, Ok

        return Ok(self) if self else Err(err)

    def ok_or_else[**P, E](
        self,
        func: Callable[Concatenate[Self, P], E],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[Self, E]:
        """Wrap `Self` in a `Result[Self, E]` based on its truthiness.

        The function is only called if self evaluates to `False`.

        Args:
            func (Callable[Concatenate[Self, P], E]): A callable that returns the error value to wrap in `Err`.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Result[Self, E]: `Ok(self)` if self is truthy, `Err(func(self, ...))` otherwise.
        """
        from ._results import Err, Ok

        return Ok(self) if self else Err(func(self, *args, **kwargs))
