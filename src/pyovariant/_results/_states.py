from dataclasses import dataclass
from typing import ClassVar

from .._core import Variant


@dataclass(slots=True, frozen=True)
class SomeState[T](Variant):
    """Option variant representing the presence of a value."""

    tag: ClassVar[str] = "Some"
    value: T


@dataclass(slots=True, frozen=True)
class NoneState(Variant):
    """Option variant representing the absence of a value."""

    tag: ClassVar[str] = "None"


@dataclass(slots=True, frozen=True)
class OkState[T](Variant):
    """Result variant representing a successful value."""

    tag: ClassVar[str] = "Ok"
    value: T


@dataclass(slots=True, frozen=True)
class ErrState[E](Variant):
    """Result variant representing an error value."""

    tag: ClassVar[str] = "Err"
    value: E


NONE_STATE = NoneState()
"""Shared absent state. Variants are frozen, so sharing it between `Option` instances is safe."""
