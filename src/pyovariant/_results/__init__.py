from ._option import Nothing, Option, OptionUnwrapError, Some
from ._result import Err, Ok, Result, ResultUnwrapError, catch_into, into_result
from ._states import ErrState, NoneState, OkState, SomeState

__all__ = [
    "Err",
    "ErrState",
    "NoneState",
    "Nothing",
    "Ok",
    "OkState",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Some",
    "SomeState",
    "catch_into",
    "into_result",
]
