import logging

from . import traits
from ._core import Config, Enum, Variant, get_config
from ._results import (
    Err,
    Nothing,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
    catch_into,
    into_result,
)

# Stay silent unless the consumer configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "Enum",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Some",
    "Variant",
    "catch_into",
    "get_config",
    "into_result",
    "traits",
]
