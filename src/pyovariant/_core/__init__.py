from ._config import Config, get_config
from ._depreciation import deprecated
from ._main import Enum, Pipeable, Variant

__all__ = [
    "Config",
    "Enum",
    "Pipeable",
    "Variant",
    "deprecated",
    "get_config",
]
