from dataclasses import dataclass
from typing import Any

from ._format import payload_repr


@dataclass(slots=True)
class Config:
    """Process-wide rendering settings for `Enum.__repr__`.

    Mutate the instance returned by `get_config()` to change how payloads are displayed.

    Example:
    ```python
    >>> import pyovariant as pv
    >>> cfg = pv.get_config()
    >>> cfg.max_items = 3
    >>> pv.Some(list(range(10)))
    Some([0, 1, 2]...)
    >>> cfg.max_items = 20

    ```
    """

    max_items: int = 20
    """Maximum number of items displayed for dict, list and tuple payloads."""
    depth: int = 3
    """Maximum nesting depth rendered by `pprint`."""
    width: int = 80
    """Target line width."""
    compact: bool = True
    """Pack sequences on as few lines as possible."""

    def payload_repr(self, value: Any) -> str:
        return payload_repr(
            value,
            max_items=self.max_items,
            depth=self.depth,
            width=self.width,
            compact=self.compact,
        )


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance."""
    return _CONFIG
