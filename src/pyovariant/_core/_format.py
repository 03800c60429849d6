from pprint import pformat
from typing import Any


def payload_repr(
    v: Any,
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    if not isinstance(v, (dict, list, tuple)):
        return repr(v)
    if isinstance(v, dict):
        truncated: Any = dict(list(v.items())[:max_items])
    else:
        truncated = v[:max_items]
    suffix = "..." if len(v) > max_items else ""
    return pformat(truncated, depth=depth, width=width, compact=compact) + suffix
