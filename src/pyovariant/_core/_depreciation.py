import warnings
from collections.abc import Callable
from functools import wraps


def deprecated[**P, R](
    replacement: Callable[..., object],
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Mark a function as a deprecated alias of **replacement**.

    Every call emits a `DeprecationWarning` naming both functions, attributed to the caller.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        msg = f"`{func.__name__}` is deprecated, use `{replacement.__name__}` instead"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(msg, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        wrapper.__doc__ = f"Deprecated alias of `{replacement.__name__}`."
        return wrapper

    return decorator
