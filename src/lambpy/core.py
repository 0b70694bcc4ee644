"""Basic combinators."""
import functools
import math
from typing import Any, Callable

__all__ = ["always", "compose", "identity", "is_svz", "negate", "pipe"]


def always(value: Any) -> Callable[..., Any]:
    """The K combinator: a function ignoring its arguments and returning *value*."""
    def constant(*args, **kwargs):
        return value

    return constant


def identity(value: Any) -> Any:
    """The I combinator."""
    return value


def compose(*functions: Callable[..., Any]) -> Callable[..., Any]:
    """Compose *functions* right to left.

    The last function receives every argument, each of the others receives the
    result of the function that follows it.

    >>> compose(str.upper, str.strip)("  hi ")
    'HI'
    """
    if not functions:
        return identity
    *outer, innermost = functions

    def composed(*args, **kwargs):
        result = innermost(*args, **kwargs)
        for fn in reversed(outer):
            result = fn(result)
        return result

    return composed


def pipe(*functions: Callable[..., Any]) -> Callable[..., Any]:
    """Compose *functions* left to right."""
    return compose(*reversed(functions))


def negate(predicate: Callable[..., Any]) -> Callable[..., bool]:
    @functools.wraps(predicate)
    def negated(*args, **kwargs):
        return not predicate(*args, **kwargs)

    return negated


def is_svz(a: Any, b: Any) -> bool:
    """SameValueZero equality: ``a == b``, except that NaN equals NaN."""
    if a is b:
        return True
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    return bool(a == b)
