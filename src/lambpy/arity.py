"""Reporting and enforcing the number of positional parameters of a callable."""
import functools
import inspect
from typing import Any, Callable

from lambpy.errors import ArityUnknown, NotCallable

__all__ = ["arity_of", "aritize", "unary", "binary"]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_required_positional(param: inspect.Parameter) -> bool:
    return param.kind in _POSITIONAL and param.default is inspect.Parameter.empty


def arity_of(fn: Callable[..., Any]) -> int:
    """Number of positional arguments *fn* needs before it can be called.

    Parameters with a default value and variadic parameters are not counted.
    Callables built by lambpy report their own ``__arity__``.
    """
    if not callable(fn):
        raise NotCallable(f"{fn!r} is not callable")
    declared = getattr(fn, "__arity__", None)
    if isinstance(declared, int):
        return declared
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise ArityUnknown(
            f"Cannot infer the arity of {fn!r}, pass it explicitly"
        ) from exc
    return sum(1 for p in signature.parameters.values() if is_required_positional(p))


def aritize(fn: Callable[..., Any], arity: int) -> Callable[..., Any]:
    """Build a function forwarding only the first *arity* positional arguments to *fn*.

    A negative *arity* drops that many arguments from the end of every call
    instead.

    >>> list_two = aritize(lambda *args: list(args), 2)
    >>> list_two(1, 2, 3)
    [1, 2]
    """
    @functools.wraps(fn)
    def aritized(*args, **kwargs):
        return fn(*args[:arity], **kwargs)

    aritized.__arity__ = max(arity, 0)
    return aritized


def unary(fn: Callable[..., Any]) -> Callable[..., Any]:
    return aritize(fn, 1)


def binary(fn: Callable[..., Any]) -> Callable[..., Any]:
    return aritize(fn, 2)
