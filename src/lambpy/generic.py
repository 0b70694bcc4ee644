"""Turning methods into free functions taking the receiver first."""
import functools
from typing import Any, Callable, Protocol, runtime_checkable

from lambpy.arity import arity_of
from lambpy.errors import ArityUnknown, NotCallable

__all__ = ["Sliceable", "generic", "to_function"]


@runtime_checkable
class Sliceable(Protocol):
    """Anything supporting ``len()`` and ``[start:stop]``."""

    def __getitem__(self, key: Any) -> Any:
        ...

    def __len__(self) -> int:
        ...


def to_function(method: str | Callable[..., Any], capability: type | None = None) -> Callable[..., Any]:
    """Lift *method* into a function whose first argument is the receiver.

    The method is looked up by name on each receiver, so the result works on
    any object exposing it, not only on instances of the class *method* was
    taken from. With a ``runtime_checkable`` *capability* protocol receivers
    that don't implement it are refused.

    Only the name of *method* is used: a plain function such as ``len`` is
    not called with the receiver, it is looked up as a ``len`` attribute of
    the receiver, which usually fails with :class:`~lambpy.errors.NotCallable`.

    >>> index = to_function(list.index)
    >>> index([1, 2, 3], 2), index("abc", "c")
    (1, 2)
    """
    if isinstance(method, str):
        name = method
    else:
        name = getattr(method, "__name__", None)
        if name is None:
            raise TypeError(f"Cannot tell the method name of {method!r}")

    def generic_method(receiver, *args, **kwargs):
        if capability is not None and not isinstance(receiver, capability):
            raise NotCallable(
                f"{type(receiver).__name__!r} object does not implement {capability.__name__}"
            )
        bound = getattr(receiver, name, None)
        if not callable(bound):
            raise NotCallable(
                f"{type(receiver).__name__!r} object has no callable {name!r}"
            )
        return bound(*args, **kwargs)

    if callable(method):
        functools.update_wrapper(generic_method, method, updated=())
    else:
        generic_method.__name__ = generic_method.__qualname__ = name
    generic_method.__arity__ = _receiver_arity(method)
    return generic_method


def _receiver_arity(method) -> int:
    if isinstance(method, str):
        return 1
    try:
        return max(arity_of(method), 1)
    except ArityUnknown:
        return 1


generic = to_function
