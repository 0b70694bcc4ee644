"""Partial application with placeholders."""
from typing import Any, Callable, TypeVar

from lambpy.arity import arity_of
from lambpy.errors import ArityUnknown, FrozenError, NotCallable
from lambpy.logger import get_logger
from lambpy.placeholder import PLACEHOLDER, substitute

__all__ = ["BoundFunction", "bind", "partial"]

logger = get_logger(__name__)

ReturnType = TypeVar("ReturnType")


class BoundFunction:
    """A callable holding *func* together with some of its arguments.

    The bound ``slots`` may contain :data:`~lambpy.placeholder.PLACEHOLDER`;
    each call fills those positions with its own positional arguments, in
    order, and appends the rest.
    """
    __slots__ = ("_func", "_slots", "_keywords", "__weakref__")
    __lambpy_frozen__ = True

    def __init__(self, func: Callable[..., ReturnType], *slots: Any, **keywords: Any) -> None:
        object.__setattr__(self, "_func", func)
        object.__setattr__(self, "_slots", slots)
        object.__setattr__(self, "_keywords", keywords)

    @property
    def func(self) -> Callable[..., ReturnType]:
        return self._func

    @property
    def slots(self) -> tuple:
        return self._slots

    @property
    def keywords(self) -> dict:
        return dict(self._keywords)

    @property
    def __arity__(self) -> int:
        holes = sum(1 for slot in self._slots if slot is PLACEHOLDER)
        try:
            declared = arity_of(self._func)
        except (ArityUnknown, NotCallable):
            return holes
        return holes + max(0, declared - len(self._slots))

    def __call__(self, *args: Any, **kwargs: Any) -> ReturnType:
        if not callable(self._func):
            raise NotCallable(f"Bound value {self._func!r} is not callable")
        vector = substitute(self._slots, args)
        if kwargs:
            return self._func(*vector, **{**self._keywords, **kwargs})
        return self._func(*vector, **self._keywords)

    def __setattr__(self, name, value):
        raise FrozenError(f"{type(self).__name__} is immutable, can't set {name!r}")

    def __delattr__(self, name):
        raise FrozenError(f"{type(self).__name__} is immutable, can't delete {name!r}")

    def __repr__(self):
        args = ", ".join(repr(slot) for slot in self._slots)
        kwargs = ", ".join(f"{k}={v!r}" for k, v in self._keywords.items())
        bound = ", ".join(part for part in (args, kwargs) if part)
        return f"{type(self).__name__}({self._func!r}, {bound})" if bound else f"{type(self).__name__}({self._func!r})"


def bind(fn: Callable[..., ReturnType], *slots: Any, **keywords: Any) -> BoundFunction:
    """Build a partially applied function.

    :data:`~lambpy.placeholder.PLACEHOLDER` marks a slot to be filled by the
    call; placeholders passed at call time are plain values.

    >>> from lambpy.placeholder import __
    >>> parse_binary = bind(int, __, 2)
    >>> parse_binary("101")
    5
    """
    logger.debug("binding %r with %d slot(s)", fn, len(slots))
    return BoundFunction(fn, *slots, **keywords)


partial = bind
