"""Currying: collecting the arguments of a function over several calls."""
from __future__ import annotations

from typing import Any, Callable, TypeVar, Union

from lambpy.arity import arity_of
from lambpy.errors import ArityMismatch, FrozenError, NotCallable
from lambpy.logger import get_logger
from lambpy.placeholder import PLACEHOLDER, substitute

__all__ = [
    "CurriedFunction",
    "PlaceholderCurriedFunction",
    "curried",
    "curry",
    "curry_placeholder",
    "curry_right",
]

logger = get_logger(__name__)

ReturnType = TypeVar("ReturnType")


class _Immutable:
    __slots__ = ()
    __lambpy_frozen__ = True

    def __setattr__(self, name, value):
        raise FrozenError(f"{type(self).__name__} is immutable, can't set {name!r}")

    def __delattr__(self, name):
        raise FrozenError(f"{type(self).__name__} is immutable, can't delete {name!r}")

    def _init(self, **fields: Any) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)


class CurriedFunction(_Immutable):
    """Collects positional arguments until *arity* of them are available.

    Every call that doesn't complete the function returns a new instance with
    the longer prefix, the receiving instance is left untouched.
    """
    __slots__ = ("func", "arity", "strict", "from_right", "collected", "keywords", "__weakref__")

    def __init__(
            self,
            func: Callable[..., ReturnType],
            arity: int,
            strict: bool = False,
            from_right: bool = False,
            collected: tuple = (),
            keywords: dict[str, Any] | None = None,
    ) -> None:
        self._init(
            func=func,
            arity=arity,
            strict=strict,
            from_right=from_right,
            collected=collected,
            keywords=keywords or {},
        )

    @property
    def __arity__(self) -> int:
        return self.arity - len(self.collected)

    def __call__(self, *args: Any, **kwargs: Any) -> Union[CurriedFunction, ReturnType]:
        missing = self.arity - len(self.collected)
        if self.strict and len(args) > missing:
            raise ArityMismatch(self.func, missing, len(args))
        collected = self.collected + args
        keywords = {**self.keywords, **kwargs} if kwargs else self.keywords
        if len(collected) >= self.arity:
            if self.from_right:
                collected = collected[::-1]
            return _invoke(self.func, collected, keywords)
        return CurriedFunction(self.func, self.arity, self.strict, self.from_right, collected, keywords)

    def __repr__(self):
        return f"CurriedFunction({self.func!r}, arity={self.arity}, collected={self.collected})"


class PlaceholderCurriedFunction(_Immutable):
    """Curried function whose bound arguments may contain placeholders.

    A call fills the held placeholders with its arguments and appends the
    rest; placeholders passed in the call become new holes. The function fires
    as soon as no hole is left and at least *arity* arguments are bound.
    """
    __slots__ = ("func", "arity", "slots", "keywords", "__weakref__")

    def __init__(
            self,
            func: Callable[..., ReturnType],
            arity: int,
            slots: tuple = (),
            keywords: dict[str, Any] | None = None,
    ) -> None:
        self._init(func=func, arity=arity, slots=slots, keywords=keywords or {})

    @property
    def __arity__(self) -> int:
        holes = sum(1 for slot in self.slots if slot is PLACEHOLDER)
        return holes + max(0, self.arity - len(self.slots))

    def __call__(self, *args: Any, **kwargs: Any) -> Union[PlaceholderCurriedFunction, ReturnType]:
        slots = substitute(self.slots, args, missing=PLACEHOLDER)
        keywords = {**self.keywords, **kwargs} if kwargs else self.keywords
        if len(slots) >= self.arity and not any(slot is PLACEHOLDER for slot in slots):
            return _invoke(self.func, slots, keywords)
        return PlaceholderCurriedFunction(self.func, self.arity, slots, keywords)

    def __repr__(self):
        return f"PlaceholderCurriedFunction({self.func!r}, arity={self.arity}, slots={self.slots})"


def _invoke(func, args, keywords):
    if not callable(func):
        raise NotCallable(f"Curried value {func!r} is not callable")
    return func(*args, **keywords)


def _resolve_arity(fn: Callable[..., Any], arity: int | None) -> int:
    if arity is None:
        return arity_of(fn)
    if arity < 0:
        raise ValueError(f"arity must be a non-negative integer, got {arity}")
    return arity


def curry(fn: Callable[..., ReturnType], arity: int | None = None, strict: bool = False) -> Callable[..., Any]:
    """Transform *fn* into a function collecting its arguments over several calls.

    Each call may pass one or more arguments. Once *arity* arguments have been
    collected *fn* is invoked with all of them, extra arguments of the last
    call included. With ``strict=True`` passing more arguments than still
    needed raises :class:`~lambpy.errors.ArityMismatch`.

    When *arity* is omitted it is inferred from the signature of *fn*. An
    arity of 0 or 1 returns *fn* itself.

    >>> add3 = curry(lambda a, b, c: a + b + c)
    >>> add3(1)(2)(3), add3(1, 2)(3), add3(1)(2, 3)
    (6, 6, 6)
    """
    arity = _resolve_arity(fn, arity)
    logger.debug("currying %r with arity %d (strict=%s)", fn, arity, strict)
    if arity <= 1:
        return fn
    return CurriedFunction(fn, arity, strict=strict)


def curry_right(fn: Callable[..., ReturnType], arity: int | None = None) -> Callable[..., Any]:
    """Same as :func:`curry` but *fn* receives the collected arguments reversed.

    >>> power = curry_right(pow, 2)
    >>> square = power(2)
    >>> square(7)
    49
    """
    arity = _resolve_arity(fn, arity)
    logger.debug("right-currying %r with arity %d", fn, arity)
    if arity <= 1:
        return fn
    return CurriedFunction(fn, arity, from_right=True)


def curry_placeholder(fn: Callable[..., ReturnType], arity: int | None = None) -> PlaceholderCurriedFunction:
    """Curry *fn* allowing placeholders in every call.

    >>> from lambpy.placeholder import __
    >>> sub = curry_placeholder(lambda a, b: a - b)
    >>> sub(__, 1)(10)
    9
    """
    arity = _resolve_arity(fn, arity)
    logger.debug("currying %r with placeholders, arity %d", fn, arity)
    return PlaceholderCurriedFunction(fn, arity)


def curried(arity: int | None = None, strict: bool = False) -> Callable[[Callable[..., ReturnType]], Callable[..., Any]]:
    """Decorator form of :func:`curry`."""
    def decorator(fn: Callable[..., ReturnType]) -> Callable[..., Any]:
        return curry(fn, arity, strict)

    return decorator
