"""Exceptions raised by lambpy.

Every error derives from :class:`LambpyError` and from the built-in exception
Python code would usually catch for the same mistake, so callers can use
either.
"""


class LambpyError(Exception):
    """Base class for all lambpy errors."""


class ArityMismatch(LambpyError, TypeError):
    """A strict curried function received more arguments than it still needs."""

    def __init__(self, func, expected: int, received: int):
        self.func = func
        self.expected = expected
        self.received = received
        super().__init__(
            f"{_name(func)} expects at most {expected} more positional "
            f"argument(s), got {received}"
        )


class NotCallable(LambpyError, TypeError):
    """A value that had to be invoked is not callable."""


class ArityUnknown(LambpyError, ValueError):
    """The arity of a callable can't be inferred and must be passed explicitly."""


class FrozenError(LambpyError, TypeError):
    """Attempt to mutate a frozen value."""


def _name(func) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or repr(func)
