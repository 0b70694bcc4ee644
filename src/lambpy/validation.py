"""Validating objects with lists of checkers."""
from typing import Any, Callable, Sequence

from lambpy.curry import curry_right
from lambpy.obj import get_path_in
from lambpy.partial import bind
from lambpy.placeholder import __

__all__ = ["checker", "validate", "validate_with"]

Checker = Callable[[Any], list]


def checker(
        predicate: Callable[..., Any],
        message: str,
        key_paths: Sequence[str],
        separator: str = ".",
) -> Checker:
    """Build a checker to use with :func:`validate`.

    The values found at every one of *key_paths* are passed together to
    *predicate*. The checker returns ``[]`` when the predicate holds and
    ``[message, key_paths]`` otherwise.

    >>> same = lambda a, b: a == b
    >>> pwd_match = checker(same, "Passwords don't match", ["login.pwd", "login.confirm"])
    >>> pwd_match({"login": {"pwd": "abc", "confirm": "abd"}})
    ["Passwords don't match", ['login.pwd', 'login.confirm']]
    """
    def check(obj):
        get_value = bind(get_path_in, obj, __, separator)
        if predicate(*[get_value(path) for path in key_paths]):
            return []
        return [message, key_paths]

    return check


def validate(obj: Any, checkers: Sequence[Checker]) -> list:
    """Run every checker on *obj* and collect the errors they report."""
    errors = []
    for check in checkers:
        result = check(obj)
        if result:
            errors.append(result)
    return errors


validate_with = curry_right(validate, 2)
