"""Mapping and object helpers built on partial application and currying.

Mappings are read through their keys; any other object through its instance
attributes. Helpers returning a mapping always build a new ``dict``.
"""
import functools
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterable

from lambpy.core import compose, is_svz, negate
from lambpy.curry import curry, curry_right
from lambpy.freezing import freeze
from lambpy.partial import bind
from lambpy.placeholder import __

__all__ = [
    "enumerables",
    "from_pairs",
    "get_in",
    "get_key",
    "get_path",
    "get_path_in",
    "has",
    "has_key",
    "has_key_value",
    "immutable",
    "make",
    "merge",
    "pairs",
    "pick",
    "pick_if",
    "set_in",
    "set_key",
    "skip",
    "skip_if",
    "tear",
    "values",
]


def enumerables(obj: Any) -> list:
    """Keys of a mapping, or names of the instance attributes of any other object."""
    if isinstance(obj, Mapping):
        return list(obj.keys())
    return list(getattr(obj, "__dict__", {}))


def _as_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        digits = key[1:] if key.startswith("-") else key
        if digits.isdecimal():
            return int(key)
    return None


def get_in(obj: Any, key: Any) -> Any:
    """Read *key* from *obj*, ``None`` when it is missing.

    Mappings are looked up by key, sequences by (possibly textual) index and
    any other object by attribute name.

    >>> get_in({"a": 1}, "a"), get_in([1, 2], "1"), get_in("abc", "upper") is not None
    (1, 2, True)
    """
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, Sequence):
        index = _as_index(key)
        if index is not None:
            return obj[index] if -len(obj) <= index < len(obj) else None
    if isinstance(key, str):
        return getattr(obj, key, None)
    return None


get_key = curry_right(get_in, 2)


def get_path_in(obj: Any, path: str, separator: str = ".") -> Any:
    """Read a nested value following *path*.

    >>> user = {"login": {"user.name": "jdoe", "roles": ["admin"]}}
    >>> get_path_in(user, "login.roles.0"), get_path_in(user, "login/user.name", "/")
    ('admin', 'jdoe')
    """
    return functools.reduce(get_in, path.split(separator), obj)


def get_path(path: str, separator: str = ".") -> Callable[[Any], Any]:
    return bind(get_path_in, __, path, separator)


def has(obj: Any, key: Any) -> bool:
    """Whether :func:`get_in` can read *key* from *obj*."""
    if isinstance(obj, Mapping):
        return key in obj
    if isinstance(obj, Sequence):
        index = _as_index(key)
        if index is not None:
            return -len(obj) <= index < len(obj)
    return isinstance(key, str) and hasattr(obj, key)


has_key = curry_right(has, 2)


def has_key_value(key: Any, value: Any) -> Callable[[Any], bool]:
    """Build a predicate checking that *key* holds *value* (SameValueZero)."""
    return compose(bind(is_svz, value), get_key(key))


def make(keys: Iterable, values: Sequence) -> dict:
    """Build a dict from *keys* and *values*; missing values become ``None``.

    >>> make(["a", "b", "c"], [1, 2])
    {'a': 1, 'b': 2, 'c': None}
    """
    return {key: values[i] if i < len(values) else None for i, key in enumerate(keys)}


def from_pairs(pairs_list: Iterable) -> dict:
    return {key: value for key, value in pairs_list}


def _merge(get_keys: Callable[[Any], list], *sources: Any) -> dict:
    result = {}
    for source in sources:
        for key in get_keys(source):
            result[key] = get_in(source, key)
    return result


merge = bind(_merge, enumerables)


def _key_to_pair(obj, key):
    return [key, get_in(obj, key)]


_pairs_from = curry(lambda get_keys, obj: [_key_to_pair(obj, key) for key in get_keys(obj)], 2)
_values_from = curry(lambda get_keys, obj: list(map(bind(get_in, obj), get_keys(obj))), 2)


def _tear(get_keys, obj):
    keys = get_keys(obj)
    return [keys, [get_in(obj, key) for key in keys]]


_tear_from = curry(_tear)

pairs = _pairs_from(enumerables)
values = _values_from(enumerables)
tear = _tear_from(enumerables)


def pick(source: Any, whitelist: Iterable) -> dict:
    """New dict holding only the *whitelist* keys found in *source*."""
    return {key: get_in(source, key) for key in whitelist if has(source, key)}


def pick_if(predicate: Callable[[Any], Any]) -> Callable[[Any], dict]:
    """Build a function keeping the properties whose value satisfies *predicate*."""
    def pick_matching(source):
        return {key: get_in(source, key) for key in enumerables(source) if predicate(get_in(source, key))}

    return pick_matching


def skip(source: Any, blacklist: Iterable) -> dict:
    """New dict without the *blacklist* keys."""
    blacklist = list(blacklist)
    return {key: get_in(source, key) for key in enumerables(source) if key not in blacklist}


def skip_if(predicate: Callable[[Any], Any]) -> Callable[[Any], dict]:
    return pick_if(negate(predicate))


def set_in(source: Any, key: Any, value: Any) -> dict:
    """Copy of *source* with *key* set to *value*; *source* is left untouched.

    >>> set_in({"name": "John", "age": 30}, "age", 40)
    {'name': 'John', 'age': 40}
    """
    return _merge(enumerables, source, make([key], [value]))


def set_key(key: Any, value: Any) -> Callable[[Any], dict]:
    return bind(set_in, __, key, value)


def immutable(obj: Any) -> Any:
    """Deeply freeze *obj*, see :func:`lambpy.freezing.freeze`."""
    return freeze(obj)
