"""Sequence helpers built on partial application and currying.

Every helper is eager and returns a new list; inputs are never mutated.
Iteratees and predicates receive the element only.
"""
import functools
from typing import Any, Callable, Iterable, Sequence

from lambpy.arity import aritize
from lambpy.core import compose, identity, is_svz, negate
from lambpy.curry import curry_right
from lambpy.generic import Sliceable, to_function
from lambpy.obj import get_key
from lambpy.partial import bind
from lambpy.placeholder import __

__all__ = [
    "contains",
    "difference",
    "drop",
    "drop_n",
    "drop_while",
    "every",
    "every_in",
    "filter_",
    "filter_with",
    "find",
    "find_index",
    "flat_map",
    "flat_map_with",
    "flatten",
    "for_each",
    "group",
    "group_by",
    "insert",
    "intersection",
    "is_in",
    "list_",
    "map_",
    "map_with",
    "partition",
    "partition_with",
    "pluck",
    "pluck_key",
    "reduce_",
    "reduce_right",
    "reduce_right_with",
    "reduce_with",
    "shallow_flatten",
    "slice_",
    "some",
    "some_in",
    "sorter",
    "take",
    "take_n",
    "take_while",
    "transpose",
    "union",
    "uniques",
    "zip_",
    "zip_with_index",
]

_NO_INITIAL = object()

_get_item = to_function("__getitem__", Sliceable)


def slice_(sequence: Sliceable, start: int | None = None, stop: int | None = None) -> Any:
    """``sequence[start:stop]`` for anything :class:`~lambpy.generic.Sliceable`.

    >>> slice_([1, 2, 3, 4], 1, 3)
    [2, 3]
    """
    return _get_item(sequence, slice(start, stop))


def list_(*items: Any) -> list:
    return list(items)


def map_(iterable: Iterable, iteratee: Callable[[Any], Any]) -> list:
    return [iteratee(element) for element in iterable]


def map_with(iteratee: Callable[[Any], Any]) -> Callable[[Iterable], list]:
    return bind(map_, __, iteratee)


def filter_(iterable: Iterable, predicate: Callable[[Any], Any]) -> list:
    return [element for element in iterable if predicate(element)]


def filter_with(predicate: Callable[[Any], Any]) -> Callable[[Iterable], list]:
    return bind(filter_, __, predicate)


def for_each(iterable: Iterable, iteratee: Callable[[Any], Any]) -> None:
    for element in iterable:
        iteratee(element)


def reduce_(iterable: Iterable, accumulator: Callable[[Any, Any], Any], initial: Any = _NO_INITIAL) -> Any:
    """Fold *iterable* left to right, like :func:`functools.reduce`."""
    if initial is _NO_INITIAL:
        return functools.reduce(accumulator, iterable)
    return functools.reduce(accumulator, iterable, initial)


def reduce_right(iterable: Iterable, accumulator: Callable[[Any, Any], Any], initial: Any = _NO_INITIAL) -> Any:
    return reduce_(list(iterable)[::-1], accumulator, initial)


def reduce_with(accumulator: Callable[[Any, Any], Any], initial: Any = _NO_INITIAL) -> Callable[[Iterable], Any]:
    return bind(reduce_, __, accumulator, initial)


def reduce_right_with(accumulator: Callable[[Any, Any], Any], initial: Any = _NO_INITIAL) -> Callable[[Iterable], Any]:
    return bind(reduce_right, __, accumulator, initial)


def every_in(iterable: Iterable, predicate: Callable[[Any], Any]) -> bool:
    return all(predicate(element) for element in iterable)


def every(predicate: Callable[[Any], Any]) -> Callable[[Iterable], bool]:
    return bind(every_in, __, predicate)


def some_in(iterable: Iterable, predicate: Callable[[Any], Any]) -> bool:
    return any(predicate(element) for element in iterable)


def some(predicate: Callable[[Any], Any]) -> Callable[[Iterable], bool]:
    return bind(some_in, __, predicate)


def find(iterable: Iterable, predicate: Callable[[Any], Any]) -> Any:
    """First element satisfying *predicate*, ``None`` when there is none."""
    for element in iterable:
        if predicate(element):
            return element
    return None


def find_index(sequence: Sequence, predicate: Callable[[Any], Any]) -> int:
    """Index of the first element satisfying *predicate*, -1 when there is none."""
    for index, element in enumerate(sequence):
        if predicate(element):
            return index
    return -1


def _flatten(sequence, output):
    for value in sequence:
        if isinstance(value, (list, tuple)):
            _flatten(value, output)
        else:
            output.append(value)
    return output


def flatten(sequence: Iterable) -> list:
    """Flatten nested lists and tuples at any depth.

    >>> flatten([1, [2, (3, [4])]])
    [1, 2, 3, 4]
    """
    return _flatten(sequence, [])


def shallow_flatten(sequence: Iterable) -> list:
    """Flatten one level of nested lists and tuples."""
    result = []
    for value in sequence:
        if isinstance(value, (list, tuple)):
            result.extend(value)
        else:
            result.append(value)
    return result


flat_map = compose(shallow_flatten, map_)


def flat_map_with(iteratee: Callable[[Any], Any]) -> Callable[[Iterable], list]:
    return bind(flat_map, __, iteratee)


def group(iterable: Iterable, iteratee: Callable[[Any], Any]) -> dict:
    """Group elements in lists keyed by the result of *iteratee*.

    >>> group([1, 2, 3, 4], lambda n: n % 2)
    {1: [1, 3], 0: [2, 4]}
    """
    result: dict = {}
    for element in iterable:
        result.setdefault(iteratee(element), []).append(element)
    return result


def group_by(iteratee: Callable[[Any], Any]) -> Callable[[Iterable], dict]:
    return bind(group, __, iteratee)


def partition(iterable: Iterable, predicate: Callable[[Any], Any]) -> list:
    """Split elements in ``[satisfying, not_satisfying]``."""
    result: list = [[], []]
    for element in iterable:
        result[0 if predicate(element) else 1].append(element)
    return result


def partition_with(predicate: Callable[[Any], Any]) -> Callable[[Iterable], list]:
    return bind(partition, __, predicate)


def pluck(iterable: Iterable, key: Any) -> list:
    """Read *key* from every element.

    >>> pluck([{"a": 1}, {"a": 2}, {}], "a")
    [1, 2, None]
    """
    return map_(iterable, get_key(key))


def pluck_key(key: Any) -> Callable[[Iterable], list]:
    return map_with(get_key(key))


def is_in(sequence: Sequence, value: Any, from_index: int = 0) -> bool:
    """Whether *value* is in *sequence*, compared with SameValueZero."""
    for index in range(max(from_index, 0), len(sequence)):
        if is_svz(value, sequence[index]):
            return True
    return False


def contains(value: Any, from_index: int = 0) -> Callable[[Sequence], bool]:
    return bind(is_in, __, value, from_index)


def uniques(iterable: Iterable, iteratee: Callable[[Any], Any] = identity) -> list:
    """Elements of *iterable* without duplicates, first occurrence wins."""
    seen: list = []
    result = []
    for element in iterable:
        value = iteratee(element)
        if not is_in(seen, value):
            seen.append(value)
            result.append(element)
    return result


def difference(sequence: Iterable, *others: Iterable) -> list:
    """Elements of *sequence* found in none of *others*.

    >>> difference([1, 2, 3, 4], [2], [4, 5])
    [1, 3]
    """
    rest = shallow_flatten(others)
    is_in_rest = bind(is_in, rest, __, 0)
    return filter_(sequence, negate(is_in_rest))


def intersection(*sequences: Sequence) -> list:
    """Unique elements present in every one of *sequences*."""
    if not sequences:
        return []
    first, *rest = sequences
    return [item for item in uniques(first) if every_in(rest, contains(item))]


union = compose(uniques, flat_map_with(list), list_)
union.__doc__ = """Unique elements of all the given sequences, in order of appearance."""

take = bind(slice_, __, 0, __)
take_n = curry_right(take, 2)

drop = aritize(slice_, 2)
drop_n = curry_right(drop, 2)


def _slice_end_index(sequence, predicate):
    index = 0
    while index < len(sequence) and predicate(sequence[index]):
        index += 1
    return index


def take_while(predicate: Callable[[Any], Any]) -> Callable[[Sliceable], Any]:
    def take_while_predicate(sequence):
        return slice_(sequence, 0, _slice_end_index(sequence, predicate))

    return take_while_predicate


def drop_while(predicate: Callable[[Any], Any]) -> Callable[[Sliceable], Any]:
    def drop_while_predicate(sequence):
        return slice_(sequence, _slice_end_index(sequence, predicate))

    return drop_while_predicate


def transpose(sequences: Sequence[Sequence]) -> list:
    """Swap rows and columns, truncating to the shortest sequence.

    >>> transpose([[1, 2, 3], [4, 5]])
    [[1, 4], [2, 5]]
    """
    width = min((len(row) for row in sequences), default=0)
    return [[row[column] for row in sequences] for column in range(width)]


zip_ = compose(transpose, list_)


def zip_with_index(sequence: Sequence) -> list:
    return transpose([sequence, range(len(sequence))])


def sorter(comparer: Callable[[Any, Any], int], reader: Callable[[Any], Any] = identity) -> Callable[[Any, Any], int]:
    """Build a comparer applying *reader* to both operands first.

    Use with :func:`functools.cmp_to_key` or :func:`insert`.
    """
    def compare(a, b):
        return comparer(reader(a), reader(b))

    return compare


def _ascending(a, b):
    return -1 if a < b else 1 if a > b else 0


def _descending(a, b):
    return -1 if b < a else 1 if b > a else 0


sorter.ascending = _ascending
sorter.descending = _descending


def insert(
        sequence: Sequence,
        element: Any,
        comparer: Callable[[Any, Any], int] = _ascending,
        reader: Callable[[Any], Any] = identity,
) -> list:
    """Copy of the sorted *sequence* with *element* inserted at its sorted position.

    >>> insert([1, 3, 5], 4)
    [1, 3, 4, 5]
    """
    target = reader(element)
    low, high = 0, len(sequence)
    while low < high:
        middle = (low + high) // 2
        if comparer(target, reader(sequence[middle])) < 0:
            high = middle
        else:
            low = middle + 1
    result = list(sequence)
    result.insert(low, element)
    return result
