"""The placeholder sentinel and the substitution of runtime arguments into it."""
from typing import Any, Sequence

__all__ = ["PLACEHOLDER", "__", "is_placeholder", "substitute"]


class _Placeholder:
    """Sentinel meaning: 'an argument will be supplied here later'."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "PLACEHOLDER"

    def __reduce__(self):
        return "PLACEHOLDER"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


PLACEHOLDER = _Placeholder()
__ = PLACEHOLDER


def is_placeholder(value: Any) -> bool:
    return value is PLACEHOLDER


def substitute(slots: Sequence[Any], args: Sequence[Any], missing: Any = None) -> tuple:
    """Fill the placeholders found in *slots* with *args*, left to right.

    Concrete slots are copied as they are, each placeholder slot takes the next
    unconsumed runtime argument and whatever is left of *args* is appended.
    A placeholder with no argument left to take receives *missing*.

    >>> substitute((1, PLACEHOLDER, 3), ("a", "b"))
    (1, 'a', 3, 'b')
    >>> substitute((PLACEHOLDER, 2, PLACEHOLDER), ("a",))
    ('a', 2, None)
    """
    consumed = 0
    n_args = len(args)
    vector = []
    for slot in slots:
        if slot is PLACEHOLDER:
            if consumed < n_args:
                vector.append(args[consumed])
                consumed += 1
            else:
                vector.append(missing)
        else:
            vector.append(slot)
    vector.extend(args[consumed:])
    return tuple(vector)
