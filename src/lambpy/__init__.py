"""Point-free composition primitives and the collection helpers built on them."""
from lambpy.arity import aritize, arity_of, binary, unary
from lambpy.core import always, compose, identity, is_svz, negate, pipe
from lambpy.curry import (
    CurriedFunction,
    PlaceholderCurriedFunction,
    curried,
    curry,
    curry_placeholder,
    curry_right,
)
from lambpy.errors import ArityMismatch, ArityUnknown, FrozenError, LambpyError, NotCallable
from lambpy.freezing import FrozenDict, FrozenList, FrozenSet, freeze, is_frozen
from lambpy.generic import Sliceable, generic, to_function
from lambpy.partial import BoundFunction, bind, partial
from lambpy.placeholder import PLACEHOLDER, __, is_placeholder, substitute
from lambpy.array import *  # noqa: F401,F403
from lambpy.obj import *  # noqa: F401,F403
from lambpy.validation import checker, validate, validate_with
from lambpy import array, obj

__version__ = "0.1.0"

__all__ = [
    "PLACEHOLDER",
    "__",
    "ArityMismatch",
    "ArityUnknown",
    "BoundFunction",
    "CurriedFunction",
    "FrozenDict",
    "FrozenError",
    "FrozenList",
    "FrozenSet",
    "LambpyError",
    "NotCallable",
    "PlaceholderCurriedFunction",
    "Sliceable",
    "aritize",
    "arity_of",
    "always",
    "binary",
    "bind",
    "checker",
    "compose",
    "curried",
    "curry",
    "curry_placeholder",
    "curry_right",
    "freeze",
    "generic",
    "identity",
    "is_frozen",
    "is_placeholder",
    "is_svz",
    "negate",
    "partial",
    "pipe",
    "substitute",
    "to_function",
    "unary",
    "validate",
    "validate_with",
    *array.__all__,
    *obj.__all__,
]
