"""Strategies that fabricate inspect.Signature objects and functions having them.
"""
import inspect
import keyword
import types
from typing import Any

from hypothesis import strategies as st
from hypothesis.strategies import DrawFn, SearchStrategy

POSITIONAL_ONLY = inspect.Parameter.POSITIONAL_ONLY
POSITIONAL_OR_KEYWORD = inspect.Parameter.POSITIONAL_OR_KEYWORD
VAR_POSITIONAL = inspect.Parameter.VAR_POSITIONAL
KEYWORD_ONLY = inspect.Parameter.KEYWORD_ONLY
VAR_KEYWORD = inspect.Parameter.VAR_KEYWORD


def valid_name(x: str) -> bool:
    return (not (keyword.iskeyword(x) or keyword.issoftkeyword(x))) and not x.startswith("_") and x != "locals" and len(x) > 0

ascii_pre_text = st.characters(codec='ascii', categories=("L",))
ascii_text = st.characters(codec='ascii',  categories=("L", "N"), include_characters='_')
NAME_STRATEGY = st.builds(''.join, st.tuples(st.text(ascii_pre_text, min_size=1, max_size=8), st.text(ascii_text, max_size=8))).filter(valid_name)
POSITIONAL_KIND_STRATEGY = st.sampled_from([POSITIONAL_ONLY, POSITIONAL_OR_KEYWORD])


def required_positional(signature: inspect.Signature) -> int:
    return sum(
        1 for p in signature.parameters.values()
        if p.kind in (POSITIONAL_ONLY, POSITIONAL_OR_KEYWORD) and p.default is inspect.Parameter.empty
    )


@st.composite
def signature_strategy(
    draw: DrawFn,
    min_positional: int = 0,
    max_positional: int = 5,
    max_keyword_only: int = 2,
) -> inspect.Signature:
    """
    Generate a *valid* `inspect.Signature` (no duplicate names, correct order).

    Positional parameters come first, sorted by kind, with defaults only on a
    trailing run of them; then optionally `*args`, keyword-only parameters and
    `**kwargs`. Every default is `None`.
    """
    n_positional = draw(st.integers(min_value=min_positional, max_value=max_positional))
    n_keyword_only = draw(st.integers(min_value=0, max_value=max_keyword_only))
    has_var_args = draw(st.booleans())
    has_var_kwargs = draw(st.booleans())
    n_names = n_positional + n_keyword_only + has_var_args + has_var_kwargs
    names = iter(draw(st.lists(NAME_STRATEGY, unique=True, min_size=n_names, max_size=n_names)))

    kinds = sorted(draw(st.lists(POSITIONAL_KIND_STRATEGY, min_size=n_positional, max_size=n_positional)))
    n_defaults = draw(st.integers(min_value=0, max_value=n_positional))
    params = []
    for i, kind in enumerate(kinds):
        default = None if i >= n_positional - n_defaults else inspect.Parameter.empty
        params.append(inspect.Parameter(next(names), kind, default=default))
    if has_var_args:
        params.append(inspect.Parameter(next(names), VAR_POSITIONAL))
    for _ in range(n_keyword_only):
        default = draw(st.sampled_from([None, inspect.Parameter.empty]))
        params.append(inspect.Parameter(next(names), KEYWORD_ONLY, default=default))
    if has_var_kwargs:
        params.append(inspect.Parameter(next(names), VAR_KEYWORD))
    return inspect.Signature(params)


def create_function(name: str, signature: inspect.Signature) -> types.FunctionType:
    """
    Return a new function whose call signature exactly matches *signature*.
    The body simply returns its local namespace for easy inspection.
    """
    if not isinstance(signature, inspect.Signature):
        raise TypeError("signature must be an inspect.Signature")
    func_src = f"def {name}{signature}: return locals()"
    namespace: dict[str, types.FunctionType] = {}
    exec(func_src, namespace)
    return namespace[name]


def function_strategy(
        signature: SearchStrategy[inspect.Signature] | None = None, name: SearchStrategy[str] | None = None
) -> SearchStrategy[types.FunctionType]:
    if name is None:
        name = NAME_STRATEGY
    if signature is None:
        signature = signature_strategy()
    return st.builds(create_function, name=name, signature=signature)


@st.composite
def function_inputs(draw: DrawFn, signature: inspect.Signature, fallback_strategy: SearchStrategy[Any]):
    """Positional and keyword arguments satisfying every required parameter of *signature*.

    Required positional parameters are always passed positionally, so their
    count is the arity of the function.
    """
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for p in signature.parameters.values():
        if p.default is not inspect.Parameter.empty or p.kind in (VAR_POSITIONAL, VAR_KEYWORD):
            continue
        if p.kind is KEYWORD_ONLY:
            kwargs[p.name] = draw(fallback_strategy)
        else:
            args.append(draw(fallback_strategy))
    return args, kwargs
