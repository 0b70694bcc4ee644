import inspect

import hypothesis
from hypothesis import strategies as st, given, settings

from lambpy import CurriedFunction, arity_of, curry
from tests.common.signatures import (
    NAME_STRATEGY,
    create_function,
    function_inputs,
    function_strategy,
    required_positional,
    signature_strategy,
)


@given(st.lists(NAME_STRATEGY, unique=True))
def test_name(names):
    for name in names:
        exec(f"def {name}():...")


@given(signature_strategy())
@settings(max_examples=100)
def test_sig(sig):
    hypothesis.note(sig)
    assert create_function("f", sig)


@given(data=st.data())
def test_function_signatures(data):
    sig = data.draw(signature_strategy())
    func = create_function("f", sig)
    assert inspect.signature(func) == sig


@given(data=st.data())
def test_arity_is_the_number_of_required_positional_parameters(data):
    sig = data.draw(signature_strategy())
    func = data.draw(function_strategy(signature=st.just(sig)))
    assert arity_of(func) == required_positional(sig)


@given(data=st.data())
def test_curried_function_returns_locals(data):
    sig = data.draw(signature_strategy(min_positional=1))
    func = create_function("f", sig)
    args, kwargs = data.draw(function_inputs(sig, fallback_strategy=st.integers()))
    curried = curry(func)
    if len(args) <= 1:
        assert curried is func
        return
    step = curried(**kwargs)
    for arg in args[:-1]:
        step = step(arg)
        assert isinstance(step, CurriedFunction)
    assert step(args[-1]) == func(*args, **kwargs)
