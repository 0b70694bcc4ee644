import math

import pytest
from hypothesis import given, strategies as st

from lambpy import always, compose, identity, is_svz, negate, pipe


def test_always_ignores_arguments():
    fn = always(42)
    assert fn() == 42
    assert fn(1, 2, key=3) == 42


def test_identity():
    value = object()
    assert identity(value) is value


def test_compose_applies_right_to_left():
    fn = compose(str.upper, str.strip)
    assert fn("  hi ") == "HI"


def test_innermost_function_receives_every_argument():
    fn = compose(str, lambda a, b, scale=1: (a + b) * scale)
    assert fn(1, 2, scale=10) == "30"


def test_compose_without_functions_is_identity():
    assert compose() is identity


def test_pipe_applies_left_to_right():
    fn = pipe(lambda a, b: a - b, abs, str)
    assert fn(1, 5) == "4"


@given(st.integers())
def test_pipe_is_reversed_compose(n):
    inc = lambda x: x + 1
    double = lambda x: x * 2
    assert pipe(inc, double)(n) == compose(double, inc)(n)


def test_negate():
    is_odd = lambda n: n % 2 == 1
    is_even = negate(is_odd)
    assert [is_even(n) for n in range(4)] == [True, False, True, False]
    assert negate(len)([]) is True


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (math.nan, math.nan, True),
        (float("nan"), math.nan, True),
        (0.0, -0.0, True),
        (1, 1.0, True),
        ("a", "a", True),
        (math.nan, 1.0, False),
        (None, 0, False),
        ([1], [1], True),
    ],
)
def test_is_svz(a, b, expected):
    assert is_svz(a, b) is expected
