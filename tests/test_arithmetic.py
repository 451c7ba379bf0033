import math

import pytest
from hypothesis import assume, given, strategies as st

from fexl.errors import FexlRuntimeError
from fexl.interpreter import Runtime
from fexl.types.data import INT_MAX, INT_MIN, Int

i32 = st.integers(min_value=INT_MIN, max_value=INT_MAX)


def run(source):
    return Runtime().eval_source(source)


def bind(a, b):
    # Literals are unsigned, so negative operands are built with subtraction
    def lit(n):
        return str(n) if n >= 0 else f"(- 0 {-n})" if n != INT_MIN else f"(- (- 0 {INT_MAX}) 1)"
    return f"(let a {lit(a)} b {lit(b)})"


@given(i32, i32)
def test_addition_matches_i32(a, b):
    assume(INT_MIN <= a + b <= INT_MAX)
    assert run(f"{bind(a, b)} (+ a b)") == Int(a + b)


@given(i32, i32.filter(lambda n: n != 0))
def test_division_truncates_toward_zero(a, b):
    assume(not (a == INT_MIN and b == -1))
    sign = 1 if (a < 0) == (b < 0) else -1
    assert run(f"{bind(a, b)} (/ a b)") == Int(sign * (abs(a) // abs(b)))


@given(i32, i32.filter(lambda n: n != 0))
def test_modulo_takes_sign_of_dividend(a, b):
    result = run(f"{bind(a, b)} (mod a b)")
    assert result == Int(int(math.fmod(a, b)))
    assert result.value == 0 or (result.value < 0) == (a < 0)


@given(i32)
def test_division_by_zero_is_a_runtime_error(a):
    with pytest.raises(FexlRuntimeError):
        run(f"{bind(a, 0)} (/ a b)")
    with pytest.raises(FexlRuntimeError):
        run(f"{bind(a, 0)} (mod a b)")


@pytest.mark.parametrize(
    "source",
    ["(+ 2147483647 2147483647)", "(* 2147483647 2)", "(- (- 0 2147483647) 10)"],
)
def test_overflow_is_a_runtime_error(source):
    with pytest.raises(FexlRuntimeError) as exc_info:
        run(source)
    assert "Integer overflow" in str(exc_info.value)
