import pytest
from hypothesis import given
from hypothesis import strategies as st

from clmmath.big_num import U64_MAX, U128_MAX
from clmmath.full_math import (
    Q64,
    div_rounding_up,
    mul_div_ceil,
    mul_div_floor,
    to_underflow_u64,
)

u64 = st.integers(min_value=0, max_value=U64_MAX)
nonzero_u64 = st.integers(min_value=1, max_value=U64_MAX)
u128 = st.integers(min_value=1, max_value=U128_MAX)
nonzero_u128 = st.integers(min_value=1, max_value=U128_MAX)


def test_documented_examples():
    assert mul_div_floor(3, 4, 2) == 6
    assert mul_div_floor(5, 2, 3) == 3
    assert mul_div_floor(3, 3, 2) == 4
    assert mul_div_ceil(3, 4, 2) == 6
    assert mul_div_ceil(5, 2, 3) == 4
    assert mul_div_ceil(3, 3, 2) == 5


def _check_floor(val, num, den, limit):
    product = val * num
    if product >= (limit + 1) * den:
        with pytest.raises(OverflowError):
            mul_div_floor(val, num, den, limit)
    else:
        result = mul_div_floor(val, num, den, limit)
        assert result * den <= product < (result + 1) * den


def _check_ceil(val, num, den, limit):
    product = val * num
    if product > limit * den:
        with pytest.raises(OverflowError):
            mul_div_ceil(val, num, den, limit)
    else:
        result = mul_div_ceil(val, num, den, limit)
        assert (result - 1) * den < product <= result * den


@given(u64, u64, nonzero_u64)
def test_scale_floor_u64(val, num, den):
    _check_floor(val, num, den, U64_MAX)


@given(u64, u64, nonzero_u64)
def test_scale_ceil_u64(val, num, den):
    _check_ceil(val, num, den, U64_MAX)


@given(u128, u128, nonzero_u128)
def test_scale_floor_u128(val, num, den):
    _check_floor(val, num, den, U128_MAX)


@given(u128, u128, nonzero_u128)
def test_scale_ceil_u128(val, num, den):
    _check_ceil(val, num, den, U128_MAX)


def test_wide_operands_with_narrow_result():
    assert mul_div_floor(1 << 200, 1, 1 << 100) == 1 << 100
    assert mul_div_ceil(1 << 200, 1, 1 << 100) == 1 << 100
    with pytest.raises(OverflowError):
        mul_div_floor(1 << 200, 1, 1)


def test_q64_scaling():
    assert mul_div_floor(Q64, Q64, Q64) == Q64


def test_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        mul_div_floor(1, 1, 0)
    with pytest.raises(ZeroDivisionError):
        mul_div_ceil(1, 1, 0)


def test_negative_operand_rejected():
    with pytest.raises(ValueError):
        mul_div_floor(-1, 1, 1)


def test_to_underflow_u64():
    assert to_underflow_u64(12345) == 12345
    assert to_underflow_u64(U64_MAX) == 0
    assert to_underflow_u64(U128_MAX) == 0


def test_divide_by_factor():
    assert div_rounding_up(4, 2) == 2


def test_divide_and_round_up():
    assert div_rounding_up(4, 3) == 2


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        div_rounding_up(2, 0)


@given(st.integers(min_value=0, max_value=U128_MAX), nonzero_u128)
def test_div_rounding_up_bounds(x, y):
    result = div_rounding_up(x, y)
    assert (result - 1) * y < x <= result * y