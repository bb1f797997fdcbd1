import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from clmmath.sqrt_price_math import (
    get_next_sqrt_price_from_amount_0_rounding_up,
    get_next_sqrt_price_from_amount_1_rounding_down,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from clmmath.tick_math import MAX_SQRT_PRICE_X64, MIN_SQRT_PRICE_X64

Q64 = 1 << 64

prices = st.integers(MIN_SQRT_PRICE_X64, MAX_SQRT_PRICE_X64)
liquidities = st.integers(1, 1 << 64)
amounts = st.integers(0, (1 << 32) - 1)


def test_zero_amount_0_keeps_price():
    assert get_next_sqrt_price_from_amount_0_rounding_up(Q64, 10**9, 0, True) == Q64
    assert get_next_sqrt_price_from_amount_0_rounding_up(Q64, 10**9, 0, False) == Q64


def test_amount_1_with_unit_liquidity_moves_by_amount():
    assert get_next_sqrt_price_from_amount_1_rounding_down(Q64, Q64, 5, True) == Q64 + 5
    assert get_next_sqrt_price_from_amount_1_rounding_down(Q64, Q64, 5, False) == Q64 - 5


def test_zero_liquidity_rejected():
    with pytest.raises(ValueError):
        get_next_sqrt_price_from_input(Q64, 0, 1, True)
    with pytest.raises(ValueError):
        get_next_sqrt_price_from_output(Q64, 0, 1, False)


def test_zero_price_rejected():
    with pytest.raises(ValueError):
        get_next_sqrt_price_from_input(0, 1, 1, False)
    with pytest.raises(ValueError):
        get_next_sqrt_price_from_output(0, 1, 1, True)


def test_output_token_1_exceeding_reserves():
    with pytest.raises(OverflowError):
        get_next_sqrt_price_from_output(Q64, 1, 2, True)


def test_output_token_0_exceeding_reserves():
    with pytest.raises(OverflowError):
        get_next_sqrt_price_from_output(Q64, 1, 2, False)


def test_output_token_0_draining_all_reserves():
    with pytest.raises(ZeroDivisionError):
        get_next_sqrt_price_from_output(Q64, 1, 1, False)


def test_input_token_1_overflow():
    with pytest.raises(OverflowError):
        get_next_sqrt_price_from_input((1 << 128) - 1, 1, 1, False)


@settings(max_examples=200)
@given(prices, liquidities, amounts)
def test_input_token_0_lowers_price(price, liquidity, amount):
    result = get_next_sqrt_price_from_input(price, liquidity, amount, True)
    assert 0 < result <= price


@settings(max_examples=200)
@given(prices, liquidities, amounts)
def test_input_token_1_raises_price(price, liquidity, amount):
    result = get_next_sqrt_price_from_input(price, liquidity, amount, False)
    assert result >= price
    assert result == get_next_sqrt_price_from_amount_1_rounding_down(
        price, liquidity, amount, True
    )


@settings(max_examples=200)
@given(prices, liquidities, amounts)
def test_output_token_1_lowers_price(price, liquidity, amount):
    assume(-(-(amount << 64) // liquidity) <= price)
    result = get_next_sqrt_price_from_output(price, liquidity, amount, True)
    assert 0 <= result <= price


@settings(max_examples=200)
@given(prices, liquidities, amounts)
def test_output_token_0_raises_price(price, liquidity, amount):
    assume(2 * amount * price <= liquidity << 64)
    result = get_next_sqrt_price_from_output(price, liquidity, amount, False)
    assert result >= price


@settings(max_examples=200)
@given(prices, liquidities, amounts, amounts)
def test_larger_token_0_input_moves_price_further(price, liquidity, a, b):
    small, large = sorted((a, b))
    assert get_next_sqrt_price_from_input(
        price, liquidity, large, True
    ) <= get_next_sqrt_price_from_input(price, liquidity, small, True)


@settings(max_examples=200)
@given(prices, liquidities, amounts, amounts)
def test_larger_token_1_input_moves_price_further(price, liquidity, a, b):
    small, large = sorted((a, b))
    assert get_next_sqrt_price_from_input(
        price, liquidity, large, False
    ) >= get_next_sqrt_price_from_input(price, liquidity, small, False)