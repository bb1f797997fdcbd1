"""Next square-root price after adding or removing token amounts."""

from clmmath.big_num import U128_MAX
from clmmath.full_math import RESOLUTION, div_rounding_up, mul_div_ceil


def get_next_sqrt_price_from_amount_0_rounding_up(sqrt_price_x64, liquidity, amount, add):
    """Next price for a change of token_0, rounded up.

    ``√P' = √P * L / (L ± Δx * √P)``.
    """
    if amount == 0:
        return sqrt_price_x64
    numerator_1 = liquidity << RESOLUTION
    product = amount * sqrt_price_x64

    if add:
        denominator = numerator_1 + product
    else:
        denominator = numerator_1 - product
        if denominator < 0:
            raise OverflowError("token_0 amount exceeds available reserves")
    return mul_div_ceil(numerator_1, sqrt_price_x64, denominator)


def get_next_sqrt_price_from_amount_1_rounding_down(sqrt_price_x64, liquidity, amount, add):
    """Next price for a change of token_1, rounded down.

    ``√P' = √P ± Δy / L``.
    """
    shifted = amount << RESOLUTION
    if add:
        if liquidity == 0:
            raise ZeroDivisionError("liquidity is zero")
        result = sqrt_price_x64 + shifted // liquidity
        if result > U128_MAX:
            raise OverflowError("next sqrt price overflows 128 bits")
        return result
    result = sqrt_price_x64 - div_rounding_up(shifted, liquidity)
    if result < 0:
        raise OverflowError("token_1 amount exceeds available reserves")
    return result


def _check_positive(sqrt_price_x64, liquidity):
    if sqrt_price_x64 <= 0:
        raise ValueError("sqrt price must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")


def get_next_sqrt_price_from_input(sqrt_price_x64, liquidity, amount_in, zero_for_one):
    """Next price after an input amount of token_0 (``zero_for_one``) or token_1."""
    _check_positive(sqrt_price_x64, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x64, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x64, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(sqrt_price_x64, liquidity, amount_out, zero_for_one):
    """Next price after an output amount of token_1 (``zero_for_one``) or token_0."""
    _check_positive(sqrt_price_x64, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x64, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x64, liquidity, amount_out, False
    )