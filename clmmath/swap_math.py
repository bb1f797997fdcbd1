"""Computation of a single swap step within one price range."""

from dataclasses import dataclass

from clmmath.big_num import U64_MAX
from clmmath.full_math import mul_div_ceil, mul_div_floor
from clmmath.liquidity_math import get_delta_amount_0_unsigned, get_delta_amount_1_unsigned
from clmmath.sqrt_price_math import get_next_sqrt_price_from_input, get_next_sqrt_price_from_output


@dataclass
class SwapStep:
    """Result of a swap step."""

    sqrt_price_next_x64: int = 0
    amount_in: int = 0
    amount_out: int = 0
    fee_amount: int = 0


def compute_swap_step(
    sqrt_price_current_x64,
    sqrt_price_target_x64,
    liquidity,
    amount_remaining,
    fee_rate,
    is_base_input,
    zero_for_one,
    fee_rate_denominator,
):
    """Swap ``amount_remaining`` in (``is_base_input``) or out towards the target price.

    ``fee_rate`` is expressed in units of ``fee_rate_denominator``.
    """
    if not 0 <= fee_rate <= fee_rate_denominator:
        raise ValueError(f"fee rate {fee_rate} outside [0, {fee_rate_denominator}]")

    step = SwapStep()
    if is_base_input:
        amount_remaining_less_fee = mul_div_floor(
            amount_remaining, fee_rate_denominator - fee_rate, fee_rate_denominator, U64_MAX
        )
        if zero_for_one:
            step.amount_in = get_delta_amount_0_unsigned(
                sqrt_price_target_x64, sqrt_price_current_x64, liquidity, True
            )
        else:
            step.amount_in = get_delta_amount_1_unsigned(
                sqrt_price_current_x64, sqrt_price_target_x64, liquidity, True
            )
        if amount_remaining_less_fee >= step.amount_in:
            step.sqrt_price_next_x64 = sqrt_price_target_x64
        else:
            step.sqrt_price_next_x64 = get_next_sqrt_price_from_input(
                sqrt_price_current_x64, liquidity, amount_remaining_less_fee, zero_for_one
            )
    else:
        if zero_for_one:
            step.amount_out = get_delta_amount_1_unsigned(
                sqrt_price_target_x64, sqrt_price_current_x64, liquidity, False
            )
        else:
            step.amount_out = get_delta_amount_0_unsigned(
                sqrt_price_current_x64, sqrt_price_target_x64, liquidity, False
            )
        if amount_remaining >= step.amount_out:
            step.sqrt_price_next_x64 = sqrt_price_target_x64
        else:
            step.sqrt_price_next_x64 = get_next_sqrt_price_from_output(
                sqrt_price_current_x64, liquidity, amount_remaining, zero_for_one
            )

    reached_target = sqrt_price_target_x64 == step.sqrt_price_next_x64
    if zero_for_one:
        if not (reached_target and is_base_input):
            step.amount_in = get_delta_amount_0_unsigned(
                step.sqrt_price_next_x64, sqrt_price_current_x64, liquidity, True
            )
        if not (reached_target and not is_base_input):
            step.amount_out = get_delta_amount_1_unsigned(
                step.sqrt_price_next_x64, sqrt_price_current_x64, liquidity, False
            )
    else:
        if not (reached_target and is_base_input):
            step.amount_in = get_delta_amount_1_unsigned(
                sqrt_price_current_x64, step.sqrt_price_next_x64, liquidity, True
            )
        if not (reached_target and not is_base_input):
            step.amount_out = get_delta_amount_0_unsigned(
                sqrt_price_current_x64, step.sqrt_price_next_x64, liquidity, False
            )

    if not is_base_input and step.amount_out > amount_remaining:
        step.amount_out = amount_remaining

    if is_base_input and step.sqrt_price_next_x64 != sqrt_price_target_x64:
        # The target was not reached: the leftover input is taken as fee.
        if amount_remaining < step.amount_in:
            raise OverflowError("amount in exceeds the remaining amount")
        step.fee_amount = amount_remaining - step.amount_in
    else:
        step.fee_amount = mul_div_ceil(
            step.amount_in, fee_rate, fee_rate_denominator - fee_rate, U64_MAX
        )
    return step