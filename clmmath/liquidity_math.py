"""Liquidity and token amount calculations over square-root price ranges."""

from clmmath.big_num import U64_MAX, U128_MAX
from clmmath.errors import LiquidityOverflowError, LiquidityUnderflowError
from clmmath.full_math import Q64, RESOLUTION, div_rounding_up, mul_div_ceil, mul_div_floor
from clmmath.tick_math import get_sqrt_price_at_tick


def _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64):
    if sqrt_ratio_a_x64 > sqrt_ratio_b_x64:
        return sqrt_ratio_b_x64, sqrt_ratio_a_x64
    return sqrt_ratio_a_x64, sqrt_ratio_b_x64


def _as_u64(value):
    if value > U64_MAX:
        raise OverflowError("integer overflow when casting to u64")
    return value


def add_delta(x, y):
    """Apply a signed liquidity delta ``y`` to liquidity ``x``.

    Raises LiquidityUnderflowError or LiquidityOverflowError when the
    result leaves the unsigned 128-bit range.
    """
    if y < 0:
        if -y > x:
            raise LiquidityUnderflowError(f"cannot remove {-y} from liquidity {x}")
        return x + y
    z = x + y
    if z > U128_MAX:
        raise LiquidityOverflowError(f"adding {y} to liquidity {x} overflows")
    return z


def get_liquidity_from_amount_0(sqrt_ratio_a_x64, sqrt_ratio_b_x64, amount_0):
    """Liquidity for an amount of token_0: ``Δx * √Pa * √Pb / (√Pb - √Pa)``."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    intermediate = mul_div_floor(lower, upper, Q64)
    return mul_div_floor(amount_0, intermediate, upper - lower)


def get_liquidity_from_amount_1(sqrt_ratio_a_x64, sqrt_ratio_b_x64, amount_1):
    """Liquidity for an amount of token_1: ``Δy / (√Pb - √Pa)``."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    return mul_div_floor(amount_1, Q64, upper - lower)


def get_liquidity_from_amounts(sqrt_ratio_x64, sqrt_ratio_a_x64, sqrt_ratio_b_x64, amount_0, amount_1):
    """Maximum liquidity that both token amounts can back at the current price."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    if sqrt_ratio_x64 <= lower:
        return get_liquidity_from_amount_0(lower, upper, amount_0)
    if sqrt_ratio_x64 < upper:
        return min(
            get_liquidity_from_amount_0(sqrt_ratio_x64, upper, amount_0),
            get_liquidity_from_amount_1(lower, sqrt_ratio_x64, amount_1),
        )
    return get_liquidity_from_amount_1(lower, upper, amount_1)


def get_liquidity_from_single_amount_0(sqrt_ratio_x64, sqrt_ratio_a_x64, sqrt_ratio_b_x64, amount_0):
    """Liquidity backed by token_0 alone; zero when the price is above the range."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    if sqrt_ratio_x64 <= lower:
        return get_liquidity_from_amount_0(lower, upper, amount_0)
    if sqrt_ratio_x64 < upper:
        return get_liquidity_from_amount_0(sqrt_ratio_x64, upper, amount_0)
    return 0


def get_liquidity_from_single_amount_1(sqrt_ratio_x64, sqrt_ratio_a_x64, sqrt_ratio_b_x64, amount_1):
    """Liquidity backed by token_1 alone; zero when the price is below the range."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    if sqrt_ratio_x64 <= lower:
        return 0
    if sqrt_ratio_x64 < upper:
        return get_liquidity_from_amount_1(lower, sqrt_ratio_x64, amount_1)
    return get_liquidity_from_amount_1(lower, upper, amount_1)


def get_delta_amount_0_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity, round_up):
    """Token_0 amount for liquidity over a range: ``L * (√Pb - √Pa) / (√Pb * √Pa)``."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    numerator_1 = liquidity << RESOLUTION
    numerator_2 = upper - lower
    if lower <= 0:
        raise ValueError("lower sqrt price must be positive")
    if round_up:
        result = div_rounding_up(mul_div_ceil(numerator_1, numerator_2, upper), lower)
    else:
        result = mul_div_floor(numerator_1, numerator_2, upper) // lower
    return _as_u64(result)


def get_delta_amount_1_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity, round_up):
    """Token_1 amount for liquidity over a range: ``L * (√Pb - √Pa)``."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    rounding = mul_div_ceil if round_up else mul_div_floor
    return _as_u64(rounding(liquidity, upper - lower, Q64))


def get_delta_amount_0_signed(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity):
    """Token_0 amount for a signed liquidity; removals round down, additions up."""
    if liquidity < 0:
        return get_delta_amount_0_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, -liquidity, False)
    return get_delta_amount_0_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity, True)


def get_delta_amount_1_signed(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity):
    """Token_1 amount for a signed liquidity; removals round down, additions up."""
    if liquidity < 0:
        return get_delta_amount_1_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, -liquidity, False)
    return get_delta_amount_1_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity, True)


def get_delta_amounts_signed(tick_current, sqrt_price_x64_current, tick_lower, tick_upper, liquidity_delta):
    """Return ``(amount_0, amount_1)`` for a liquidity change on a tick range."""
    amount_0 = 0
    amount_1 = 0
    if tick_current < tick_lower:
        amount_0 = get_delta_amount_0_signed(
            get_sqrt_price_at_tick(tick_lower),
            get_sqrt_price_at_tick(tick_upper),
            liquidity_delta,
        )
    elif tick_current < tick_upper:
        amount_0 = get_delta_amount_0_signed(
            sqrt_price_x64_current,
            get_sqrt_price_at_tick(tick_upper),
            liquidity_delta,
        )
        amount_1 = get_delta_amount_1_signed(
            get_sqrt_price_at_tick(tick_lower),
            sqrt_price_x64_current,
            liquidity_delta,
        )
    else:
        amount_1 = get_delta_amount_1_signed(
            get_sqrt_price_at_tick(tick_lower),
            get_sqrt_price_at_tick(tick_upper),
            liquidity_delta,
        )
    return amount_0, amount_1