"""Overflow-resistant multiply-divide and rounding division.

Also holds the Q64.64 fixed-point constants.
"""

from clmmath.big_num import U64_MAX, U128_MAX

Q64 = 1 << 64
RESOLUTION = 64


def _check_operands(*values):
    if any(v < 0 for v in values):
        raise ValueError("operands must be unsigned")


def mul_div_floor(value, num, denom, max_result=U128_MAX):
    """Return ``floor(value * num / denom)``.

    Raises OverflowError if the result exceeds ``max_result`` and
    ZeroDivisionError if ``denom`` is zero.
    """
    _check_operands(value, num, denom)
    if denom == 0:
        raise ZeroDivisionError("mul_div_floor denominator is zero")
    result = value * num // denom
    if result > max_result:
        raise OverflowError("mul_div_floor result out of range")
    return result


def mul_div_ceil(value, num, denom, max_result=U128_MAX):
    """Return ``ceil(value * num / denom)``.

    Raises OverflowError if the result exceeds ``max_result`` and
    ZeroDivisionError if ``denom`` is zero.
    """
    _check_operands(value, num, denom)
    if denom == 0:
        raise ZeroDivisionError("mul_div_ceil denominator is zero")
    result = (value * num + denom - 1) // denom
    if result > max_result:
        raise OverflowError("mul_div_ceil result out of range")
    return result


def to_underflow_u64(value):
    """Return ``value`` if it is below the u64 maximum, otherwise 0."""
    _check_operands(value)
    return value if value < U64_MAX else 0


def div_rounding_up(x, y):
    """Return ``ceil(x / y)``; dividing by zero raises ZeroDivisionError."""
    _check_operands(x, y)
    quotient, remainder = divmod(x, y)
    return quotient + (1 if remainder > 0 else 0)