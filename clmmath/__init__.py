"""Exact integer math for concentrated-liquidity market makers: ticks, Q64.64 prices, liquidity and swap steps."""

__version__ = "0.1.0"

__all__ = [
    "big_num",
    "errors",
    "full_math",
    "liquidity_math",
    "sqrt_price_math",
    "swap_math",
    "tick_array_bitmap",
    "tick_math",
]