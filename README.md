# clmmath

Exact integer arithmetic for concentrated-liquidity automated market makers.
Square-root prices are Q64.64 fixed-point numbers held as plain Python `int`s.
Each operation has a fixed rounding direction and checks that its result fits
the width it is meant to have: u64 for token amounts, u128 for prices and
liquidity.

The package has no dependencies outside the standard library.

## Installation

```
pip install clmmath
```

To run the test suite:

```
pip install "clmmath[test]"
pytest
```

## Modules

- `clmmath.big_num`: helpers for fixed-width unsigned integers. These are
  `max_value(bits)`, `to_words` / `from_words` for little-endian 64-bit words,
  `bit`, `leading_zeros`, `trailing_zeros`, and `shl` / `shr`. `shl` drops any
  bits beyond the width. The constants `U64_MAX`, `U128_MAX`, `U256_MAX`,
  `U512_MAX` and `U1024_MAX` are also defined here.
- `clmmath.full_math`: `mul_div_floor` and `mul_div_ceil`, which compute
  `value * num / denom` at full precision. They raise `OverflowError` when the
  result exceeds `max_result`, which defaults to the u128 maximum. The module
  also provides `div_rounding_up` and `to_underflow_u64`, and the constants
  `Q64` (2**64) and `RESOLUTION` (64).
- `clmmath.tick_math`: `get_sqrt_price_at_tick` and `get_tick_at_sqrt_price`.
  The module defines the bounds `MIN_TICK`, `MAX_TICK`, `MIN_SQRT_PRICE_X64`
  and `MAX_SQRT_PRICE_X64`.
- `clmmath.sqrt_price_math`: the next square-root price after an amount of
  token 0 or token 1 is added or removed. It provides
  `get_next_sqrt_price_from_input` and `get_next_sqrt_price_from_output`, plus
  the two per-token functions they are built on.
- `clmmath.liquidity_math`: converts between token amounts and liquidity over
  a price range. It covers liquidity from one token (`get_liquidity_from_amount_0`,
  `get_liquidity_from_amount_1`), from both tokens
  (`get_liquidity_from_amounts`) and from one side at the current price
  (`get_liquidity_from_single_amount_0`, `get_liquidity_from_single_amount_1`).
  It also gives token amounts for a liquidity, signed or unsigned
  (`get_delta_amount_*`, `get_delta_amounts_signed`), and applies a signed
  liquidity delta (`add_delta`).
- `clmmath.swap_math`: `compute_swap_step` returns a `SwapStep` dataclass with
  the fields `sqrt_price_next_x64`, `amount_in`, `amount_out` and
  `fee_amount`, for one step of a swap towards a target price. The fee rate is
  given in units of the `fee_rate_denominator` argument.
- `clmmath.tick_array_bitmap`: helpers for the 1024-bit bitmap of tick arrays,
  where each array holds 60 ticks (`TICK_ARRAY_SIZE`).
  `max_tick_in_tickarray_bitmap` gives the ticks covered by half the bitmap.
  `get_bitmap_tick_boundary` gives the bitmap range that holds a tick array's
  start index. `most_significant_bit` returns the number of leading zero bits,
  and `least_significant_bit` the position of the lowest set bit. Both return
  `None` for zero.
- `clmmath.errors`: `AmmMathError` and its subclasses `TickOutOfRangeError`,
  `SqrtPriceOutOfRangeError`, `LiquidityUnderflowError` and
  `LiquidityOverflowError`.

## Example

```python
from clmmath.tick_math import get_sqrt_price_at_tick, get_tick_at_sqrt_price
from clmmath.liquidity_math import get_delta_amounts_signed
from clmmath.swap_math import compute_swap_step

price = get_sqrt_price_at_tick(-1860)
assert get_tick_at_sqrt_price(price) == -1860

amount_0, amount_1 = get_delta_amounts_signed(-1860, price, -6960, 4080, 100000)

step = compute_swap_step(
    price,
    get_sqrt_price_at_tick(-6960),
    10**12,
    1_000_000,
    2500,
    True,   # exact input
    True,   # token 0 for token 1
    1_000_000,
)
print(step.sqrt_price_next_x64, step.amount_in, step.amount_out, step.fee_amount)
```

## Errors

A tick outside `[MIN_TICK, MAX_TICK]` raises `TickOutOfRangeError`. A
square-root price outside `[MIN_SQRT_PRICE_X64, MAX_SQRT_PRICE_X64)` raises
`SqrtPriceOutOfRangeError`. If `add_delta` would take liquidity below zero it
raises `LiquidityUnderflowError`, and if it would go past 128 bits it raises
`LiquidityOverflowError`. Any other arithmetic that cannot be done raises the
usual Python exception:

- `ZeroDivisionError` for division by zero,
- `OverflowError` for a result too wide for its type,
- `ValueError` for negative or non-positive inputs where those are not allowed.

## What it does not do

This is a library of pure functions. It keeps no pool, position or tick state
and stores nothing. It does not run a full swap across several price ranges:
`compute_swap_step` handles one range at a time. The tick-array module only
works out bitmap boundaries and bit positions. It cannot look up or search for
initialized tick arrays. The package has no command-line interface.