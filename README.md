# clmm_math

Integer fixed-point math for a concentrated-liquidity automated market maker.
Every value is a plain Python `int`, but the functions keep the bit widths,
rounding directions and range limits of a fixed-width implementation:
square-root prices are Q64.64 numbers, token amounts are 64-bit and liquidity
is 128-bit. Results that would not fit raise an exception instead of wrapping.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `clmm_math.bignum`: `U1024`, an immutable 1024-bit unsigned integer. It can
  be built from an `int` or with `U1024.from_words(words)` (sixteen 64-bit
  words, least significant first), and offers `zero()`, `one()`,
  `max_value()`, `is_zero()`, `as_usize()`, `leading_zeros()`,
  `trailing_zeros()`, `bit(index)`, the `words` property, and the `&`, `|`,
  `^`, `~`, `<<` and `>>` operators. Shifts of 1024 bits or more give zero.
- `clmm_math.unsafe_math`: `div_rounding_up(x, y)`, ceiling division of
  non-negative integers; raises `ZeroDivisionError` when `y` is 0.
- `clmm_math.full_math`: `mul_div_floor(value, num, denom, bits=128)` and
  `mul_div_ceil(...)` compute `value * num / denom` for 64-, 128- or 256-bit
  operands, raising `ValueError` for operands that do not fit the width,
  `ZeroDivisionError` for a zero denominator and `OverflowError` when the result
  exceeds the range (the 256-bit form caps results at the 128-bit maximum).
  `to_underflow_u64(value)` returns `value` when it is below the 64-bit maximum
  and 0 otherwise. The constants `Q64`, `RESOLUTION`, `U64_MAX` and `U128_MAX`
  live here too.
- `clmm_math.tick_math`: `get_sqrt_price_at_tick(tick)` and
  `get_tick_at_sqrt_price(sqrt_price_x64)` convert between ticks (powers of
  1.0001) and Q64.64 square-root prices, raising `TickMathError` outside
  `MIN_TICK`..`MAX_TICK` or `MIN_SQRT_PRICE_X64`..`MAX_SQRT_PRICE_X64`
  (the upper price bound is exclusive).
- `clmm_math.sqrt_price_math`: the next square-root price after adding or
  removing an amount of token_0 (rounded up) or token_1 (rounded down), and
  `get_next_sqrt_price_from_input` / `get_next_sqrt_price_from_output` for swaps.
- `clmm_math.liquidity_math`: converts between liquidity and token amounts
  (`get_liquidity_from_amount_0`, `get_liquidity_from_amount_1`,
  `get_liquidity_from_amounts`, `get_liquidity_from_single_amount_0/1`,
  `get_delta_amount_0/1_unsigned`, `get_delta_amount_0/1_signed`,
  `get_delta_amounts_signed`), plus `add_delta(x, y)`, which raises
  `LiquidityError` when the new liquidity would be negative or exceed 128 bits.
- `clmm_math.swap_math`: `compute_swap_step(...)` returns a frozen `SwapStep`
  with the next price, amount in, amount out and fee for one step of a swap.
  Fee rates are parts of `FEE_RATE_DENOMINATOR_VALUE` (1,000,000).
- `clmm_math.tick_array_bit_map`: searches a `U1024` bitmap of initialised tick
  arrays. `check_current_tick_array_is_initialized` returns
  `(initialised, start_index)` for the array holding a tick, and
  `next_initialized_tick_array_start_index` returns the start index of the next
  initialised array downwards (`zero_for_one=True`) or upwards, or `None`.
  `most_significant_bit` returns the number of leading zero bits and
  `least_significant_bit` the number of trailing zero bits, each `None` for an
  empty bitmap.

## Example

```python
from clmm_math.tick_math import get_sqrt_price_at_tick, get_tick_at_sqrt_price
from clmm_math.liquidity_math import get_delta_amounts_signed
from clmm_math.swap_math import compute_swap_step

price = get_sqrt_price_at_tick(-1860)
assert get_tick_at_sqrt_price(price) == -1860

amount_0, amount_1 = get_delta_amounts_signed(-1860, price, -6960, 4080, 100_000)

step = compute_swap_step(
    sqrt_price_current_x64=price,
    sqrt_price_target_x64=get_sqrt_price_at_tick(-2000),
    liquidity=10**12,
    amount_remaining=1_000_000,
    fee_rate=2500,          # out of 1_000_000
    is_base_input=True,
    zero_for_one=True,
)
print(step.sqrt_price_next_x64, step.amount_in, step.amount_out, step.fee_amount)
```

## What it does not do

This is a library of pure functions only. It keeps no pool, position, tick or
reward state, does not run a full multi-step swap across tick arrays, moves no
tokens and has no command-line tool. Callers supply the current price,
liquidity and bitmap themselves and apply the results.