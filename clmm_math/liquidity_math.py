"""Liquidity arithmetic: converting between liquidity, token amounts and price ranges."""

from __future__ import annotations

from clmm_math.full_math import (
    Q64,
    RESOLUTION,
    U64_MAX,
    U128_MAX,
    mul_div_ceil,
    mul_div_floor,
)
from clmm_math.tick_math import get_sqrt_price_at_tick
from clmm_math.unsafe_math import div_rounding_up

I64_MAX = (1 << 63) - 1


class LiquidityError(ValueError):
    """Raised when a liquidity change would underflow or overflow."""


def _ordered(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def _as_u64(value: int) -> int:
    if value > U64_MAX:
        raise OverflowError(f"{value} does not fit in an unsigned 64-bit amount")
    return value


def _as_i64(value: int) -> int:
    if value > I64_MAX:
        raise OverflowError(f"{value} does not fit in a signed 64-bit amount")
    return value


def add_delta(x: int, y: int) -> int:
    """Apply the signed liquidity delta ``y`` to liquidity ``x``.

    Raises LiquidityError if the result would drop below zero or exceed 128 bits.
    """
    if not 0 <= x <= U128_MAX:
        raise ValueError(f"liquidity {x} is out of range")
    z = x + y
    if y < 0:
        if z < 0:
            raise LiquidityError("liquidity subtraction underflows")
    elif z > U128_MAX:
        raise LiquidityError("liquidity addition overflows")
    return z


def get_liquidity_from_amount_0(
    sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, amount_0: int
) -> int:
    """Liquidity provided by ``amount_0`` of token_0 over the price range.

    L = amount_0 * (sqrt(P_upper) * sqrt(P_lower)) / (sqrt(P_upper) - sqrt(P_lower))
    """
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    intermediate = mul_div_floor(lower, upper, Q64)
    return mul_div_floor(amount_0, intermediate, upper - lower)


def get_liquidity_from_amount_1(
    sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, amount_1: int
) -> int:
    """Liquidity provided by ``amount_1`` of token_1 over the price range.

    L = amount_1 / (sqrt(P_upper) - sqrt(P_lower))
    """
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    return mul_div_floor(amount_1, Q64, upper - lower)


def get_liquidity_from_amounts(
    sqrt_ratio_x64: int,
    sqrt_ratio_a_x64: int,
    sqrt_ratio_b_x64: int,
    amount_0: int,
    amount_1: int,
) -> int:
    """Maximum liquidity obtainable from both amounts at the current price."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    if sqrt_ratio_x64 <= lower:
        return get_liquidity_from_amount_0(lower, upper, amount_0)
    if sqrt_ratio_x64 < upper:
        return min(
            get_liquidity_from_amount_0(sqrt_ratio_x64, upper, amount_0),
            get_liquidity_from_amount_1(lower, sqrt_ratio_x64, amount_1),
        )
    return get_liquidity_from_amount_1(lower, upper, amount_1)


def get_liquidity_from_single_amount_0(
    sqrt_ratio_x64: int, sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, amount_0: int
) -> int:
    """Liquidity obtainable from token_0 alone; 0 when the price is above the range."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    if sqrt_ratio_x64 <= lower:
        return get_liquidity_from_amount_0(lower, upper, amount_0)
    if sqrt_ratio_x64 < upper:
        return get_liquidity_from_amount_0(sqrt_ratio_x64, upper, amount_0)
    return 0


def get_liquidity_from_single_amount_1(
    sqrt_ratio_x64: int, sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, amount_1: int
) -> int:
    """Liquidity obtainable from token_1 alone; 0 when the price is below the range."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    if sqrt_ratio_x64 <= lower:
        return 0
    if sqrt_ratio_x64 < upper:
        return get_liquidity_from_amount_1(lower, sqrt_ratio_x64, amount_1)
    return get_liquidity_from_amount_1(lower, upper, amount_1)


def get_delta_amount_0_unsigned(
    sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, liquidity: int, round_up: bool
) -> int:
    """Token_0 amount for ``liquidity`` over the range.

    amount_0 = L * (sqrt(P_upper) - sqrt(P_lower)) / (sqrt(P_upper) * sqrt(P_lower))
    """
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    if lower <= 0:
        raise ValueError("lower sqrt price must be positive")
    numerator_1 = liquidity << RESOLUTION
    numerator_2 = upper - lower
    if round_up:
        scaled = mul_div_ceil(numerator_1, numerator_2, upper, bits=256)
        return _as_u64(div_rounding_up(scaled, lower))
    scaled = mul_div_floor(numerator_1, numerator_2, upper, bits=256)
    return _as_u64(scaled // lower)


def get_delta_amount_1_unsigned(
    sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, liquidity: int, round_up: bool
) -> int:
    """Token_1 amount for ``liquidity`` over the range: L * (sqrt(P_upper) - sqrt(P_lower))."""
    lower, upper = _ordered(sqrt_ratio_a_x64, sqrt_ratio_b_x64)
    mul_div = mul_div_ceil if round_up else mul_div_floor
    return _as_u64(mul_div(liquidity, upper - lower, Q64, bits=256))


def get_delta_amount_0_signed(
    sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, liquidity: int
) -> int:
    """Signed token_0 amount: rounded up when adding liquidity, down when removing."""
    if liquidity < 0:
        return -_as_i64(
            get_delta_amount_0_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, -liquidity, False)
        )
    return _as_i64(
        get_delta_amount_0_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity, True)
    )


def get_delta_amount_1_signed(
    sqrt_ratio_a_x64: int, sqrt_ratio_b_x64: int, liquidity: int
) -> int:
    """Signed token_1 amount: rounded up when adding liquidity, down when removing."""
    if liquidity < 0:
        return -_as_i64(
            get_delta_amount_1_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, -liquidity, False)
        )
    return _as_i64(
        get_delta_amount_1_unsigned(sqrt_ratio_a_x64, sqrt_ratio_b_x64, liquidity, True)
    )


def get_delta_amounts_signed(
    tick_current: int,
    sqrt_price_x64_current: int,
    tick_lower: int,
    tick_upper: int,
    liquidity_delta: int,
) -> tuple[int, int]:
    """Signed (amount_0, amount_1) for a liquidity change on a tick range."""
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