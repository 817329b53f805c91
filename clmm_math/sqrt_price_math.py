"""Next square-root price after adding or removing an amount of either token."""

from __future__ import annotations

from clmm_math.full_math import RESOLUTION, U64_MAX, U128_MAX, mul_div_ceil
from clmm_math.unsafe_math import div_rounding_up


def _check_range(name: str, value: int, limit: int) -> None:
    if not 0 <= value <= limit:
        raise ValueError(f"{name} {value} is out of range")


def get_next_sqrt_price_from_amount_0_rounding_up(
    sqrt_price_x64: int, liquidity: int, amount: int, add: bool
) -> int:
    """Return the next sqrt price after a change of ``amount`` token_0, rounding up.

    Uses sqrt(P') = sqrt(P) * L / (L +/- amount * sqrt(P)).
    """
    _check_range("sqrt_price_x64", sqrt_price_x64, U128_MAX)
    _check_range("liquidity", liquidity, U128_MAX)
    _check_range("amount", amount, U64_MAX)
    if amount == 0:
        return sqrt_price_x64

    numerator_1 = liquidity << RESOLUTION
    product = amount * sqrt_price_x64
    if add:
        denominator = numerator_1 + product
    else:
        if product > numerator_1:
            raise OverflowError("token_0 amount removed exceeds available liquidity")
        denominator = numerator_1 - product
    return mul_div_ceil(numerator_1, sqrt_price_x64, denominator, bits=256)


def get_next_sqrt_price_from_amount_1_rounding_down(
    sqrt_price_x64: int, liquidity: int, amount: int, add: bool
) -> int:
    """Return the next sqrt price after a change of ``amount`` token_1, rounding down.

    Uses sqrt(P') = sqrt(P) +/- amount / L.
    """
    _check_range("sqrt_price_x64", sqrt_price_x64, U128_MAX)
    _check_range("liquidity", liquidity, U128_MAX)
    _check_range("amount", amount, U64_MAX)
    if liquidity == 0:
        raise ZeroDivisionError("liquidity is zero")

    shifted = amount << RESOLUTION
    if add:
        result = sqrt_price_x64 + shifted // liquidity
        if result > U128_MAX:
            raise OverflowError("next sqrt price overflows 128 bits")
        return result

    quotient = div_rounding_up(shifted, liquidity)
    if quotient > sqrt_price_x64:
        raise OverflowError("next sqrt price underflows zero")
    return sqrt_price_x64 - quotient


def _require_positive(sqrt_price_x64: int, liquidity: int) -> None:
    if sqrt_price_x64 <= 0:
        raise ValueError("sqrt_price_x64 must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")


def get_next_sqrt_price_from_input(
    sqrt_price_x64: int, liquidity: int, amount_in: int, zero_for_one: bool
) -> int:
    """Return the next sqrt price after swapping ``amount_in`` into the pool."""
    _require_positive(sqrt_price_x64, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x64, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x64, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(
    sqrt_price_x64: int, liquidity: int, amount_out: int, zero_for_one: bool
) -> int:
    """Return the next sqrt price after taking ``amount_out`` out of the pool."""
    _require_positive(sqrt_price_x64, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x64, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x64, liquidity, amount_out, False
    )