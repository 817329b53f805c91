"""A single step of a swap within one price range."""

from __future__ import annotations

from dataclasses import dataclass

from clmm_math.full_math import U64_MAX, mul_div_ceil, mul_div_floor
from clmm_math.liquidity_math import (
    get_delta_amount_0_unsigned,
    get_delta_amount_1_unsigned,
)
from clmm_math.sqrt_price_math import (
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)

FEE_RATE_DENOMINATOR_VALUE = 1_000_000


@dataclass(frozen=True)
class SwapStep:
    """Outcome of a swap step."""

    sqrt_price_next_x64: int = 0
    amount_in: int = 0
    amount_out: int = 0
    fee_amount: int = 0


def compute_swap_step(
    sqrt_price_current_x64: int,
    sqrt_price_target_x64: int,
    liquidity: int,
    amount_remaining: int,
    fee_rate: int,
    is_base_input: bool,
    zero_for_one: bool,
) -> SwapStep:
    """Swap ``amount_remaining`` (input or output) towards the target price, without passing it."""
    if not 0 <= fee_rate <= FEE_RATE_DENOMINATOR_VALUE:
        raise ValueError(f"fee rate {fee_rate} is out of range")
    if not 0 <= amount_remaining <= U64_MAX:
        raise ValueError(f"amount {amount_remaining} is out of range")

    current = sqrt_price_current_x64
    target = sqrt_price_target_x64

    def input_needed(price: int) -> int:
        if zero_for_one:
            return get_delta_amount_0_unsigned(price, current, liquidity, True)
        return get_delta_amount_1_unsigned(current, price, liquidity, True)

    def output_given(price: int) -> int:
        if zero_for_one:
            return get_delta_amount_1_unsigned(price, current, liquidity, False)
        return get_delta_amount_0_unsigned(current, price, liquidity, False)

    amount_in = 0
    amount_out = 0
    if is_base_input:
        remaining_less_fee = mul_div_floor(
            amount_remaining,
            FEE_RATE_DENOMINATOR_VALUE - fee_rate,
            FEE_RATE_DENOMINATOR_VALUE,
            bits=64,
        )
        amount_in = input_needed(target)
        if remaining_less_fee >= amount_in:
            sqrt_price_next = target
        else:
            sqrt_price_next = get_next_sqrt_price_from_input(
                current, liquidity, remaining_less_fee, zero_for_one
            )
    else:
        amount_out = output_given(target)
        if amount_remaining >= amount_out:
            sqrt_price_next = target
        else:
            sqrt_price_next = get_next_sqrt_price_from_output(
                current, liquidity, amount_remaining, zero_for_one
            )

    reached_target = sqrt_price_next == target
    if not (reached_target and is_base_input):
        amount_in = input_needed(sqrt_price_next)
    if not (reached_target and not is_base_input):
        amount_out = output_given(sqrt_price_next)

    if not is_base_input and amount_out > amount_remaining:
        amount_out = amount_remaining

    if is_base_input and not reached_target:
        # The target was not reached, so what is left over is kept as fee.
        if amount_in > amount_remaining:
            raise OverflowError("input amount exceeds the remaining amount")
        fee_amount = amount_remaining - amount_in
    else:
        fee_amount = mul_div_ceil(
            amount_in, fee_rate, FEE_RATE_DENOMINATOR_VALUE - fee_rate, bits=64
        )

    return SwapStep(
        sqrt_price_next_x64=sqrt_price_next,
        amount_in=amount_in,
        amount_out=amount_out,
        fee_amount=fee_amount,
    )