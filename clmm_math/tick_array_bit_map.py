"""Search a 1024-bit bitmap of initialised tick arrays."""

from __future__ import annotations

from clmm_math.bignum import N_BITS, U1024
from clmm_math.tick_math import MAX_TICK, MIN_TICK, TickMathError

TICK_ARRAY_SIZE = 60
MIN_TICK_ARRAY_START_INDEX = -307200
MAX_TICK_ARRAY_START_INDEX = 306600

# Bit 512 of the bitmap corresponds to the tick array starting at tick 0.
_ZERO_BIT = N_BITS // 2


def most_significant_bit(x: U1024) -> int | None:
    """Distance of the highest set bit from the top of the bitmap, or None if empty."""
    if x.is_zero():
        return None
    return x.leading_zeros()


def least_significant_bit(x: U1024) -> int | None:
    """Position of the lowest set bit, or None if empty."""
    if x.is_zero():
        return None
    return x.trailing_zeros()


def _compressed(index: int, multiplier: int) -> int:
    # Floor division rounds towards negative infinity, as the bitmap layout requires.
    return index // multiplier + _ZERO_BIT


def check_current_tick_array_is_initialized(
    bit_map: U1024, tick_current: int, tick_spacing: int
) -> tuple[bool, int]:
    """Return whether the tick array holding ``tick_current`` is set, and its start index.

    Raises TickMathError if ``tick_current`` is outside the valid tick range.
    """
    if not MIN_TICK <= tick_current <= MAX_TICK:
        raise TickMathError(f"tick {tick_current} is out of range")
    multiplier = tick_spacing * TICK_ARRAY_SIZE
    compressed = _compressed(tick_current, multiplier)
    bit_pos = abs(compressed)
    initialized = not (bit_map & (U1024.one() << bit_pos)).is_zero()
    return initialized, (compressed - _ZERO_BIT) * multiplier


def next_initialized_tick_array_start_index(
    bit_map: U1024,
    tick_array_start_index: int,
    tick_spacing: int,
    zero_for_one: bool,
) -> int | None:
    """Start index of the next initialised tick array in the swap direction, or None.

    Searches downwards when ``zero_for_one`` is true, upwards otherwise.
    """
    if not MIN_TICK_ARRAY_START_INDEX <= tick_array_start_index <= MAX_TICK_ARRAY_START_INDEX:
        raise ValueError(f"tick array start index {tick_array_start_index} is out of range")
    multiplier = tick_spacing * TICK_ARRAY_SIZE
    bit_pos = abs(_compressed(tick_array_start_index, multiplier))

    if zero_for_one:
        next_bit = most_significant_bit(bit_map << (N_BITS - bit_pos))
        if next_bit is None:
            return None
        return (bit_pos - 1 - next_bit - _ZERO_BIT) * multiplier

    next_bit = least_significant_bit(bit_map >> (bit_pos + 1))
    if next_bit is None:
        return None
    return (bit_pos + 1 + next_bit - _ZERO_BIT) * multiplier