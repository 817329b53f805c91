"""Conversions between ticks and Q64.64 square-root prices."""

from __future__ import annotations

MIN_TICK = -307200
MAX_TICK = -MIN_TICK

MIN_SQRT_PRICE_X64 = 3939943522091
MAX_SQRT_PRICE_X64 = 86367321006760116002434269

_U128_MAX = (1 << 128) - 1
_BIT_PRECISION = 16

# Each factor is 2^64 / 1.0001^(2^(i - 1)) for bit i of |tick|, from bit 1 upwards.
_FACTORS = (
    0xFFF97272373D4000,
    0xFFF2E50F5F657000,
    0xFFE5CACA7E10F000,
    0xFFCB9843D60F7000,
    0xFF973B41FA98E800,
    0xFF2EA16466C9B000,
    0xFE5DEE046A9A3800,
    0xFCBE86C7900BB000,
    0xF987A7253AC65800,
    0xF3392B0822BB6000,
    0xE7159475A2CAF000,
    0xD097F3BDFD2F2000,
    0xA9F746462D9F8000,
    0x70D869A156F31C00,
    0x31BE135F97ED3200,
    0x9AA508B5B85A500,
    0x5D6AF8DEDC582C,
    0x2216E584F5FA,
)
_BIT0_FACTOR = 0xFFFCB933BD6FB800


class TickMathError(ValueError):
    """Raised when a tick or a square-root price lies outside the supported range."""


def get_sqrt_price_at_tick(tick: int) -> int:
    """Return sqrt(1.0001^tick) as a Q64.64 number.

    Raises TickMathError if ``|tick|`` exceeds MAX_TICK.
    """
    abs_tick = abs(tick)
    if abs_tick > MAX_TICK:
        raise TickMathError(f"tick {tick} is out of range")

    ratio = _BIT0_FACTOR if abs_tick & 0x1 else 1 << 64
    for position, factor in enumerate(_FACTORS, start=1):
        if abs_tick & (1 << position):
            ratio = (ratio * factor) >> 64

    if tick > 0:
        ratio = _U128_MAX // ratio
    return ratio


def get_tick_at_sqrt_price(sqrt_price_x64: int) -> int:
    """Return the greatest tick whose square-root price is at most ``sqrt_price_x64``.

    Raises TickMathError unless MIN_SQRT_PRICE_X64 <= sqrt_price_x64 < MAX_SQRT_PRICE_X64.
    """
    if not MIN_SQRT_PRICE_X64 <= sqrt_price_x64 < MAX_SQRT_PRICE_X64:
        raise TickMathError(f"sqrt price {sqrt_price_x64} is out of range")

    msb = sqrt_price_x64.bit_length() - 1
    log2p_integer_x32 = (msb - 64) << 32

    # Normalise to a Q1.63 mantissa, then square repeatedly to extract fraction bits.
    if msb >= 64:
        r = sqrt_price_x64 >> (msb - 63)
    else:
        r = sqrt_price_x64 << (63 - msb)

    bit = 1 << 63
    log2p_fraction_x64 = 0
    for _ in range(_BIT_PRECISION):
        r *= r
        is_r_more_than_two = r >> 127
        r >>= 63 + is_r_more_than_two
        log2p_fraction_x64 += bit * is_r_more_than_two
        bit >>= 1

    log2p_x32 = log2p_integer_x32 + (log2p_fraction_x64 >> 32)

    # Change of base: multiply by 2^16 / log2(sqrt(1.0001)).
    log_sqrt_10001_x64 = log2p_x32 * 59543866431248

    tick_low = (log_sqrt_10001_x64 - 184467440737095516) >> 64
    tick_high = (log_sqrt_10001_x64 + 15793534762490258745) >> 64

    if tick_low == tick_high:
        return tick_low
    if get_sqrt_price_at_tick(tick_high) <= sqrt_price_x64:
        return tick_high
    return tick_low