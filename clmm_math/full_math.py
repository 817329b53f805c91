"""Overflow-aware multiply-then-divide on fixed-width unsigned integers, and Q64.64 constants."""

Q64 = 1 << 64
RESOLUTION = 64

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1

_WIDTHS = (64, 128, 256)


def _check_operands(bits: int, *operands: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported width {bits}; expected one of {_WIDTHS}")
    limit = 1 << bits
    for operand in operands:
        if not 0 <= operand < limit:
            raise ValueError(f"operand {operand} does not fit in {bits} bits")


def _mul_div(value: int, num: int, denom: int, bits: int, round_up: bool) -> int:
    _check_operands(bits, value, num, denom)
    if denom == 0:
        raise ZeroDivisionError("mul_div denominator is zero")
    numerator = value * num
    if round_up:
        numerator += denom - 1
    # 64- and 128-bit operands are widened; 256-bit ones have no wider type.
    if bits == 256 and numerator >> 256:
        raise OverflowError("intermediate product overflows 256 bits")
    result = numerator // denom
    # The 256-bit variant still caps its result at the 128-bit maximum.
    limit = U64_MAX if bits == 64 else U128_MAX
    if result > limit:
        raise OverflowError(f"result {result} exceeds the {bits}-bit mul_div range")
    return result


def mul_div_floor(value: int, num: int, denom: int, bits: int = 128) -> int:
    """Return floor(value * num / denom), raising OverflowError if the result does not fit."""
    return _mul_div(value, num, denom, bits, round_up=False)


def mul_div_ceil(value: int, num: int, denom: int, bits: int = 128) -> int:
    """Return ceil(value * num / denom), raising OverflowError if the result does not fit."""
    return _mul_div(value, num, denom, bits, round_up=True)


def to_underflow_u64(value: int) -> int:
    """Return ``value`` if it is below the 64-bit maximum, otherwise 0."""
    if value < 0:
        raise ValueError("value must be non-negative")
    return value if value < U64_MAX else 0