"""Integer fixed-point math for concentrated-liquidity market makers."""

__version__ = "0.1.0"

__all__ = [
    "bignum",
    "full_math",
    "liquidity_math",
    "sqrt_price_math",
    "swap_math",
    "tick_array_bit_map",
    "tick_math",
    "unsafe_math",
]