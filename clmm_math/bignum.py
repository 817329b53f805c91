"""Fixed-width 1024-bit unsigned integer used as a tick-array bitmap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

WORD_BITS = 64
N_WORDS = 16
N_BITS = WORD_BITS * N_WORDS
WORD_MAX = (1 << WORD_BITS) - 1
USIZE_MAX = (1 << 64) - 1
_MASK = (1 << N_BITS) - 1


@dataclass(frozen=True, order=True)
class U1024:
    """An unsigned integer of exactly 1024 bits with wrapping bit operations."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise TypeError("U1024 value must be an int")
        if not 0 <= self.value <= _MASK:
            raise ValueError("value does not fit in 1024 bits")

    @classmethod
    def from_words(cls, words: Iterable[int]) -> U1024:
        """Build from 16 unsigned 64-bit words, least significant first."""
        words = list(words)
        if len(words) != N_WORDS:
            raise ValueError(f"expected {N_WORDS} words, got {len(words)}")
        value = 0
        for position, word in enumerate(words):
            if not 0 <= word <= WORD_MAX:
                raise ValueError(f"word {position} does not fit in 64 bits")
            value |= word << (WORD_BITS * position)
        return cls(value)

    @classmethod
    def zero(cls) -> U1024:
        """The additive identity."""
        return cls(0)

    @classmethod
    def one(cls) -> U1024:
        """The multiplicative identity."""
        return cls(1)

    @classmethod
    def max_value(cls) -> U1024:
        """The largest representable value: all bits set."""
        return cls(_MASK)

    @property
    def words(self) -> tuple[int, ...]:
        """The 16 64-bit words, least significant first."""
        return tuple((self.value >> (WORD_BITS * i)) & WORD_MAX for i in range(N_WORDS))

    def __int__(self) -> int:
        return self.value

    def is_zero(self) -> bool:
        """Whether every bit is clear."""
        return self.value == 0

    def as_usize(self) -> int:
        """Return the value as a machine word, raising OverflowError if it does not fit."""
        if self.value > USIZE_MAX:
            raise OverflowError("integer overflow when casting to usize")
        return self.value

    def leading_zeros(self) -> int:
        """Number of clear bits above the highest set bit."""
        return N_BITS - self.value.bit_length()

    def trailing_zeros(self) -> int:
        """Number of clear bits below the lowest set bit (1024 for zero)."""
        if self.value == 0:
            return N_BITS
        return (self.value & -self.value).bit_length() - 1

    def bit(self, index: int) -> bool:
        """Whether the bit at ``index`` is set."""
        if not 0 <= index < N_BITS:
            raise IndexError("bit index out of range")
        return bool((self.value >> index) & 1)

    def __and__(self, other: object) -> U1024:
        if not isinstance(other, U1024):
            return NotImplemented
        return U1024(self.value & other.value)

    def __or__(self, other: object) -> U1024:
        if not isinstance(other, U1024):
            return NotImplemented
        return U1024(self.value | other.value)

    def __xor__(self, other: object) -> U1024:
        if not isinstance(other, U1024):
            return NotImplemented
        return U1024(self.value ^ other.value)

    def __invert__(self) -> U1024:
        return U1024(self.value ^ _MASK)

    def __lshift__(self, shift: int) -> U1024:
        if not isinstance(shift, int):
            return NotImplemented
        if shift < 0:
            raise ValueError("negative shift count")
        if shift >= N_BITS:
            return U1024(0)
        return U1024((self.value << shift) & _MASK)

    def __rshift__(self, shift: int) -> U1024:
        if not isinstance(shift, int):
            return NotImplemented
        if shift < 0:
            raise ValueError("negative shift count")
        if shift >= N_BITS:
            return U1024(0)
        return U1024(self.value >> shift)