"""Blowfish initial state.

Blowfish seeds its P-array and S-boxes with the fractional hexadecimal digits
of pi: the first 18 words form P, the next 4 * 256 words form S0..S3. The
8336 hex digits needed are derived here with exact integer arithmetic
(Machin's formula, 64 guard bits) once per process.
"""
from __future__ import annotations

import functools
import struct

__all__ = ["P_WORDS", "S_BOXES", "S_WORDS", "initial_state", "pi_words"]

P_WORDS = 18
S_BOXES = 4
S_WORDS = 256

_WORD_COUNT = P_WORDS + S_BOXES * S_WORDS
_FRACTION_BITS = 32 * _WORD_COUNT
_GUARD_BITS = 64


def _arctan_inv(x: int, one: int) -> int:
    """``arctan(1/x)`` scaled by ``one``, truncated term by term."""
    total = term = one // x
    x_squared = x * x
    divisor = 3
    sign = -1
    while term:
        term //= x_squared
        total += sign * (term // divisor)
        sign = -sign
        divisor += 2
    return total


@functools.lru_cache(maxsize=1)
def pi_words() -> tuple[int, ...]:
    """The first 1042 32-bit words of the fractional part of pi."""
    one = 1 << (_FRACTION_BITS + _GUARD_BITS)
    pi = 16 * _arctan_inv(5, one) - 4 * _arctan_inv(239, one)
    fraction = (pi - 3 * one) >> _GUARD_BITS
    return struct.unpack(f">{_WORD_COUNT}I", fraction.to_bytes(4 * _WORD_COUNT, "big"))


def initial_state() -> tuple[list[int], list[list[int]]]:
    """Fresh, mutable copies of the P-array and the four S-boxes."""
    words = pi_words()
    p = list(words[:P_WORDS])
    s = [
        list(words[P_WORDS + i * S_WORDS : P_WORDS + (i + 1) * S_WORDS])
        for i in range(S_BOXES)
    ]
    return p, s
