"""bcrypt radix-64 codec.

Same bit packing as RFC 4648 base64 (three bytes to four symbols, most
significant bits first, no padding) over a different alphabet::

    ./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789

``n`` bytes encode to ``ceil(4n / 3)`` symbols, so a 16-byte salt becomes 22
symbols and a 23-byte digest 31. The unused low bits of the final symbol must
be zero; anything else is an alternate encoding of the same bytes and is
rejected.
"""
from __future__ import annotations

import base64
import binascii

from eksblowfish.kernel.errors import InvalidSaltError, ValidationError

__all__ = ["ALPHABET", "decode", "encode", "encoded_length"]

ALPHABET = "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
_STANDARD = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

_TO_RADIX = str.maketrans(_STANDARD, ALPHABET)
_FROM_RADIX = str.maketrans(ALPHABET, _STANDARD)
_ALPHABET_SET = frozenset(ALPHABET)


def encoded_length(nbytes: int) -> int:
    """Number of radix symbols produced for ``nbytes`` input bytes."""
    return (4 * nbytes + 2) // 3


def encode(data: bytes) -> str:
    std = base64.b64encode(data).decode("ascii").rstrip("=")
    return std.translate(_TO_RADIX)


def decode(text: str, *, error: type[ValidationError] = InvalidSaltError) -> bytes:
    """Decode radix-64 ``text``; raise ``error`` when it is not canonical."""
    if not _ALPHABET_SET.issuperset(text):
        raise error("Character outside the bcrypt radix-64 alphabet")
    if len(text) % 4 == 1:
        raise error(f"Impossible radix-64 length {len(text)}")

    padded = text.translate(_FROM_RADIX) + "=" * (-len(text) % 4)
    try:
        data = base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise error("Undecodable radix-64 text", cause=exc) from exc

    if encode(data) != text:
        raise error("Non-canonical radix-64 encoding")
    return data
