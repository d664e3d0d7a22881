"""EksBlowfish key schedule.

``EksBlowfish.setup(key, salt, rounds)`` builds the expensive Blowfish state
described in "A Future-Adaptable Password Scheme" (Provos, Mazières)::

    state = initial Blowfish state
    ExpandKey(state, salt, key)
    repeat 2**rounds:
        ExpandKey(state, 0, key)
        ExpandKey(state, 0, salt)

Byte strings are read as a cyclic stream of big-endian 32-bit words. The
state is only good for enciphering fixed blocks (see ``digest.py``); there is
no general-purpose Blowfish interface here.
"""
from __future__ import annotations

import struct

from eksblowfish.kernel.constants import MAX_PASSWORD_LEN
from eksblowfish.security.bcrypt.tables import P_WORDS, S_BOXES, S_WORDS, initial_state

__all__ = ["EksBlowfish", "derive_key", "stream_words"]

_MASK = 0xFFFFFFFF
_STATE_WORDS = P_WORDS + S_BOXES * S_WORDS


def stream_words(data: bytes | bytearray, count: int) -> list[int]:
    """Read ``count`` big-endian words from ``data`` repeated end to end."""
    nbytes = 4 * count
    repeats = -(-nbytes // len(data))
    return list(struct.unpack(f">{count}I", (bytes(data) * repeats)[:nbytes]))


def derive_key(password: bytes, version: str) -> bytearray:
    """Key bytes fed to the schedule for ``password`` under ``version``.

    Revisions ``2a``, ``2b`` and ``2y`` include the C string terminator.
    Revision ``2`` does not, except that an empty password still reads one
    NUL byte. Callers enforce the length limit; only the first
    ``MAX_PASSWORD_LEN`` bytes of the key reach the state anyway.
    """
    key = bytearray(password[:MAX_PASSWORD_LEN])
    if version != "2" or not key:
        key.append(0)
    return key


def _encipher(
    left: int,
    right: int,
    p: list[int],
    s0: list[int],
    s1: list[int],
    s2: list[int],
    s3: list[int],
) -> tuple[int, int]:
    left ^= p[0]
    for i in range(1, 17, 2):
        right ^= (
            (((s0[left >> 24] + s1[(left >> 16) & 0xFF]) ^ s2[(left >> 8) & 0xFF])
             + s3[left & 0xFF]) & _MASK
        ) ^ p[i]
        left ^= (
            (((s0[right >> 24] + s1[(right >> 16) & 0xFF]) ^ s2[(right >> 8) & 0xFF])
             + s3[right & 0xFF]) & _MASK
        ) ^ p[i + 1]
    return right ^ p[17], left


class EksBlowfish:
    """Mutable Blowfish state owned by a single hashing call."""

    __slots__ = ("p", "s0", "s1", "s2", "s3")

    def __init__(self) -> None:
        self.p, (self.s0, self.s1, self.s2, self.s3) = initial_state()

    @classmethod
    def setup(cls, key: bytes | bytearray, salt: bytes, rounds: int) -> EksBlowfish:
        """Run the full cost-``rounds`` schedule. ``rounds`` must already be valid."""
        state = cls()
        key_words = stream_words(key, P_WORDS)
        salt_key_words = stream_words(salt, P_WORDS)
        state._expand(key_words, stream_words(salt, _STATE_WORDS))
        for _ in range(1 << rounds):
            state._expand0(key_words)
            state._expand0(salt_key_words)
        key_words[:] = [0] * P_WORDS
        return state

    def encipher(self, left: int, right: int) -> tuple[int, int]:
        """Encrypt one 64-bit block given as two 32-bit halves."""
        return _encipher(left, right, self.p, self.s0, self.s1, self.s2, self.s3)

    def _expand(self, key_words: list[int], data_words: list[int]) -> None:
        p, s0, s1, s2, s3 = self.p, self.s0, self.s1, self.s2, self.s3
        for i in range(P_WORDS):
            p[i] ^= key_words[i]

        left = right = 0
        k = 0
        for table in (p, s0, s1, s2, s3):
            for i in range(0, len(table), 2):
                left, right = _encipher(
                    left ^ data_words[k], right ^ data_words[k + 1], p, s0, s1, s2, s3
                )
                table[i] = left
                table[i + 1] = right
                k += 2

    def _expand0(self, key_words: list[int]) -> None:
        p, s0, s1, s2, s3 = self.p, self.s0, self.s1, self.s2, self.s3
        for i in range(P_WORDS):
            p[i] ^= key_words[i]

        left = right = 0
        for table in (p, s0, s1, s2, s3):
            for i in range(0, len(table), 2):
                left, right = _encipher(left, right, p, s0, s1, s2, s3)
                table[i] = left
                table[i + 1] = right

    def wipe(self) -> None:
        """Overwrite every table with zeros."""
        self.p[:] = [0] * P_WORDS
        for table in (self.s0, self.s1, self.s2, self.s3):
            table[:] = [0] * S_WORDS
