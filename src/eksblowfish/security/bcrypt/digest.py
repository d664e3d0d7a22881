"""bcrypt digest: ``OrpheanBeholderScryDoubt`` enciphered 64 times in ECB mode."""
from __future__ import annotations

import struct

from eksblowfish.kernel.constants import DIGEST_LEN
from eksblowfish.security.bcrypt.schedule import EksBlowfish

__all__ = ["CIPHERTEXT_ROUNDS", "MAGIC", "bcrypt_digest", "compute_digest"]

MAGIC = b"OrpheanBeholderScryDoubt"
CIPHERTEXT_ROUNDS = 64

_MAGIC_WORDS = struct.unpack(">6I", MAGIC)


def compute_digest(state: EksBlowfish) -> bytes:
    """Encrypt the magic block under ``state`` and return the first 23 bytes."""
    words = list(_MAGIC_WORDS)
    for _ in range(CIPHERTEXT_ROUNDS):
        for i in range(0, len(words), 2):
            words[i], words[i + 1] = state.encipher(words[i], words[i + 1])
    return struct.pack(">6I", *words)[:DIGEST_LEN]


def bcrypt_digest(key: bytes | bytearray, salt: bytes, rounds: int) -> bytes:
    """Raw 23-byte digest for already-derived ``key`` bytes."""
    state = EksBlowfish.setup(key, salt, rounds)
    try:
        return compute_digest(state)
    finally:
        state.wipe()
