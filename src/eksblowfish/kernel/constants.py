"""Kernel – fixed parameters of the OpenBSD bcrypt scheme."""
from __future__ import annotations

from typing import Final

DEFAULT_ROUNDS: Final[int] = 12
MIN_ROUNDS: Final[int] = 4
MAX_ROUNDS: Final[int] = 31

RANDOM_SALT_LEN: Final[int] = 16
SALT_BUFFER_LEN: Final[int] = 64

# 18 P-array words * 4 bytes; key bytes past this never reach the state.
MAX_PASSWORD_LEN: Final[int] = 72

DIGEST_LEN: Final[int] = 23
ENCODED_SALT_LEN: Final[int] = 22
ENCODED_DIGEST_LEN: Final[int] = 31

DEFAULT_VERSION: Final[str] = "2b"
SUPPORTED_VERSIONS: Final[frozenset[str]] = frozenset({"2", "2a", "2b", "2y"})

LONG_PASSWORD_REJECT: Final[str] = "reject"
LONG_PASSWORD_TRUNCATE: Final[str] = "truncate"
LONG_PASSWORD_POLICIES: Final[frozenset[str]] = frozenset(
    {LONG_PASSWORD_REJECT, LONG_PASSWORD_TRUNCATE}
)

__all__ = [
    "DEFAULT_ROUNDS",
    "DEFAULT_VERSION",
    "DIGEST_LEN",
    "ENCODED_DIGEST_LEN",
    "ENCODED_SALT_LEN",
    "LONG_PASSWORD_POLICIES",
    "LONG_PASSWORD_REJECT",
    "LONG_PASSWORD_TRUNCATE",
    "MAX_PASSWORD_LEN",
    "MAX_ROUNDS",
    "MIN_ROUNDS",
    "RANDOM_SALT_LEN",
    "SALT_BUFFER_LEN",
    "SUPPORTED_VERSIONS",
]
