"""Module-level bcrypt API backed by a process-wide default hasher.

The default hasher reads ``BCRYPT_*`` environment variables on first use.
Call :func:`reset_default_hasher` after changing them.
"""
from __future__ import annotations

import functools

from eksblowfish.config.settings import EnvSettingsLoader, HashingSettings
from eksblowfish.security.bcrypt import BcryptHasher

__all__ = [
    "get_default_hasher",
    "hash",
    "hash_bytes",
    "match",
    "match_bytes",
    "reset_default_hasher",
    "salt",
    "salt_bytes",
]


@functools.lru_cache(maxsize=1)
def get_default_hasher() -> BcryptHasher:
    return BcryptHasher(EnvSettingsLoader().load(HashingSettings))


def reset_default_hasher() -> None:
    get_default_hasher.cache_clear()


def salt(rounds: int | None = None) -> str:
    """Random header text; ``rounds`` defaults to the configured cost."""
    return get_default_hasher().salt(rounds)


def salt_bytes(rounds: int | None = None) -> bytes:
    return get_default_hasher().salt_bytes(rounds)


def hash(password: str, salt: str | None = None) -> str:  # noqa: A001
    """Hash ``password``; generate a salt at the default cost when none is given."""
    return get_default_hasher().hash(password, salt)


def hash_bytes(password: bytes, salt: bytes | None = None) -> bytes:
    return get_default_hasher().hash_bytes(password, salt)


def match(password: str, hashed: str) -> bool:
    """True when ``password`` matches ``hashed``. Malformed hashes give ``False``."""
    return get_default_hasher().verify(password, hashed)


def match_bytes(password: bytes, hashed: bytes) -> bool:
    return get_default_hasher().verify_bytes(password, hashed)
