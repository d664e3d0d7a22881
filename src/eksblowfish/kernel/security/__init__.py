"""Kernel security – hashing ports and sensitive field names."""
from eksblowfish.kernel.security.crypto import PasswordHasher, RandomSource

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "salt", "hash", "hashed",
    "digest", "key", "authorization",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "PasswordHasher", "RandomSource"]
