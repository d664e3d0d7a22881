"""
eksblowfish – OpenBSD bcrypt password hashing in pure Python.

Import path convention::

    from eksblowfish import hash, match, salt
    from eksblowfish.security.bcrypt import BcryptHasher
    from eksblowfish.kernel.errors import InvalidRoundsError, InvalidSaltError
    from eksblowfish.config import HashingSettings
"""

from eksblowfish.api import (
    get_default_hasher,
    hash,
    hash_bytes,
    match,
    match_bytes,
    reset_default_hasher,
    salt,
    salt_bytes,
)
from eksblowfish.kernel.constants import (
    DEFAULT_ROUNDS,
    MAX_PASSWORD_LEN,
    MAX_ROUNDS,
    MIN_ROUNDS,
    RANDOM_SALT_LEN,
    SALT_BUFFER_LEN,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_ROUNDS",
    "MAX_PASSWORD_LEN",
    "MAX_ROUNDS",
    "MIN_ROUNDS",
    "RANDOM_SALT_LEN",
    "SALT_BUFFER_LEN",
    "__version__",
    "get_default_hasher",
    "hash",
    "hash_bytes",
    "match",
    "match_bytes",
    "reset_default_hasher",
    "salt",
    "salt_bytes",
]
