"""Security – OpenBSD bcrypt (EksBlowfish) password hashing."""
from eksblowfish.security.bcrypt.digest import bcrypt_digest, compute_digest
from eksblowfish.security.bcrypt.entropy import SystemRandomSource
from eksblowfish.security.bcrypt.hasher import BcryptHasher
from eksblowfish.security.bcrypt.salt import (
    Header,
    ParsedHash,
    decode_hash,
    decode_salt,
    encode_salt,
)
from eksblowfish.security.bcrypt.schedule import EksBlowfish, derive_key

__all__ = [
    "BcryptHasher",
    "EksBlowfish",
    "Header",
    "ParsedHash",
    "SystemRandomSource",
    "bcrypt_digest",
    "compute_digest",
    "decode_hash",
    "decode_salt",
    "derive_key",
    "encode_salt",
]
