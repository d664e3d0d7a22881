"""bcrypt header and hash-string codec.

Grammar (version ``2`` has no minor letter)::

    $<2|2a|2b|2y>$<rounds:02d>$<22 radix symbols: salt>[<31 radix symbols: digest>]

A header is the part up to and including the salt; a hash string carries the
digest as well. Both parse into immutable values that re-encode to exactly
the text they were parsed from.
"""
from __future__ import annotations

import dataclasses
import re

from eksblowfish.kernel.constants import (
    DEFAULT_VERSION,
    ENCODED_DIGEST_LEN,
    ENCODED_SALT_LEN,
    MAX_ROUNDS,
    MIN_ROUNDS,
    RANDOM_SALT_LEN,
    SALT_BUFFER_LEN,
    SUPPORTED_VERSIONS,
)
from eksblowfish.kernel.errors import (
    InvalidHashError,
    InvalidRoundsError,
    InvalidSaltError,
    ValidationError,
)
from eksblowfish.security.bcrypt import radix

__all__ = [
    "Header",
    "ParsedHash",
    "check_rounds",
    "decode_hash",
    "decode_salt",
    "encode_salt",
]

_GRAMMAR = re.compile(
    r"\$(?P<version>2[aby]?)"
    r"\$(?P<rounds>[0-9]{2})"
    rf"\$(?P<salt>[./A-Za-z0-9]{{{ENCODED_SALT_LEN}}})"
    rf"(?P<digest>[./A-Za-z0-9]{{{ENCODED_DIGEST_LEN}}})?"
)


@dataclasses.dataclass(frozen=True)
class Header:
    """Version, cost and raw salt bytes of a bcrypt hash."""

    version: str
    rounds: int
    salt: bytes

    def encode(self) -> str:
        return f"${self.version}${self.rounds:02d}${radix.encode(self.salt)}"


@dataclasses.dataclass(frozen=True)
class ParsedHash:
    """A fully decoded hash string."""

    header: Header
    digest: bytes

    def encode(self) -> str:
        return self.header.encode() + radix.encode(self.digest)


def check_rounds(rounds: object) -> int:
    """Return ``rounds`` if it is an int in ``[MIN_ROUNDS, MAX_ROUNDS]``."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidRoundsError(rounds, f"Rounds must be an int, got {type(rounds).__name__}")
    if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
        raise InvalidRoundsError(
            rounds,
            f"Rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got {rounds}",
            detail={"rounds": rounds},
        )
    return rounds


def encode_salt(random_bytes: bytes, rounds: int, version: str = DEFAULT_VERSION) -> str:
    """Serialise ``random_bytes`` and ``rounds`` into header text.

    Raises:
        InvalidRoundsError: ``rounds`` outside ``[4, 31]``.
        InvalidSaltError: wrong number of random bytes or unknown version.
    """
    check_rounds(rounds)
    if version not in SUPPORTED_VERSIONS:
        raise InvalidSaltError(f"Unsupported bcrypt version {version!r}")
    if len(random_bytes) != RANDOM_SALT_LEN:
        raise InvalidSaltError(
            f"Salt must be {RANDOM_SALT_LEN} bytes, got {len(random_bytes)}",
            detail={"length": len(random_bytes)},
        )
    return Header(version, rounds, bytes(random_bytes)).encode()


def _parse(text: str, error: type[ValidationError]) -> tuple[Header, bytes | None]:
    if len(text) > SALT_BUFFER_LEN:
        raise error(f"Input longer than {SALT_BUFFER_LEN} characters")
    match = _GRAMMAR.fullmatch(text)
    if match is None:
        raise error("Input does not match the bcrypt hash grammar")

    rounds = int(match["rounds"])
    if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
        raise error(f"Cost field {rounds} outside [{MIN_ROUNDS}, {MAX_ROUNDS}]")

    salt = radix.decode(match["salt"], error=error)
    digest = None
    if match["digest"] is not None:
        digest = radix.decode(match["digest"], error=error)
    return Header(match["version"], rounds, salt), digest


def decode_salt(text: str) -> Header:
    """Parse a header or a full hash string into its :class:`Header`.

    Raises:
        InvalidSaltError: truncated or over-long input, bad version tag,
            characters outside the radix alphabet, non-canonical symbols or
            cost digits outside ``[4, 31]``.
    """
    header, _ = _parse(text, InvalidSaltError)
    return header


def decode_hash(text: str) -> ParsedHash:
    """Parse a full hash string.

    Raises:
        InvalidHashError: on any grammar violation.
    """
    header, digest = _parse(text, InvalidHashError)
    if digest is None:
        raise InvalidHashError("Hash string has no digest")
    return ParsedHash(header, digest)
