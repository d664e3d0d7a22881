"""BcryptHasher – hash and verify passwords with the OpenBSD bcrypt scheme.

The byte-oriented methods (``salt_bytes``, ``hash_bytes``, ``verify_bytes``)
carry the logic; the text methods encode their arguments and delegate.

Long passwords follow ``HashingSettings.long_password_policy``:

* ``reject`` (default): more than 72 bytes raises :class:`InvalidPasswordError`.
* ``truncate``: only the first 72 bytes are used and a warning is logged.
  This reproduces what C implementations did silently.

Verification is fail-closed: a malformed stored hash and a wrong password both
give ``False``.
"""
from __future__ import annotations

import asyncio
import hmac
import time
from typing import Any

from eksblowfish.config.settings import HashingSettings
from eksblowfish.kernel.constants import (
    LONG_PASSWORD_TRUNCATE,
    MAX_PASSWORD_LEN,
    RANDOM_SALT_LEN,
    SUPPORTED_VERSIONS,
)
from eksblowfish.kernel.errors import (
    InvalidHashError,
    InvalidPasswordError,
    InvalidSaltError,
    ValidationError,
)
from eksblowfish.kernel.security import PasswordHasher, RandomSource
from eksblowfish.observability.logging import get_logger
from eksblowfish.security.bcrypt.digest import bcrypt_digest
from eksblowfish.security.bcrypt.entropy import SystemRandomSource, draw
from eksblowfish.security.bcrypt.salt import (
    Header,
    ParsedHash,
    check_rounds,
    decode_hash,
    decode_salt,
)
from eksblowfish.security.bcrypt.schedule import derive_key

__all__ = ["BcryptHasher"]

logger = get_logger(__name__)


def _ascii(data: bytes | bytearray, error: type[ValidationError]) -> str:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"expected bytes, got {type(data).__name__}")
    try:
        return bytes(data).decode("ascii")
    except UnicodeDecodeError as exc:
        raise error("Input contains non-ASCII bytes", cause=exc) from exc


def _utf8(text: str, error: type[ValidationError], **kwargs: Any) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise error("Text is not encodable as UTF-8", cause=exc, **kwargs) from exc


class BcryptHasher(PasswordHasher):
    """Self-contained bcrypt implementation of :class:`PasswordHasher`.

    Usage::

        hasher = BcryptHasher(HashingSettings(default_rounds=10))
        stored = hasher.hash("WyWihatdyd?frub1")
        assert hasher.verify("WyWihatdyd?frub1", stored)
    """

    def __init__(
        self,
        settings: HashingSettings | None = None,
        *,
        random_source: RandomSource | None = None,
    ) -> None:
        self._settings = settings or HashingSettings()
        self._random = random_source or SystemRandomSource()

    @property
    def settings(self) -> HashingSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Salts
    # ------------------------------------------------------------------

    def _new_header(self, rounds: int | None, version: str | None) -> Header:
        rounds = check_rounds(self._settings.default_rounds if rounds is None else rounds)
        version = version or self._settings.version
        if version not in SUPPORTED_VERSIONS:
            raise InvalidSaltError(f"Unsupported bcrypt version {version!r}")
        header = Header(version, rounds, draw(self._random, RANDOM_SALT_LEN))
        logger.debug("bcrypt.salt.generated", rounds=rounds, version=version)
        return header

    def salt(self, rounds: int | None = None, *, version: str | None = None) -> str:
        """Fresh header text with ``rounds`` (default from settings).

        Raises:
            InvalidRoundsError: ``rounds`` outside ``[4, 31]``.
            RandomSourceError: the random source failed.
        """
        return self._new_header(rounds, version).encode()

    def salt_bytes(self, rounds: int | None = None, *, version: str | None = None) -> bytes:
        return self.salt(rounds, version=version).encode("ascii")

    # ------------------------------------------------------------------
    # Hashing
    # ------------------------------------------------------------------

    def _check_password(self, password: bytes | bytearray) -> bytes:
        if not isinstance(password, (bytes, bytearray)):
            raise TypeError(f"password must be bytes, got {type(password).__name__}")
        if b"\x00" in password:
            raise InvalidPasswordError("Password contains a NUL byte", reason="nul_byte")
        if len(password) > MAX_PASSWORD_LEN:
            if self._settings.long_password_policy == LONG_PASSWORD_TRUNCATE:
                logger.warning("bcrypt.password.truncated", limit=MAX_PASSWORD_LEN)
                return bytes(password[:MAX_PASSWORD_LEN])
            raise InvalidPasswordError(
                f"Password longer than {MAX_PASSWORD_LEN} bytes",
                reason="too_long",
                detail={"limit": MAX_PASSWORD_LEN},
            )
        return bytes(password)

    def _hash(self, password: bytes | bytearray, header: Header) -> str:
        key = derive_key(self._check_password(password), header.version)
        started = time.perf_counter()
        try:
            digest = bcrypt_digest(key, header.salt, header.rounds)
        finally:
            key[:] = bytes(len(key))
        logger.debug(
            "bcrypt.hash.completed",
            rounds=header.rounds,
            version=header.version,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return ParsedHash(header, digest).encode()

    def hash_bytes(self, password: bytes, salt: bytes | None = None) -> bytes:
        """Hash ``password`` with ``salt`` (a header or a full hash).

        Without ``salt`` a new one is generated at the default cost.

        Raises:
            InvalidSaltError: malformed ``salt``.
            InvalidPasswordError: password has a NUL byte or is too long.
            RandomSourceError: salt generation failed.
        """
        if salt is None:
            header = self._new_header(None, None)
        else:
            header = decode_salt(_ascii(salt, InvalidSaltError))
        return self._hash(password, header).encode("ascii")

    def hash(self, password: str, salt: str | None = None) -> str:
        """Text form of :meth:`hash_bytes`.

        Text that UTF-8 cannot encode (lone surrogates) is rejected with
        ``InvalidPasswordError(reason="encoding")`` or ``InvalidSaltError``.
        """
        encoded_password = _utf8(password, InvalidPasswordError, reason="encoding")
        encoded_salt = None if salt is None else _utf8(salt, InvalidSaltError)
        return self.hash_bytes(encoded_password, encoded_salt).decode("ascii")

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify_bytes(self, password: bytes, hashed: bytes) -> bool:
        """True when ``password`` hashes to ``hashed``; never raises on bad input."""
        try:
            parsed = decode_hash(_ascii(hashed, InvalidHashError))
            candidate = self._hash(password, parsed.header)
        except ValidationError as exc:
            logger.debug("bcrypt.verify.rejected", reason=exc.code)
            return False
        return hmac.compare_digest(candidate.encode("ascii"), bytes(hashed))

    def verify(self, password: str, hashed: str) -> bool:
        try:
            encoded_password = _utf8(password, InvalidPasswordError, reason="encoding")
            encoded_hash = _utf8(hashed, InvalidHashError)
        except ValidationError as exc:
            logger.debug("bcrypt.verify.rejected", reason=exc.code)
            return False
        return self.verify_bytes(encoded_password, encoded_hash)

    def needs_rehash(self, hashed: str | bytes) -> bool:
        """True when ``hashed`` was not made with the configured cost and version."""
        try:
            text = hashed if isinstance(hashed, str) else _ascii(hashed, InvalidHashError)
            header = decode_hash(text).header
        except InvalidHashError:
            return True
        return (
            header.rounds != self._settings.default_rounds
            or header.version != self._settings.version
        )

    # ------------------------------------------------------------------
    # Async
    # ------------------------------------------------------------------

    async def hash_async(self, password: str, salt: str | None = None) -> str:
        """:meth:`hash` on a worker thread."""
        return await asyncio.to_thread(self.hash, password, salt)

    async def verify_async(self, password: str, hashed: str) -> bool:
        """:meth:`verify` on a worker thread."""
        return await asyncio.to_thread(self.verify, password, hashed)
