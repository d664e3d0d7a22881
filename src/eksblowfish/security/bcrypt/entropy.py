"""Secure random source for salt generation."""
from __future__ import annotations

import secrets

from eksblowfish.kernel.errors import RandomSourceError
from eksblowfish.kernel.security import RandomSource
from eksblowfish.observability.logging import get_logger

__all__ = ["SystemRandomSource", "draw"]

logger = get_logger(__name__)


class SystemRandomSource:
    """The operating system CSPRNG via :func:`secrets.token_bytes`."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)


def draw(source: RandomSource, nbytes: int) -> bytes:
    """Take exactly ``nbytes`` from ``source``.

    Any failure, including a short read, surfaces as :class:`RandomSourceError`.
    """
    try:
        data = source.token_bytes(nbytes)
    except Exception as exc:
        logger.error("bcrypt.random_source.failed", source=type(source).__name__, error=repr(exc))
        raise RandomSourceError(requested=nbytes, cause=exc) from exc

    if not isinstance(data, (bytes, bytearray)) or len(data) != nbytes:
        got = len(data) if isinstance(data, (bytes, bytearray)) else type(data).__name__
        logger.error("bcrypt.random_source.failed", source=type(source).__name__, error="short read")
        raise RandomSourceError(
            f"Random source returned {got} instead of {nbytes} bytes",
            requested=nbytes,
        )
    return bytes(data)
