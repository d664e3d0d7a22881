"""Domain errors – rejected hashing inputs."""

from __future__ import annotations

from typing import Any

from eksblowfish.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an input violates a rule of the hashing scheme."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``verify`` treats every subclass as a non-match.
    """

    default_code = "validation_error"


class InvalidRoundsError(ValidationError):
    """Cost parameter outside ``[MIN_ROUNDS, MAX_ROUNDS]``."""

    default_code = "invalid_rounds"

    def __init__(
        self,
        rounds: object,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Invalid rounds {rounds!r}", **kwargs)
        self.rounds = rounds


class InvalidSaltError(ValidationError):
    """Malformed salt or header text, or random salt of the wrong size."""

    default_code = "invalid_salt"


class InvalidHashError(ValidationError):
    """Malformed hash string."""

    default_code = "invalid_hash"


class InvalidPasswordError(ValidationError):
    """Password that the scheme cannot represent (too long, embedded NUL)."""

    default_code = "invalid_password"

    def __init__(
        self,
        message: str,
        *,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["reason"] = self.reason
        return base


__all__ = [
    "DomainError",
    "InvalidHashError",
    "InvalidPasswordError",
    "InvalidRoundsError",
    "InvalidSaltError",
    "ValidationError",
]
