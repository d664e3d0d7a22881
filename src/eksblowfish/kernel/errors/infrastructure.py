"""Infrastructure errors – failures of external capabilities."""

from __future__ import annotations

from typing import Any

from eksblowfish.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure failure that is not a rule violation."""

    default_code = "infrastructure_error"


class RandomSourceError(InfrastructureError):
    """The secure random source failed or returned too few bytes."""

    default_code = "random_source_error"

    def __init__(
        self,
        message: str = "Secure random source failed",
        *,
        requested: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.requested = requested


__all__ = ["InfrastructureError", "RandomSourceError"]
