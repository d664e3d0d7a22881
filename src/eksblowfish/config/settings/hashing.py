"""Config settings – HashingSettings for the bcrypt hasher."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from eksblowfish.config.settings.base import Settings
from eksblowfish.config.validation import InvalidSettingValueError
from eksblowfish.kernel.constants import (
    DEFAULT_ROUNDS,
    DEFAULT_VERSION,
    LONG_PASSWORD_POLICIES,
    LONG_PASSWORD_REJECT,
    MAX_ROUNDS,
    MIN_ROUNDS,
    SUPPORTED_VERSIONS,
)


@dataclasses.dataclass
class HashingSettings(Settings):
    """Defaults applied when callers do not pass explicit parameters.

    Environment variables: ``BCRYPT_DEFAULT_ROUNDS``, ``BCRYPT_VERSION``,
    ``BCRYPT_LONG_PASSWORD_POLICY``.
    """

    _prefix: ClassVar[str] = "BCRYPT"

    default_rounds: int = DEFAULT_ROUNDS
    version: str = DEFAULT_VERSION
    long_password_policy: str = LONG_PASSWORD_REJECT

    def _validate(self) -> None:
        if isinstance(self.default_rounds, bool) or not isinstance(self.default_rounds, int):
            raise InvalidSettingValueError("default_rounds", self.default_rounds, "must be an int")
        if not MIN_ROUNDS <= self.default_rounds <= MAX_ROUNDS:
            raise InvalidSettingValueError(
                "default_rounds",
                self.default_rounds,
                f"must be between {MIN_ROUNDS} and {MAX_ROUNDS}",
            )
        if self.version not in SUPPORTED_VERSIONS:
            raise InvalidSettingValueError(
                "version", self.version, f"must be one of {sorted(SUPPORTED_VERSIONS)}"
            )
        if self.long_password_policy not in LONG_PASSWORD_POLICIES:
            raise InvalidSettingValueError(
                "long_password_policy",
                self.long_password_policy,
                f"must be one of {sorted(LONG_PASSWORD_POLICIES)}",
            )


__all__ = ["HashingSettings"]
