"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass base for environment-driven settings.

    Subclasses set ``_prefix``; field ``default_rounds`` under prefix
    ``BCRYPT`` is read from ``BCRYPT_DEFAULT_ROUNDS``. ``_validate`` runs
    after every construction, so a settings object is valid or never exists.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    def _validate(self) -> None:
        """Raise ``InvalidSettingValueError`` for unusable values."""


__all__ = ["Settings"]
