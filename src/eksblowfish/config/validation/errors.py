"""Config validation errors.

``setting_name`` is the environment key when the error comes from a loader
(``BCRYPT_DEFAULT_ROUNDS``) and the field name when it comes from
``Settings._validate`` (``default_rounds``).
"""
from __future__ import annotations

from typing import Any

from eksblowfish.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is inconsistent."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required setting {setting_name!r} is not set",
            detail={"setting": setting_name},
            **kwargs,
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable (wrong type, out of range, unknown choice)."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Setting {setting_name!r}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
