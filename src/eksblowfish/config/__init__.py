"""Config – 12-factor settings and loaders."""

from eksblowfish.config.settings import EnvSettingsLoader, HashingSettings, Settings, SettingsLoader
from eksblowfish.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HashingSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
