"""Config settings – 12-factor env-based configuration."""
from eksblowfish.config.settings.base import Settings
from eksblowfish.config.settings.hashing import HashingSettings
from eksblowfish.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HashingSettings",
    "Settings",
    "SettingsLoader",
]
