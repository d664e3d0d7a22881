"""Config settings – SettingsLoader port, environment and dotenv loaders."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from eksblowfish.config.settings.base import Settings
from eksblowfish.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(raw: str) -> bool:
    token = raw.strip().lower()
    if token in _TRUE:
        return True
    if token in _FALSE:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


# Field annotations are strings under ``from __future__ import annotations``.
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _parse_bool,
    "int": lambda raw: int(raw.strip()),
    "str": str.strip,
}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read each dataclass field from ``<PREFIX>_<FIELD>``.

    Unset variables fall back to the field default; a field without a default
    raises :class:`MissingRequiredSettingError`. ``environ`` defaults to
    :data:`os.environ` at load time.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            if env_key in environ:
                values[field.name] = self._coerce(env_key, environ[env_key], field.type)
            elif _is_required(field):
                raise MissingRequiredSettingError(env_key)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Could not build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(env_key: str, raw: str, type_hint: Any) -> Any:
        name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        coerce = _COERCERS.get(name, str.strip)
        try:
            return coerce(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(env_key, raw, str(exc), cause=exc) from exc


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


class DotenvSettingsLoader(SettingsLoader):
    """Merge a ``.env`` file into the process environment, then load from it.

    Existing variables win unless ``override`` is set. Needs the ``dotenv``
    extra (python-dotenv).
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv
        except ImportError as exc:
            raise ImportError("Install 'eksblowfish[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
