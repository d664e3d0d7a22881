"""Unit tests for config settings & validation."""

import dataclasses
import os
from dataclasses import dataclass
from typing import ClassVar

import pytest

from eksblowfish.config import (
    ConfigError,
    EnvSettingsLoader,
    HashingSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from eksblowfish.config.settings import DotenvSettingsLoader


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    secret_name: str
    enabled: bool = False


# ---------------------------------------------------------------------------
# HashingSettings defaults and validation
# ---------------------------------------------------------------------------


class TestHashingSettings:
    def test_defaults(self) -> None:
        settings = HashingSettings()
        assert settings.default_rounds == 12
        assert settings.version == "2b"
        assert settings.long_password_policy == "reject"

    @pytest.mark.parametrize("rounds", [4, 10, 31])
    def test_rounds_in_range(self, rounds: int) -> None:
        assert HashingSettings(default_rounds=rounds).default_rounds == rounds

    @pytest.mark.parametrize("rounds", [3, 32, -1])
    def test_rounds_out_of_range(self, rounds: int) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            HashingSettings(default_rounds=rounds)
        assert exc_info.value.setting_name == "default_rounds"

    def test_rounds_must_be_int(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HashingSettings(default_rounds="12")  # type: ignore[arg-type]

    def test_rounds_rejects_bool(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HashingSettings(default_rounds=True)  # type: ignore[arg-type]

    @pytest.mark.parametrize("version", ["2", "2a", "2b", "2y"])
    def test_supported_versions(self, version: str) -> None:
        assert HashingSettings(version=version).version == version

    @pytest.mark.parametrize("version", ["2x", "3", "", "2B"])
    def test_unsupported_versions(self, version: str) -> None:
        with pytest.raises(InvalidSettingValueError):
            HashingSettings(version=version)

    def test_truncate_policy_allowed(self) -> None:
        assert HashingSettings(long_password_policy="truncate").long_password_policy == "truncate"

    def test_unknown_policy(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HashingSettings(long_password_policy="ignore")

    def test_is_dataclass(self) -> None:
        names = {f.name for f in dataclasses.fields(HashingSettings)}
        assert names == {"default_rounds", "version", "long_password_policy"}


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(HashingSettings)
        assert settings == HashingSettings()

    def test_loads_int(self) -> None:
        settings = EnvSettingsLoader(environ={"BCRYPT_DEFAULT_ROUNDS": "10"}).load(HashingSettings)
        assert settings.default_rounds == 10

    def test_loads_strings(self) -> None:
        environ = {"BCRYPT_VERSION": "2a", "BCRYPT_LONG_PASSWORD_POLICY": " truncate "}
        settings = EnvSettingsLoader(environ=environ).load(HashingSettings)
        assert settings.version == "2a"
        assert settings.long_password_policy == "truncate"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BCRYPT_DEFAULT_ROUNDS", "5")
        settings = EnvSettingsLoader().load(HashingSettings)
        assert settings.default_rounds == 5

    def test_non_integer_rounds(self) -> None:
        loader = EnvSettingsLoader(environ={"BCRYPT_DEFAULT_ROUNDS": "twelve"})
        with pytest.raises(InvalidSettingValueError) as exc_info:
            loader.load(HashingSettings)
        assert exc_info.value.setting_name == "BCRYPT_DEFAULT_ROUNDS"

    def test_out_of_range_rounds(self) -> None:
        loader = EnvSettingsLoader(environ={"BCRYPT_DEFAULT_ROUNDS": "40"})
        with pytest.raises(InvalidSettingValueError):
            loader.load(HashingSettings)

    def test_invalid_setting_is_config_error(self) -> None:
        loader = EnvSettingsLoader(environ={"BCRYPT_VERSION": "2x"})
        with pytest.raises(ConfigError):
            loader.load(HashingSettings)

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_SECRET_NAME"

    def test_bool_coercion(self) -> None:
        environ = {"REQ_SECRET_NAME": "db", "REQ_ENABLED": "yes"}
        settings = EnvSettingsLoader(environ=environ).load(RequiredSettings)
        assert settings.secret_name == "db"
        assert settings.enabled is True

    def test_unrecognised_bool(self) -> None:
        environ = {"REQ_SECRET_NAME": "db", "REQ_ENABLED": "maybe"}
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ=environ).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_ENABLED"

    def test_foreign_exception_is_wrapped(self) -> None:
        @dataclass
        class Broken(Settings):
            _prefix: ClassVar[str] = "BROKEN"

            def _validate(self) -> None:
                raise RuntimeError("boom")

        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader(environ={}).load(Broken)
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestDotenvSettingsLoader:
    def test_loads_from_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        scratch = {k: v for k, v in os.environ.items() if not k.startswith("BCRYPT_")}
        monkeypatch.setattr(os, "environ", scratch)
        env_file = tmp_path / ".env"
        env_file.write_text("BCRYPT_DEFAULT_ROUNDS=6\n")
        settings = DotenvSettingsLoader(str(env_file)).load(HashingSettings)
        assert settings.default_rounds == 6
        assert scratch["BCRYPT_DEFAULT_ROUNDS"] == "6"


class TestEnvKey:
    def test_prefixed(self) -> None:
        assert HashingSettings.env_key("default_rounds") == "BCRYPT_DEFAULT_ROUNDS"

    def test_without_prefix(self) -> None:
        assert Settings.env_key("level") == "LEVEL"


class TestSettingsBase:
    def test_prefix_is_not_a_field(self) -> None:
        assert dataclasses.fields(Settings) == ()
        assert "_prefix" not in {f.name for f in dataclasses.fields(RequiredSettings)}

    def test_prefix_cannot_be_passed_to_init(self) -> None:
        with pytest.raises(TypeError):
            Settings(_prefix="X")  # type: ignore[call-arg]
