"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from eksblowfish.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from eksblowfish.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidHashError,
    InvalidPasswordError,
    InvalidRoundsError,
    InvalidSaltError,
    RandomSourceError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_detail_is_copied(self) -> None:
        detail = {"limit": 72}
        err = BaseError("m", detail=detail)
        detail["limit"] = 0
        assert err.detail == {"limit": 72}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestValidationErrors:
    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (InvalidSaltError, "invalid_salt"),
            (InvalidHashError, "invalid_hash"),
        ],
    )
    def test_codes(self, cls: type[ValidationError], code: str) -> None:
        err = cls("bad")
        assert err.code == code
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)

    def test_invalid_rounds_keeps_value(self) -> None:
        err = InvalidRoundsError(32)
        assert err.rounds == 32
        assert err.code == "invalid_rounds"
        assert "32" in err.message

    def test_invalid_rounds_custom_message(self) -> None:
        err = InvalidRoundsError("x", "Rounds must be an int")
        assert err.message == "Rounds must be an int"

    def test_invalid_password_reason_in_dict(self) -> None:
        err = InvalidPasswordError("too long", reason="too_long")
        assert err.reason == "too_long"
        assert err.to_dict()["reason"] == "too_long"
        assert err.code == "invalid_password"


class TestInfrastructureErrors:
    def test_random_source_error_defaults(self) -> None:
        err = RandomSourceError(requested=16)
        assert err.code == "random_source_error"
        assert err.requested == 16
        assert isinstance(err, InfrastructureError)
        assert not isinstance(err, ValidationError)

    def test_random_source_error_cause(self) -> None:
        cause = OSError("no entropy")
        err = RandomSourceError(cause=cause)
        assert err.__cause__ is cause


class TestConfigErrors:
    def test_config_error_is_application_error(self) -> None:
        assert issubclass(ConfigError, ApplicationError)

    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("BCRYPT_X")
        assert err.setting_name == "BCRYPT_X"
        assert err.code == "missing_required_setting"

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("default_rounds", 99, "out of range")
        assert err.value == 99
        assert "out of range" in err.message
