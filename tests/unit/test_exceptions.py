"""Tests for settings-manager exceptions (error_code, message, details)."""

import pytest

from settings_manager.application.models.records import Setting
from settings_manager.domain.exceptions import (
    AlreadyInitializedError,
    CipherConfigurationError,
    DecodeError,
    MissingGlobalDefaultError,
    RecordKindConflictError,
    RecordKindError,
    SettingsManagerException,
    UninitializedError,
)


def test_base_exception_default_error_code() -> None:
    """Base exception uses the class name as error_code when not provided."""
    exc = SettingsManagerException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "SettingsManagerException"
    assert exc.details == {}


def test_uninitialized_error() -> None:
    """UninitializedError names the component and points at init()."""
    exc = UninitializedError("PersistenceProvider")
    assert "init()" in exc.message
    assert exc.error_code == "UNINITIALIZED"
    assert exc.details == {"component": "PersistenceProvider"}


def test_already_initialized_error() -> None:
    """AlreadyInitializedError sets ALREADY_INITIALIZED."""
    assert AlreadyInitializedError().error_code == "ALREADY_INITIALIZED"


def test_missing_global_default_error() -> None:
    """MissingGlobalDefaultError carries the key and record kind."""
    exc = MissingGlobalDefaultError("pkg.ThemeSetting")
    assert exc.message == "Global setting was not set for key: pkg.ThemeSetting"
    assert exc.key == "pkg.ThemeSetting"
    assert exc.details == {"key": "pkg.ThemeSetting", "kind": "setting"}


def test_decode_error_with_location() -> None:
    """DecodeError includes key and tenant in message and details."""
    exc = DecodeError("bad json", key="pkg.ThemeSetting", tenant_id="t-1")
    assert "pkg.ThemeSetting" in exc.message
    assert exc.error_code == "DECODE_ERROR"
    assert exc.details == {"reason": "bad json", "key": "pkg.ThemeSetting", "tenant_id": "t-1"}


def test_decode_error_without_location() -> None:
    """DecodeError without a location only records the reason."""
    exc = DecodeError("bad token")
    assert exc.details == {"reason": "bad token"}


def test_decode_error_is_not_value_error() -> None:
    """DecodeError is not a ValueError, so pydantic validators let it through."""
    assert not isinstance(DecodeError("x"), ValueError)


def test_cipher_configuration_error() -> None:
    """CipherConfigurationError sets CIPHER_NOT_CONFIGURED."""
    exc = CipherConfigurationError()
    assert "cryptography provider" in exc.message
    assert exc.error_code == "CIPHER_NOT_CONFIGURED"


@pytest.mark.parametrize("record_type", [Setting, "not-a-type"])
def test_record_kind_error(record_type) -> None:
    """RecordKindError is a TypeError and accepts non-type inputs."""
    exc = RecordKindError(record_type, "Config")
    assert isinstance(exc, TypeError)
    assert exc.details["required"] == "Config"


def test_record_kind_conflict_error() -> None:
    """RecordKindConflictError names the offending record type."""
    exc = RecordKindConflictError(Setting)
    assert exc.details == {"record_type": "Setting"}
