"""Exceptions raised by the settings manager.

None of these derive from ValueError: they are raised from inside pydantic
validators and must propagate unchanged instead of being folded into a
ValidationError.
"""

from typing import Any


class SettingsManagerException(Exception):
    """Base exception for all settings-manager errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, tenant_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class UninitializedError(SettingsManagerException):
    """Raised when the settings manager is used before init()."""

    def __init__(self, component: str) -> None:
        super().__init__(
            f"{component} is not configured; invoke SettingsManager.init() before use.",
            "UNINITIALIZED",
            {"component": component},
        )


class AlreadyInitializedError(SettingsManagerException):
    """Raised when init() is called a second time on the same manager."""

    def __init__(self) -> None:
        super().__init__(
            "SettingsManager is already initialized; it cannot be reconfigured.",
            "ALREADY_INITIALIZED",
        )


class MissingGlobalDefaultError(SettingsManagerException):
    """Raised when a setting or config has no record under the global tenant."""

    def __init__(self, key: str, kind: str = "setting") -> None:
        """Initialize with the storage key that has no global record.

        Args:
            key: Storage key derived from the record type.
            kind: 'setting' or 'config' (message only).
        """
        super().__init__(
            f"Global {kind} was not set for key: {key}",
            "MISSING_GLOBAL_DEFAULT",
            {"key": key, "kind": kind},
        )
        self.key = key


class DecodeError(SettingsManagerException):
    """Raised when a stored payload or encrypted field cannot be decoded."""

    def __init__(
        self,
        reason: str,
        key: str | None = None,
        tenant_id: str | None = None,
    ) -> None:
        """Initialize with reason and optional record location.

        Args:
            reason: What failed (invalid JSON, validation errors, decrypt failure).
            key: Storage key of the record, when known.
            tenant_id: Tenant the record was read for, when known.
        """
        details: dict[str, Any] = {"reason": reason}
        if key is not None:
            details["key"] = key
        if tenant_id is not None:
            details["tenant_id"] = tenant_id
        message = f"Failed to decode {key}: {reason}" if key else f"Failed to decode: {reason}"
        super().__init__(message, "DECODE_ERROR", details)


class CipherConfigurationError(SettingsManagerException):
    """Raised when an encrypted field is used without a cryptography provider."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "CryptographyProvider is not configured; encrypted fields require "
            "a cryptography provider in SettingsManager.init().",
            "CIPHER_NOT_CONFIGURED",
        )


class RecordKindError(SettingsManagerException, TypeError):
    """Raised when a record type lacks the capability an operation requires."""

    def __init__(self, record_type: Any, required: str) -> None:
        """Initialize with the offending type and the missing capability.

        Args:
            record_type: Type passed to the service.
            required: Capability name ('Setting', 'Config', 'Feature').
        """
        super().__init__(
            f"{_type_name(record_type)} is not a {required}",
            "RECORD_KIND_ERROR",
            {"record_type": _type_name(record_type), "required": required},
        )


class RecordKindConflictError(SettingsManagerException, TypeError):
    """Raised when a record type declares both Setting and Config."""

    def __init__(self, record_type: type) -> None:
        super().__init__(
            f"{record_type.__qualname__} cannot be both a Setting and a Config",
            "RECORD_KIND_CONFLICT",
            {"record_type": record_type.__qualname__},
        )


def _type_name(record_type: Any) -> str:
    return getattr(record_type, "__qualname__", repr(record_type))
