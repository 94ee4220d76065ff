"""Tenant-scoped settings, configs and feature flags with per-field encryption."""

from settings_manager.application.models.records import (
    Config,
    DefaultFeature,
    Feature,
    Record,
    Setting,
    key_of,
)
from settings_manager.application.serialization.encrypted_property import (
    EncryptedProperty,
    FieldCodec,
)
from settings_manager.application.serialization.options import SerializerOptions
from settings_manager.application.services.settings_manager_service import (
    SettingsManagerService,
)
from settings_manager.application.settings_manager import SettingsManager
from settings_manager.core.constants import GLOBAL_ID
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

__all__ = [
    "GLOBAL_ID",
    "Record",
    "Setting",
    "Config",
    "Feature",
    "DefaultFeature",
    "key_of",
    "EncryptedProperty",
    "FieldCodec",
    "SerializerOptions",
    "SettingsManager",
    "SettingsManagerService",
    "SettingsManagerException",
    "UninitializedError",
    "AlreadyInitializedError",
    "MissingGlobalDefaultError",
    "DecodeError",
    "CipherConfigurationError",
    "RecordKindError",
    "RecordKindConflictError",
]
