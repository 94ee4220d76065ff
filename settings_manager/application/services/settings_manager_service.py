"""Settings-manager service: tenant resolution and record (de)serialization.

Reads and writes go straight to the persistence provider on every call; the
service keeps no state besides its SettingsManager handle, adds no locking
and is safe to share between tasks when the providers are.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any
from uuid import UUID

from pydantic import ValidationError
from pydantic_core import to_json

from settings_manager.application.models.records import (
    Config,
    ConfigT,
    DefaultFeature,
    Feature,
    Record,
    RecordT,
    Setting,
    SettingT,
    key_of,
)
from settings_manager.application.serialization.encrypted_property import (
    codec_context,
    has_encrypted_fields,
)
from settings_manager.application.settings_manager import SettingsManager
from settings_manager.core.constants import GLOBAL_ID
from settings_manager.domain.exceptions import (
    DecodeError,
    MissingGlobalDefaultError,
    RecordKindError,
)
from settings_manager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=512)
def _declares_encrypted_fields(record_type: type[Record]) -> bool:
    return has_encrypted_fields(record_type)


def _require_kind(record_type: Any, kind: type[Record]) -> None:
    """Raise RecordKindError unless record_type subclasses the kind marker."""
    if not (isinstance(record_type, type) and issubclass(record_type, kind)):
        raise RecordKindError(record_type, kind.__name__)


class SettingsManagerService:
    """Create, modify and retrieve settings, configs and features.

    Settings are resolved per tenant with a fallback to the record stored
    under GLOBAL_ID. Configs live only under GLOBAL_ID. Features read the
    is_enabled flag through a minimal projection and default to disabled.
    """

    GLOBAL_ID = GLOBAL_ID

    def __init__(self, settings_manager: SettingsManager) -> None:
        self._manager = settings_manager

    async def get_setting(self, setting_type: type[SettingT], tenant_id: UUID) -> SettingT | None:
        """Return the setting stored for tenant_id, or None if there is none.

        Raises:
            DecodeError: The stored payload is not a valid setting_type.
        """
        _require_kind(setting_type, Setting)
        return await self._get(setting_type, tenant_id)

    async def get_setting_or_default(
        self, setting_type: type[SettingT], tenant_id: UUID | None
    ) -> SettingT:
        """Return the tenant's setting, falling back to the global setting.

        Global settings are required: every setting type resolved this way
        must have a record stored under GLOBAL_ID.

        Raises:
            MissingGlobalDefaultError: Neither tenant nor global setting exists.
        """
        _require_kind(setting_type, Setting)
        if tenant_id is not None:
            tenant_setting = await self._get(setting_type, tenant_id)
            if tenant_setting is not None:
                return tenant_setting
            logger.debug(
                "No %s for tenant %s; using global setting",
                key_of(setting_type),
                tenant_id,
            )

        global_setting = await self._get(setting_type, GLOBAL_ID)
        if global_setting is None:
            key = key_of(setting_type)
            logger.warning("Global setting was not set for key: %s", key)
            raise MissingGlobalDefaultError(key, "setting")
        return global_setting

    async def add_or_update_setting(self, setting: Setting, tenant_id: UUID) -> None:
        """Store setting for tenant_id; an existing value is replaced.

        Concurrent writers are the persistence provider's concern.
        """
        _require_kind(type(setting), Setting)
        await self._add_or_update(setting, tenant_id)

    async def is_feature_enabled(self, feature_type: type[Feature], tenant_id: UUID) -> bool:
        """Return True if the feature is stored for tenant_id with is_enabled set.

        A missing record is disabled. A stored record that cannot be read
        as a feature raises DecodeError, like get_setting.
        """
        _require_kind(feature_type, Feature)
        persistence = self._manager.get_persistence_provider()
        key = key_of(feature_type)

        serialized = await persistence.try_get_value(key, tenant_id)
        if serialized is None:
            return False
        feature = self._deserialize(DefaultFeature, serialized, key, tenant_id)
        return feature is not None and feature.is_enabled

    async def add_or_update_feature(self, feature: Feature, tenant_id: UUID) -> None:
        """Store feature for tenant_id; an existing value is replaced."""
        _require_kind(type(feature), Feature)
        await self._add_or_update(feature, tenant_id)

    async def get_config(self, config_type: type[ConfigT]) -> ConfigT:
        """Return the config stored under GLOBAL_ID.

        Configs are application-wide and required; there is no further
        fallback.

        Raises:
            MissingGlobalDefaultError: The config was never stored.
        """
        _require_kind(config_type, Config)
        config = await self._get(config_type, GLOBAL_ID)
        if config is None:
            key = key_of(config_type)
            logger.warning("Global config was not set for key: %s", key)
            raise MissingGlobalDefaultError(key, "config")
        return config

    async def add_or_update_config(self, config: Config) -> None:
        """Store config under GLOBAL_ID; an existing value is replaced."""
        _require_kind(type(config), Config)
        await self._add_or_update(config, GLOBAL_ID)

    async def _get(self, record_type: type[RecordT], tenant_id: UUID) -> RecordT | None:
        persistence = self._manager.get_persistence_provider()
        key = key_of(record_type)

        serialized = await persistence.try_get_value(key, tenant_id)
        if serialized is None:
            return None
        return self._deserialize(record_type, serialized, key, tenant_id)

    async def _add_or_update(self, record: Record, tenant_id: UUID) -> None:
        persistence = self._manager.get_persistence_provider()
        key = key_of(type(record))
        serialized = self.serialize(record)

        await persistence.add_or_update_setting(key, tenant_id, serialized)
        logger.debug("Stored %s for tenant %s", key, tenant_id)

    def serialize(self, record: Record) -> str:
        """Encode record as stored JSON text, encrypting annotated fields."""
        options = self._manager.get_serializer_options()
        data = record.model_dump(
            mode="json",
            context=self._codec_context(type(record)),
            **options.dump_kwargs(),
        )
        return to_json(data).decode()

    def deserialize(self, record_type: type[RecordT], serialized: str) -> RecordT | None:
        """Decode stored JSON text into record_type; JSON null yields None."""
        return self._deserialize(record_type, serialized, key_of(record_type), None)

    def _deserialize(
        self,
        record_type: type[RecordT],
        serialized: str,
        key: str,
        tenant_id: UUID | None,
    ) -> RecordT | None:
        options = self._manager.get_serializer_options()
        if serialized.strip() == "null":
            return None
        tenant = str(tenant_id) if tenant_id is not None else None
        try:
            return record_type.model_validate_json(
                serialized,
                context=self._codec_context(record_type),
                **options.validate_kwargs(),
            )
        except ValidationError as e:
            raise DecodeError(str(e), key, tenant) from e
        except DecodeError as e:
            raise DecodeError(e.details["reason"], key, tenant) from e

    def _codec_context(self, record_type: type[Record]) -> dict[str, Any]:
        """Pydantic context carrying the cipher for encrypted fields.

        Records that declare encrypted fields require a cipher up front, so a
        missing one fails before anything is read or written.
        """
        strict = self._manager.get_serializer_options().strict
        if _declares_encrypted_fields(record_type):
            return codec_context(self._manager.get_cryptography_provider(), strict)
        return codec_context(self._manager.get_optional_cryptography_provider(), strict)
