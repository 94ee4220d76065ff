"""Service interface for the settings manager (DIP)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from settings_manager.application.models.records import (
        Config,
        ConfigT,
        Feature,
        Setting,
        SettingT,
    )


class ISettingsManagerService(Protocol):
    """Create, modify and retrieve settings, configs and features."""

    async def get_setting(self, setting_type: type[SettingT], tenant_id: UUID) -> SettingT | None:
        """Return the tenant's setting, or None if not stored."""

    async def get_setting_or_default(
        self, setting_type: type[SettingT], tenant_id: UUID | None
    ) -> SettingT:
        """Return the tenant's setting, falling back to the global one."""

    async def add_or_update_setting(self, setting: Setting, tenant_id: UUID) -> None:
        """Store setting for tenant_id, replacing any existing value."""

    async def is_feature_enabled(self, feature_type: type[Feature], tenant_id: UUID) -> bool:
        """Return True only if the feature is stored for tenant_id and enabled."""

    async def add_or_update_feature(self, feature: Feature, tenant_id: UUID) -> None:
        """Store feature for tenant_id, replacing any existing value."""

    async def get_config(self, config_type: type[ConfigT]) -> ConfigT:
        """Return the global config; raise if it was never stored."""

    async def add_or_update_config(self, config: Config) -> None:
        """Store config under the global tenant."""
