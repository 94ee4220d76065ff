"""Application services."""

from settings_manager.application.services.settings_manager_service import (
    SettingsManagerService,
)

__all__ = ["SettingsManagerService"]
