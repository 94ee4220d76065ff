"""Provider and service interfaces (ports) for the settings manager."""

from settings_manager.application.interfaces.providers import (
    CryptographyProvider,
    PersistenceProvider,
)
from settings_manager.application.interfaces.services import ISettingsManagerService

__all__ = ["CryptographyProvider", "ISettingsManagerService", "PersistenceProvider"]
