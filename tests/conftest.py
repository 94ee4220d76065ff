"""Pytest configuration and fixtures for the settings manager.

Services run against the in-memory persistence provider and a Fernet
cipher with a freshly generated key; no Redis or filesystem needed.
"""

import uuid

import pytest
from cryptography.fernet import Fernet

from settings_manager.application.services.settings_manager_service import (
    SettingsManagerService,
)
from settings_manager.application.settings_manager import SettingsManager
from settings_manager.infrastructure.crypto.fernet_provider import (
    FernetCryptographyProvider,
)
from settings_manager.infrastructure.persistence.local_persistence import (
    LocalPersistenceProvider,
)


@pytest.fixture
def persistence() -> LocalPersistenceProvider:
    """Empty in-memory persistence provider."""
    return LocalPersistenceProvider()


@pytest.fixture
def cipher() -> FernetCryptographyProvider:
    """Fernet cipher with a random key."""
    return FernetCryptographyProvider(Fernet.generate_key())


@pytest.fixture
def manager(
    persistence: LocalPersistenceProvider,
    cipher: FernetCryptographyProvider,
) -> SettingsManager:
    """Initialized SettingsManager with encryption enabled."""
    return SettingsManager.create(persistence, cryptography_provider=cipher)


@pytest.fixture
def service(manager: SettingsManager) -> SettingsManagerService:
    return SettingsManagerService(manager)


@pytest.fixture
def plain_service(persistence: LocalPersistenceProvider) -> SettingsManagerService:
    """Service over the same persistence but without a cipher."""
    return SettingsManagerService(SettingsManager.create(persistence))


@pytest.fixture
def tenant_id() -> uuid.UUID:
    """A tenant that has never been seen before."""
    return uuid.uuid4()
