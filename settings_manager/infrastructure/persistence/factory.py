"""Persistence provider factory: builds the backend named in configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from settings_manager.application.interfaces.providers import PersistenceProvider
from settings_manager.core.constants import (
    STORAGE_BACKEND_FILE,
    STORAGE_BACKEND_MEMORY,
    STORAGE_BACKEND_REDIS,
)

if TYPE_CHECKING:
    from settings_manager.core.config import SettingsManagerConfig


def create_persistence_provider(
    config: "SettingsManagerConfig | None" = None,
) -> PersistenceProvider:
    """Create a persistence provider from configuration.

    Args:
        config: Settings-manager configuration; if None, uses get_config().

    Returns:
        LocalPersistenceProvider, RedisPersistenceProvider (not yet
        connected) or FilePersistenceProvider.

    Raises:
        ValueError: Unknown backend.
    """
    from settings_manager.core.config import get_config

    c = config or get_config()
    backend = c.storage_backend.lower()

    if backend == STORAGE_BACKEND_MEMORY:
        from settings_manager.infrastructure.persistence.local_persistence import (
            LocalPersistenceProvider,
        )

        return LocalPersistenceProvider()
    if backend == STORAGE_BACKEND_REDIS:
        from settings_manager.infrastructure.persistence.redis_persistence import (
            RedisPersistenceProvider,
        )

        return RedisPersistenceProvider(config=c)
    if backend == STORAGE_BACKEND_FILE:
        from settings_manager.infrastructure.persistence.file_persistence import (
            FilePersistenceProvider,
        )

        return FilePersistenceProvider(c.storage_root)
    raise ValueError(f"Unsupported storage backend: {c.storage_backend!r}")
