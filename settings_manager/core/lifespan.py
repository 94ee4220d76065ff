"""Startup and shutdown wiring for the settings manager.

Only wiring of infrastructure (persistence backend, cipher, serializer
options); no resolution logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from settings_manager.application.interfaces.services import ISettingsManagerService
from settings_manager.application.serialization.options import SerializerOptions
from settings_manager.application.services.settings_manager_service import (
    SettingsManagerService,
)
from settings_manager.application.settings_manager import SettingsManager
from settings_manager.core.config import SettingsManagerConfig, get_config
from settings_manager.infrastructure.crypto.fernet_provider import (
    create_cryptography_provider,
)
from settings_manager.infrastructure.persistence.factory import (
    create_persistence_provider,
)
from settings_manager.infrastructure.persistence.redis_persistence import (
    RedisPersistenceProvider,
)
from settings_manager.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def serializer_options_from_config(config: SettingsManagerConfig) -> SerializerOptions:
    return SerializerOptions(
        by_alias=config.serializer_by_alias,
        exclude_none=config.serializer_exclude_none,
        strict=config.serializer_strict,
    )


def build_settings_manager(config: SettingsManagerConfig | None = None) -> SettingsManager:
    """Create and initialize a SettingsManager from configuration.

    A Redis backend is returned unconnected; use settings_manager_lifespan
    (or call connect() yourself) before the first operation.
    """
    c = config or get_config()
    return SettingsManager.create(
        create_persistence_provider(c),
        serializer_options_from_config(c),
        create_cryptography_provider(c),
    )


@asynccontextmanager
async def settings_manager_lifespan(
    config: SettingsManagerConfig | None = None,
) -> AsyncIterator[ISettingsManagerService]:
    """Wire the service, yield it, and release backend connections on exit."""
    c = config or get_config()
    setup_logging(c)
    manager = build_settings_manager(c)
    persistence = manager.get_persistence_provider()

    if isinstance(persistence, RedisPersistenceProvider):
        await persistence.connect()
    logger.info("Settings manager started (storage_backend=%s)", c.storage_backend)

    try:
        yield SettingsManagerService(manager)
    finally:
        if isinstance(persistence, RedisPersistenceProvider):
            await persistence.disconnect()
        logger.info("Settings manager stopped")
