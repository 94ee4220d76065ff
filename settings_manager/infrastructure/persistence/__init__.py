"""Persistence providers: in-memory, Redis and local files.

Key format for backends that need a flat string key is in keys.py.
"""

from settings_manager.infrastructure.persistence.factory import (
    create_persistence_provider,
)
from settings_manager.infrastructure.persistence.file_persistence import (
    FilePersistenceProvider,
)
from settings_manager.infrastructure.persistence.keys import storage_key
from settings_manager.infrastructure.persistence.local_persistence import (
    LocalPersistenceProvider,
)
from settings_manager.infrastructure.persistence.redis_persistence import (
    RedisPersistenceProvider,
)

__all__ = [
    "FilePersistenceProvider",
    "LocalPersistenceProvider",
    "RedisPersistenceProvider",
    "create_persistence_provider",
    "storage_key",
]
