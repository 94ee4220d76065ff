"""Core constants: reserved tenant identifier and storage key format.

GLOBAL_ID is part of the public contract. Changing it orphans every global
setting, config and feature already stored.
"""

from typing import Final
from uuid import UUID

# Tenant identifier used for global (tenant-agnostic) records.
GLOBAL_ID: Final[UUID] = UUID("11111111-61c8-4a18-8fe5-40ec9851cfa1")

# Storage key format (Redis and file backends)
STORAGE_KEY_SEP: Final[str] = ":"
STORAGE_PREFIX_SETTING: Final[str] = "settings"

# Key under which the field codec looks up its cipher in pydantic context.
CODEC_CONTEXT_KEY: Final[str] = "settings_manager.codec"

STORAGE_BACKEND_MEMORY: Final[str] = "memory"
STORAGE_BACKEND_REDIS: Final[str] = "redis"
STORAGE_BACKEND_FILE: Final[str] = "file"
STORAGE_BACKENDS: Final[frozenset[str]] = frozenset(
    {STORAGE_BACKEND_MEMORY, STORAGE_BACKEND_REDIS, STORAGE_BACKEND_FILE}
)
