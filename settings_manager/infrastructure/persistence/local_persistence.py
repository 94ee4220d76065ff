"""In-memory persistence provider for local runs and tests."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from uuid import UUID


class LocalPersistenceProvider:
    """Store settings in a process-local dict keyed on (key, tenant_id).

    Nothing survives a restart. Writes overwrite unconditionally; a lock
    keeps the dict consistent across threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._local_settings: dict[tuple[str, UUID], str] = {}

    async def try_get_value(self, key: str, tenant_id: UUID) -> str | None:
        with self._lock:
            return self._local_settings.get((key, tenant_id))

    async def add_or_update_setting(self, key: str, tenant_id: UUID, value: str) -> None:
        with self._lock:
            self._local_settings[(key, tenant_id)] = value

    def seed(self, settings: Mapping[tuple[str, UUID], str]) -> None:
        """Bulk-load serialized records, e.g. test fixtures."""
        with self._lock:
            self._local_settings.update(settings)

    def __len__(self) -> int:
        with self._lock:
            return len(self._local_settings)
