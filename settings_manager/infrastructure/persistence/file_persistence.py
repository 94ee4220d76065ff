"""Local filesystem persistence with path validation and atomic writes."""

from __future__ import annotations

import hashlib
import os
import tempfile
from pathlib import Path
from uuid import UUID

import aiofiles
import aiofiles.os

from settings_manager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class FilePersistenceProvider:
    """One file per record: <root>/<tenant_id>/<sha256(key)>.json.

    Keys are hashed so any record key maps to a safe file name. Writes go to
    a temp file in the same directory and are renamed into place, so readers
    never observe a partial payload; the last rename wins.
    """

    def __init__(self, storage_root: str) -> None:
        """Initialize file storage.

        Args:
            storage_root: Base directory for all records.
        """
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _get_full_path(self, key: str, tenant_id: UUID) -> Path:
        """Resolve the record path under storage_root. Raises ValueError on traversal."""
        digest = hashlib.sha256(key.encode()).hexdigest()
        full_path = (self.storage_root / str(tenant_id) / f"{digest}.json").resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise ValueError(f"Invalid tenant id for file storage: {tenant_id!r}") from e
        return full_path

    async def try_get_value(self, key: str, tenant_id: UUID) -> str | None:
        path = self._get_full_path(key, tenant_id)
        if not await aiofiles.os.path.exists(path):
            return None
        async with aiofiles.open(path, encoding="utf-8") as f:
            return await f.read()

    async def add_or_update_setting(self, key: str, tenant_id: UUID, value: str) -> None:
        path = self._get_full_path(key, tenant_id)
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        os.close(fd)
        try:
            async with aiofiles.open(tmp_name, "w", encoding="utf-8") as f:
                await f.write(value)
            await aiofiles.os.replace(tmp_name, path)
        except BaseException:
            if await aiofiles.os.path.exists(tmp_name):
                await aiofiles.os.remove(tmp_name)
            raise
        logger.debug("Wrote %s for tenant %s to %s", key, tenant_id, path.name)
