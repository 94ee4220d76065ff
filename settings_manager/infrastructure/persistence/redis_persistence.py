"""Redis-backed persistence provider.

One Redis string per record under settings:<key>:<tenant_id> (see keys.py).
Unlike a cache, a settings store must not hide failures: Redis errors
propagate to the caller and there is no reconnect or retry here.
"""

from __future__ import annotations

import logging
from uuid import UUID

import redis.asyncio as redis

from settings_manager.core.config import SettingsManagerConfig, get_config
from settings_manager.infrastructure.persistence.keys import storage_key

logger = logging.getLogger(__name__)


class RedisPersistenceProvider:
    """Async Redis persistence with last-writer-wins SET semantics.

    Call connect() at startup and disconnect() at shutdown, or pass an
    existing client (tests, shared pools).
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        config: SettingsManagerConfig | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            redis_client: Optional Redis client for testing or DI.
            config: Connection settings; defaults to get_config().
        """
        self.redis = redis_client
        self.config = config or get_config()

    async def connect(self) -> None:
        """Open the Redis connection and verify it with PING."""
        if self.redis is not None:
            return
        client = redis.Redis(
            host=self.config.redis_host,
            port=self.config.redis_port,
            db=self.config.redis_db,
            password=self.config.redis_password.get_secret_value()
            if self.config.redis_password
            else None,
            decode_responses=True,
            socket_connect_timeout=self.config.redis_socket_timeout,
            socket_keepalive=True,
        )
        await client.ping()
        self.redis = client
        logger.info(
            "Redis persistence connected: %s:%s",
            self.config.redis_host,
            self.config.redis_port,
        )

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            logger.info("Redis persistence disconnected")

    def _client(self) -> redis.Redis:
        if self.redis is None:
            raise RuntimeError("RedisPersistenceProvider is not connected; call connect() first")
        return self.redis

    async def try_get_value(self, key: str, tenant_id: UUID) -> str | None:
        value = await self._client().get(storage_key(key, tenant_id))
        if value is None:
            return None
        return value.decode() if isinstance(value, bytes) else value

    async def add_or_update_setting(self, key: str, tenant_id: UUID, value: str) -> None:
        redis_key = storage_key(key, tenant_id)
        await self._client().set(redis_key, value)
        logger.debug("Redis SET: %s", redis_key)
