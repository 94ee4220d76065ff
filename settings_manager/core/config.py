"""Settings-manager configuration (environment and .env).

Uses pydantic-settings with the SETTINGS_MANAGER_ prefix. Only wiring
concerns live here (which backend, where, which key material); the records
themselves are stored behind the persistence provider.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from settings_manager.core.constants import (
    STORAGE_BACKEND_FILE,
    STORAGE_BACKEND_MEMORY,
    STORAGE_BACKEND_REDIS,
    STORAGE_BACKENDS,
)


class SettingsManagerConfig(BaseSettings):
    """Configuration loaded from environment and .env.

    All fields have defaults; validate_backend_and_crypto checks the
    combinations that only make sense together.
    """

    debug: bool = False

    # Storage: "memory" (process-local), "redis" or "file"
    storage_backend: str = STORAGE_BACKEND_MEMORY
    storage_root: str = ""

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_socket_timeout: float | None = 5.0

    # Encrypted fields: either a Fernet key, or a secret + salt for PBKDF2.
    encryption_key: SecretStr | None = None
    encryption_secret: SecretStr | None = None
    encryption_salt: SecretStr | None = None
    encryption_kdf_iterations: int = 100_000

    # Structured encoding
    serializer_by_alias: bool = False
    serializer_exclude_none: bool = False
    serializer_strict: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SETTINGS_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backend_and_crypto(self) -> "SettingsManagerConfig":
        """Validate storage backend and encryption settings.

        - storage_backend must be one of memory, redis, file.
        - file: STORAGE_ROOT required.
        - encryption_secret requires encryption_salt.
        """
        backend = self.storage_backend.lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Invalid storage_backend {self.storage_backend!r}. "
                f"Must be one of: {', '.join(sorted(STORAGE_BACKENDS))}"
            )
        self.storage_backend = backend
        if backend == STORAGE_BACKEND_FILE and not self.storage_root:
            raise ValueError(
                "SETTINGS_MANAGER_STORAGE_ROOT is required when storage_backend is 'file'."
            )
        if backend == STORAGE_BACKEND_REDIS and not self.redis_host:
            raise ValueError(
                "SETTINGS_MANAGER_REDIS_HOST is required when storage_backend is 'redis'."
            )
        if self.encryption_secret and self.encryption_secret.get_secret_value():
            if not self.encryption_salt or not self.encryption_salt.get_secret_value():
                raise ValueError(
                    "SETTINGS_MANAGER_ENCRYPTION_SALT is required with ENCRYPTION_SECRET. "
                    "Generate with: openssl rand -hex 16"
                )
        return self

    @property
    def encryption_enabled(self) -> bool:
        """True when key material for encrypted fields is configured."""
        if self.encryption_key and self.encryption_key.get_secret_value():
            return True
        return bool(self.encryption_secret and self.encryption_secret.get_secret_value())


@lru_cache
def get_config() -> SettingsManagerConfig:
    """Return cached configuration (single instance per process).

    In tests, call get_config.cache_clear() after changing env vars.
    """
    return SettingsManagerConfig()
