"""SettingsManager: the dependency holder for the settings-manager service.

Construct one per process, call init() once at startup with the persistence
provider, serializer options and (optionally) a cryptography provider, then
hand it to SettingsManagerService. There is no reconfiguration path.
"""

from __future__ import annotations

import threading

from settings_manager.application.interfaces.providers import (
    CryptographyProvider,
    PersistenceProvider,
)
from settings_manager.application.serialization.options import SerializerOptions
from settings_manager.domain.exceptions import (
    AlreadyInitializedError,
    CipherConfigurationError,
    UninitializedError,
)
from settings_manager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class SettingsManager:
    """Holds the persistence provider, serializer options and cipher."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._initialized = False
        self._persistence_provider: PersistenceProvider | None = None
        self._serializer_options: SerializerOptions | None = None
        self._cryptography_provider: CryptographyProvider | None = None

    @classmethod
    def create(
        cls,
        persistence_provider: PersistenceProvider,
        serializer_options: SerializerOptions | None = None,
        cryptography_provider: CryptographyProvider | None = None,
    ) -> SettingsManager:
        """Return a new, initialized SettingsManager."""
        manager = cls()
        manager.init(persistence_provider, serializer_options, cryptography_provider)
        return manager

    def init(
        self,
        persistence_provider: PersistenceProvider,
        serializer_options: SerializerOptions | None = None,
        cryptography_provider: CryptographyProvider | None = None,
    ) -> None:
        """Configure dependencies. Must be called exactly once.

        Args:
            persistence_provider: Store for serialized records.
            serializer_options: Encoding options; defaults to SerializerOptions().
            cryptography_provider: Cipher for encrypted fields. Without it,
                any record with an encrypted field fails to encode/decode.

        Raises:
            AlreadyInitializedError: init() was already called.
        """
        with self._lock:
            if self._initialized:
                raise AlreadyInitializedError()
            self._persistence_provider = persistence_provider
            self._serializer_options = serializer_options or SerializerOptions()
            self._cryptography_provider = cryptography_provider
            self._initialized = True
        logger.info(
            "SettingsManager initialized: persistence=%s, encryption=%s",
            type(persistence_provider).__name__,
            "enabled" if cryptography_provider is not None else "disabled",
        )

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def get_persistence_provider(self) -> PersistenceProvider:
        if self._persistence_provider is None:
            raise UninitializedError("PersistenceProvider")
        return self._persistence_provider

    def get_serializer_options(self) -> SerializerOptions:
        if self._serializer_options is None:
            raise UninitializedError("SerializerOptions")
        return self._serializer_options

    def get_cryptography_provider(self) -> CryptographyProvider:
        """Return the configured cipher.

        Raises:
            UninitializedError: init() has not been called.
            CipherConfigurationError: init() was called without a cipher.
        """
        if not self._initialized:
            raise UninitializedError("CryptographyProvider")
        if self._cryptography_provider is None:
            raise CipherConfigurationError()
        return self._cryptography_provider

    def get_optional_cryptography_provider(self) -> CryptographyProvider | None:
        """Return the cipher, or None when encryption is not configured."""
        if not self._initialized:
            raise UninitializedError("CryptographyProvider")
        return self._cryptography_provider
