"""Cryptography providers for encrypted record fields."""

from settings_manager.infrastructure.crypto.fernet_provider import (
    FernetCryptographyProvider,
    create_cryptography_provider,
)

__all__ = ["FernetCryptographyProvider", "create_cryptography_provider"]
