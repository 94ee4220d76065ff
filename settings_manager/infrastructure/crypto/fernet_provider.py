"""Fernet cryptography provider for encrypted record fields."""

from __future__ import annotations

import base64

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from settings_manager.core.config import SettingsManagerConfig, get_config

DECRYPTION_ERROR_MSG = "Failed to decrypt value - invalid or corrupted data"


class FernetCryptographyProvider:
    """Encrypt/decrypt strings with Fernet (AES-128-CBC + HMAC-SHA256).

    Every call to encrypt_string yields a different token for the same
    input; decrypt_string raises ValueError for tokens it cannot verify.
    """

    def __init__(self, key: bytes | str) -> None:
        """Initialize with a urlsafe-base64 Fernet key (see Fernet.generate_key)."""
        self._fernet = Fernet(key)

    @classmethod
    def from_secret(
        cls,
        secret: str,
        salt: str,
        iterations: int = 100_000,
    ) -> FernetCryptographyProvider:
        """Derive a 32-byte key from secret + salt via PBKDF2-HMAC-SHA256."""
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt.encode(),
            iterations=iterations,
        )
        derived = kdf.derive(secret.encode())
        return cls(base64.urlsafe_b64encode(derived))

    def encrypt_string(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode()).decode()

    def decrypt_string(self, ciphertext: str) -> str:
        """Decrypt a token produced by encrypt_string.

        Raises:
            ValueError: Token is malformed, tampered with, or from another key.
        """
        try:
            return self._fernet.decrypt(ciphertext.encode()).decode()
        except InvalidToken as e:
            raise ValueError(DECRYPTION_ERROR_MSG) from e


def create_cryptography_provider(
    config: SettingsManagerConfig | None = None,
) -> FernetCryptographyProvider | None:
    """Build the cipher from configuration, or None if no key material is set.

    A raw encryption_key takes precedence over encryption_secret + salt.
    """
    c = config or get_config()
    if c.encryption_key and c.encryption_key.get_secret_value():
        return FernetCryptographyProvider(c.encryption_key.get_secret_value())
    if c.encryption_secret and c.encryption_secret.get_secret_value():
        salt = c.encryption_salt.get_secret_value() if c.encryption_salt else ""
        return FernetCryptographyProvider.from_secret(
            c.encryption_secret.get_secret_value(),
            salt,
            c.encryption_kdf_iterations,
        )
    return None
