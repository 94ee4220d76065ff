"""Provider protocols (DIP). Implementations live under infrastructure/.

Implementations must be safe for concurrent use; the service adds no
locking, retry or timeout of its own.
"""

from typing import Protocol
from uuid import UUID


class PersistenceProvider(Protocol):
    """Flat string store keyed on (key, tenant_id).

    A database is the usual choice; any long-term store works. Caching, if
    wanted, belongs in the implementation.
    """

    async def try_get_value(self, key: str, tenant_id: UUID) -> str | None:
        """Return the stored string for key + tenant_id, or None if absent."""
        ...

    async def add_or_update_setting(self, key: str, tenant_id: UUID, value: str) -> None:
        """Store value for key + tenant_id, replacing any existing value."""
        ...


class CryptographyProvider(Protocol):
    """Symmetric string cipher used for encrypted record fields.

    decrypt_string(encrypt_string(s)) must equal s. Input that cannot be
    decrypted must raise ValueError.
    """

    def encrypt_string(self, plaintext: str) -> str:
        """Encrypt plaintext and return the ciphertext as text."""
        ...

    def decrypt_string(self, ciphertext: str) -> str:
        """Decrypt ciphertext produced by encrypt_string."""
        ...
