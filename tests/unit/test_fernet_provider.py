"""Fernet cryptography provider and its construction from configuration."""

import pytest
from cryptography.fernet import Fernet

from settings_manager.core.config import SettingsManagerConfig
from settings_manager.infrastructure.crypto.fernet_provider import (
    DECRYPTION_ERROR_MSG,
    FernetCryptographyProvider,
    create_cryptography_provider,
)


class TestFernetCryptographyProvider:
    def test_round_trip(self, cipher) -> None:
        """decrypt_string inverts encrypt_string."""
        token = cipher.encrypt_string("is it secret? is it safe?")
        assert token != "is it secret? is it safe?"
        assert cipher.decrypt_string(token) == "is it secret? is it safe?"

    def test_tokens_differ_per_call(self, cipher) -> None:
        """Fernet tokens are randomized per call."""
        assert cipher.encrypt_string("same") != cipher.encrypt_string("same")

    def test_other_key_cannot_decrypt(self, cipher) -> None:
        """A token from another key raises ValueError."""
        other = FernetCryptographyProvider(Fernet.generate_key())
        with pytest.raises(ValueError, match=DECRYPTION_ERROR_MSG):
            other.decrypt_string(cipher.encrypt_string("x"))

    def test_garbage_raises_value_error(self, cipher) -> None:
        """Non-token input raises ValueError."""
        with pytest.raises(ValueError):
            cipher.decrypt_string("definitely not a token")

    def test_from_secret_is_deterministic(self) -> None:
        """Same secret and salt derive the same key."""
        a = FernetCryptographyProvider.from_secret("s3cret", "salt", iterations=1_000)
        b = FernetCryptographyProvider.from_secret("s3cret", "salt", iterations=1_000)
        assert b.decrypt_string(a.encrypt_string("hello")) == "hello"

    def test_from_secret_salt_matters(self) -> None:
        """A different salt derives a different key."""
        a = FernetCryptographyProvider.from_secret("s3cret", "salt-a", iterations=1_000)
        b = FernetCryptographyProvider.from_secret("s3cret", "salt-b", iterations=1_000)
        with pytest.raises(ValueError):
            b.decrypt_string(a.encrypt_string("hello"))


class TestCreateCryptographyProvider:
    def test_none_without_key_material(self) -> None:
        """No key material means no cipher."""
        assert create_cryptography_provider(SettingsManagerConfig()) is None

    def test_from_raw_key(self) -> None:
        """A raw Fernet key is used directly."""
        key = Fernet.generate_key().decode()
        provider = create_cryptography_provider(SettingsManagerConfig(encryption_key=key))
        assert provider is not None
        assert FernetCryptographyProvider(key).decrypt_string(provider.encrypt_string("v")) == "v"

    def test_from_secret_and_salt(self) -> None:
        """Secret and salt go through key derivation."""
        config = SettingsManagerConfig(
            encryption_secret="s3cret",
            encryption_salt="salt",
            encryption_kdf_iterations=1_000,
        )
        provider = create_cryptography_provider(config)
        expected = FernetCryptographyProvider.from_secret("s3cret", "salt", iterations=1_000)
        assert expected.decrypt_string(provider.encrypt_string("v")) == "v"
