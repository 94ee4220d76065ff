"""Storage key builder for flat key-value backends.

Record keys may contain dots and, for nested classes, '<locals>'; only the
tenant component is restricted because it is the last segment.
"""

from uuid import UUID

from settings_manager.core.constants import STORAGE_KEY_SEP, STORAGE_PREFIX_SETTING


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the key separator.

    Args:
        value: String component used in a storage key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains STORAGE_KEY_SEP.
    """
    if not value:
        raise ValueError(f"Storage key component {name!r} must be a non-empty string")
    if STORAGE_KEY_SEP in value:
        raise ValueError(
            f"Storage key component {name!r} must not contain separator {STORAGE_KEY_SEP!r}"
        )


def storage_key(key: str, tenant_id: UUID) -> str:
    """Flat key for a record: settings:<key>:<tenant_id>."""
    if not key:
        raise ValueError("Storage key component 'key' must be a non-empty string")
    tenant = str(tenant_id)
    _validate_key_component(tenant, "tenant_id")
    return f"{STORAGE_PREFIX_SETTING}{STORAGE_KEY_SEP}{key}{STORAGE_KEY_SEP}{tenant}"
