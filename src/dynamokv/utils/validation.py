"""Input validation utilities."""

from datetime import timedelta
from typing import Any

from dynamokv.exceptions import ConfigError, ValidationError


def check_key(key: str) -> str:
    """Validate a store key.

    Args:
        key: The key to validate

    Returns:
        The validated key

    Raises:
        ValidationError: If the key is empty
    """
    if not key:
        raise ValidationError("key cannot be empty")
    return key


def check_value(value: Any, name: str = "value") -> Any:
    """Validate that a value or destination is present.

    Raises:
        ValidationError: If the value is None
    """
    if value is None:
        raise ValidationError(f"{name} cannot be None")
    return value


def check_key_and_value(key: str, value: Any, name: str = "value") -> None:
    """Validate a key together with its value (or read destination)."""
    check_key(key)
    check_value(value, name)


def normalize_ttl(ttl: timedelta | float | None) -> timedelta | None:
    """Convert a TTL setting to a positive timedelta, or None for no TTL.

    Raises:
        ConfigError: If the TTL is negative
    """
    if ttl is None:
        return None
    if not isinstance(ttl, timedelta):
        ttl = timedelta(seconds=ttl)
    if ttl < timedelta(0):
        raise ConfigError("ttl cannot be negative")
    return ttl or None
