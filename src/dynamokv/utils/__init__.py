"""Utility modules."""

from dynamokv.utils.validation import (
    check_key,
    check_key_and_value,
    check_value,
    normalize_ttl,
)

__all__ = ["check_key", "check_key_and_value", "check_value", "normalize_ttl"]
