"""Store protocol for key-value storage backends."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Store(Protocol):
    """Protocol for key-value storage backends (DynamoDB, memory)."""

    def set(self, key: str, value: Any) -> None:
        """Store a value under a key, replacing any previous value."""
        ...

    def get(self, key: str, target: Any) -> Any | None:
        """Decode the value stored under key into target. Returns None if not found."""
        ...

    def delete(self, key: str) -> None:
        """Delete a key. No-op if key doesn't exist."""
        ...

    def close(self) -> None:
        """Release backend resources."""
        ...
