"""Codec protocol for value serialization."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Codec(Protocol):
    """Protocol for value encoders (JSON, pickle)."""

    name: str

    def marshal(self, value: Any) -> bytes:
        """Encode a value to bytes."""
        ...

    def unmarshal(self, data: bytes, target: Any) -> Any:
        """Decode bytes into an instance of target."""
        ...
