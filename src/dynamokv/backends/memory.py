"""In-memory key-value storage."""

import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from dynamokv.encoding import JSON, get_codec
from dynamokv.exceptions import CodecError, DecodeError, EncodeError
from dynamokv.observability import Timer, emit_timer
from dynamokv.protocols import Codec
from dynamokv.utils.validation import check_key, check_key_and_value, normalize_ttl


@dataclass
class Entry:
    """An encoded value with optional expiration."""

    value: bytes
    expires_at: float | None = None

    def is_expired(self) -> bool:
        """Check if this entry has expired."""
        if self.expires_at is None:
            return False
        return time.time() > self.expires_at


class MemoryStore:
    """In-memory key-value store.

    Same contract as DynamoDBStore, including codec round-trips and TTL
    expiry. Suitable for development and testing. Data is lost on restart.
    """

    def __init__(
        self,
        codec: Codec | str | None = None,
        ttl: timedelta | float | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize memory store.

        Args:
            codec: Codec instance or name. Defaults to JSON.
            ttl: Lifetime of written entries. None or 0 disables expiry.
            **kwargs: Ignored (for compatibility with other backends)
        """
        if codec is None:
            self.codec: Codec = JSON
        elif isinstance(codec, str):
            self.codec = get_codec(codec)
        else:
            self.codec = codec
        self.ttl = normalize_ttl(ttl)
        self._data: dict[str, Entry] = {}
        self._lock = threading.Lock()

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any existing entry."""
        check_key_and_value(key, value)
        try:
            data = self.codec.marshal(value)
        except CodecError:
            raise
        except Exception as e:
            raise EncodeError(f"Cannot encode value for key '{key}': {e}") from e

        expires_at = time.time() + self.ttl.total_seconds() if self.ttl else None
        with Timer() as t, self._lock:
            self._data[key] = Entry(value=data, expires_at=expires_at)
        emit_timer("dynamokv.memory.set", t.duration_ms)

    def get(self, key: str, target: Any) -> Any | None:
        """Get the value for key decoded into target, or None if not found."""
        check_key_and_value(key, target, name="target")
        with Timer() as t, self._lock:
            entry = self._data.get(key)
            if entry is not None and entry.is_expired():
                del self._data[key]
                entry = None
        emit_timer("dynamokv.memory.get", t.duration_ms)
        if entry is None:
            return None

        try:
            return self.codec.unmarshal(entry.value, target)
        except DecodeError as e:
            e.key = key
            raise
        except Exception as e:
            raise DecodeError(f"Cannot decode value for key '{key}': {e}", key=key) from e

    def contains(self, key: str) -> bool:
        """Check whether an unexpired entry exists for key."""
        check_key(key)
        with self._lock:
            entry = self._data.get(key)
            return entry is not None and not entry.is_expired()

    def delete(self, key: str) -> None:
        """Delete a key. No-op if the key doesn't exist."""
        check_key(key)
        with Timer() as t, self._lock:
            self._data.pop(key, None)
        emit_timer("dynamokv.memory.delete", t.duration_ms)

    def keys(self) -> list[str]:
        """List unexpired keys. Useful for testing."""
        with self._lock:
            return [k for k, v in self._data.items() if not v.is_expired()]

    def clear(self) -> None:
        """Clear all data. Useful for testing."""
        with self._lock:
            self._data.clear()

    def close(self) -> None:
        """Close the store. Data is kept until the instance is discarded."""

    def __enter__(self) -> "MemoryStore":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
