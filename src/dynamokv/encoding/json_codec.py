"""JSON codec backed by pydantic."""

from functools import lru_cache
from typing import Any

from pydantic import ConfigDict, PydanticUserError, TypeAdapter
from pydantic_core import PydanticSerializationError, to_json

from dynamokv.exceptions import DecodeError, EncodeError

# bytes travel as base64 strings so non-UTF-8 data round-trips
BYTES_CONFIG = ConfigDict(val_json_bytes="base64")


def _build_adapter(target: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(target, config=BYTES_CONFIG)
    except PydanticUserError:
        # Models, dataclasses and TypedDicts carry their own config
        return TypeAdapter(target)


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return _build_adapter(target)


class JSONCodec:
    """Encodes values as UTF-8 JSON.

    Anything pydantic can serialize is accepted: builtins, dataclasses,
    pydantic models, datetimes, UUIDs. ``bytes`` are written as base64
    strings. Decoding validates against the requested target type, so
    ``get(key, MyModel)`` returns a ``MyModel``.
    """

    name = "json"

    def marshal(self, value: Any) -> bytes:
        """Encode a value to JSON bytes."""
        try:
            return to_json(value, bytes_mode="base64")
        except PydanticSerializationError as e:
            raise EncodeError(f"Cannot encode {type(value).__name__} as JSON: {e}") from e

    def unmarshal(self, data: bytes, target: Any) -> Any:
        """Decode JSON bytes into target."""
        try:
            adapter = _adapter(target)
        except TypeError:
            # Unhashable or unsupported target, build an uncached adapter
            try:
                adapter = _build_adapter(target)
            except TypeError as e:
                raise DecodeError(f"Unsupported decode target {target!r}: {e}") from e

        try:
            return adapter.validate_json(data)
        except ValueError as e:
            raise DecodeError(f"Cannot decode JSON into {target!r}: {e}") from e
