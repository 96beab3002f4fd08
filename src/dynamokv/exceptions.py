"""dynamokv exceptions."""


class StoreError(Exception):
    """Base exception for dynamokv."""

    pass


class ConfigError(StoreError):
    """Configuration error."""

    pass


class StoreConnectionError(StoreError):
    """The backing table could not be reached."""

    pass


class TableNotFoundError(StoreConnectionError):
    """The backing table does not exist."""

    pass


class ValidationError(StoreError, ValueError):
    """Invalid key, value or destination passed to a store operation."""

    pass


class CodecError(StoreError):
    """Value encoding or decoding error."""

    pass


class EncodeError(CodecError):
    """Failed to encode a value."""

    pass


class DecodeError(CodecError):
    """Failed to decode a stored value.

    Only raised for an item that exists, so the key was found.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
