"""Binary codec based on pickle.

Only decode data written by a trusted party: unpickling can execute code.
"""

import pickle
from typing import Any, get_origin

from dynamokv.exceptions import DecodeError, EncodeError


class PickleCodec:
    """Encodes arbitrary Python objects with pickle."""

    name = "pickle"

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self.protocol = protocol

    def marshal(self, value: Any) -> bytes:
        """Pickle a value."""
        try:
            return pickle.dumps(value, protocol=self.protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise EncodeError(f"Cannot pickle {type(value).__name__}: {e}") from e

    def unmarshal(self, data: bytes, target: Any) -> Any:
        """Unpickle data and check it is an instance of target.

        Generic aliases are checked against their origin (``dict[str, int]``
        against ``dict``). ``typing.Any`` and non-class targets are not checked.
        """
        try:
            value = pickle.loads(data)
        except (pickle.UnpicklingError, EOFError, ValueError, TypeError, AttributeError, ImportError) as e:
            raise DecodeError(f"Cannot unpickle stored value: {e}") from e

        if target is Any:
            return value
        expected = get_origin(target) or target
        if isinstance(expected, type) and not isinstance(value, expected):
            raise DecodeError(
                f"Stored value is {type(value).__name__}, expected {expected.__name__}"
            )
        return value
