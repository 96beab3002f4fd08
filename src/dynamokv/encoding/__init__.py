"""Value codecs."""

from dynamokv.encoding.json_codec import JSONCodec
from dynamokv.encoding.pickle_codec import PickleCodec
from dynamokv.exceptions import ConfigError
from dynamokv.protocols import Codec

JSON = JSONCodec()
PICKLE = PickleCodec()

CODECS: dict[str, Codec] = {
    JSON.name: JSON,
    PICKLE.name: PICKLE,
}


def get_codec(name: str) -> Codec:
    """Get a codec by name ("json" or "pickle").

    Raises:
        ConfigError: If no codec is registered under that name
    """
    try:
        return CODECS[name]
    except KeyError:
        available = ", ".join(sorted(CODECS))
        raise ConfigError(f"Unknown codec '{name}'. Available: {available}") from None


__all__ = ["CODECS", "JSON", "JSONCodec", "PICKLE", "PickleCodec", "get_codec"]
