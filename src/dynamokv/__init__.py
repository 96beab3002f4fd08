"""dynamokv - Key-value store adapter for DynamoDB tables."""

from dynamokv.backends import DynamoDBStore, MemoryStore
from dynamokv.config import Config, StoreConfig
from dynamokv.encoding import JSONCodec, PickleCodec, get_codec
from dynamokv.exceptions import (
    CodecError,
    ConfigError,
    DecodeError,
    EncodeError,
    StoreConnectionError,
    StoreError,
    TableNotFoundError,
    ValidationError,
)
from dynamokv.observability import (
    StoreLogger,
    StructuredFormatter,
    Timer,
    configure_logging,
    emit_timer,
    get_logger,
    register_metric_callback,
)
from dynamokv.plugins import create_store, create_store_from_config
from dynamokv.protocols import Codec, DynamoDBClient, Store

__version__ = "0.1.0"
__all__ = [
    # Stores
    "DynamoDBStore",
    "MemoryStore",
    "Store",
    "create_store",
    "create_store_from_config",
    # Configuration
    "Config",
    "StoreConfig",
    # Encoding
    "Codec",
    "JSONCodec",
    "PickleCodec",
    "get_codec",
    # Clients
    "DynamoDBClient",
    # Errors
    "CodecError",
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "StoreConnectionError",
    "StoreError",
    "TableNotFoundError",
    "ValidationError",
    # Observability
    "StoreLogger",
    "StructuredFormatter",
    "Timer",
    "configure_logging",
    "emit_timer",
    "get_logger",
    "register_metric_callback",
]
