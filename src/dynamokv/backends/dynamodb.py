"""DynamoDB key-value storage backend."""

import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from dynamokv.config import StoreConfig
from dynamokv.encoding import JSON, get_codec
from dynamokv.exceptions import (
    CodecError,
    ConfigError,
    DecodeError,
    EncodeError,
    StoreConnectionError,
    TableNotFoundError,
)
from dynamokv.observability import Timer, emit_timer, get_logger
from dynamokv.protocols import AttributeMap, Codec, DynamoDBClient
from dynamokv.utils.validation import check_key, check_key_and_value, normalize_ttl

# Item attribute names
KEY_ATTR = "k"
VALUE_ATTR = "v"
TTL_ATTR = "ttl"

# Upper bound for the table check done on construction, in seconds. The
# check runs on a daemon thread, so a hung call never delays process exit.
DESCRIBE_TABLE_TIMEOUT = 5.0


def describe_table(
    client: DynamoDBClient,
    table_name: str,
    timeout: float = DESCRIBE_TABLE_TIMEOUT,
) -> dict[str, Any]:
    """Describe a table, waiting at most ``timeout`` seconds.

    The call runs on a daemon thread. On timeout the thread is abandoned;
    the client's own socket timeouts end it eventually.

    Raises:
        TableNotFoundError: If the table does not exist
        StoreConnectionError: If the table cannot be reached in time
    """
    outcome: dict[str, Any] = {}

    def run() -> None:
        try:
            outcome["response"] = client.describe_table(TableName=table_name)
        except Exception as e:
            outcome["error"] = e

    thread = threading.Thread(target=run, name="dynamokv-describe", daemon=True)
    thread.start()
    thread.join(timeout)

    if thread.is_alive():
        raise StoreConnectionError(
            f"Timed out after {timeout}s describing DynamoDB table '{table_name}'"
        )

    error = outcome.get("error")
    if isinstance(error, ClientError):
        if error.response.get("Error", {}).get("Code") == "ResourceNotFoundException":
            raise TableNotFoundError(f"DynamoDB table '{table_name}' does not exist") from error
        raise StoreConnectionError(f"Cannot describe DynamoDB table '{table_name}': {error}") from error
    if isinstance(error, BotoCoreError):
        raise StoreConnectionError(f"Cannot reach DynamoDB table '{table_name}': {error}") from error
    if error is not None:
        raise error
    return outcome["response"]


def create_client(config: StoreConfig) -> DynamoDBClient:
    """Create a boto3 DynamoDB client from configuration.

    Unset credentials and region fall back to boto3's resolution chain
    (environment, shared config files, instance metadata).
    """
    session = boto3.session.Session(
        aws_access_key_id=config.aws_access_key_id,
        aws_secret_access_key=config.aws_secret_access_key,
        region_name=config.region,
    )
    return session.client(
        "dynamodb",
        endpoint_url=config.endpoint_url,
        config=BotoConfig(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        ),
    )


class DynamoDBStore:
    """Key-value store backed by a DynamoDB table.

    Each key is one item: ``k`` (string) holds the key, ``v`` (binary) the
    codec output and, when a TTL is configured, ``ttl`` (number) the expiry
    in epoch seconds for DynamoDB's native TTL. The table must already exist
    with ``k`` as its partition key.

    The store holds no mutable state after construction and can be shared
    across threads.
    """

    def __init__(
        self,
        client: DynamoDBClient | None = None,
        table_name: str = "",
        codec: Codec | str | None = None,
        ttl: timedelta | float | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the store and check that the table exists.

        Args:
            client: DynamoDB client, e.g. ``boto3.client("dynamodb")``
            table_name: Name of an existing table
            codec: Codec instance or name. Defaults to JSON.
            ttl: Lifetime of written items (timedelta or seconds). None or 0
                 disables expiry.
            **kwargs: Ignored (for compatibility with other backends)

        Raises:
            ConfigError: If client or table_name is missing
            TableNotFoundError: If the table does not exist
            StoreConnectionError: If the table cannot be reached
        """
        if client is None:
            raise ConfigError("DynamoDBStore requires a DynamoDB client")
        if not table_name:
            raise ConfigError("DynamoDBStore requires table_name")

        self.ttl = normalize_ttl(ttl)
        if codec is None:
            self.codec: Codec = JSON
        elif isinstance(codec, str):
            self.codec = get_codec(codec)
        else:
            self.codec = codec

        describe_table(client, table_name)

        self.client = client
        self.table_name = table_name
        self._logger = get_logger(__name__, table=table_name)
        self._logger.info(
            f"Connected to DynamoDB table (codec: {self.codec.name})",
            extra={"op": "describe_table"},
        )

    @classmethod
    def from_config(
        cls,
        config: StoreConfig,
        client: DynamoDBClient | None = None,
        **kwargs: Any,
    ) -> "DynamoDBStore":
        """Create a store from configuration.

        Args:
            config: Store configuration
            client: Existing client to use instead of building one from config
            **kwargs: Ignored (for compatibility with other backends)
        """
        if client is None:
            client = create_client(config)
        return cls(
            client=client,
            table_name=config.table_name,
            codec=config.codec,
            ttl=config.ttl,
        )

    def _call(self, op: str, method: Callable[..., dict[str, Any]], **kwargs: Any) -> dict[str, Any]:
        """Invoke a client method, timing it."""
        with Timer() as t:
            response = method(TableName=self.table_name, **kwargs)
        emit_timer(f"dynamokv.dynamodb.{op}", t.duration_ms, {"table": self.table_name})
        self._logger.debug("DynamoDB call", extra={"op": op, "duration_ms": t.duration_ms})
        return response

    def _key(self, key: str) -> AttributeMap:
        return {KEY_ATTR: {"S": key}}

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any existing item for the key.

        Raises:
            ValidationError: If key is empty or value is None
            EncodeError: If the codec cannot encode the value
        """
        check_key_and_value(key, value)

        try:
            data = self.codec.marshal(value)
        except CodecError:
            raise
        except Exception as e:
            raise EncodeError(f"Cannot encode value for key '{key}': {e}") from e

        item = self._key(key)
        item[VALUE_ATTR] = {"B": data}
        if self.ttl is not None:
            expires_at = int(time.time() + self.ttl.total_seconds())
            item[TTL_ATTR] = {"N": str(expires_at)}

        self._call("put_item", self.client.put_item, Item=item)

    def get(self, key: str, target: Any) -> Any | None:
        """Get the value stored for key, decoded into target.

        Args:
            key: The key
            target: Type to decode into, e.g. ``dict``, a pydantic model or
                    ``typing.Any``

        Returns:
            The decoded value, or None if the key doesn't exist

        Raises:
            ValidationError: If key is empty or target is None
            DecodeError: If the item exists but cannot be decoded
        """
        check_key_and_value(key, target, name="target")

        response = self._call("get_item", self.client.get_item, Key=self._key(key))
        item = response.get("Item")
        if item is None:
            return None

        data = item.get(VALUE_ATTR, {}).get("B")
        if data is None:
            # Item without a value attribute is treated as not found
            self._logger.warning(
                "DynamoDB item has no value attribute",
                extra={"op": "get_item", "key": key},
            )
            return None

        try:
            return self.codec.unmarshal(data, target)
        except DecodeError as e:
            e.key = key
            raise
        except Exception as e:
            raise DecodeError(f"Cannot decode value for key '{key}': {e}", key=key) from e

    def contains(self, key: str) -> bool:
        """Check whether an item exists for key, without decoding it."""
        check_key(key)
        response = self._call(
            "get_item",
            self.client.get_item,
            Key=self._key(key),
            ProjectionExpression=KEY_ATTR,
        )
        return response.get("Item") is not None

    def delete(self, key: str) -> None:
        """Delete the item for key. No-op if the key doesn't exist.

        Raises:
            ValidationError: If key is empty
        """
        check_key(key)
        self._call("delete_item", self.client.delete_item, Key=self._key(key))

    def close(self) -> None:
        """Close the store.

        The client is owned by the caller, so this has no effect.
        """

    def __enter__(self) -> "DynamoDBStore":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
