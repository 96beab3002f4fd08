"""Protocol interfaces for pluggable backends."""

from dynamokv.protocols.codec import Codec
from dynamokv.protocols.dynamodb_client import AttributeMap, DynamoDBClient
from dynamokv.protocols.store import Store

__all__ = [
    "AttributeMap",
    "Codec",
    "DynamoDBClient",
    "Store",
]
