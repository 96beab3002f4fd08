"""DynamoDB client protocol.

Matches the subset of the boto3 low-level ``dynamodb`` client the store
calls. Attribute values use the wire shape, e.g. ``{"S": "key"}``.
"""

from typing import Any, Protocol, runtime_checkable

AttributeMap = dict[str, dict[str, Any]]


@runtime_checkable
class DynamoDBClient(Protocol):
    """Minimal DynamoDB client protocol."""

    def put_item(self, *, TableName: str, Item: AttributeMap, **kwargs: Any) -> dict[str, Any]: ...

    def get_item(self, *, TableName: str, Key: AttributeMap, **kwargs: Any) -> dict[str, Any]: ...

    def delete_item(self, *, TableName: str, Key: AttributeMap, **kwargs: Any) -> dict[str, Any]: ...

    def describe_table(self, *, TableName: str) -> dict[str, Any]: ...
