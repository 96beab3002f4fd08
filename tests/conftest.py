"""Pytest configuration and fixtures."""

import copy
from typing import Any

import pytest
from botocore.exceptions import ClientError, ParamValidationError

from dynamokv.backends.dynamodb import DynamoDBStore
from dynamokv.backends.memory import MemoryStore


def client_error(code: str, operation: str, message: str = "") -> ClientError:
    """Build a botocore ClientError the way the service returns it."""
    return ClientError({"Error": {"Code": code, "Message": message or code}}, operation)


def check_table_name(name: str) -> None:
    """Reject table names the service's parameter validation rejects."""
    if not 3 <= len(name) <= 255:
        raise ParamValidationError(
            report=f"Invalid length for parameter TableName, value: {len(name)}, valid min length: 3"
        )


class FakeDynamoDBClient:
    """In-memory stand-in for the boto3 low-level DynamoDB client.

    Stores items in their wire shape and records every request in ``calls``.
    """

    def __init__(self, tables: tuple[str, ...] = ("kvstore",)) -> None:
        for name in tables:
            check_table_name(name)
        self.tables: dict[str, dict[str, dict[str, Any]]] = {name: {} for name in tables}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _table(self, name: str, operation: str) -> dict[str, dict[str, Any]]:
        check_table_name(name)
        if name not in self.tables:
            raise client_error(
                "ResourceNotFoundException", operation, "Requested resource not found"
            )
        return self.tables[name]

    def calls_to(self, method: str) -> list[dict[str, Any]]:
        return [params for name, params in self.calls if name == method]

    def describe_table(self, *, TableName: str) -> dict[str, Any]:
        self.calls.append(("describe_table", {"TableName": TableName}))
        self._table(TableName, "DescribeTable")
        return {"Table": {"TableName": TableName, "TableStatus": "ACTIVE"}}

    def put_item(self, *, TableName: str, Item: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("put_item", {"TableName": TableName, "Item": Item, **kwargs}))
        table = self._table(TableName, "PutItem")
        table[Item["k"]["S"]] = copy.deepcopy(Item)
        return {}

    def get_item(self, *, TableName: str, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("get_item", {"TableName": TableName, "Key": Key, **kwargs}))
        item = self._table(TableName, "GetItem").get(Key["k"]["S"])
        if item is None:
            return {}
        item = copy.deepcopy(item)
        if "ProjectionExpression" in kwargs:
            wanted = kwargs["ProjectionExpression"].split(",")
            item = {name: value for name, value in item.items() if name in wanted}
        return {"Item": item}

    def delete_item(self, *, TableName: str, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("delete_item", {"TableName": TableName, "Key": Key, **kwargs}))
        self._table(TableName, "DeleteItem").pop(Key["k"]["S"], None)
        return {}


@pytest.fixture
def fake_client():
    """A fake DynamoDB client with an existing table named "kvstore"."""
    return FakeDynamoDBClient()


@pytest.fixture
def dynamodb_store(fake_client):
    """A DynamoDB store on the fake client with the default JSON codec."""
    return DynamoDBStore(client=fake_client, table_name="kvstore")


@pytest.fixture(params=["dynamodb", "memory"])
def store(request, fake_client):
    """Every Store backend, for contract tests."""
    if request.param == "dynamodb":
        return DynamoDBStore(client=fake_client, table_name="kvstore")
    return MemoryStore()


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary for testing."""
    return {
        "store": {
            "backend": "dynamodb",
            "table_name": "kvstore",
            "codec": "json",
            "ttl": 3600,
            "region": "eu-west-1",
            "endpoint_url": "http://localhost:8000",
        },
        "logging": {"level": "DEBUG", "format": "text"},
    }


@pytest.fixture
def make_client():
    """Factory for fake DynamoDB clients with custom tables."""
    return FakeDynamoDBClient
