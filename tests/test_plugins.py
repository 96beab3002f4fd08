"""Tests for backend discovery."""

import pytest

from dynamokv.backends.dynamodb import DynamoDBStore
from dynamokv.backends.memory import MemoryStore
from dynamokv.config import StoreConfig
from dynamokv.exceptions import ConfigError
from dynamokv.plugins import (
    create_store,
    create_store_from_config,
    discover_backends,
    get_backend,
)


class TestDiscovery:
    """Tests for entry point discovery."""

    def test_builtin_backends_registered(self):
        """Both built-in backends are registered."""
        backends = discover_backends()
        assert backends["dynamodb"] is DynamoDBStore
        assert backends["memory"] is MemoryStore

    def test_get_backend(self):
        """Backends resolve by name."""
        assert get_backend("memory") is MemoryStore

    def test_unknown_backend(self):
        """Unknown names list what is available."""
        with pytest.raises(ConfigError, match="dynamodb, memory"):
            get_backend("redis")


class TestCreateStore:
    """Tests for store factories."""

    def test_create_memory_store(self):
        """create_store passes kwargs to the backend."""
        store = create_store("memory", codec="pickle")
        assert isinstance(store, MemoryStore)
        assert store.codec.name == "pickle"

    def test_create_dynamodb_store(self, fake_client):
        """create_store builds a DynamoDB store on the given client."""
        store = create_store("dynamodb", client=fake_client, table_name="kvstore", ttl=30)
        assert isinstance(store, DynamoDBStore)
        assert store.ttl.total_seconds() == 30

    def test_from_config_dynamodb(self, fake_client):
        """DynamoDB stores are built through from_config."""
        config = StoreConfig(backend="dynamodb", table_name="kvstore", codec="pickle")

        store = create_store_from_config(config, client=fake_client)

        assert isinstance(store, DynamoDBStore)
        assert store.codec.name == "pickle"
        assert fake_client.calls == [("describe_table", {"TableName": "kvstore"})]

    def test_from_config_passes_extra_kwargs(self, fake_client):
        """Backend-specific options don't break the DynamoDB backend."""
        config = StoreConfig(backend="dynamodb", table_name="kvstore")

        store = create_store_from_config(config, client=fake_client, namespace="x")

        assert isinstance(store, DynamoDBStore)

    def test_from_config_memory(self):
        """Memory stores get codec and TTL from config."""
        config = StoreConfig(backend="memory", ttl=5)

        store = create_store_from_config(config)

        assert isinstance(store, MemoryStore)
        assert store.ttl.total_seconds() == 5

    def test_from_config_missing_table(self, fake_client):
        """Config without a table name fails for DynamoDB."""
        with pytest.raises(ConfigError, match="table_name"):
            create_store_from_config(StoreConfig(), client=fake_client)
