"""Storage backends."""

from dynamokv.backends.dynamodb import DynamoDBStore
from dynamokv.backends.memory import MemoryStore

__all__ = ["DynamoDBStore", "MemoryStore"]
