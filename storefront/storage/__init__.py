"""
Client-state storage.

Backends implement KeyValueStore; the catalog cache only sees a SnapshotPort.
The Redis backend lives in storefront.storage.redis_real and is imported
lazily by storefront.bootstrap.
"""

from .file_store import JsonFileKeyValueStore
from .memory import InMemoryKeyValueStore
from .ports import (
    KeyValueSnapshotPort,
    KeyValueStore,
    SnapshotCorruptError,
    SnapshotPort,
    StorageError,
    StorageQuotaExceededError,
)

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueSnapshotPort",
    "KeyValueStore",
    "SnapshotCorruptError",
    "SnapshotPort",
    "StorageError",
    "StorageQuotaExceededError",
]
