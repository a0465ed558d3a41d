"""
Redis-backed key-value store for production when REDIS_URL is set.
Implements the same interface as storefront.storage.memory (in-memory stub).
"""

from __future__ import annotations

from typing import Optional

import redis

from storefront.storage.ports import KeyValueStore, StorageError, StorageQuotaExceededError


class RedisKeyValueStore(KeyValueStore):
    """
    Redis-backed client state. Keys are namespaced with ``prefix`` so several
    storefront sessions can share one server.
    """

    def __init__(self, url: Optional[str] = None, prefix: str = "storefront", client=None) -> None:
        if client is None and not url:
            raise ValueError("RedisKeyValueStore needs a url or a client")
        self._client = client or redis.from_url(url, decode_responses=True)
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(self._key(key))
        except redis.RedisError as exc:
            raise StorageError(f"Redis read failed for '{key}': {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(self._key(key), value)
        except redis.ResponseError as exc:
            if "OOM" in str(exc):
                raise StorageQuotaExceededError(f"Redis is out of memory writing '{key}'") from exc
            raise StorageError(f"Redis write failed for '{key}': {exc}") from exc
        except redis.RedisError as exc:
            raise StorageError(f"Redis write failed for '{key}': {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(self._key(key))
        except redis.RedisError as exc:
            raise StorageError(f"Redis delete failed for '{key}': {exc}") from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
