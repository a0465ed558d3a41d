"""
In-memory key-value store for local development and tests.

Data lives for the lifetime of the object. An optional ``quota_bytes``
simulates a full browser-style store so callers can exercise their
quota-exceeded paths.
"""

from __future__ import annotations

from typing import Dict, Optional

from storefront.storage.ports import KeyValueStore, StorageQuotaExceededError


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, quota_bytes: Optional[int] = None) -> None:
        self._data: Dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
            if used + len(key) + len(value) > self.quota_bytes:
                raise StorageQuotaExceededError(
                    f"Quota of {self.quota_bytes} bytes exceeded writing '{key}'"
                )
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)
