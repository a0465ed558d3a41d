"""
Persistence ports.

KeyValueStore is the storage backend (in-memory, JSON file or Redis).
SnapshotPort is the narrow interface the catalog cache talks to:

    load() -> snapshot | None
    save(snapshot) -> bool
    clear() -> None

The cache never touches a backend directly, so tests inject the in-memory
store and production wires Redis or a file in one place (storefront.bootstrap).
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """A backend could not read or write a value."""


class StorageQuotaExceededError(StorageError):
    """The backend refused a write because it is full."""


class SnapshotCorruptError(StorageError):
    """A stored snapshot exists but cannot be decoded."""


class KeyValueStore(ABC):
    """String key -> string value storage backend."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value. Raises StorageError on failure."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""

    def ping(self) -> bool:
        return True


class SnapshotPort(ABC):
    @abstractmethod
    def load(self) -> Optional[Any]:
        """
        Return the decoded snapshot, or None when nothing is stored.

        Raises SnapshotCorruptError when stored data cannot be decoded.
        """

    @abstractmethod
    def save(self, snapshot: List[Any]) -> bool:
        """Persist the full snapshot. Returns False instead of raising on failure."""

    @abstractmethod
    def clear(self) -> None:
        """Discard the persisted snapshot."""


class KeyValueSnapshotPort(SnapshotPort):
    """Stores the snapshot as one JSON blob under a fixed key."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        self.store = store
        self.key = key

    def load(self) -> Optional[Any]:
        try:
            raw = self.store.get(self.key)
        except StorageError as exc:
            raise SnapshotCorruptError(f"Could not read snapshot '{self.key}': {exc}") from exc
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError) as exc:
            raise SnapshotCorruptError(f"Snapshot '{self.key}' is not valid JSON: {exc}") from exc

    def save(self, snapshot: List[Any]) -> bool:
        payload = json.dumps(snapshot, ensure_ascii=False, default=str)
        try:
            self.store.set(self.key, payload)
            return True
        except StorageQuotaExceededError:
            logger.warning("Storage quota exceeded saving '%s'. Clearing old snapshot and retrying...", self.key)
            try:
                self.store.delete(self.key)
                self.store.set(self.key, payload)
                return True
            except StorageError as retry_exc:
                logger.error("Failed to save '%s' even after clearing: %s", self.key, retry_exc)
                return False
        except StorageError as exc:
            logger.error("Error saving '%s': %s", self.key, exc)
            return False

    def clear(self) -> None:
        try:
            self.store.delete(self.key)
        except StorageError as exc:
            logger.error("Error clearing '%s': %s", self.key, exc)
