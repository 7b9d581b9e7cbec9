"""Record store for persisted entity collections.

Each collection (videos, notifications, monetization requests, payout
requests, creator stats, subscriptions, site event) lives under its own
namespaced key as one JSON document. Supports: in-memory, local filesystem
and Redis backends.

Operations are synchronous and last-write-wins. There is no locking and no
transaction spanning several collections.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, TypeVar

import redis
from pydantic import BaseModel, ValidationError

from streamora.core.config import settings
from streamora.core.exceptions import StorageError
from streamora.core.logging import log_warning

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


# Collection keys
VIDEOS_KEY = "videos"
NOTIFICATIONS_KEY = "notifications"
MONETIZATION_REQUESTS_KEY = "mon_requests"
PAYOUT_REQUESTS_KEY = "payout_requests"
USER_STATS_KEY = "user_stats"
SITE_EVENT_KEY = "site_event"
SUBSCRIPTIONS_KEY = "subscriptions"
USERS_KEY = "users"


@dataclass
class StoreConfig:
    """Record store configuration."""
    backend: str  # memory, local, redis
    key_prefix: str = "streamora_"
    local_path: str = "./storage"
    redis_url: str = "redis://localhost:6379/0"


class StoreBackend(ABC):
    """Abstract raw key/value backend holding serialized documents."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the raw document stored under key, or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a raw document under key."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""
        pass


class MemoryStoreBackend(StoreBackend):
    """Process-local backend, used for tests and throwaway sessions."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class LocalStoreBackend(StoreBackend):
    """Local filesystem backend: one JSON file per key."""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, key: str) -> Path:
        return self.base_path / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._get_full_path(key)
        try:
            if not path.exists():
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {key}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._get_full_path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise StorageError(f"Failed to write {key}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self._get_full_path(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {key}: {e}") from e


class RedisStoreBackend(StoreBackend):
    """Redis backend: one string value per key."""

    def __init__(self, redis_url: str = "", client: Optional[redis.Redis] = None):
        self.client = client or redis.Redis.from_url(redis_url, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(key)
        except redis.RedisError as e:
            raise StorageError(f"Failed to read {key}: {e}") from e
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(key, value)
        except redis.RedisError as e:
            raise StorageError(f"Failed to write {key}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except redis.RedisError as e:
            raise StorageError(f"Failed to delete {key}: {e}") from e


class RecordStore:
    """JSON collection store over a raw key/value backend.

    Reads never fail: a missing, unreadable or corrupt document degrades to
    the caller's default and a warning is logged. Writes raise StorageError.
    """

    _instance: Optional["RecordStore"] = None

    def __init__(
        self,
        backend: Optional[StoreBackend] = None,
        config: Optional[StoreConfig] = None,
    ):
        if config is None:
            config = StoreConfig(
                backend=settings.STORE_BACKEND,
                key_prefix=settings.STORE_KEY_PREFIX,
                local_path=settings.LOCAL_STORAGE_PATH,
                redis_url=settings.REDIS_URL,
            )

        self.config = config
        self.key_prefix = config.key_prefix
        self._backend = backend or self._create_backend(config)

    def _create_backend(self, config: StoreConfig) -> StoreBackend:
        """Create appropriate store backend."""
        backend_type = config.backend.lower()

        if backend_type == "memory":
            return MemoryStoreBackend()
        elif backend_type == "local":
            return LocalStoreBackend(config.local_path)
        elif backend_type == "redis":
            return RedisStoreBackend(config.redis_url)
        else:
            raise ValueError(f"Unsupported store backend: {backend_type}")

    @classmethod
    def in_memory(cls, key_prefix: str = "streamora_") -> "RecordStore":
        """Build a store backed by process memory."""
        return cls(
            backend=MemoryStoreBackend(),
            config=StoreConfig(backend="memory", key_prefix=key_prefix),
        )

    @classmethod
    def get_instance(cls) -> "RecordStore":
        """Get singleton store instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _full_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    # ==================== Single documents ====================

    def read(self, key: str, default: Any = None) -> Any:
        """Read and decode the document under key."""
        full_key = self._full_key(key)
        try:
            raw = self._backend.get(full_key)
        except StorageError as e:
            log_warning(logger, "Store read failed, using default", store_key=full_key, error=str(e))
            return copy.deepcopy(default)

        if raw is None:
            return copy.deepcopy(default)

        try:
            return json.loads(raw)
        except ValueError as e:
            log_warning(logger, "Corrupt document, using default", store_key=full_key, error=str(e))
            return copy.deepcopy(default)

    def write(self, key: str, value: Any) -> None:
        """Encode and store value under key."""
        self._backend.set(self._full_key(key), json.dumps(value))

    def remove(self, key: str) -> None:
        """Drop the document under key."""
        self._backend.delete(self._full_key(key))

    # ==================== List collections ====================

    def list_records(self, key: str) -> list[dict]:
        """Return every record of a list collection in stored order."""
        records = self.read(key, [])
        if not isinstance(records, list):
            log_warning(logger, "Collection is not a list, using empty", store_key=self._full_key(key))
            return []
        return [r for r in records if isinstance(r, dict)]

    def insert(self, key: str, record: dict, prepend: bool = True) -> dict:
        """Add a record without any identity check."""
        records = self.list_records(key)
        if prepend:
            records.insert(0, record)
        else:
            records.append(record)
        self.write(key, records)
        return record

    def find_by_field(self, key: str, field: str, value: Any) -> Optional[dict]:
        """Return the first record whose field equals value."""
        for record in self.list_records(key):
            if record.get(field) == value:
                return record
        return None

    def upsert_by_field(
        self,
        key: str,
        field: str,
        record: dict,
        prepend: bool = True,
    ) -> bool:
        """Replace the record matching record[field] in place, or add it.

        Returns:
            True when an existing record was replaced
        """
        records = self.list_records(key)
        for idx, existing in enumerate(records):
            if existing.get(field) == record.get(field):
                records[idx] = record
                self.write(key, records)
                return True

        if prepend:
            records.insert(0, record)
        else:
            records.append(record)
        self.write(key, records)
        return False

    def update_by_field(
        self,
        key: str,
        field: str,
        value: Any,
        changes: dict,
    ) -> Optional[dict]:
        """Apply changes to the first record whose field equals value."""
        records = self.list_records(key)
        for record in records:
            if record.get(field) == value:
                record.update(changes)
                self.write(key, records)
                return record
        return None

    def delete_by_field(self, key: str, field: str, value: Any) -> int:
        """Delete every record whose field equals value.

        Returns:
            Number of records removed
        """
        records = self.list_records(key)
        kept = [r for r in records if r.get(field) != value]
        removed = len(records) - len(kept)
        if removed:
            self.write(key, kept)
        return removed

    # ==================== Map collections ====================

    def entries(self, key: str) -> dict[str, Any]:
        """Return a map collection."""
        mapping = self.read(key, {})
        if not isinstance(mapping, dict):
            log_warning(logger, "Collection is not a map, using empty", store_key=self._full_key(key))
            return {}
        return mapping

    def get_entry(self, key: str, entry_key: str) -> Optional[Any]:
        """Return one entry of a map collection."""
        return self.entries(key).get(entry_key)

    def put_entry(self, key: str, entry_key: str, value: Any) -> None:
        """Set one entry of a map collection."""
        mapping = self.entries(key)
        mapping[entry_key] = value
        self.write(key, mapping)


def get_store() -> RecordStore:
    """Get the default record store instance."""
    return RecordStore.get_instance()


def parse_records(model: type[ModelT], records: list[dict], collection: str) -> list[ModelT]:
    """Validate raw records into model instances, skipping malformed ones."""
    parsed = []
    for record in records:
        try:
            parsed.append(model.model_validate(record))
        except ValidationError as e:
            log_warning(
                logger,
                "Skipping malformed record",
                collection=collection,
                record_id=record.get("id"),
                error=str(e),
            )
    return parsed
