"""Mini README: Concrete key-value backends for the FinTrack ledger.

Structure:
    * InMemoryKeyValueStore - dictionary backend with an optional byte quota.
    * FileKeyValueStore - one file per key, replaced atomically on write.

Both backends expose ``from_settings`` so the registry can build them from
``FinTrackSettings`` without knowing their constructor arguments.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..configuration import FinTrackSettings
from ..logging_utils import get_logger
from .base import KeyValueStore, StorageQuotaExceeded

LOGGER = get_logger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Volatile backend, mostly useful for tests and throwaway sessions."""

    backend_name = "memory"

    def __init__(self, quota_bytes: Optional[int] = None) -> None:
        self._entries: Dict[str, bytes] = {}
        self.quota_bytes = quota_bytes

    @classmethod
    def from_settings(cls, settings: FinTrackSettings) -> "InMemoryKeyValueStore":
        return cls(quota_bytes=settings.storage_quota_bytes)

    def _usage_with(self, key: str, value: bytes) -> int:
        usage = sum(
            len(stored_key) + len(stored)
            for stored_key, stored in self._entries.items()
            if stored_key != key
        )
        return usage + len(key) + len(value)

    def get(self, key: str) -> Optional[bytes]:
        return self._entries.get(key)

    def set(self, key: str, value: bytes) -> None:
        if self.quota_bytes is not None:
            required = self._usage_with(key, value)
            if required > self.quota_bytes:
                raise StorageQuotaExceeded(
                    f"Writing '{key}' needs {required} bytes; quota is {self.quota_bytes}"
                )
        self._entries[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)


class FileKeyValueStore(KeyValueStore):
    """Persist each key as ``<directory>/<key>.json``."""

    backend_name = "file"

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    @classmethod
    def from_settings(cls, settings: FinTrackSettings) -> "FileKeyValueStore":
        return cls(settings.data_directory)

    def _path_for(self, key: str) -> Path:
        if not key or any(separator in key for separator in ("/", "\\")) or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        path = self._path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        descriptor, temp_name = tempfile.mkstemp(prefix=f".{key}.", dir=self.directory)
        try:
            with os.fdopen(descriptor, "wb") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_name, path)
        except OSError:
            Path(temp_name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Wrote %s bytes to %s", len(value), path)

    def delete(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)
