"""Mini README: Durable storage for the FinTrack ledger.

The package is divided into ``base`` for the abstract key-value store,
``backends`` for the in-memory and file implementations, ``registry`` for
name-based backend selection, ``codec`` for the JSON wire format and
``adapter`` for the load/save protocol used by the ledger session.
"""

from .adapter import LAST_SAVED_KEY, TRANSACTIONS_KEY, LoadResult, PersistenceAdapter
from .backends import FileKeyValueStore, InMemoryKeyValueStore
from .base import KeyValueStore, StorageQuotaExceeded
from .codec import TransactionCodec
from .registry import REGISTRY, StorageBackendRegistry

__all__ = [
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "LAST_SAVED_KEY",
    "LoadResult",
    "PersistenceAdapter",
    "REGISTRY",
    "StorageBackendRegistry",
    "StorageQuotaExceeded",
    "TRANSACTIONS_KEY",
    "TransactionCodec",
]
