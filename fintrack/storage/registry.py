"""Mini README: Backend registry mapping names to key-value store classes.

Structure:
    * StorageBackendRegistry - registers backends and builds them from settings.

The ``storage_backend`` setting selects an entry by name. Additional
backends register themselves here; the ledger code never imports a concrete
backend directly.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from ..configuration import FinTrackSettings, get_settings
from ..logging_utils import get_logger
from .backends import FileKeyValueStore, InMemoryKeyValueStore
from .base import KeyValueStore

LOGGER = get_logger(__name__)


class StorageBackendRegistry:
    """Simple registry for mapping backend identifiers to classes."""

    def __init__(self) -> None:
        self._backends: Dict[str, Type[KeyValueStore]] = {}

    def register(self, backend: Type[KeyValueStore]) -> None:
        """Register a new backend class with the registry."""

        identifier = backend.backend_name.lower()
        LOGGER.debug("Registering storage backend '%s'", identifier)
        self._backends[identifier] = backend

    def available_backends(self) -> Iterable[str]:
        return sorted(self._backends.keys())

    def create(
        self, identifier: Optional[str] = None, *, settings: Optional[FinTrackSettings] = None
    ) -> KeyValueStore:
        """Instantiate the backend named ``identifier`` (defaults to the configured one)."""

        settings = settings or get_settings()
        name = (identifier or settings.storage_backend).lower()
        backend_cls = self._backends.get(name)
        if not backend_cls:
            raise KeyError(f"Unknown storage backend '{name}'")
        LOGGER.info("Creating storage backend '%s'", name)
        return backend_cls.from_settings(settings)


REGISTRY = StorageBackendRegistry()
REGISTRY.register(FileKeyValueStore)
REGISTRY.register(InMemoryKeyValueStore)
