"""Mini README: Abstract key-value byte store used for ledger persistence.

Structure:
    * StorageQuotaExceeded - raised when a backend runs out of room.
    * KeyValueStore - abstract interface implemented by storage backends.

Backends hold opaque bytes under string keys. They raise ``OSError`` (or
``StorageQuotaExceeded``) when a write cannot be completed; translating that
into ledger errors is the persistence adapter's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..configuration import FinTrackSettings


class StorageQuotaExceeded(OSError):
    """Raised when a write would push a backend beyond its quota."""


class KeyValueStore(ABC):
    """Base interface for durable key-value byte stores."""

    backend_name: str = "generic"

    @classmethod
    def from_settings(cls, settings: "FinTrackSettings") -> "KeyValueStore":
        """Build the backend from runtime settings; override when arguments are needed."""

        return cls()

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the bytes stored under ``key`` or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value atomically."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
