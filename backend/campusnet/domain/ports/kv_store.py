"""
Key-Value Store Port - durable mapping from string key to a JSON-able value.

Implementations:
- campusnet/infrastructure/kv/in_memory_kv_store.py
- campusnet/infrastructure/kv/redis_kv_store.py

Every operation is atomic for a single key only. Nothing here offers
cross-key transactions, so callers order their multi-key writes instead.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class KeyValueStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None: ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the key; deleting an absent key is not an error."""

    @abstractmethod
    async def scan_prefix(self, prefix: str) -> list[Any]:
        """Return the values of all keys starting with `prefix`, ordered by key."""
