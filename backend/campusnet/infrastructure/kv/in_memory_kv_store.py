"""
In-memory KeyValueStore for development and tests.

Values are deep-copied on the way in and out so callers can never mutate
stored state without going through `set`, which matches what a real store
(serialising to JSON) does.
"""

import copy
from typing import Any, Optional

from campusnet.domain.ports.kv_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def scan_prefix(self, prefix: str) -> list[Any]:
        return [
            copy.deepcopy(self._data[key])
            for key in sorted(self._data)
            if key.startswith(prefix)
        ]

    def keys(self) -> list[str]:
        """All stored keys, sorted. Handy for inspecting index state."""
        return sorted(self._data)
