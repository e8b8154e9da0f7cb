"""
Index Maintainer - keeps relationship pointers in step with entity lifecycle.

On create, one pointer is written per foreign key present in the record
(`relation:{parentId}:{child}:{id}` = id). On delete, exactly that same set
is removed; it is recomputed from the record with `pointer_keys`, so no
separate bookkeeping is stored. Entity bodies are never touched here.

Failures are not rolled back. A pointer left behind by a half-finished
operation is harmless because readers drop pointers whose entity is gone.
"""

import logging
from typing import Any, Mapping

from campusnet.domain.ports.kv_store import KeyValueStore
from campusnet.domain.services.relationship_index import EntityKind, pointer_keys

logger = logging.getLogger(__name__)


class IndexMaintainer:
    def __init__(self, kv: KeyValueStore):
        self._kv = kv

    async def add_pointers(self, kind: EntityKind, record: Mapping[str, Any]) -> list[str]:
        keys = pointer_keys(kind, record)
        for key in keys:
            try:
                await self._kv.set(key, record["id"])
            except Exception as e:
                logger.error(f"[Index] Failed to write pointer {key}: {e}")
                raise
        logger.debug(f"[Index] Added {len(keys)} pointers for {kind.value}:{record['id']}")
        return keys

    async def remove_pointers(
        self, kind: EntityKind, record: Mapping[str, Any]
    ) -> list[str]:
        keys = pointer_keys(kind, record)
        for key in keys:
            try:
                await self._kv.delete(key)
            except Exception as e:
                logger.error(f"[Index] Failed to remove pointer {key}: {e}")
                raise
        logger.debug(
            f"[Index] Removed {len(keys)} pointers for {kind.value}:{record['id']}"
        )
        return keys
