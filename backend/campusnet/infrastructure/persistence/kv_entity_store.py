"""
KV Entity Store - generic `{kind}:{id}` record access.

Write ordering (no cross-key transactions are available):
- create: entity record first, then its pointers
- delete: entity record first, then its pointers

Either way the only inconsistency a concurrent reader can observe is a
pointer whose entity is missing, which readers treat as absence. An entity
that exists without its pointers would be hidden from listings, so that
order is never used.
"""

import logging
from typing import Any, Optional

from campusnet.domain.ports.kv_store import KeyValueStore
from campusnet.domain.services.relationship_index import (
    EntityKind,
    entity_key,
    entity_prefix,
)
from campusnet.infrastructure.persistence.index_maintainer import IndexMaintainer

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class KvEntityStore:
    def __init__(self, kv: KeyValueStore, index: IndexMaintainer):
        self._kv = kv
        self._index = index

    async def create(self, kind: EntityKind, record: Record) -> None:
        await self._kv.set(entity_key(kind, record["id"]), record)
        await self._index.add_pointers(kind, record)
        logger.info(f"[Entity] Created {kind.value}:{record['id']}")

    async def read(self, kind: EntityKind, entity_id: str) -> Optional[Record]:
        value = await self._kv.get(entity_key(kind, entity_id))
        if value is None:
            return None
        if not isinstance(value, dict):
            logger.warning(
                f"[Entity] {kind.value}:{entity_id} holds a non-record value, ignoring"
            )
            return None
        return value

    async def write(self, kind: EntityKind, record: Record) -> None:
        """Overwrite a record. Foreign keys never change, so pointers stay as they are."""
        await self._kv.set(entity_key(kind, record["id"]), record)

    async def delete(self, kind: EntityKind, record: Record) -> None:
        await self._kv.delete(entity_key(kind, record["id"]))
        await self._index.remove_pointers(kind, record)
        logger.info(f"[Entity] Deleted {kind.value}:{record['id']}")

    async def list_kind(self, kind: EntityKind) -> list[Record]:
        """
        All records of one kind.

        The `{kind}:` prefix also covers pointer keys such as
        `user:{id}:inbox:{messageId}`; those hold plain id strings and are
        skipped.
        """
        values = await self._kv.scan_prefix(entity_prefix(kind))
        return [value for value in values if isinstance(value, dict)]
