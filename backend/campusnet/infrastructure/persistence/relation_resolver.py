"""
Relation Resolver - read-side joins over pointer indexes.

list_children:
    1. Prefix-scan `relation:{parentId}:{child}:` for pointer values (ids)
    2. Materialise the ids through the entity store, all reads in flight at once
    3. Drop pointers whose entity is gone (transient after a delete)
    4. Sort newest first by createdAt, ties broken by id (both descending)

All reads are side-effect free, so clients can poll them as often as they
like.
"""

import asyncio
import logging
from typing import Any, Optional

from campusnet.domain.ports.kv_store import KeyValueStore
from campusnet.domain.services.relationship_index import (
    CHILD_ENTITY,
    ChildKind,
    EntityKind,
    Relation,
    index_prefix,
)
from campusnet.infrastructure.persistence.kv_entity_store import KvEntityStore, Record

logger = logging.getLogger(__name__)


def newest_first(records: list[Record]) -> list[Record]:
    return sorted(
        records,
        key=lambda r: (str(r.get("createdAt") or ""), str(r.get("id") or "")),
        reverse=True,
    )


class RelationResolver:
    def __init__(self, kv: KeyValueStore, entities: KvEntityStore):
        self._kv = kv
        self._entities = entities

    async def list_children(
        self, relation: Relation, parent_id: str, child: ChildKind
    ) -> list[Record]:
        kind = CHILD_ENTITY[ChildKind(child)]
        prefix = index_prefix(relation, parent_id, child)
        pointers = await self._kv.scan_prefix(prefix)

        child_ids = []
        for child_id in pointers:
            if not isinstance(child_id, str):
                logger.warning(f"[Resolver] Non-pointer value under {prefix}, skipping")
                continue
            child_ids.append(child_id)

        fetched = await asyncio.gather(
            *(self._entities.read(kind, child_id) for child_id in child_ids)
        )
        records = []
        for child_id, record in zip(child_ids, fetched):
            if record is None:
                logger.debug(f"[Resolver] Dangling pointer {prefix}{child_id}, skipping")
                continue
            records.append(record)

        return newest_first(records)

    async def list_inbox_with_sender(
        self, user_id: str
    ) -> list[tuple[Record, Optional[Record]]]:
        """
        Inbox messages paired with their sender's user record.

        A sender that cannot be resolved is paired as None; the message is
        still returned.
        """
        messages = await self.list_children(Relation.USER, user_id, ChildKind.INBOX)

        # One read per distinct sender
        sender_ids: list[Any] = list(
            dict.fromkeys(m.get("senderId") for m in messages if m.get("senderId"))
        )
        fetched = await asyncio.gather(
            *(self._entities.read(EntityKind.USER, sender_id) for sender_id in sender_ids)
        )
        senders: dict[Any, Optional[Record]] = dict(zip(sender_ids, fetched))
        return [(message, senders.get(message.get("senderId"))) for message in messages]
