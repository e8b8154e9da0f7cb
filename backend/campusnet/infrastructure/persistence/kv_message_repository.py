"""
KV Message Repository Implementation.

Record `message:{id}` = {id, senderId, receiverId, subject, content, read, createdAt}

Fan-out on save: the body is written once, then two pointers
- `user:{receiverId}:inbox:{id}` = id
- `user:{senderId}:sent:{id}` = id
so neither list duplicates message content.
"""

import logging
from typing import Any, Optional

from campusnet.domain.entities.inbox_entry import (
    UNKNOWN_SENDER_EMAIL,
    UNKNOWN_SENDER_NAME,
    InboxEntry,
)
from campusnet.domain.entities.message import Message
from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.ports.repositories.message_repository import MessageRepository
from campusnet.domain.services.clock import format_timestamp, parse_timestamp
from campusnet.domain.services.relationship_index import (
    ChildKind,
    EntityKind,
    Relation,
)
from campusnet.domain.value_objects.message_id import MessageId
from campusnet.domain.value_objects.user_id import UserId
from campusnet.infrastructure.persistence.kv_entity_store import KvEntityStore, Record
from campusnet.infrastructure.persistence.relation_resolver import RelationResolver

logger = logging.getLogger(__name__)

# entity attribute → record field; everything else is fixed at send time
_FIELD_NAMES = {"read": "read"}


class KvMessageRepository(MessageRepository):
    def __init__(self, entities: KvEntityStore, resolver: RelationResolver):
        self._entities = entities
        self._resolver = resolver

    def _to_entity(self, record: Record) -> Message:
        return Message(
            id=MessageId(record["id"]),
            sender_id=UserId(record["senderId"]),
            receiver_id=UserId(record["receiverId"]),
            subject=record["subject"],
            content=record["content"],
            created_at=parse_timestamp(record["createdAt"]),
            read=bool(record.get("read", False)),
        )

    def _to_record(self, message: Message) -> Record:
        return {
            "id": message.id.value,
            "senderId": message.sender_id.value,
            "receiverId": message.receiver_id.value,
            "subject": message.subject,
            "content": message.content,
            "read": message.read,
            "createdAt": format_timestamp(message.created_at),
        }

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        record = await self._entities.read(EntityKind.MESSAGE, message_id.value)
        return self._to_entity(record) if record else None

    async def save(self, message: Message) -> None:
        await self._entities.create(EntityKind.MESSAGE, self._to_record(message))

    async def update(
        self, message_id: MessageId, changes: dict[str, Any]
    ) -> Optional[Message]:
        current = await self._entities.read(EntityKind.MESSAGE, message_id.value)
        if current is None:
            return None

        unknown = set(changes) - set(_FIELD_NAMES)
        if unknown:
            raise DomainValidationError(f"Not updatable: {', '.join(sorted(unknown))}")

        # Untouched fields go back exactly as stored
        merged = {**current, **{_FIELD_NAMES[k]: v for k, v in changes.items()}}
        await self._entities.write(EntityKind.MESSAGE, merged)
        logger.info(f"[Messages] Updated {sorted(changes)} for message {message_id.value}")
        return self._to_entity(merged)

    async def list_sent(self, user_id: UserId) -> list[Message]:
        records = await self._resolver.list_children(
            Relation.USER, user_id.value, ChildKind.SENT
        )
        return [self._to_entity(r) for r in records]

    async def list_inbox_with_sender(self, user_id: UserId) -> list[InboxEntry]:
        joined = await self._resolver.list_inbox_with_sender(user_id.value)
        return [
            InboxEntry(
                message=self._to_entity(message),
                sender_name=(sender or {}).get("name") or UNKNOWN_SENDER_NAME,
                sender_email=(sender or {}).get("email") or UNKNOWN_SENDER_EMAIL,
            )
            for message, sender in joined
        ]
