"""Message DTOs for API responses."""

from datetime import datetime

from pydantic import BaseModel

from campusnet.domain.entities.inbox_entry import InboxEntry
from campusnet.domain.entities.message import Message


class MessageDTO(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    subject: str
    content: str
    read: bool = False
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            sender_id=message.sender_id.value,
            receiver_id=message.receiver_id.value,
            subject=message.subject,
            content=message.content,
            read=message.read,
            created_at=message.created_at,
        )


class InboxEntryDTO(MessageDTO):
    """A received message with the sender's display fields joined in."""

    sender_name: str
    sender_email: str

    @classmethod
    def from_entry(cls, entry: InboxEntry) -> "InboxEntryDTO":
        return cls(
            **MessageDTO.from_entity(entry.message).model_dump(),
            sender_name=entry.sender_name,
            sender_email=entry.sender_email,
        )
