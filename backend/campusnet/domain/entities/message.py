"""
Message Entity - An inbox message between two users.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from campusnet.domain.exceptions.access_denied import AccessDeniedError
from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.services.clock import utc_now
from campusnet.domain.value_objects.message_id import MessageId
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    sender_id: UserId
    receiver_id: UserId
    subject: str
    content: str
    created_at: datetime
    read: bool = False

    def __post_init__(self):
        if not self.subject or not self.subject.strip():
            raise DomainValidationError("Message subject is required")
        if not self.content or not self.content.strip():
            raise DomainValidationError("Message content is required")

    @classmethod
    def create(
        cls, sender_id: UserId, receiver_id: UserId, subject: str, content: str
    ) -> Message:
        """Factory method to create a new unread Message with a generated ID and timestamp."""
        return cls(
            id=MessageId.generate(),
            sender_id=sender_id,
            receiver_id=receiver_id,
            subject=subject,
            content=content,
            created_at=utc_now(),
            read=False,
        )

    def mark_read(self, caller_id: UserId) -> bool:
        """
        Flip `read` to True on behalf of the receiver.

        Returns True if the flag changed, False if it was already read.
        Raises AccessDeniedError for anyone but the receiver, whatever the
        current read state.
        """
        if caller_id != self.receiver_id:
            raise AccessDeniedError("Only the receiver can mark a message as read")
        if self.read:
            return False
        self.read = True
        return True
