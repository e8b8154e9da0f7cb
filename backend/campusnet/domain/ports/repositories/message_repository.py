"""
Message Repository Port - Interface for message persistence.
Implementation: campusnet/infrastructure/persistence/kv_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from campusnet.domain.entities.inbox_entry import InboxEntry
from campusnet.domain.entities.message import Message
from campusnet.domain.value_objects.message_id import MessageId
from campusnet.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def save(self, message: Message) -> None:
        """Write the message once and fan it out to the receiver's inbox and sender's sent list."""

    @abstractmethod
    async def update(
        self, message_id: MessageId, changes: dict[str, Any]
    ) -> Optional[Message]:
        """Read-merge-write of the stored record; None if the message is gone."""

    @abstractmethod
    async def list_sent(self, user_id: UserId) -> list[Message]: ...

    @abstractmethod
    async def list_inbox_with_sender(self, user_id: UserId) -> list[InboxEntry]: ...
