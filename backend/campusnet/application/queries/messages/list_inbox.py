"""
ListInbox Query - received messages with sender name/email joined in.

Response format:
{
    "messages": [
        {"id": "...", "subject": "...", "read": false,
         "sender_name": "Dr. Smith", "sender_email": "smith@uni.edu", ...}
    ],
    "unread_count": 1
}

A sender whose profile cannot be found shows as "Unknown" with an empty
email; the message itself is still listed.
"""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.application.dto.message import InboxEntryDTO
from campusnet.domain.ports.repositories import MessageRepository
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class ListInboxResult:
    messages: list[InboxEntryDTO]
    unread_count: int


@dataclass(frozen=True)
class ListInboxQuery(Query[ListInboxResult]):
    user_id: UserId


class ListInboxHandler(QueryHandler[ListInboxResult]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListInboxQuery) -> ListInboxResult:
        entries = await self._message_repository.list_inbox_with_sender(query.user_id)
        return ListInboxResult(
            messages=[InboxEntryDTO.from_entry(e) for e in entries],
            unread_count=sum(1 for e in entries if not e.message.read),
        )
