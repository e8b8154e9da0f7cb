"""ListSent Query - messages the caller sent, newest first."""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.application.dto.message import MessageDTO
from campusnet.domain.ports.repositories import MessageRepository
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class ListSentResult:
    messages: list[MessageDTO]


@dataclass(frozen=True)
class ListSentQuery(Query[ListSentResult]):
    user_id: UserId


class ListSentHandler(QueryHandler[ListSentResult]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListSentQuery) -> ListSentResult:
        messages = await self._message_repository.list_sent(query.user_id)
        return ListSentResult(messages=[MessageDTO.from_entity(m) for m in messages])
