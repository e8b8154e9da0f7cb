"""Mark Message Read Command - receiver only, idempotent."""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Command, CommandHandler
from campusnet.domain.entities.message import Message
from campusnet.domain.exceptions import EntityNotFoundError
from campusnet.domain.ports.repositories import MessageRepository
from campusnet.domain.value_objects.message_id import MessageId
from campusnet.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class MarkMessageReadCommand(Command[Message]):
    message_id: MessageId
    user_id: UserId


class MarkMessageReadHandler(CommandHandler[Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: MarkMessageReadCommand) -> Message:
        message = await self._message_repository.get_by_id(command.message_id)
        if not message:
            raise EntityNotFoundError(f"Message {command.message_id.value} not found")

        # Already-read messages skip the write
        if message.mark_read(command.user_id):
            await self._message_repository.update(message.id, {"read": True})
        return message
