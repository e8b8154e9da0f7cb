"""
SendMessage Command.

The message body is written once; the repository fans it out as two
pointers, one into the receiver's inbox and one into the sender's sent list.
"""

import logging
from dataclasses import dataclass

from campusnet.application.common.interfaces import Command, CommandHandler
from campusnet.domain.entities.message import Message
from campusnet.domain.exceptions import ReceiverNotFoundError
from campusnet.domain.ports.repositories import MessageRepository, UserRepository
from campusnet.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    sender_id: UserId
    receiver_id: UserId
    subject: str
    content: str


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        user_repository: UserRepository,
        message_repository: MessageRepository,
    ):
        self._user_repository = user_repository
        self._message_repository = message_repository

    async def execute(self, command: SendMessageCommand) -> Message:
        if not await self._user_repository.get_by_id(command.receiver_id):
            raise ReceiverNotFoundError(command.receiver_id.value)

        message = Message.create(
            sender_id=command.sender_id,
            receiver_id=command.receiver_id,
            subject=command.subject,
            content=command.content,
        )
        await self._message_repository.save(message)
        logger.info(
            f"[Messages] {message.id.value} sent from {command.sender_id.value} "
            f"to {command.receiver_id.value}"
        )
        return message
