"""
Messages API Router.

- POST /messages               → send
- GET  /messages/inbox         → {"messages": [...], "unread_count": n, "poll_seconds": s}
- GET  /messages/sent          → {"messages": [...]}
- PUT  /messages/{id}/read     → mark read (receiver only, idempotent)

There is no push channel; clients re-query the inbox every `poll_seconds`.
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, Field

from campusnet.application.commands.messages import (
    MarkMessageReadCommand,
    MarkMessageReadHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from campusnet.application.dto.message import InboxEntryDTO, MessageDTO
from campusnet.application.queries.messages import (
    ListInboxHandler,
    ListInboxQuery,
    ListSentHandler,
    ListSentQuery,
)
from campusnet.config.settings import Config
from campusnet.domain.exceptions import DomainValidationError, ReceiverNotFoundError
from campusnet.domain.value_objects.message_id import MessageId
from campusnet.domain.value_objects.user_id import UserId
from campusnet.presentation.dependencies.auth import AuthUser, get_current_user


class SendMessageRequest(BaseModel):
    receiver_id: str = Field(validation_alias=AliasChoices("receiver_id", "receiverId"))
    subject: str
    content: str


class InboxResponse(BaseModel):
    messages: list[InboxEntryDTO]
    unread_count: int
    poll_seconds: int


class SentResponse(BaseModel):
    messages: list[MessageDTO]


router = APIRouter(prefix="/messages", tags=["messages"])


def parse_receiver_id(value: str) -> UserId:
    """An id that cannot name any profile is an unknown receiver, not bad input."""
    try:
        return UserId(value)
    except DomainValidationError as e:
        raise ReceiverNotFoundError(value) from e


@router.post("", response_model=MessageDTO, status_code=status.HTTP_201_CREATED)
@inject
async def send_message(
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    message = await handler.execute(
        SendMessageCommand(
            sender_id=current_user.id,
            receiver_id=parse_receiver_id(request.receiver_id),
            subject=request.subject,
            content=request.content,
        )
    )
    return MessageDTO.from_entity(message)


@router.get("/inbox", response_model=InboxResponse)
@inject
async def list_inbox(
    handler: FromDishka[ListInboxHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListInboxQuery(user_id=current_user.id))
    return InboxResponse(
        messages=result.messages,
        unread_count=result.unread_count,
        poll_seconds=Config.INBOX_POLL_SECONDS,
    )


@router.get("/sent", response_model=SentResponse)
@inject
async def list_sent(
    handler: FromDishka[ListSentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListSentQuery(user_id=current_user.id))
    return SentResponse(messages=result.messages)


@router.put("/{message_id}/read", response_model=MessageDTO)
@inject
async def mark_read(
    message_id: str,
    handler: FromDishka[MarkMessageReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    message = await handler.execute(
        MarkMessageReadCommand(message_id=MessageId(message_id), user_id=current_user.id)
    )
    return MessageDTO.from_entity(message)
