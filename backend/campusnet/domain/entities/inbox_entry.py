"""
InboxEntry - A received message joined with its sender's display fields.
"""

from dataclasses import dataclass

from campusnet.domain.entities.message import Message

UNKNOWN_SENDER_NAME = "Unknown"
UNKNOWN_SENDER_EMAIL = ""


@dataclass(frozen=True)
class InboxEntry:
    message: Message
    sender_name: str = UNKNOWN_SENDER_NAME
    sender_email: str = UNKNOWN_SENDER_EMAIL
