"""
MessageId Value Object - UUID wrapper for Message identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from campusnet.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class MessageId:
    value: str  # message_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise DomainValidationError("Message ID cannot be empty")
        try:
            UUID(self.value)
        except ValueError as e:
            raise DomainValidationError(f"Invalid Message ID: {self.value}") from e

    @classmethod
    def generate(cls) -> "MessageId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
