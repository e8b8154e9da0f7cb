"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from campusnet.domain.value_objects.user_id import UserId
from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.paper_id import PaperId
from campusnet.domain.value_objects.message_id import MessageId
from campusnet.domain.value_objects.user_role import UserRole

__all__ = [
    "UserId",
    "UserEmail",
    "DomainId",
    "PaperId",
    "MessageId",
    "UserRole",
]
