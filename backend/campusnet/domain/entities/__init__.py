"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from campusnet.domain.entities.user import User
from campusnet.domain.entities.research_domain import ResearchDomain
from campusnet.domain.entities.paper import Paper
from campusnet.domain.entities.message import Message
from campusnet.domain.entities.inbox_entry import InboxEntry

__all__ = [
    "User",
    "ResearchDomain",
    "Paper",
    "Message",
    "InboxEntry",
]
