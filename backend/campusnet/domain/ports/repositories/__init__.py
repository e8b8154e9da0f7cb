"""
REPOSITORY PORTS - Typed entity persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application layer needs
- Does NOT specify implementation (the KV repositories in infrastructure)
"""

from campusnet.domain.ports.repositories.user_repository import UserRepository
from campusnet.domain.ports.repositories.research_domain_repository import (
    ResearchDomainRepository,
)
from campusnet.domain.ports.repositories.paper_repository import PaperRepository
from campusnet.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "ResearchDomainRepository",
    "PaperRepository",
    "MessageRepository",
]
