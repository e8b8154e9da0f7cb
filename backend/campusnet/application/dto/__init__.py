"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- profile.py → ProfileDTO
- domain.py → DomainDTO
- paper.py → PaperDTO
- message.py → MessageDTO, InboxEntryDTO

Note: These are different from domain entities.
DTOs are for API output, entities are for business logic.
"""

from campusnet.application.dto.profile import ProfileDTO
from campusnet.application.dto.domain import DomainDTO
from campusnet.application.dto.paper import PaperDTO
from campusnet.application.dto.message import InboxEntryDTO, MessageDTO

__all__ = [
    "ProfileDTO",
    "DomainDTO",
    "PaperDTO",
    "MessageDTO",
    "InboxEntryDTO",
]
