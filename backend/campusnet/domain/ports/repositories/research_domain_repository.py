"""
ResearchDomain Repository Port - Interface for research domain persistence.
Implementation: campusnet/infrastructure/persistence/kv_research_domain_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from campusnet.domain.entities.research_domain import ResearchDomain
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.user_id import UserId


class ResearchDomainRepository(ABC):
    @abstractmethod
    async def get_by_id(self, domain_id: DomainId) -> Optional[ResearchDomain]: ...

    @abstractmethod
    async def save(self, domain: ResearchDomain) -> None: ...

    @abstractmethod
    async def list_by_teacher(self, teacher_id: UserId) -> list[ResearchDomain]: ...
