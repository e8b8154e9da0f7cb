"""
Paper Repository Port - Interface for paper persistence.
Implementation: campusnet/infrastructure/persistence/kv_paper_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from campusnet.domain.entities.paper import Paper
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.paper_id import PaperId
from campusnet.domain.value_objects.user_id import UserId


class PaperRepository(ABC):
    @abstractmethod
    async def get_by_id(self, paper_id: PaperId) -> Optional[Paper]: ...

    @abstractmethod
    async def save(self, paper: Paper) -> None: ...

    @abstractmethod
    async def delete(self, paper: Paper) -> None:
        """Remove the record and exactly the pointers written when it was saved."""

    @abstractmethod
    async def list_by_teacher(self, teacher_id: UserId) -> list[Paper]: ...

    @abstractmethod
    async def list_by_domain(self, domain_id: DomainId) -> list[Paper]: ...
