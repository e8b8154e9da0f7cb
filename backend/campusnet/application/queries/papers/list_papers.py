"""
Paper listing queries.

- ListTeacherPapers: every paper a teacher uploaded
- ListDomainPapers: papers filed under one research domain

Both read through the relationship index and come back newest first.
"""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.application.dto.paper import PaperDTO
from campusnet.domain.ports.repositories import PaperRepository
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class ListPapersResult:
    papers: list[PaperDTO]


@dataclass(frozen=True)
class ListTeacherPapersQuery(Query[ListPapersResult]):
    teacher_id: UserId


@dataclass(frozen=True)
class ListDomainPapersQuery(Query[ListPapersResult]):
    domain_id: DomainId


class ListTeacherPapersHandler(QueryHandler[ListPapersResult]):
    def __init__(self, paper_repository: PaperRepository):
        self._paper_repository = paper_repository

    async def execute(self, query: ListTeacherPapersQuery) -> ListPapersResult:
        papers = await self._paper_repository.list_by_teacher(query.teacher_id)
        return ListPapersResult(papers=[PaperDTO.from_entity(p) for p in papers])


class ListDomainPapersHandler(QueryHandler[ListPapersResult]):
    def __init__(self, paper_repository: PaperRepository):
        self._paper_repository = paper_repository

    async def execute(self, query: ListDomainPapersQuery) -> ListPapersResult:
        papers = await self._paper_repository.list_by_domain(query.domain_id)
        return ListPapersResult(papers=[PaperDTO.from_entity(p) for p in papers])
