"""ListTeacherDomains Query - a teacher's research domains, newest first."""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.application.dto.domain import DomainDTO
from campusnet.domain.ports.repositories import ResearchDomainRepository
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class ListTeacherDomainsResult:
    domains: list[DomainDTO]


@dataclass(frozen=True)
class ListTeacherDomainsQuery(Query[ListTeacherDomainsResult]):
    teacher_id: UserId


class ListTeacherDomainsHandler(QueryHandler[ListTeacherDomainsResult]):
    def __init__(self, domain_repository: ResearchDomainRepository):
        self._domain_repository = domain_repository

    async def execute(self, query: ListTeacherDomainsQuery) -> ListTeacherDomainsResult:
        domains = await self._domain_repository.list_by_teacher(query.teacher_id)
        return ListTeacherDomainsResult(
            domains=[DomainDTO.from_entity(d) for d in domains]
        )
