"""Create Domain Command - a teacher opens a new research area."""

from dataclasses import dataclass
from typing import Optional

from campusnet.application.common.interfaces import Command, CommandHandler
from campusnet.domain.entities.research_domain import ResearchDomain
from campusnet.domain.exceptions import AccessDeniedError, EntityNotFoundError
from campusnet.domain.ports.repositories import (
    ResearchDomainRepository,
    UserRepository,
)
from campusnet.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CreateDomainCommand(Command[ResearchDomain]):
    teacher_id: UserId
    name: str
    description: Optional[str] = None


class CreateDomainHandler(CommandHandler[ResearchDomain]):
    def __init__(
        self,
        user_repository: UserRepository,
        domain_repository: ResearchDomainRepository,
    ):
        self._user_repository = user_repository
        self._domain_repository = domain_repository

    async def execute(self, command: CreateDomainCommand) -> ResearchDomain:
        teacher = await self._user_repository.get_by_id(command.teacher_id)
        if not teacher:
            raise EntityNotFoundError(f"Profile {command.teacher_id.value} not found")
        if not teacher.is_teacher:
            raise AccessDeniedError("Only teachers can create research domains")

        domain = ResearchDomain.create(
            teacher_id=command.teacher_id,
            name=command.name,
            description=command.description,
        )
        await self._domain_repository.save(domain)
        return domain
