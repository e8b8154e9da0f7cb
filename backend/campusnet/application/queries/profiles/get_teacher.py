"""GetTeacher Query - a teacher's public profile; students are not listed here."""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.domain.entities.user import User
from campusnet.domain.exceptions import EntityNotFoundError
from campusnet.domain.ports.repositories import UserRepository
from campusnet.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetTeacherQuery(Query[User]):
    teacher_id: UserId


class GetTeacherHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetTeacherQuery) -> User:
        user = await self._user_repository.get_by_id(query.teacher_id)
        if not user or not user.is_teacher:
            raise EntityNotFoundError(f"Teacher {query.teacher_id.value} not found")
        return user
