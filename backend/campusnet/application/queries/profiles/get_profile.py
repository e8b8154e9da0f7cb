"""GetProfile Query - the caller's own profile."""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.domain.entities.user import User
from campusnet.domain.exceptions import EntityNotFoundError
from campusnet.domain.ports.repositories import UserRepository
from campusnet.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetProfileQuery(Query[User]):
    user_id: UserId


class GetProfileHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetProfileQuery) -> User:
        user = await self._user_repository.get_by_id(query.user_id)
        if not user:
            raise EntityNotFoundError(f"Profile {query.user_id.value} not found")
        return user
