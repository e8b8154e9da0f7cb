"""
ListTeachers Query - the teacher directory students browse.

Response format:
{
    "teachers": [
        {"id": "...", "name": "...", "institution": "...",
         "research_interests": [...], ...}
    ]
}

Sorted by name (case-insensitive), then id, so the order is stable between
polls.
"""

from dataclasses import dataclass
from typing import Optional

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.application.dto.profile import ProfileDTO
from campusnet.domain.ports.repositories import UserRepository
from campusnet.domain.value_objects.user_role import UserRole


# ==================== RESULT ====================


@dataclass
class ListTeachersResult:
    teachers: list[ProfileDTO]


# ==================== QUERY ====================


@dataclass(frozen=True)
class ListTeachersQuery(Query[ListTeachersResult]):
    """
    Args:
        search: Optional case-insensitive filter over name, institution,
            bio and research interests
    """

    search: Optional[str] = None


# ==================== HANDLER ====================


class ListTeachersHandler(QueryHandler[ListTeachersResult]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListTeachersQuery) -> ListTeachersResult:
        teachers = await self._user_repository.list_by_role(UserRole.TEACHER)
        if query.search:
            teachers = [t for t in teachers if t.matches(query.search)]

        teachers.sort(key=lambda t: (t.name.lower(), t.id.value))
        return ListTeachersResult(teachers=[ProfileDTO.from_entity(t) for t in teachers])
