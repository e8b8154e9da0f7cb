"""
User Repository Port - Interface for profile persistence.
Implementation: campusnet/infrastructure/persistence/kv_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from campusnet.domain.entities.user import User
from campusnet.domain.value_objects.user_id import UserId
from campusnet.domain.value_objects.user_role import UserRole


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def save(self, user: User) -> None: ...

    @abstractmethod
    async def update(self, user_id: UserId, changes: dict[str, Any]) -> Optional[User]:
        """
        Read-merge-write: overlay only the supplied entity fields on the
        stored record. Returns the merged user, or None if it does not exist.
        """

    @abstractmethod
    async def list_by_role(self, role: UserRole) -> list[User]: ...
