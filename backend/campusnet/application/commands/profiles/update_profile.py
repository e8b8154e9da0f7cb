"""Update Profile Command - partial read-merge-write of the caller's own profile."""

from dataclasses import dataclass, field
from typing import Any

from campusnet.application.common.interfaces import Command, CommandHandler
from campusnet.domain.entities.user import User
from campusnet.domain.exceptions import EntityNotFoundError
from campusnet.domain.ports.repositories import UserRepository
from campusnet.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UpdateProfileCommand(Command[User]):
    """
    Args:
        user_id: Caller, who is always the profile owner
        changes: Only the fields to overwrite (name, bio, institution,
            research_interests). Absent fields keep their stored value.
    """

    user_id: UserId
    changes: dict[str, Any] = field(default_factory=dict)


class UpdateProfileHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UpdateProfileCommand) -> User:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError(f"Profile {command.user_id.value} not found")

        # Validate and normalise on the entity, then persist only the touched fields
        user.apply_profile_changes(command.changes)
        updated = await self._user_repository.update(
            command.user_id,
            {name: getattr(user, name) for name in command.changes},
        )
        if updated is None:
            raise EntityNotFoundError(f"Profile {command.user_id.value} not found")
        return updated
