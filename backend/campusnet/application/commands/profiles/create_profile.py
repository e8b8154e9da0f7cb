"""
Create Profile Command - signup.

The user id and email are taken from the verified identity token, never
from the request body, so a caller can only ever create their own profile.
The role is chosen once here and cannot be changed afterwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from campusnet.application.common.interfaces import Command, CommandHandler
from campusnet.domain.entities.user import User
from campusnet.domain.exceptions import DomainValidationError
from campusnet.domain.ports.repositories import UserRepository
from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateProfileCommand(Command[User]):
    user_id: UserId
    email: UserEmail
    name: str
    role: str
    bio: Optional[str] = None
    institution: Optional[str] = None
    research_interests: tuple[str, ...] = field(default_factory=tuple)


class CreateProfileHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: CreateProfileCommand) -> User:
        if await self._user_repository.get_by_id(command.user_id):
            raise DomainValidationError("Profile already exists")

        user = User.create(
            user_id=command.user_id,
            email=command.email,
            name=command.name,
            role=command.role,
            bio=command.bio,
            institution=command.institution,
            research_interests=list(command.research_interests),
        )
        await self._user_repository.save(user)
        logger.info(f"[Profiles] Created {user.role.value} profile {user.id.value}")
        return user
