"""
Identity Provider Port - turns a bearer credential into a stable user id.

Implementation: campusnet/infrastructure/identity/jwt_identity_provider.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class AuthenticatedIdentity:
    user_id: UserId
    email: UserEmail


class IdentityProvider(ABC):
    @abstractmethod
    async def authenticate(self, token: str) -> AuthenticatedIdentity:
        """Verify `token`. Raises AuthenticationError when it is not valid."""
