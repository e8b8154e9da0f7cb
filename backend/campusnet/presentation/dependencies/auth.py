"""
Authentication Dependency for FastAPI.

- Extracts the bearer token from the Authorization header
- Verifies it through the IdentityProvider port (resolved from the
  request's dishka container, so tests can swap the provider)
- Returns AuthUser for use in route handlers

A missing or rejected token raises AuthenticationError, which the app
turns into a 401 response.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from campusnet.domain.exceptions import AuthenticationError
from campusnet.domain.ports.identity_provider import IdentityProvider
from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class AuthUser:
    id: UserId
    email: UserEmail


security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Verify the caller's token.

    Raises:
        AuthenticationError if the token is missing, invalid, expired or
        lacks the user id / email claims
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")

    identity_provider = await request.state.dishka_container.get(IdentityProvider)
    identity = await identity_provider.authenticate(credentials.credentials)
    return AuthUser(id=identity.user_id, email=identity.email)
