"""
JWT Identity Provider.

Verifies HS256 access tokens issued by the campus identity provider.
Required claims: sub (user id, UUID), email, exp, iat, aud, iss.
"""

import logging
from typing import Optional

import jwt

from campusnet.config.settings import Config
from campusnet.domain.exceptions.authentication_error import AuthenticationError
from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.ports.identity_provider import (
    AuthenticatedIdentity,
    IdentityProvider,
)
from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class JwtIdentityProvider(IdentityProvider):
    def __init__(
        self,
        secret: Optional[str] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
    ):
        self._secret = secret if secret is not None else Config.SERVICE_AUTH_SECRET
        self._issuer = issuer or Config.SERVICE_AUTH_ISSUER
        self._audience = audience or Config.SERVICE_AUTH_AUDIENCE

    async def authenticate(self, token: str) -> AuthenticatedIdentity:
        if not token:
            raise AuthenticationError("Missing access token")
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=["HS256"],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "aud", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug(f"[Auth] Rejected token: {e}")
            raise AuthenticationError(f"Invalid token: {str(e)}") from e

        try:
            return AuthenticatedIdentity(
                user_id=UserId(claims["sub"]),
                email=UserEmail(claims.get("email", "")),
            )
        except DomainValidationError as e:
            raise AuthenticationError("Missing required claims in token") from e
