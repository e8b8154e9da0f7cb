"""
Identity Layer - verifies bearer credentials issued by the identity provider.
"""

from campusnet.infrastructure.identity.jwt_identity_provider import JwtIdentityProvider

__all__ = ["JwtIdentityProvider"]
