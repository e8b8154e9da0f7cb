"""
AuthenticationError - Raised when a bearer credential cannot be verified.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    """Raised by the identity provider for missing, invalid or expired credentials."""

    kind = "Unauthenticated"

    def __init__(self, message: str = "Unauthenticated"):
        super().__init__(message)
