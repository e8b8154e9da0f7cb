"""
AccessDeniedError - Raised when the caller is not the record's owner or receiver.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to access a resource"""

    kind = "Unauthorized"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
