"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
the presentation layer, which maps them to HTTP status codes.
"""

from campusnet.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    ReceiverNotFoundError,
)
from campusnet.domain.exceptions.access_denied import AccessDeniedError
from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.exceptions.dependency_failure import DependencyFailureError
from campusnet.domain.exceptions.authentication_error import AuthenticationError

__all__ = [
    "EntityNotFoundError",
    "ReceiverNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "DependencyFailureError",
    "AuthenticationError",
]
