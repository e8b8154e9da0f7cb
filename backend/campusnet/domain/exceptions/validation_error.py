"""
DomainValidationError - Raised when input is missing or violates a business rule.
Maps to: HTTP 422 Unprocessable Entity
"""


class DomainValidationError(ValueError):
    """Exception raised for domain validation errors."""

    kind = "InvalidInput"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
