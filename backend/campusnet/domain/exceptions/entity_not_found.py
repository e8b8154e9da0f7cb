"""
EntityNotFoundError - Raised when a requested entity or referenced id does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    kind = "NotFound"

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class ReceiverNotFoundError(EntityNotFoundError):
    """Raised when a message is addressed to a user that does not exist."""

    def __init__(self, receiver_id: str):
        super().__init__(f"Receiver {receiver_id} not found")
        self.receiver_id = receiver_id
