"""
DependencyFailureError - Raised when the blob store or identity provider call fails.
Maps to: HTTP 502 Bad Gateway
"""


class DependencyFailureError(Exception):
    """Exception raised when an external collaborator fails."""

    kind = "DependencyFailure"

    def __init__(self, dependency: str, message: str):
        super().__init__(f"{dependency}: {message}")
        self.dependency = dependency
