"""Profile commands."""

from .create_profile import CreateProfileCommand, CreateProfileHandler
from .update_profile import UpdateProfileCommand, UpdateProfileHandler

__all__ = [
    "CreateProfileCommand",
    "CreateProfileHandler",
    "UpdateProfileCommand",
    "UpdateProfileHandler",
]
