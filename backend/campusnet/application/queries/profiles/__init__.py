"""Profile and teacher directory queries."""

from campusnet.application.queries.profiles.get_profile import (
    GetProfileQuery,
    GetProfileHandler,
)
from campusnet.application.queries.profiles.list_teachers import (
    ListTeachersQuery,
    ListTeachersHandler,
    ListTeachersResult,
)
from campusnet.application.queries.profiles.get_teacher import (
    GetTeacherQuery,
    GetTeacherHandler,
)

__all__ = [
    "GetProfileQuery",
    "GetProfileHandler",
    "ListTeachersQuery",
    "ListTeachersHandler",
    "ListTeachersResult",
    "GetTeacherQuery",
    "GetTeacherHandler",
]
