"""Research domain queries."""

from campusnet.application.queries.domains.list_teacher_domains import (
    ListTeacherDomainsQuery,
    ListTeacherDomainsHandler,
    ListTeacherDomainsResult,
)

__all__ = [
    "ListTeacherDomainsQuery",
    "ListTeacherDomainsHandler",
    "ListTeacherDomainsResult",
]
