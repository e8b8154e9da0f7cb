"""Message queries."""

from campusnet.application.queries.messages.list_inbox import (
    ListInboxQuery,
    ListInboxHandler,
    ListInboxResult,
)
from campusnet.application.queries.messages.list_sent import (
    ListSentQuery,
    ListSentHandler,
    ListSentResult,
)

__all__ = [
    "ListInboxQuery",
    "ListInboxHandler",
    "ListInboxResult",
    "ListSentQuery",
    "ListSentHandler",
    "ListSentResult",
]
