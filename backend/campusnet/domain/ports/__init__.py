"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/        → Typed entity persistence interfaces
- kv_store.py          → Flat key-value namespace (in-memory / Redis)
- blob_store.py        → Object storage for uploaded paper files
- identity_provider.py → Bearer credential verification
"""

from campusnet.domain.ports.kv_store import KeyValueStore
from campusnet.domain.ports.blob_store import BlobStore
from campusnet.domain.ports.identity_provider import (
    AuthenticatedIdentity,
    IdentityProvider,
)

__all__ = [
    "KeyValueStore",
    "BlobStore",
    "AuthenticatedIdentity",
    "IdentityProvider",
]
