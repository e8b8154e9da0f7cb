"""
Blob Store Port - external object storage for uploaded files.

The core only stores object paths (`Paper.file_path`), never file bytes.
Implementation: campusnet/infrastructure/storage/local_blob_store.py
"""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    @abstractmethod
    async def put_object(self, path: str, data: bytes, content_type: str) -> None:
        """Store bytes at `path`. Raises DependencyFailureError on failure."""

    @abstractmethod
    async def delete_object(self, path: str) -> None:
        """Remove the object; an already missing object counts as deleted."""

    @abstractmethod
    async def create_signed_url(self, path: str, ttl_seconds: int) -> str:
        """Return a URL granting read access to `path` for `ttl_seconds`."""
