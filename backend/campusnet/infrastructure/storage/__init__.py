"""
Storage Layer - blob store for uploaded paper files.
"""

from campusnet.infrastructure.storage.local_blob_store import LocalBlobStore

__all__ = ["LocalBlobStore"]
