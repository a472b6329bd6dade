"""Blob store backends."""

from app.storage.backends.base import BlobInfo, BlobStore
from app.storage.backends.local import LocalBlobStore
from app.storage.backends.remote import RemoteBlobStore

__all__ = ["BlobInfo", "BlobStore", "LocalBlobStore", "RemoteBlobStore"]
