"""Blob storage package for the journal.

Provides the blob store backends, the entry index, and the factory that
builds a store from configuration.

Examples:
    >>> from app.storage import IndexStore, StorageConfig, build_blob_store
    >>> store = build_blob_store(StorageConfig(backend="local", local_root="/tmp/blobs"))
    >>> index = IndexStore(store)
"""

from app.storage.backends import BlobInfo, BlobStore, LocalBlobStore, RemoteBlobStore
from app.storage.config import StorageConfig
from app.storage.index import IndexStore
from app.storage.naming import INDEX_FILENAME, entry_blob_name, is_url


def build_blob_store(config: StorageConfig) -> BlobStore:
    """Create the blob store selected by config.

    Args:
        config: Storage configuration.

    Returns:
        A remote or local blob store.

    Raises:
        ValueError: If the backend name is unknown.
    """
    if config.backend == "remote":
        return RemoteBlobStore(
            api_base=config.api_base,
            api_key=config.api_key,
            timeout=config.timeout,
        )
    if config.backend == "local":
        return LocalBlobStore(root=config.local_root)
    raise ValueError(f"Unknown storage backend: {config.backend}")


__all__ = [
    "INDEX_FILENAME",
    "BlobInfo",
    "BlobStore",
    "IndexStore",
    "LocalBlobStore",
    "RemoteBlobStore",
    "StorageConfig",
    "build_blob_store",
    "entry_blob_name",
    "is_url",
]
