"""Storage configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.storage.naming import INDEX_FILENAME


class StorageConfig(BaseModel):
    """Configuration for the blob store and the entry index.

    Attributes:
        backend: Which blob store to build ("remote" or "local").
        api_base: Base URL of the remote storage service.
        api_key: Bearer key for the remote storage service.
        index_name: Well-known name of the index blob.
        index_ref: Stable id or URL of the index blob, if known.
        local_root: Root directory for the local blob store.
        timeout: Timeout in seconds for remote calls.
    """

    model_config = ConfigDict(frozen=True)

    backend: str = Field(default="remote", description="Blob store backend")
    api_base: str = Field(default="https://api.filess.io", description="Storage service base URL")
    api_key: str = Field(default="", description="Storage service API key")
    index_name: str = Field(default=INDEX_FILENAME, description="Index blob name")
    index_ref: str | None = Field(default=None, description="Stable index blob ref")
    local_root: str = Field(default="./data/blobs", description="Local blob store root directory")
    timeout: float = Field(default=30.0, description="Remote call timeout in seconds")
