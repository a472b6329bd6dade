"""Abstract base class for blob stores."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, field_validator


class BlobInfo(BaseModel):
    """Metadata for a stored blob as reported by a name search."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    url: str | None = None
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        """Services may report numeric ids."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def ref(self) -> str | None:
        """Ref to download this blob with, preferring the URL."""
        return self.url or self.id


class BlobStore(ABC):
    """Abstract store for opaque named byte blobs.

    Every upload creates a new blob and returns a new ref; nothing is
    overwritten in place. Failures raise ``StorageError``.
    """

    name: str = "abstract"

    @abstractmethod
    async def upload(self, name: str, content: bytes) -> str:
        """Upload a blob.

        Args:
            name: Blob name.
            content: Raw bytes.

        Returns:
            Ref (URL or id) of the new blob.
        """

    @abstractmethod
    async def download(self, ref: str) -> bytes:
        """Download a blob.

        Args:
            ref: URL or id returned by ``upload``.

        Returns:
            Raw bytes.
        """

    @abstractmethod
    async def search(self, name: str) -> list[BlobInfo]:
        """Find blobs by name.

        Args:
            name: Exact blob name.

        Returns:
            Matching blobs, possibly empty.
        """

    async def close(self) -> None:
        """Release any held resources."""
