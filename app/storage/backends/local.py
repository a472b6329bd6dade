"""Local filesystem blob store using pathlib.

Each upload lands in its own directory: ``{root}/{blob_id}/{name}``.
Blob ids are time-ordered, so a name search can list newest first.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from app.errors import StorageError
from app.storage.backends.base import BlobInfo, BlobStore
from app.storage.naming import generate_blob_id, is_url, sanitize_blob_name


class LocalBlobStore(BlobStore):
    """Pathlib-based local filesystem blob store."""

    name = "local"

    def __init__(self, root: str) -> None:
        self.root = Path(root)

    def _blob_dir(self, ref: str) -> Path:
        try:
            sanitize_blob_name(ref)
        except ValueError as e:
            raise StorageError(f"Invalid local blob ref: {ref}") from e
        return self.root / ref

    async def upload(self, name: str, content: bytes) -> str:
        """Write a blob to a fresh directory under the root."""
        try:
            sanitize_blob_name(name)
        except ValueError as e:
            raise StorageError(str(e)) from e

        blob_id = generate_blob_id()
        p = self.root / blob_id / name
        try:
            await asyncio.to_thread(_write_bytes, p, content)
        except OSError as e:
            raise StorageError(f"Local upload failed: {e}") from e
        return blob_id

    async def download(self, ref: str) -> bytes:
        """Read a blob by id."""
        if is_url(ref):
            raise StorageError(f"Local store cannot fetch URLs: {ref}")
        blob_dir = self._blob_dir(ref)
        files = sorted(blob_dir.glob("*")) if blob_dir.is_dir() else []
        if not files:
            raise StorageError(f"Blob not found: {ref}", status_code=404)
        try:
            return await asyncio.to_thread(files[0].read_bytes)
        except OSError as e:
            raise StorageError(f"Local download failed: {e}") from e

    async def search(self, name: str) -> list[BlobInfo]:
        """List blobs with this name, newest first."""
        try:
            sanitize_blob_name(name)
        except ValueError:
            return []
        if not self.root.is_dir():
            return []
        matches = sorted(
            (p.parent.name for p in self.root.glob(f"*/{name}") if p.is_file()),
            reverse=True,
        )
        return [BlobInfo(id=blob_id, name=name) for blob_id in matches]


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
