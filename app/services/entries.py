"""Entry creation and listing.

Creating an entry is two non-atomic steps:

1. Upload the entry blob (``entry_<id>.json``).
2. Read the index, append a record, write the index back.

If step 1 fails nothing is written. If step 2 fails the entry blob is left
orphaned: it exists in storage but no index record points at it.

The read-modify-write in step 2 is a lost-update race between concurrent
creates. With ``serialize_writes`` enabled it runs under a process-wide
lock, which closes the race for a single server process only.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import AsyncExitStack
from uuid import UUID

from app.errors import ValidationError
from app.models import Entry, IndexRecord
from app.storage.backends.base import BlobStore
from app.storage.index import IndexStore
from app.storage.naming import entry_blob_name

logger = logging.getLogger(__name__)


class EntryService:
    """Journal entry operations over a blob store and its index."""

    def __init__(
        self,
        store: BlobStore,
        index: IndexStore,
        serialize_writes: bool = True,
    ) -> None:
        self.store = store
        self.index = index
        self._write_lock = asyncio.Lock() if serialize_writes else None

    async def list(self) -> list[IndexRecord]:
        """Return every index record, oldest first."""
        return await self.index.read()

    async def create(self, title: str | None, body: str | None) -> UUID:
        """Create an entry and add it to the index.

        Args:
            title: Entry title (required, non-empty).
            body: Entry body (required, non-empty).

        Returns:
            The new entry's id.

        Raises:
            ValidationError: If title or body is missing or empty.
            StorageError: If the entry or index upload fails.
        """
        if not title or not body:
            raise ValidationError("title+body required")

        entry = Entry.new(title=title, body=body)
        file_ref = await self.store.upload(entry_blob_name(entry.id), entry.to_bytes())
        logger.info(f"Entry blob uploaded: {entry.id} -> {file_ref}")

        async with AsyncExitStack() as stack:
            if self._write_lock is not None:
                await stack.enter_async_context(self._write_lock)
            records = await self.index.read()
            records.append(IndexRecord.for_entry(entry, file=file_ref))
            await self.index.write(records)

        logger.info(f"Entry created: {entry.id} ({len(records)} in index)")
        return entry.id
