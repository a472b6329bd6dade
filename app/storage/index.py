"""Entry index stored as a single JSON blob.

The index is read and written wholesale. Reads never fail: if the index
cannot be located, fetched or parsed, the journal is reported as empty.
Writes upload a new blob each time and leave older versions in place.

Examples:
    >>> index = IndexStore(store, index_name="pib_journal_index.json")
    >>> records = await index.read()
    >>> ref = await index.write([*records, new_record])
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.models import IndexRecord, IndexRecords
from app.storage.backends.base import BlobStore
from app.storage.naming import INDEX_FILENAME

logger = logging.getLogger(__name__)


class IndexStore:
    """Read-modify-write access to the entry index.

    Attributes:
        store: Blob store holding the index.
        index_name: Well-known name of the index blob.
        index_ref: Stable ref of the index blob, if configured.
    """

    def __init__(
        self,
        store: BlobStore,
        index_name: str = INDEX_FILENAME,
        index_ref: str | None = None,
    ) -> None:
        self.store = store
        self.index_name = index_name
        self.index_ref = index_ref

    async def _locate(self) -> str | None:
        if self.index_ref:
            return self.index_ref

        matches = await self.store.search(self.index_name)
        if not matches:
            return None
        return matches[0].ref

    async def read(self) -> list[IndexRecord]:
        """Load the index.

        Returns:
            Index records in insertion order, or an empty list if the index
            does not exist or could not be loaded.
        """
        try:
            ref = await self._locate()
            if ref is None:
                logger.info("No index blob found, treating journal as empty")
                return []
            data = await self.store.download(ref)
            return IndexRecords.validate_json(data)
        except Exception as e:
            logger.warning(f"Index read failed, treating journal as empty: {e}")
            return []

    async def write(self, records: Sequence[IndexRecord]) -> str:
        """Upload the full index as a new blob.

        Args:
            records: Every index record, in insertion order.

        Returns:
            Ref of the newly uploaded index blob.

        Raises:
            StorageError: If the upload fails.
        """
        content = IndexRecords.dump_json(list(records), indent=2)
        ref = await self.store.upload(self.index_name, content)
        logger.info(f"Index uploaded ({len(records)} records): {ref}")
        if self.index_ref and ref != self.index_ref:
            logger.info(
                "Set STORAGE_INDEX_REF to the new index ref to read the latest version"
            )
        return ref
