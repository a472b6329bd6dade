"""Journal data models.

Entry and IndexRecord are serialized as JSON blobs in the storage service.
Both are immutable once created.

Examples:
    >>> entry = Entry.new(title="Day 1", body="Went well")
    >>> record = IndexRecord.for_entry(entry, file="https://files.example/abc")
    >>> record.title
    'Day 1'
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def utcnow() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class Entry(BaseModel):
    """A journal entry, stored as one blob named ``entry_<id>.json``."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    body: str
    date: datetime

    @classmethod
    def new(cls, title: str, body: str, date: datetime | None = None) -> "Entry":
        """Build an entry with a fresh random id, stamped now."""
        return cls(id=uuid.uuid4(), title=title, body=body, date=date or utcnow())

    def to_bytes(self) -> bytes:
        return self.model_dump_json().encode("utf-8")


class IndexRecord(BaseModel):
    """Index metadata for one entry."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    date: datetime
    file: str = Field(description="Ref of the entry blob")

    @field_validator("file", mode="before")
    @classmethod
    def coerce_file(cls, v: object) -> object:
        """Older indexes may hold a numeric blob id."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def for_entry(cls, entry: Entry, file: str) -> "IndexRecord":
        return cls(id=entry.id, title=entry.title, date=entry.date, file=file)


IndexRecords = TypeAdapter(list[IndexRecord])
