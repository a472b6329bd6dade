"""Blob naming rules for the journal.

Entry blobs are named ``entry_<uuid>.json``; the index is a single
well-known name. Refs returned by the storage service are either absolute
URLs or service ids.

Examples:
    >>> from app.storage.naming import entry_blob_name, is_url
    >>> entry_blob_name("0b6f1c2e-5d3a-4f0e-9b1a-7c2d4e5f6a7b")
    'entry_0b6f1c2e-5d3a-4f0e-9b1a-7c2d4e5f6a7b.json'
    >>> is_url("https://files.example/abc")
    True
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timezone
from uuid import UUID

INDEX_FILENAME = "pib_journal_index.json"

_SAFE_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def entry_blob_name(entry_id: UUID | str) -> str:
    """Blob name for an entry.

    Args:
        entry_id: The entry's UUID.

    Returns:
        Name of the form ``entry_<uuid>.json``.
    """
    return f"entry_{entry_id}.json"


def is_url(ref: str) -> bool:
    """Whether a blob ref is a direct URL rather than a service id."""
    return ref.startswith("http")


def sanitize_blob_name(name: str) -> str:
    """Validate a blob name for use as a filename.

    Rules:
        - Starts with an alphanumeric character
        - Only [A-Za-z0-9._-] afterwards
        - No ``..`` sequences

    Args:
        name: Raw blob name.

    Returns:
        The name, unchanged.

    Raises:
        ValueError: If the name is not filesystem-safe.
    """
    if not _SAFE_NAME.match(name) or ".." in name:
        raise ValueError(f"Unsafe blob name: {name!r}")
    return name


def generate_blob_id(date: datetime | None = None) -> str:
    """Generate a time-ordered blob id.

    Format: {YYYYMMDDHHMMSSffffff}-{uuid8}

    Ids sort lexicographically in creation order (to microsecond precision).

    Args:
        date: Override timestamp (defaults to now UTC).

    Returns:
        Blob id string.
    """
    if date is None:
        date = datetime.now(timezone.utc)
    return f"{date.strftime('%Y%m%d%H%M%S%f')}-{uuid.uuid4().hex[:8]}"
