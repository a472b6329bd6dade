"""Journal services."""

from app.services.entries import EntryService

__all__ = ["EntryService"]
