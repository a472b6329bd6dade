"""Dependency wiring for the API routers."""

from __future__ import annotations

from fastapi import Request

from app.services.entries import EntryService


def get_entry_service(request: Request) -> EntryService:
    """Return the process-wide entry service built at startup."""
    return request.app.state.entry_service
