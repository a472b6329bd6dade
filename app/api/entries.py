"""Entry API endpoints.

Endpoints:
    GET  /api/entries - List index records, oldest first
    POST /api/entries - Create an entry (Bearer token required)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_entry_service
from app.api.schemas import EntryCreatedResponse, EntryCreateRequest
from app.auth.dependencies import get_current_principal
from app.auth.gateway import Principal
from app.models import IndexRecord
from app.services.entries import EntryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("", response_model=list[IndexRecord])
async def list_entries(
    service: EntryService = Depends(get_entry_service),
) -> list[IndexRecord]:
    """List every entry's index record.

    Returns an empty list when the index is missing or unreadable.
    """
    return await service.list()


@router.post(
    "",
    response_model=EntryCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_entry(
    request: EntryCreateRequest,
    principal: Principal = Depends(get_current_principal),
    service: EntryService = Depends(get_entry_service),
) -> EntryCreatedResponse:
    """Create an entry and append it to the index."""
    entry_id = await service.create(request.title, request.body)
    logger.info(f"Entry {entry_id} created by {principal.username}")
    return EntryCreatedResponse(id=entry_id)
