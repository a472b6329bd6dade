"""Pydantic schemas for the entries API."""

from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field


class EntryCreateRequest(BaseModel):
    """Request body for creating an entry.

    Both fields are required; emptiness is checked by the entry service
    so that it is reported as a plain 400.
    """

    title: str | None = Field(default=None, description="Entry title")
    body: str | None = Field(default=None, description="Entry text")


class EntryCreatedResponse(BaseModel):
    """Response for a created entry."""

    ok: Literal[True] = True
    id: UUID
