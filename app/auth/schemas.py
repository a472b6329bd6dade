"""Pydantic schemas for the login API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request body for login.

    Fields are optional here so that a missing field is reported as a
    plain 400 by the gateway rather than a schema error.
    """

    username: str | None = Field(default=None, description="Admin username")
    password: str | None = Field(default=None, description="Admin password")


class TokenResponse(BaseModel):
    """Token returned on login."""

    token: str
