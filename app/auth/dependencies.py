"""FastAPI dependencies for authentication.

Only the write endpoint requires a token; listing and login are open.
"""

from __future__ import annotations

from fastapi import Depends, Request

from app.auth.gateway import AuthGateway, Principal
from app.errors import AuthError


def get_auth_gateway(request: Request) -> AuthGateway:
    """Return the process-wide auth gateway built at startup."""
    return request.app.state.auth_gateway


def get_current_principal(
    request: Request,
    gateway: AuthGateway = Depends(get_auth_gateway),
) -> Principal:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header.

    Raises:
        AuthError: If the header is missing or the token does not verify.
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        raise AuthError("Missing token")

    token = auth_header[len("Bearer "):].strip()
    return gateway.authenticate(token)
