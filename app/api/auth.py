"""Auth API endpoints.

Endpoints:
    POST /api/login - Exchange the admin credentials for a bearer token
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_auth_gateway
from app.auth.gateway import AuthGateway
from app.auth.schemas import LoginRequest, TokenResponse

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    gateway: AuthGateway = Depends(get_auth_gateway),
) -> TokenResponse:
    """Verify the admin credentials and return a token valid for 12 hours.

    Returns 400 if a field is missing and 401 if the credentials are wrong.
    """
    token = gateway.login(request.username, request.password)
    return TokenResponse(token=token)
