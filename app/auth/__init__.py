"""Auth module: single-admin login and JWT management."""

from app.auth.dependencies import get_auth_gateway, get_current_principal
from app.auth.gateway import AuthGateway, Principal
from app.auth.jwt_handler import create_access_token, decode_access_token

__all__ = [
    "AuthGateway",
    "Principal",
    "create_access_token",
    "decode_access_token",
    "get_auth_gateway",
    "get_current_principal",
]
