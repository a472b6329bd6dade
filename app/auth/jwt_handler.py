"""JWT access token management.

Access tokens: HS256, 12 hours by default, no refresh and no revocation.
Expired sessions log in again.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import jwt

from app.errors import AuthError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_access_token(username: str, secret: str, expire_minutes: int) -> str:
    """Create an HS256 access token.

    Args:
        username: The authenticated username.
        secret: Signing secret.
        expire_minutes: Token lifetime in minutes.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "username": username,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
        "type": "access",
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> str:
    """Decode and validate an access token.

    Args:
        token: The encoded JWT.
        secret: Signing secret.

    Returns:
        username (sub claim).

    Raises:
        AuthError: If token is invalid or expired.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        logger.debug("Rejected expired access token")
        raise AuthError("Access token has expired")
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected access token: {e}")
        raise AuthError(f"Invalid access token: {e}")

    if payload.get("type") != "access":
        raise AuthError("Token is not an access token")

    sub = payload.get("sub")
    if not sub:
        raise AuthError("Token missing subject")
    return sub
