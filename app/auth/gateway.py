"""Single-admin login and token verification."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from app.auth.jwt_handler import create_access_token, decode_access_token
from app.errors import AuthError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """The identity asserted by a verified token."""

    username: str


class AuthGateway:
    """Exchanges the configured credential pair for a signed token.

    Passwords are compared in plain text against the configured value.
    """

    def __init__(
        self,
        username: str,
        password: str,
        secret: str,
        expire_minutes: int = 720,
    ) -> None:
        self._username = username
        self._password = password
        self._secret = secret
        self.expire_minutes = expire_minutes

    def _matches(self, username: str, password: str) -> bool:
        user_ok = hmac.compare_digest(username.encode(), self._username.encode())
        pass_ok = hmac.compare_digest(password.encode(), self._password.encode())
        return user_ok and pass_ok

    def login(self, username: str | None, password: str | None) -> str:
        """Issue a token for the admin credentials.

        Args:
            username: Submitted username.
            password: Submitted password.

        Returns:
            Encoded access token.

        Raises:
            ValidationError: If either field is missing or empty.
            AuthError: If the credentials do not match.
        """
        if not username or not password:
            raise ValidationError("username+password required")

        if not self._matches(username, password):
            logger.warning(f"Failed login attempt for user {username!r}")
            raise AuthError("Invalid credentials")

        logger.info(f"User {username!r} logged in")
        return create_access_token(username, self._secret, self.expire_minutes)

    def authenticate(self, token: str | None) -> Principal:
        """Verify a bearer token.

        Args:
            token: The raw token, without the ``Bearer`` prefix.

        Returns:
            The principal the token asserts.

        Raises:
            AuthError: If the token is missing, malformed, wrongly signed or expired.
        """
        if not token:
            raise AuthError("Missing token")
        return Principal(username=decode_access_token(token, self._secret))
