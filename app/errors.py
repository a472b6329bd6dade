"""Error taxonomy shared by the storage, service and API layers.

Each error maps to one HTTP status in ``app.main``:

    ValidationError -> 400
    AuthError       -> 401
    StorageError    -> 500
"""

from __future__ import annotations


class JournalError(Exception):
    """Base exception for journal errors."""

    @property
    def message(self) -> str:
        return self.args[0] if self.args else self.__class__.__name__


class ValidationError(JournalError):
    """A required field is missing or empty."""


class AuthError(JournalError):
    """Bad credentials, or a missing, invalid or expired token."""


class StorageError(JournalError):
    """The blob store answered with a non-success status or could not be reached.

    Attributes:
        status_code: HTTP status returned by the storage service (if any).
        body: Response body returned by the storage service (if any).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.status_code is not None:
            parts.append(f"({self.status_code})")
        if self.body:
            parts.append(self.body)
        return " ".join(parts)
