"""Application configuration with Pydantic Settings.

Settings are loaded once from environment variables and the ``.env`` file,
then treated as read-only for the life of the process. Components receive
the values they need explicitly instead of reaching for a module global.

Examples:
    >>> from app.config import get_settings
    >>> settings = get_settings()
    >>> settings.STORAGE_BACKEND
    <StorageBackendType.REMOTE: 'remote'>

    >>> settings.get_storage_config().index_name
    'pib_journal_index.json'

Tests:
    - tests/unit/test_config.py::TestSettings
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.storage.config import StorageConfig


class StorageBackendType(str, Enum):
    """Supported blob store backends."""

    REMOTE = "remote"
    LOCAL = "local"


class Settings(BaseSettings):
    """Application settings.

    Attributes:
        PORT: Listening port for the API server.
        JWT_SECRET_KEY: Secret used to sign access tokens.
        JWT_ACCESS_EXPIRE_MINUTES: Access token lifetime (12 hours by default).
        ADMIN_USERNAME: The single admin username.
        ADMIN_PASSWORD: The single admin password.
        STORAGE_BACKEND: Which blob store to use (remote or local).
        STORAGE_API_BASE: Base URL of the remote file storage service.
        STORAGE_API_KEY: Bearer key for the remote file storage service.
        STORAGE_INDEX_REF: Optional stable id or URL of the index blob.
        CORS_ORIGIN: Allowed browser origins, comma separated.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Server
    HOST: str = Field(default="0.0.0.0", description="Bind address")
    PORT: int = Field(default=3000, description="Listening port", ge=1, le=65535)
    DEBUG: bool = Field(default=False, description="Enable debug mode")

    # Auth
    JWT_SECRET_KEY: str = Field(
        default="dev-secret",
        description="Token signing secret",
    )
    JWT_ACCESS_EXPIRE_MINUTES: int = Field(
        default=720,
        description="Access token lifetime in minutes",
        gt=0,
    )
    ADMIN_USERNAME: str = Field(default="admin", description="Admin username")
    ADMIN_PASSWORD: str = Field(default="password", description="Admin password")

    # Storage
    STORAGE_BACKEND: StorageBackendType = Field(
        default=StorageBackendType.REMOTE,
        description="Blob store backend",
    )
    STORAGE_API_BASE: str = Field(
        default="https://api.filess.io",
        description="Remote storage service base URL",
    )
    STORAGE_API_KEY: str = Field(default="", description="Remote storage API key")
    STORAGE_INDEX_REF: str | None = Field(
        default=None,
        description="Stable id or URL of the index blob",
    )
    STORAGE_LOCAL_ROOT: str = Field(
        default="./data/blobs",
        description="Root directory for the local blob store",
    )
    STORAGE_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Timeout for storage service calls",
        gt=0,
    )
    SERIALIZE_INDEX_WRITES: bool = Field(
        default=True,
        description="Serialize index read-modify-write cycles within this process",
    )

    # HTTP
    CORS_ORIGIN: str = Field(default="*", description="Allowed CORS origins")

    @field_validator("JWT_SECRET_KEY")
    @classmethod
    def validate_secret(cls, v: str) -> str:
        """Reject an empty signing secret."""
        if not v:
            raise ValueError("JWT_SECRET_KEY must not be empty")
        return v

    @field_validator("STORAGE_API_BASE")
    @classmethod
    def validate_api_base(cls, v: str) -> str:
        """Require an http(s) base URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("STORAGE_API_BASE must start with http:// or https://")
        return v.rstrip("/")

    @property
    def cors_origins(self) -> list[str]:
        """Allowed origins as a list."""
        origins = [o.strip() for o in self.CORS_ORIGIN.split(",") if o.strip()]
        return origins or ["*"]

    def get_storage_config(self) -> StorageConfig:
        """Build the storage configuration from these settings.

        Returns:
            StorageConfig for the blob store and index.
        """
        return StorageConfig(
            backend=self.STORAGE_BACKEND.value,
            api_base=self.STORAGE_API_BASE,
            api_key=self.STORAGE_API_KEY,
            index_ref=self.STORAGE_INDEX_REF or None,
            local_root=self.STORAGE_LOCAL_ROOT,
            timeout=self.STORAGE_TIMEOUT_SECONDS,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The application settings.
    """
    return Settings()
