"""Unit tests for configuration module.

Tests for app/config.py - Settings and storage configuration.

Run with:
    pytest tests/unit/test_config.py -v
"""

import pytest
from pydantic import ValidationError

from app.config import Settings, StorageBackendType, get_settings

_ENV_KEYS = (
    "PORT",
    "JWT_SECRET_KEY",
    "JWT_ACCESS_EXPIRE_MINUTES",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
    "STORAGE_BACKEND",
    "STORAGE_API_BASE",
    "STORAGE_API_KEY",
    "STORAGE_INDEX_REF",
    "CORS_ORIGIN",
    "SERIALIZE_INDEX_WRITES",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.mark.fast
class TestStorageBackendType:
    """Tests for StorageBackendType enum."""

    def test_values(self):
        assert StorageBackendType.REMOTE.value == "remote"
        assert StorageBackendType.LOCAL.value == "local"


@pytest.mark.fast
class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self, clean_env):
        """Test default values match the documented configuration."""
        settings = Settings(_env_file=None)
        assert settings.PORT == 3000
        assert settings.JWT_ACCESS_EXPIRE_MINUTES == 720
        assert settings.ADMIN_USERNAME == "admin"
        assert settings.STORAGE_BACKEND == StorageBackendType.REMOTE
        assert settings.STORAGE_API_BASE == "https://api.filess.io"
        assert settings.STORAGE_INDEX_REF is None
        assert settings.SERIALIZE_INDEX_WRITES is True

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ADMIN_PASSWORD", "hunter2")
        monkeypatch.setenv("STORAGE_INDEX_REF", "idx-123")
        monkeypatch.setenv("STORAGE_BACKEND", "local")

        settings = Settings(_env_file=None)
        assert settings.PORT == 8080
        assert settings.ADMIN_PASSWORD == "hunter2"
        assert settings.STORAGE_INDEX_REF == "idx-123"
        assert settings.STORAGE_BACKEND == StorageBackendType.LOCAL

    def test_empty_secret_rejected(self):
        with pytest.raises(ValidationError, match="JWT_SECRET_KEY"):
            Settings(JWT_SECRET_KEY="")

    def test_api_base_requires_http(self):
        with pytest.raises(ValidationError, match="STORAGE_API_BASE"):
            Settings(STORAGE_API_BASE="ftp://files.example")

    def test_api_base_trailing_slash_stripped(self):
        settings = Settings(STORAGE_API_BASE="https://files.example/")
        assert settings.STORAGE_API_BASE == "https://files.example"

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            Settings(STORAGE_BACKEND="s3")

    def test_settings_are_frozen(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.ADMIN_PASSWORD = "changed"

    def test_cors_origins_split(self):
        settings = Settings(CORS_ORIGIN="https://a.example, https://b.example")
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_cors_origins_default_wildcard(self):
        assert Settings(CORS_ORIGIN="").cors_origins == ["*"]

    def test_storage_config(self):
        settings = Settings(
            STORAGE_BACKEND="local",
            STORAGE_API_KEY="key",
            STORAGE_INDEX_REF="",
            STORAGE_LOCAL_ROOT="/tmp/blobs",
            STORAGE_TIMEOUT_SECONDS=5,
        )
        config = settings.get_storage_config()
        assert config.backend == "local"
        assert config.api_key == "key"
        assert config.index_ref is None
        assert config.index_name == "pib_journal_index.json"
        assert config.local_root == "/tmp/blobs"
        assert config.timeout == 5

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
