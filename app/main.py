"""FastAPI application for the Pib Journal backend.

This module builds the application: settings, blob store, index, entry
service and auth gateway are created once and attached to ``app.state``.

Run with:
    uvicorn app.main:app --reload

Examples:
    >>> # Health check
    >>> curl http://localhost:3000/

    >>> # Log in and post an entry
    >>> curl -X POST localhost:3000/api/login -d '{"username":"admin","password":"password"}'
    >>> curl -X POST localhost:3000/api/entries -H "Authorization: Bearer $TOKEN" \\
    ...      -d '{"title":"Day 1","body":"Went well"}'

Tests:
    - tests/unit/test_main.py
    - tests/integration/test_api_entries.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api import router as api_router
from app.auth.gateway import AuthGateway
from app.config import Settings, get_settings
from app.errors import AuthError, StorageError, ValidationError
from app.services.entries import EntryService
from app.storage import BlobStore, IndexStore, build_blob_store

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Pib Journal backend"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    storage_backend: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Closes the blob store's HTTP client on shutdown.
    """
    logger.info(f"Starting Pib Journal v{__version__} (storage: {app.state.blob_store.name})")

    yield

    logger.info("Shutting down Pib Journal")
    await app.state.blob_store.close()


def _register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies are reported like missing fields."""
        return PlainTextResponse("Invalid request body", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return PlainTextResponse(
            exc.message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
        return PlainTextResponse(
            "Failed to create entry",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unexpected error: {exc}")
        detail = f"Internal server error: {exc}" if settings.DEBUG else "Internal server error"
        return PlainTextResponse(detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(
    settings: Settings | None = None,
    blob_store: BlobStore | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached environment settings).
        blob_store: Blob store to use (defaults to one built from settings).

    Returns:
        Configured FastAPI app.
    """
    settings = settings or get_settings()
    storage_config = settings.get_storage_config()
    blob_store = blob_store or build_blob_store(storage_config)

    app = FastAPI(
        title="Pib Journal",
        description="Single-admin journal backed by a remote blob store",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.state.settings = settings
    app.state.blob_store = blob_store
    app.state.entry_service = EntryService(
        store=blob_store,
        index=IndexStore(
            blob_store,
            index_name=storage_config.index_name,
            index_ref=storage_config.index_ref,
        ),
        serialize_writes=settings.SERIALIZE_INDEX_WRITES,
    )
    app.state.auth_gateway = AuthGateway(
        username=settings.ADMIN_USERNAME,
        password=settings.ADMIN_PASSWORD,
        secret=settings.JWT_SECRET_KEY,
        expire_minutes=settings.JWT_ACCESS_EXPIRE_MINUTES,
    )

    # CORS middleware
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    _register_exception_handlers(app, settings)

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    async def root() -> str:
        """Plain-text liveness string."""
        return HEALTH_MESSAGE

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Application status and configured storage backend."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            storage_backend=app.state.blob_store.name,
        )

    return app


app = create_app()


# Entry point for development
if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.DEBUG,
    )
