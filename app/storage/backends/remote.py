"""Remote blob store backed by an HTTP file storage service.

Endpoints used:
    POST {base}/upload            multipart upload, returns {"id", "url"}
    GET  {base}/files/{id}        download by id
    GET  {base}/files?name=<name> search by name, returns a JSON array

Every call is a single round trip. There is no retry and no caching.

Examples:
    >>> store = RemoteBlobStore(api_base="https://api.filess.io", api_key="...")
    >>> ref = await store.upload("entry_x.json", b"{}")
    >>> data = await store.download(ref)
"""

from __future__ import annotations

import logging

import httpx

from app.errors import StorageError
from app.storage.backends.base import BlobInfo, BlobStore
from app.storage.naming import is_url

logger = logging.getLogger(__name__)


class RemoteBlobStore(BlobStore):
    """HTTP client for the remote file storage service.

    Attributes:
        api_base: Service base URL.
        api_key: Bearer key sent with every request.
        timeout: Request timeout in seconds.
    """

    name = "remote"

    def __init__(
        self,
        api_base: str,
        api_key: str = "",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the remote blob store.

        Args:
            api_base: Service base URL.
            api_key: Bearer key for the service.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self.api_base = api_base.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get httpx async client (lazy initialization)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.api_base,
                timeout=self.timeout,
                headers={"Authorization": f"Bearer {self.api_key}"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _handle_error(self, response: httpx.Response, action: str) -> None:
        """Raise StorageError for a non-success response.

        Args:
            response: The HTTP response.
            action: Short description of the call, for the message.

        Raises:
            StorageError: If the response status is not 2xx.
        """
        if response.is_success:
            return
        raise StorageError(
            f"Storage {action} failed",
            status_code=response.status_code,
            body=response.text,
        )

    async def _request(self, method: str, url: str, action: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise StorageError(f"Storage {action} failed: {e}") from e
        self._handle_error(response, action)
        return response

    async def upload(self, name: str, content: bytes) -> str:
        """Upload a blob as multipart form data.

        Args:
            name: Blob name (sent as the file name).
            content: Raw bytes.

        Returns:
            The blob URL if the service returned one, otherwise its id.

        Raises:
            StorageError: On a non-success status or a response without a ref.
        """
        response = await self._request(
            "POST",
            "/upload",
            "upload",
            files={"file": (name, content, "application/octet-stream")},
        )
        try:
            info = BlobInfo.model_validate(response.json())
        except ValueError as e:
            raise StorageError(
                "Storage upload returned an unreadable response",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not info.ref:
            raise StorageError(
                "Storage upload response has no id or url",
                status_code=response.status_code,
                body=response.text,
            )
        logger.debug(f"Uploaded blob {name} -> {info.ref}")
        return info.ref

    async def download(self, ref: str) -> bytes:
        """Download a blob by URL or id.

        Args:
            ref: Absolute URL, or a service id resolved against ``/files/``.

        Returns:
            Raw bytes.

        Raises:
            StorageError: On a non-success status.
        """
        url = ref if is_url(ref) else f"/files/{ref}"
        response = await self._request("GET", url, "download")
        return response.content

    async def search(self, name: str) -> list[BlobInfo]:
        """Search blobs by exact name.

        Args:
            name: Blob name.

        Returns:
            Matching blobs in the order the service lists them.

        Raises:
            StorageError: On a non-success status.
        """
        response = await self._request("GET", "/files", "search", params={"name": name})
        try:
            payload = response.json()
        except ValueError as e:
            raise StorageError(
                "Storage search returned an unreadable response",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(payload, list):
            return []
        return [BlobInfo.model_validate(item) for item in payload if isinstance(item, dict)]
