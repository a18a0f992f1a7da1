"""Client for the backend PDF extraction and embedding endpoint."""

import asyncio
import logging
from typing import Any, TypedDict

import requests

from chat_attachments.exceptions import EmbeddingServiceError

logger = logging.getLogger(__name__)

EMBED_API_PATH = "/api/chat/embed"


class PdfDetail(TypedDict, total=False):
    """Fields returned by the embedding endpoint for a PDF."""

    content: str
    embeddings: list[float]


class EmbeddingClient:
    """Sends base64-encoded PDFs to the backend for text extraction and embedding.

    The backend base URL is passed in explicitly; resolving it from the
    environment is left to ``chat_attachments.utils.config``.

    Attributes:
        backend_url: Base URL of the chat backend
        timeout: Request timeout in seconds, or None to wait indefinitely

    Example:
        ```python
        client = EmbeddingClient("http://localhost:8000")
        detail = await client.get_pdf_detail("data:application/pdf;base64,JVBERi0...")
        print(detail["content"])
        ```
    """

    def __init__(self, backend_url: str, timeout: float | None = None) -> None:
        """Initialize the client.

        Args:
            backend_url: Base URL of the chat backend (e.g. 'http://localhost:8000')
            timeout: Optional request timeout in seconds. No timeout by default.

        Raises:
            ValueError: If backend_url is empty
        """
        if not backend_url:
            raise ValueError("Backend URL is required")

        self.backend_url = backend_url
        self.timeout = timeout

    @property
    def embed_url(self) -> str:
        """Full URL of the embedding endpoint."""
        return f"{self.backend_url.rstrip('/')}{EMBED_API_PATH}"

    async def get_pdf_detail(self, pdf_base64: str) -> PdfDetail:
        """Extract text content and an embedding vector from a PDF.

        Issues a single POST; the call is never retried.

        Args:
            pdf_base64: The PDF encoded as a base64 data URL.

        Returns:
            The decoded JSON response, trusted as-is.

        Raises:
            EmbeddingServiceError: If the service answers with a non-success
                status or cannot be reached.
        """
        return await asyncio.to_thread(self._post_pdf, pdf_base64)

    def _post_pdf(self, pdf_base64: str) -> PdfDetail:
        headers = {"Content-Type": "application/json"}
        try:
            response = requests.post(
                self.embed_url,
                json={"pdf": pdf_base64},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Embedding request to %s failed: %s", self.embed_url, e)
            raise EmbeddingServiceError(
                "Failed to get pdf detail", original_error=e
            ) from e

        if not response.ok:
            logger.warning(
                "Embedding service returned HTTP %s", response.status_code
            )
            raise EmbeddingServiceError(
                "Failed to get pdf detail", status_code=response.status_code
            )

        try:
            data: Any = response.json()
        except ValueError as e:
            logger.warning("Embedding service returned a non-JSON body: %s", e)
            raise EmbeddingServiceError(
                "Failed to get pdf detail",
                status_code=response.status_code,
                original_error=e,
            ) from e

        if not isinstance(data, dict):
            raise EmbeddingServiceError(
                "Failed to get pdf detail", status_code=response.status_code
            )
        return data
