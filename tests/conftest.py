"""Shared pytest configuration and fixtures for the test suite."""

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest

from chat_attachments.embedding.client import EmbeddingClient
from chat_attachments.files.models import RawFile
from chat_attachments.manager import AttachmentManager

SAMPLE_CSV = "name,score\nalice,3\nbob,5\n"
# Smallest byte string that looks like a PDF header
SAMPLE_PDF = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF\n"
SAMPLE_PNG = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


@pytest.fixture
def backend_url() -> str:
    """Backend base URL used by unit tests (never contacted)."""
    return "http://backend.test"


@pytest.fixture
def embedding_client(backend_url: str) -> EmbeddingClient:
    """Embedding client pointed at the test backend."""
    return EmbeddingClient(backend_url)


@pytest.fixture
def manager(embedding_client: EmbeddingClient) -> AttachmentManager:
    """Attachment manager with an empty store."""
    return AttachmentManager(embedding_client)


@pytest.fixture
def csv_file() -> RawFile:
    """In-memory CSV selection."""
    return RawFile.from_bytes("scores.csv", SAMPLE_CSV.encode("utf-8"), "text/csv")


@pytest.fixture
def pdf_file() -> RawFile:
    """In-memory PDF selection."""
    return RawFile.from_bytes("report.pdf", SAMPLE_PDF, "application/pdf")


@pytest.fixture
def png_file() -> RawFile:
    """In-memory PNG selection."""
    return RawFile.from_bytes("photo.png", SAMPLE_PNG, "image/png")


def _build_response(status_code: int = 200, payload: Any = None) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = payload
    return response


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory for requests.Response stand-ins."""
    return _build_response


@pytest.fixture
def embed_response() -> Mock:
    """Successful embedding endpoint response."""
    return _build_response(
        200, {"content": "Quarterly report text", "embeddings": [0.1, 0.2, 0.3]}
    )


# Pytest configuration
pytest_plugins: list[str] = []
