"""Configuration utilities for environment-based setup."""

import os

from dotenv import load_dotenv

from chat_attachments.embedding.client import EmbeddingClient
from chat_attachments.exceptions import ConfigurationException
from chat_attachments.manager import AttachmentManager

BACKEND_URL_ENV = "CHAT_BACKEND_URL"


def load_environment() -> None:
    """Load environment variables from .env file if it exists."""
    load_dotenv()


def get_backend_url(backend_url: str | None = None) -> str:
    """Resolve the chat backend base URL.

    Args:
        backend_url: Explicit URL (if None, loads from CHAT_BACKEND_URL env var)

    Returns:
        The backend base URL

    Raises:
        ConfigurationException: If no URL is found in parameter or environment
    """
    if backend_url:
        return backend_url

    load_environment()
    backend_url = os.getenv(BACKEND_URL_ENV)

    if not backend_url:
        raise ConfigurationException(
            f"Backend URL not found. Set {BACKEND_URL_ENV} environment variable "
            "or pass backend_url parameter.",
            config_key=BACKEND_URL_ENV,
            config_value=backend_url,
        )

    return backend_url


def create_embedding_client(
    backend_url: str | None = None,
    timeout: float | None = None,
) -> EmbeddingClient:
    """Create an embedding client with environment-based configuration.

    Args:
        backend_url: Backend base URL (if None, loads from CHAT_BACKEND_URL env var)
        timeout: Optional request timeout in seconds

    Returns:
        Configured EmbeddingClient
    """
    return EmbeddingClient(backend_url=get_backend_url(backend_url), timeout=timeout)


def create_attachment_manager(
    backend_url: str | None = None,
    timeout: float | None = None,
) -> AttachmentManager:
    """Create an attachment manager with an empty store.

    Args:
        backend_url: Backend base URL (if None, loads from CHAT_BACKEND_URL env var)
        timeout: Optional request timeout for the embedding endpoint

    Returns:
        Configured AttachmentManager
    """
    return AttachmentManager(create_embedding_client(backend_url, timeout=timeout))
