"""Configuration utilities."""

from .config import (
    BACKEND_URL_ENV,
    create_attachment_manager,
    create_embedding_client,
    get_backend_url,
    load_environment,
)

__all__ = [
    "BACKEND_URL_ENV",
    "load_environment",
    "get_backend_url",
    "create_embedding_client",
    "create_attachment_manager",
]
