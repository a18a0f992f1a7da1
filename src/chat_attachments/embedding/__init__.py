"""Remote PDF text extraction and embedding."""

from .client import EMBED_API_PATH, EmbeddingClient, PdfDetail

__all__ = ["EMBED_API_PATH", "EmbeddingClient", "PdfDetail"]
