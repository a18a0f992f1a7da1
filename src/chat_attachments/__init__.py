"""Chat Attachments - file attachment handling for chat messages."""

__version__ = "0.1.0"

# Annotations
from .annotations import (
    DocumentFileAnnotation,
    DocumentFileData,
    ImageAnnotation,
    ImageData,
    MessageAnnotation,
    MessageAnnotationType,
    annotations_to_json,
    build_annotations,
    parse_annotations,
)

# Embedding service client
from .embedding import EmbeddingClient, PdfDetail

# Custom exceptions
from .exceptions import (
    ChatAttachmentsException,
    ConfigurationException,
    EmbeddingServiceError,
    UnreadableFileError,
)

# File models and reading
from .files import (
    AttachmentKind,
    DocumentFile,
    RawFile,
    classify_content_type,
    is_same_document,
    read_content,
)

# Upload pipeline and state
from .manager import AttachmentManager, UploadOutcome
from .store import DocumentStore, ImageSlot

# Configuration utilities
from .utils import (
    create_attachment_manager,
    create_embedding_client,
    get_backend_url,
    load_environment,
)

__all__ = [
    "__version__",
    "AttachmentManager",
    "UploadOutcome",
    "DocumentStore",
    "ImageSlot",
    "DocumentFile",
    "RawFile",
    "AttachmentKind",
    "classify_content_type",
    "is_same_document",
    "read_content",
    "EmbeddingClient",
    "PdfDetail",
    "MessageAnnotation",
    "MessageAnnotationType",
    "ImageAnnotation",
    "DocumentFileAnnotation",
    "ImageData",
    "DocumentFileData",
    "build_annotations",
    "annotations_to_json",
    "parse_annotations",
    "load_environment",
    "get_backend_url",
    "create_embedding_client",
    "create_attachment_manager",
    # Exceptions
    "ChatAttachmentsException",
    "ConfigurationException",
    "EmbeddingServiceError",
    "UnreadableFileError",
]
