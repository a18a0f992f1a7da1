"""File models, content-type detection and content reading."""

from .capabilities import AttachmentKind, classify_content_type
from .models import DocumentFile, DocumentFileType, RawFile, is_same_document
from .processors import read_content, to_data_url

__all__ = [
    "AttachmentKind",
    "DocumentFile",
    "DocumentFileType",
    "RawFile",
    "classify_content_type",
    "is_same_document",
    "read_content",
    "to_data_url",
]
