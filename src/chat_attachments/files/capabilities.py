"""Content-type detection for incoming attachments."""

from enum import Enum

IMAGE_MIME_PREFIX = "image/"
CSV_MIME = "text/csv"
PDF_MIME = "application/pdf"


class AttachmentKind(str, Enum):
    """How an incoming file is handled."""

    IMAGE = "image"
    CSV = "csv"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"


def classify_content_type(content_type: str) -> AttachmentKind:
    """Map a declared MIME type to its handling strategy.

    Any ``image/*`` type is an image. CSV and PDF must match exactly, so
    parameters (``text/csv; charset=utf-8``) or aliases such as
    ``application/csv`` are treated as unsupported.

    Args:
        content_type: The file's declared content type.

    Returns:
        The attachment kind. ``UNSUPPORTED`` files are dropped by the caller.
    """
    if content_type.startswith(IMAGE_MIME_PREFIX):
        return AttachmentKind.IMAGE
    if content_type == CSV_MIME:
        return AttachmentKind.CSV
    if content_type == PDF_MIME:
        return AttachmentKind.PDF
    return AttachmentKind.UNSUPPORTED
