"""Data models for raw file selections and document attachments."""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

DocumentFileType = Literal["csv", "pdf"]


@dataclass(frozen=True)
class RawFile:
    """A file selected by the user, before any processing.

    Holds either in-memory bytes or a filesystem path; the bytes are only
    pulled when the file is read.

    Args:
        name: Original file name as selected by the user.
        content_type: Declared MIME type (may be empty when unknown).
        size: Length of the file in bytes.
        data: In-memory contents, if the file is not backed by a path.
        path: Filesystem location of the contents.
    """

    name: str
    content_type: str
    size: int
    data: bytes | None = None
    path: Path | None = None

    @classmethod
    def from_bytes(cls, name: str, data: bytes, content_type: str = "") -> "RawFile":
        """Build a RawFile around in-memory bytes."""
        return cls(name=name, content_type=content_type, size=len(data), data=data)

    @classmethod
    def from_path(
        cls, path: str | Path, content_type: str | None = None
    ) -> "RawFile":
        """Build a RawFile backed by a file on disk.

        Args:
            path: Location of the file.
            content_type: Declared MIME type. Guessed from the extension when
                omitted, and left empty if the extension is unknown.

        Returns:
            RawFile whose size reflects the file on disk.

        Raises:
            OSError: If the file does not exist or cannot be stat'ed.
        """
        path = Path(path)
        if content_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            content_type = guessed or ""
        return cls(
            name=path.name,
            content_type=content_type,
            size=path.stat().st_size,
            path=path,
        )

    def read_bytes(self) -> bytes:
        """Return the file contents. Blocks on disk I/O for path-backed files."""
        if self.data is not None:
            return self.data
        if self.path is None:
            raise OSError(f"No byte source attached to file '{self.name}'")
        return self.path.read_bytes()


class DocumentFile(BaseModel):
    """A non-image attachment (CSV or PDF) ready to be sent with a message.

    Instances are immutable once created; two documents are considered the
    same attachment when their ids match, or when both filename and filesize
    match (see ``is_same_document``).

    Attributes:
        id: Unique identifier assigned at creation time
        filetype: Kind of document ("csv" or "pdf")
        filename: Original file name
        filesize: Size of the original file in bytes
        content: Raw CSV text or text extracted from the PDF
        embeddings: Precomputed embedding vector (PDF only)
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=lambda: str(uuid4()), description="Unique identifier"
    )
    filetype: DocumentFileType = Field(description="Kind of document")
    filename: str = Field(description="Original file name")
    filesize: int = Field(ge=0, description="Size of the original file in bytes")
    content: str = Field(description="Textual content of the document")
    embeddings: list[float] | None = Field(
        default=None, description="Precomputed embedding vector (PDF only)"
    )


def is_same_document(a: DocumentFile, b: DocumentFile) -> bool:
    """Return True if two documents represent the same attachment.

    This is re-upload protection, not a content comparison: documents match
    on id, or on the (filename, filesize) pair.
    """
    if a.id == b.id:
        return True
    return a.filename == b.filename and a.filesize == b.filesize
