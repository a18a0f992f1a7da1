"""Upload pipeline tying file classification, reading, embedding and storage together."""

import asyncio
import logging
from collections.abc import Iterable
from enum import Enum

from pydantic import ValidationError

from chat_attachments.annotations import (
    MessageAnnotation,
    annotations_to_json,
    build_annotations,
)
from chat_attachments.embedding.client import EmbeddingClient
from chat_attachments.exceptions import EmbeddingServiceError
from chat_attachments.files.capabilities import AttachmentKind, classify_content_type
from chat_attachments.files.models import DocumentFile, RawFile
from chat_attachments.files.processors import read_content
from chat_attachments.store import DocumentStore

logger = logging.getLogger(__name__)


class UploadOutcome(str, Enum):
    """Result of a single successful ``upload_file`` call."""

    IMAGE = "image"
    STORED = "stored"
    DUPLICATE = "duplicate"
    UNSUPPORTED = "unsupported"


class AttachmentManager:
    """Attachment state for one chat composer.

    Classifies each uploaded file by declared content type and routes it:

    - ``image/*``: read as a data URL into the image slot, replacing any
      previous image.
    - ``text/csv``: read as text and added as a CSV document.
    - ``application/pdf``: read as a data URL, sent to the embedding service,
      and added as a PDF document with the extracted text and embeddings.
    - anything else: ignored without error.

    Read and embedding failures propagate out of ``upload_file`` and leave the
    store untouched.

    Args:
        embedding_client: Client used for PDF text extraction.
        store: Attachment state. A fresh store is created when omitted.

    Example:
        ```python
        manager = AttachmentManager(EmbeddingClient("http://localhost:8000"))
        await manager.upload_file(RawFile.from_path("report.pdf"))
        payload = manager.get_annotations_json()
        ```
    """

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        store: DocumentStore | None = None,
    ) -> None:
        self.embedding_client = embedding_client
        self.store = store if store is not None else DocumentStore()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def image_url(self) -> str | None:
        """Current image data URL, or None."""
        return self.store.image_url

    def set_image_url(self, url: str | None) -> None:
        """Replace (or clear, with None) the current image."""
        self.store.set_image(url)

    @property
    def files(self) -> list[DocumentFile]:
        """Attached documents in upload order."""
        return self.store.files

    @property
    def already_uploaded(self) -> bool:
        """True when an image or at least one document is attached."""
        return not self.store.is_empty()

    def remove_doc(self, file: DocumentFile) -> None:
        """Detach a document."""
        self.store.remove(file)

    def reset(self) -> None:
        """Detach everything."""
        self.store.reset()

    def get_annotations(self) -> list[MessageAnnotation]:
        """Annotations describing the current attachments."""
        return build_annotations(self.store)

    def get_annotations_json(self) -> list[dict]:
        """Annotations rendered as JSON-ready dicts."""
        return annotations_to_json(self.get_annotations())

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------

    async def upload_file(self, file: RawFile) -> UploadOutcome:
        """Process one selected file.

        Args:
            file: The file to attach.

        Returns:
            What happened to the file.

        Raises:
            UnreadableFileError: If the file cannot be read.
            EmbeddingServiceError: If PDF extraction fails or returns an
                unusable body.
        """
        kind = classify_content_type(file.content_type)

        if kind is AttachmentKind.IMAGE:
            url = await read_content(file, as_url=True)
            self.store.set_image(url)
            logger.debug("Attached image %s", file.name)
            return UploadOutcome.IMAGE

        if kind is AttachmentKind.CSV:
            content = await read_content(file)
            document = DocumentFile(
                filetype="csv",
                filename=file.name,
                filesize=file.size,
                content=content,
            )
            return self._add_document(document)

        if kind is AttachmentKind.PDF:
            encoded = await read_content(file, as_url=True)
            detail = await self.embedding_client.get_pdf_detail(encoded)
            try:
                document = DocumentFile(
                    filetype="pdf",
                    filename=file.name,
                    filesize=file.size,
                    content=detail.get("content", ""),
                    embeddings=detail.get("embeddings"),
                )
            except ValidationError as e:
                logger.warning("Unexpected embedding response for %s: %s", file.name, e)
                raise EmbeddingServiceError(
                    "Failed to get pdf detail", original_error=e
                ) from e
            return self._add_document(document)

        logger.debug(
            "Ignoring %s: unsupported content type %r", file.name, file.content_type
        )
        return UploadOutcome.UNSUPPORTED

    async def upload_files(
        self, files: Iterable[RawFile]
    ) -> list[UploadOutcome | BaseException]:
        """Upload several files concurrently.

        A failure affects only its own file: the returned list holds, in input
        order, either the outcome or the exception raised for each file.
        """
        return await asyncio.gather(
            *(self.upload_file(f) for f in files), return_exceptions=True
        )

    def _add_document(self, document: DocumentFile) -> UploadOutcome:
        if not self.store.add(document):
            return UploadOutcome.DUPLICATE
        logger.info(
            "Attached %s document %s (%d bytes)",
            document.filetype,
            document.filename,
            document.filesize,
        )
        return UploadOutcome.STORED
