"""Message annotations describing the attachments of an outgoing message."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from chat_attachments.files.models import DocumentFile
from chat_attachments.store import DocumentStore


class MessageAnnotationType(str, Enum):
    """Kinds of annotation attached to a chat message."""

    IMAGE = "image"
    DOCUMENT_FILE = "document_file"


class ImageData(BaseModel):
    """Payload of an IMAGE annotation."""

    url: str = Field(description="Image data URL")


class DocumentFileData(BaseModel):
    """Payload of a DOCUMENT_FILE annotation."""

    files: list[DocumentFile] = Field(description="Attached documents, in order")


class ImageAnnotation(BaseModel):
    """Annotation carrying the attached image."""

    type: Literal["image"] = "image"
    data: ImageData


class DocumentFileAnnotation(BaseModel):
    """Annotation carrying every attached document."""

    type: Literal["document_file"] = "document_file"
    data: DocumentFileData


MessageAnnotation = Annotated[
    ImageAnnotation | DocumentFileAnnotation, Field(discriminator="type")
]

message_annotations_adapter = TypeAdapter(list[MessageAnnotation])


def build_annotations(store: DocumentStore) -> list[MessageAnnotation]:
    """Project the store's current state into message annotations.

    Produces at most one IMAGE annotation, followed by at most one
    DOCUMENT_FILE annotation carrying every stored document. The image and
    documents are read in a single snapshot; the store is not modified.

    Args:
        store: Attachment state to read.

    Returns:
        The annotations, IMAGE first. Empty when nothing is attached.
    """
    annotations: list[MessageAnnotation] = []
    image_url, files = store.snapshot()
    if image_url:
        annotations.append(ImageAnnotation(data=ImageData(url=image_url)))
    if files:
        annotations.append(
            DocumentFileAnnotation(data=DocumentFileData(files=files))
        )
    return annotations


def parse_annotations(payload: list[dict[str, Any]]) -> list[MessageAnnotation]:
    """Validate a wire payload back into annotation models.

    Raises:
        pydantic.ValidationError: If an annotation's data does not match its type.
    """
    return message_annotations_adapter.validate_python(payload)


def annotations_to_json(annotations: list[MessageAnnotation]) -> list[dict[str, Any]]:
    """Render annotations as JSON-ready dicts for the message-send path.

    Absent optional fields (e.g. ``embeddings`` on CSV documents) are omitted.
    """
    return [a.model_dump(mode="json", exclude_none=True) for a in annotations]
