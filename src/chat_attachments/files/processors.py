"""Reading raw files into text or base64 data URLs."""

import asyncio
import base64
import logging

from chat_attachments.exceptions import UnreadableFileError
from chat_attachments.files.models import RawFile

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def to_data_url(data: bytes, content_type: str) -> str:
    """Encode bytes as a ``data:<type>;base64,<payload>`` URL."""
    mime = content_type or DEFAULT_MIME_TYPE
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{payload}"


def _read_sync(file: RawFile, as_url: bool) -> str:
    data = file.read_bytes()
    if as_url:
        return to_data_url(data, file.content_type)
    # Invalid sequences become U+FFFD rather than failing the read
    return data.decode("utf-8", errors="replace")


async def read_content(file: RawFile, as_url: bool = False) -> str:
    """Read a file as UTF-8 text or as a base64 data URL.

    The blocking read runs in a worker thread; the caller is suspended until
    it completes.

    Args:
        file: The file to read.
        as_url: Produce a data URL instead of text.

    Returns:
        The decoded text, or the data URL.

    Raises:
        UnreadableFileError: If the underlying read fails. The original
            ``OSError`` is chained as the cause.
    """
    try:
        return await asyncio.to_thread(_read_sync, file, as_url)
    except OSError as exc:
        logger.debug("Failed to read %s: %s", file.name, exc)
        raise UnreadableFileError(
            f"Failed to read file '{file.name}': {exc}",
            filename=file.name,
            original_error=exc,
        ) from exc
